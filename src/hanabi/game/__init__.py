"""
Hanabi game model module.
"""

from .cards import Card, COLORS, VALUES, make_deck
from .board_state import BoardState
from .card_possibility import CardPossibilityTable, HandInfo
from .view import OwnedGameView
from .game_state import GameState

__all__ = [
    "Card",
    "COLORS",
    "VALUES",
    "make_deck",
    "BoardState",
    "CardPossibilityTable",
    "HandInfo",
    "OwnedGameView",
    "GameState",
]
