"""
What one player can observe.
"""

from dataclasses import dataclass, field
from typing import Dict, List
from .board_state import BoardState
from .cards import Card


@dataclass
class OwnedGameView:
    """
    Observation of a single player:
    - every other player's hand (private cards of others are visible)
    - the public board state
    The player's own hand is never part of the view.
    """

    player: int
    board: BoardState
    other_hands: Dict[int, List[Card]] = field(default_factory=dict)

    def get_hand(self, player: int) -> List[Card]:
        """
        Get the cards of another player.

        Args:
            player: ID of player (must not be the viewer)

        Returns:
            Cards in that player's hand
        """
        if player == self.player:
            raise ValueError("A player cannot see their own hand")
        if player not in self.other_hands:
            raise ValueError(f"Unknown player: {player}")
        return self.other_hands[player]

    def get_board(self) -> BoardState:
        return self.board

    def get_other_players(self) -> List[int]:
        """Get every player except the viewer, in seat order."""
        return [player for player in self.board.get_players() if player != self.player]
