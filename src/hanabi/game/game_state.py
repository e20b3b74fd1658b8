"""
Game state class for Hanabi.

Holds the hidden part of the game (deck and hands) next to the public
BoardState, and hands out per-player views.
"""

import logging
from typing import List, Optional
import numpy as np
from .board_state import BoardState
from .cards import Card, make_deck
from .view import OwnedGameView
from ..config import GameConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class GameState:
    """Class for managing Hanabi game state."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        deck: Optional[List[Card]] = None,
    ):
        """
        Initialize game state and deal.

        Args:
            config: Game configuration (uses DEFAULT_CONFIG if not provided)
            deck: Explicit deck to deal from (top of deck last). If None,
                a full deck is shuffled with config.seed.
        """
        self.config = config if config is not None else DEFAULT_CONFIG.game
        self.num_players = self.config.num_players
        self.hand_size = self.config.get_hand_size()

        if deck is None:
            rng = np.random.default_rng(self.config.seed)
            deck = make_deck(rng)
        if len(deck) < self.num_players * self.hand_size:
            raise ValueError(
                f"Deck of {len(deck)} cards is too small for {self.num_players} hands of {self.hand_size}"
            )

        self.deck: List[Card] = list(deck)
        self.hands: List[List[Card]] = []
        self.board = BoardState(
            num_players=self.num_players,
            hand_size=self.hand_size,
            num_hints=self.config.num_hints,
            num_lives=self.config.num_lives,
        )
        self.deal()

    def deal(self) -> None:
        """Deal a hand to every player."""
        self.hands = []
        for _ in range(self.num_players):
            self.hands.append([self.deck.pop() for _ in range(self.hand_size)])
        self.board.deck_size = len(self.deck)
        logger.debug(f"Dealt {self.num_players} hands, {len(self.deck)} cards left in deck")

    def get_hand(self, player: int) -> List[Card]:
        """
        Get cards of a specific player.

        Args:
            player: Player ID

        Returns:
            Copy of the player's hand
        """
        self._check_player(player)
        return list(self.hands[player])

    def get_view(self, player: int) -> OwnedGameView:
        """
        Build the observation of one player.

        Args:
            player: Player ID

        Returns:
            View with every other hand and a copy of the board
        """
        self._check_player(player)
        other_hands = {
            other: list(self.hands[other])
            for other in self.board.get_players()
            if other != player
        }
        return OwnedGameView(player=player, board=self.board.copy(), other_hands=other_hands)

    def play_card(self, player: int, index: int) -> Card:
        """
        Play a card from a hand and draw a replacement.

        Args:
            player: Player ID
            index: Slot of the card in the hand

        Returns:
            The played card
        """
        card = self._take_card(player, index)
        success = self.board.play(card)
        logger.debug(f"Player {player} played {card} ({'success' if success else 'fail'})")
        self._draw(player)
        return card

    def discard_card(self, player: int, index: int) -> Card:
        """
        Discard a card from a hand and draw a replacement.

        Args:
            player: Player ID
            index: Slot of the card in the hand

        Returns:
            The discarded card
        """
        card = self._take_card(player, index)
        self.board.discard_card(card)
        logger.debug(f"Player {player} discarded {card}")
        self._draw(player)
        return card

    def next_player(self) -> None:
        """Move to next player."""
        self.board.next_player()

    def _take_card(self, player: int, index: int) -> Card:
        self._check_player(player)
        if index < 0 or index >= len(self.hands[player]):
            raise ValueError("Bad card index.")
        return self.hands[player].pop(index)

    def _draw(self, player: int) -> None:
        if self.deck:
            self.hands[player].append(self.deck.pop())
        self.board.deck_size = len(self.deck)

    def _check_player(self, player: int) -> None:
        if not 0 <= player < self.num_players:
            raise ValueError(f"Unknown player: {player}")
