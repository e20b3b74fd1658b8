"""
Public board state for Hanabi.

Everything stored here is visible to all players, so any deterministic
function of a BoardState is common knowledge.
"""

import copy
from typing import Dict, List, Optional
from .cards import Card, COLORS, VALUES, get_count_for_value


class BoardState:
    """Class for managing the public part of a Hanabi game."""

    def __init__(
        self,
        num_players: int,
        hand_size: Optional[int] = None,
        num_hints: int = 8,
        num_lives: int = 3,
        deck_size: int = 0,
    ):
        """
        Initialize board state.

        Args:
            num_players: Number of players
            hand_size: Cards per hand (5 for 2-3 players, 4 otherwise if None)
            num_hints: Hint tokens available at the start
            num_lives: Lives (fuse tokens) available at the start
            deck_size: Cards left in the deck
        """
        if num_players < 2:
            raise ValueError("Hanabi needs at least 2 players")
        self.num_players = num_players
        self.hand_size = hand_size if hand_size is not None else (5 if num_players <= 3 else 4)
        self.total_hints = num_hints
        self.hints_remaining = num_hints
        self.lives_remaining = num_lives
        self.deck_size = deck_size

        # Highest value played for each color (0 = nothing played yet)
        self.fireworks: Dict[str, int] = {color: 0 for color in COLORS}
        self.discard: List[Card] = []

        # Player whose turn it is
        self.player: int = 0
        self.turn: int = 0

    def get_players(self) -> List[int]:
        """Get all players in seat order."""
        return list(range(self.num_players))

    def get_firework(self, color: str) -> int:
        """Get highest played value for a color."""
        return self.fireworks[color]

    def is_playable(self, card: Card) -> bool:
        """
        Check if card can be played on its firework right now.

        Args:
            card: Card to check

        Returns:
            True if card is the next value for its color
        """
        return self.fireworks[card.color] + 1 == card.value

    def discard_count(self, card: Card) -> int:
        """Get number of copies of this card in the discard pile."""
        return sum(1 for discarded in self.discard if discarded == card)

    def is_dead(self, card: Card) -> bool:
        """
        Check if card can never be played.

        A card is dead if its value was already played, or if every copy
        of some lower card of the same color was discarded.

        Args:
            card: Card to check

        Returns:
            True if card is useless for the rest of the game
        """
        firework = self.fireworks[card.color]
        if card.value <= firework:
            return True
        for value in range(firework + 1, card.value):
            needed = Card(card.color, value)
            if self.discard_count(needed) >= get_count_for_value(value):
                return True
        return False

    def score(self) -> int:
        """Get current score (sum of fireworks)."""
        return sum(self.fireworks.values())

    def is_complete(self, color: str) -> bool:
        """Check if a firework is finished."""
        return self.fireworks[color] == VALUES[-1]

    def play(self, card: Card) -> bool:
        """
        Apply a played card to the board.

        Args:
            card: Card that was played

        Returns:
            True if the card was playable (added to its firework)
        """
        if self.is_playable(card):
            self.fireworks[card.color] = card.value
            # Completing a firework returns a hint token
            if self.is_complete(card.color) and self.hints_remaining < self.total_hints:
                self.hints_remaining += 1
            return True
        self.lives_remaining -= 1
        self.discard.append(card)
        return False

    def discard_card(self, card: Card) -> None:
        """Apply a discarded card to the board (returns a hint token)."""
        self.discard.append(card)
        if self.hints_remaining < self.total_hints:
            self.hints_remaining += 1

    def next_player(self) -> None:
        """Move to next player."""
        self.player = (self.player + 1) % self.num_players
        self.turn += 1

    def copy(self) -> "BoardState":
        """Get independent copy of the board."""
        return copy.deepcopy(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __repr__(self) -> str:
        fireworks = " ".join(f"{color}{value}" for color, value in self.fireworks.items())
        return (
            f"BoardState(player={self.player}, turn={self.turn}, fireworks=[{fireworks}], "
            f"hints={self.hints_remaining}, lives={self.lives_remaining}, deck={self.deck_size})"
        )
