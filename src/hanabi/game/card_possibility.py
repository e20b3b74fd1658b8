"""
Public knowledge about hidden cards.

A CardPossibilityTable holds, for one hand slot, a weight per card type:
how many copies of that card the slot could still be. A HandInfo is the
ordered list of tables for one player's hand.
"""

from typing import Callable, Iterator, List, Optional
import numpy as np
from .board_state import BoardState
from .cards import Card, NUM_COLORS, VALUE_COUNTS, encode_card, decode_card


def full_deck_weights() -> np.ndarray:
    """Get weight matrix (colors x values) for the full deck."""
    return np.tile(np.array(VALUE_COUNTS, dtype=np.int64), (NUM_COLORS, 1))


class CardPossibilityTable:
    """Possible identities of a single hidden card, with weights."""

    def __init__(self, weights: Optional[np.ndarray] = None):
        """
        Initialize possibility table.

        Args:
            weights: Weight matrix (colors x values), full deck counts if None
        """
        if weights is None:
            weights = full_deck_weights()
        self.weights = np.array(weights, dtype=np.int64)

    @classmethod
    def from_board(cls, board: BoardState) -> "CardPossibilityTable":
        """
        Build a table for a freshly drawn card.

        Every card already discarded or played is removed once.

        Args:
            board: Current board state

        Returns:
            Table with the remaining unseen-by-everyone counts
        """
        table = cls()
        for card in board.discard:
            table.decrement_weight_if_possible(card)
        for color, firework in board.fireworks.items():
            for value in range(1, firework + 1):
                table.decrement_weight_if_possible(Card(color, value))
        return table

    def get_weight(self, card: Card) -> int:
        return int(self.weights[encode_card(card)])

    def is_possible(self, card: Card) -> bool:
        return self.get_weight(card) > 0

    def mark_false(self, card: Card) -> None:
        """Rule out a card entirely."""
        self.weights[encode_card(card)] = 0

    def decrement_weight_if_possible(self, card: Card) -> None:
        """
        Remove one copy of a card from the possibilities.

        Used when a copy of the card is observed elsewhere (another hand,
        the discard pile) and therefore cannot be in this slot.

        Args:
            card: Observed card
        """
        index = encode_card(card)
        if self.weights[index] > 0:
            self.weights[index] -= 1

    def get_possibilities(self) -> List[Card]:
        """Get possible cards in color-major order."""
        return [decode_card(c, v) for c, v in zip(*np.nonzero(self.weights))]

    def total_weight(self) -> int:
        return int(self.weights.sum())

    def is_determined(self) -> bool:
        """Check if exactly one card is possible."""
        return int(np.count_nonzero(self.weights)) == 1

    def probability_of_predicate(self, predicate: Callable[[Card], bool]) -> float:
        """
        Get weighted probability that the card satisfies a predicate.

        Args:
            predicate: Function of a card

        Returns:
            Probability in [0, 1] (0 if nothing is possible)
        """
        total = self.total_weight()
        if total == 0:
            return 0.0
        matching = sum(self.get_weight(card) for card in self.get_possibilities() if predicate(card))
        return matching / total

    def probability_is_playable(self, board: BoardState) -> float:
        return self.probability_of_predicate(board.is_playable)

    def probability_is_dead(self, board: BoardState) -> float:
        return self.probability_of_predicate(board.is_dead)

    def copy(self) -> "CardPossibilityTable":
        return CardPossibilityTable(self.weights.copy())

    def __eq__(self, other) -> bool:
        if not isinstance(other, CardPossibilityTable):
            return NotImplemented
        return bool(np.array_equal(self.weights, other.weights))

    def __repr__(self) -> str:
        return "CardPossibilityTable(" + ", ".join(str(card) for card in self.get_possibilities()) + ")"


class HandInfo:
    """Public knowledge about every slot of one hand."""

    def __init__(self, hand_size: int = 0, tables: Optional[List[CardPossibilityTable]] = None):
        """
        Initialize hand info.

        Args:
            hand_size: Number of slots (ignored if tables given)
            tables: Existing per-slot tables
        """
        if tables is None:
            tables = [CardPossibilityTable() for _ in range(hand_size)]
        self.tables: List[CardPossibilityTable] = tables

    def __len__(self) -> int:
        return len(self.tables)

    def __getitem__(self, index: int) -> CardPossibilityTable:
        return self.tables[index]

    def __iter__(self) -> Iterator[CardPossibilityTable]:
        return iter(self.tables)

    def remove(self, index: int) -> CardPossibilityTable:
        """Remove the slot of a card that left the hand."""
        return self.tables.pop(index)

    def push(self, table: CardPossibilityTable) -> None:
        """Add a slot for a newly drawn card."""
        self.tables.append(table)

    def copy(self) -> "HandInfo":
        return HandInfo(tables=[table.copy() for table in self.tables])

    def __eq__(self, other) -> bool:
        if not isinstance(other, HandInfo):
            return NotImplemented
        return self.tables == other.tables

    def __repr__(self) -> str:
        return f"HandInfo({self.tables!r})"
