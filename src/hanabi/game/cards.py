"""
Cards and deck composition for Hanabi.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple
import numpy as np


COLORS: Tuple[str, ...] = ("r", "y", "g", "b", "w")
VALUES: Tuple[int, ...] = (1, 2, 3, 4, 5)

# Copies of each value per color (three 1s, two 2s/3s/4s, one 5)
VALUE_COUNTS: Tuple[int, ...] = (3, 2, 2, 2, 1)

NUM_COLORS = len(COLORS)
NUM_VALUES = len(VALUES)
FINAL_VALUE = VALUES[-1]


@dataclass(frozen=True)
class Card:
    """A single Hanabi card."""

    color: str
    value: int

    def __post_init__(self):
        if self.color not in COLORS:
            raise ValueError(f"Unknown color: {self.color}")
        if self.value not in VALUES:
            raise ValueError(f"Value must be between {VALUES[0]} and {FINAL_VALUE}")

    def __str__(self) -> str:
        return f"{self.color}{self.value}"


def get_count_for_value(value: int) -> int:
    """
    Get number of copies of a card with this value in one color.

    Args:
        value: Card value (1-5)

    Returns:
        Number of copies in the full deck
    """
    return VALUE_COUNTS[value - 1]


def make_deck(rng: Optional[np.random.Generator] = None) -> List[Card]:
    """
    Build the full 50-card deck.

    Args:
        rng: Random generator used to shuffle (deck is left ordered if None)

    Returns:
        List of cards, top of deck last
    """
    deck = [
        Card(color, value)
        for color in COLORS
        for value in VALUES
        for _ in range(get_count_for_value(value))
    ]
    if rng is not None:
        order = rng.permutation(len(deck))
        deck = [deck[i] for i in order]
    return deck


def encode_card(card: Card) -> Tuple[int, int]:
    """
    Encode card into (row, column) indices of a possibility matrix.

    Args:
        card: Card to encode

    Returns:
        Tuple (color_index, value_index)
    """
    return COLORS.index(card.color), card.value - VALUES[0]


def decode_card(color_index: int, value_index: int) -> Card:
    """
    Decode card from possibility matrix indices.

    Args:
        color_index: Row index (color)
        value_index: Column index (value)

    Returns:
        Card at that position
    """
    return Card(COLORS[color_index], VALUES[value_index])
