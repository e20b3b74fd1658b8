"""
Helper functions for logging and displaying Hanabi state.
"""

import logging
from typing import Iterable, Optional
from ..config import LoggingConfig, DEFAULT_CONFIG


def format_cards(cards: Iterable) -> str:
    """
    Format a hand of cards for log output.

    Args:
        cards: Cards to format

    Returns:
        Space-separated card names (e.g. "r1 g3 w5")
    """
    return " ".join(str(card) for card in cards)


def format_hand_info(hand_info) -> str:
    """
    Format public knowledge about a hand for log output.

    Each slot is rendered as the list of cards it can still be.

    Args:
        hand_info: HandInfo to format

    Returns:
        String with one bracketed group per slot
    """
    slots = []
    for card_table in hand_info:
        slots.append("[" + format_cards(card_table.get_possibilities()) + "]")
    return " ".join(slots)


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Configure root logging for entry points.

    Args:
        config: Logging configuration (uses DEFAULT_CONFIG if not provided)
    """
    config = config if config is not None else DEFAULT_CONFIG.logging
    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        format=config.format,
    )
