"""
Helper utilities.
"""

from .helpers import format_cards, format_hand_info, setup_logging

__all__ = [
    "format_cards",
    "format_hand_info",
    "setup_logging",
]
