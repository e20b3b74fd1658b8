"""
Strategies and the hat-guessing information protocol.
"""

from .modulus_information import ModulusInformation, HatContractViolation
from .hat_helpers import Question, PublicInformation
from .questions import IsPlayable, CardPossibilityPartition
from .information import HanabiPublicInformation

__all__ = [
    "ModulusInformation",
    "HatContractViolation",
    "Question",
    "PublicInformation",
    "IsPlayable",
    "CardPossibilityPartition",
    "HanabiPublicInformation",
]
