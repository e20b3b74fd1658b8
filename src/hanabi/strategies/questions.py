"""
Questions asked about a hand by the information strategy.
"""

from typing import Dict, List
from .hat_helpers import Question
from .modulus_information import require
from ..game.board_state import BoardState
from ..game.card_possibility import CardPossibilityTable, HandInfo
from ..game.cards import Card


class IsPlayable(Question):
    """Is the card in slot `index` playable right now? (0 = no, 1 = yes)"""

    def __init__(self, index: int):
        self.index = index

    def info_amount(self) -> int:
        return 2

    def answer(self, hand: List[Card], board: BoardState) -> int:
        return 1 if board.is_playable(hand[self.index]) else 0

    def acknowledge_answer(self, value: int, hand_info: HandInfo, board: BoardState) -> None:
        card_table = hand_info[self.index]
        for card in card_table.get_possibilities():
            if board.is_playable(card) != (value == 1):
                card_table.mark_false(card)

    def __repr__(self) -> str:
        return f"IsPlayable(index={self.index})"


class CardPossibilityPartition(Question):
    """
    Which block of a partition of its possibilities is the card in?

    Cards that are not dead are dealt round-robin into at most
    max_n_partitions blocks. If some possibilities are dead, one block is
    kept back and all dead cards go into it, since which dead card it is
    never matters.
    """

    def __init__(
        self,
        index: int,
        max_n_partitions: int,
        card_table: CardPossibilityTable,
        board: BoardState,
    ):
        """
        Build the partition.

        Args:
            index: Slot of the card in the hand
            max_n_partitions: Upper bound on info_amount() (at least 2)
            card_table: Public knowledge about the card
            board: Current board state
        """
        require(max_n_partitions >= 2, f"Partition needs at least 2 blocks, got {max_n_partitions}")
        self.index = index
        possibilities = card_table.get_possibilities()
        has_dead = any(board.is_dead(card) for card in possibilities)

        effective_max = max_n_partitions - 1 if has_dead else max_n_partitions
        partition: Dict[Card, int] = {}
        n_partitions = 0
        cur_block = 0
        for card in possibilities:
            if not board.is_dead(card):
                partition[card] = cur_block
                cur_block = (cur_block + 1) % effective_max
                if n_partitions < effective_max:
                    n_partitions += 1

        if has_dead:
            for card in possibilities:
                if board.is_dead(card):
                    partition[card] = n_partitions
            n_partitions += 1

        self.partition = partition
        self.n_partitions = n_partitions

    def info_amount(self) -> int:
        return self.n_partitions

    def answer(self, hand: List[Card], board: BoardState) -> int:
        card = hand[self.index]
        require(card in self.partition, f"Card {card} in slot {self.index} is not a public possibility")
        return self.partition[card]

    def acknowledge_answer(self, value: int, hand_info: HandInfo, board: BoardState) -> None:
        card_table = hand_info[self.index]
        for card in card_table.get_possibilities():
            if self.partition.get(card) != value:
                card_table.mark_false(card)

    def __repr__(self) -> str:
        return f"CardPossibilityPartition(index={self.index}, n_partitions={self.n_partitions})"
