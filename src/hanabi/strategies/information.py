"""
Public information for the hat-guessing information strategy.
"""

import logging
from typing import Dict
from .hat_helpers import AskQuestion, PublicInformation
from .questions import IsPlayable, CardPossibilityPartition
from ..game.board_state import BoardState
from ..game.card_possibility import CardPossibilityTable, HandInfo
from ..game.cards import Card
from ..utils.helpers import format_hand_info

logger = logging.getLogger(__name__)


class HanabiPublicInformation(PublicInformation):
    """
    Common knowledge about every hand, plus the board it refers to.

    Responsibilities:
    - Store one HandInfo per player
    - Choose which questions each hand answers (ask_questions)
    - Track cards leaving and entering hands
    """

    def __init__(self, board: BoardState, hand_info: Dict[int, HandInfo]):
        self.board = board.copy()
        self.hand_info = hand_info

    @classmethod
    def from_board(cls, board: BoardState) -> "HanabiPublicInformation":
        hand_info = {player: HandInfo(board.hand_size) for player in board.get_players()}
        return cls(board, hand_info)

    def get_player_info(self, player: int) -> HandInfo:
        return self.hand_info[player].copy()

    def set_player_info(self, player: int, hand_info: HandInfo) -> None:
        self.hand_info[player] = hand_info

    def set_board(self, board: BoardState) -> None:
        self.board = board.copy()

    def agrees_with(self, other: PublicInformation) -> bool:
        if not isinstance(other, HanabiPublicInformation):
            return False
        return self.board == other.board and self.hand_info == other.hand_info

    def ask_questions(
        self,
        player: int,
        hand_info: HandInfo,
        ask_question: AskQuestion,
        total_info: int,
    ) -> None:
        info_remaining = total_info
        board = self.board

        # Find a playable card first, most likely candidates first
        p_play = [card_table.probability_is_playable(board) for card_table in hand_info]
        known_playable = any(p == 1.0 for p in p_play)
        if not known_playable:
            candidates = sorted(
                (index for index, p in enumerate(p_play) if 0.0 < p < 1.0),
                key=lambda index: (-p_play[index], index),
            )
            for index in candidates:
                if info_remaining < 2:
                    return
                info_remaining = ask_question(IsPlayable(index))
                if hand_info[index].probability_is_playable(board) == 1.0:
                    break

        # Spend the rest narrowing down card identities
        for index, card_table in enumerate(hand_info):
            if info_remaining <= 1:
                return
            if len(card_table.get_possibilities()) <= 1:
                continue
            question = CardPossibilityPartition(index, info_remaining, card_table, board)
            info_remaining = ask_question(question)

    def update_from_play_or_discard(self, player: int, index: int, card: Card, board: BoardState) -> None:
        """
        Update after a card left a player's hand.

        The slot is removed, the revealed card is removed from every
        remaining slot's possibilities, and if a card was drawn a fresh
        slot is added that excludes every card already revealed.

        Args:
            player: Player who played or discarded
            index: Slot the card came from
            card: The revealed card
            board: Board after the move
        """
        drew_card = self.board.deck_size > 0
        hand_info = self.get_player_info(player)
        hand_info.remove(index)
        self.set_player_info(player, hand_info)

        for other_info in self.hand_info.values():
            for card_table in other_info:
                card_table.decrement_weight_if_possible(card)

        self.set_board(board)
        if drew_card:
            self.hand_info[player].push(CardPossibilityTable.from_board(self.board))
        self.update_other_info()
        logger.debug(f"Player {player} revealed {card}; now {format_hand_info(self.hand_info[player])}")
