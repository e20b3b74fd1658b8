"""
Hat-guessing information transfer on top of public information.

Every player can compute the same PublicInformation from the visible
history. Before acting, a player answers a fixed sequence of questions
about every other hand, packs each hand's answers into one number
modulo the number of available choices, sums those numbers and makes
the choice with that index. Each observer recomputes the contributions
of the hands it can see, subtracts them, and is left with the answers
about its own hand.

This module defines the contracts (Question, PublicInformation) and the
generic algorithms. Concrete strategies only supply the primitives.
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Tuple
from .modulus_information import ModulusInformation, require
from ..game.board_state import BoardState
from ..game.card_possibility import HandInfo
from ..game.cards import Card
from ..game.view import OwnedGameView

logger = logging.getLogger(__name__)


class Question(ABC):
    """
    Interface for a question about a hand.

    Contract:
    - info_amount() depends only on public information, never on the hand
    - answer() is deterministic and lies in [0, info_amount())
    - acknowledge_answer() narrows hand info to cards consistent with the answer
    """

    @abstractmethod
    def info_amount(self) -> int:
        """How many different answers this question has."""
        pass

    @abstractmethod
    def answer(self, hand: List[Card], board: BoardState) -> int:
        """
        Answer the question for a known hand.

        Args:
            hand: Actual cards of the hand
            board: Current board state

        Returns:
            Answer in [0, info_amount())
        """
        pass

    @abstractmethod
    def acknowledge_answer(self, value: int, hand_info: HandInfo, board: BoardState) -> None:
        """
        Update hand info (in place) from an answer.

        Args:
            value: Answer in [0, info_amount())
            hand_info: Public knowledge about the hand (will be modified)
            board: Current board state
        """
        pass

    def answer_info(self, hand: List[Card], board: BoardState) -> ModulusInformation:
        return ModulusInformation(self.info_amount(), self.answer(hand, board))

    def acknowledge_answer_info(
        self,
        answer: ModulusInformation,
        hand_info: HandInfo,
        board: BoardState,
    ) -> None:
        require(
            self.info_amount() == answer.modulus,
            f"Answer modulus {answer.modulus} does not match question info amount {self.info_amount()}",
        )
        self.acknowledge_answer(answer.value, hand_info, board)


# Callback passed to ask_questions: takes a question, answers and
# acknowledges it, and returns how much information is still available.
AskQuestion = Callable[[Question], int]


class PublicInformation(ABC):
    """
    Interface for information that is common knowledge among players.

    Concrete strategies implement the primitives (get/set player info,
    from_board, set_board, agrees_with, ask_questions); the hat algorithms
    below are built only on top of those.

    Contract:
    - Two players who saw the same history hold equal PublicInformation
    - get_player_info() returns a copy; changes go through set_player_info()
    - Players are always processed in seat order
    """

    @abstractmethod
    def get_player_info(self, player: int) -> HandInfo:
        """Get a copy of the public knowledge about a player's hand."""
        pass

    @abstractmethod
    def set_player_info(self, player: int, hand_info: HandInfo) -> None:
        pass

    @classmethod
    @abstractmethod
    def from_board(cls, board: BoardState) -> "PublicInformation":
        """Build public information for the start of a game."""
        pass

    @abstractmethod
    def set_board(self, board: BoardState) -> None:
        pass

    @abstractmethod
    def agrees_with(self, other: "PublicInformation") -> bool:
        """Check that another instance holds the same common knowledge."""
        pass

    @abstractmethod
    def ask_questions(
        self,
        player: int,
        hand_info: HandInfo,
        ask_question: AskQuestion,
        total_info: int,
    ) -> None:
        """
        Decide which questions a player learns the answers to.

        Questions are asked by calling ask_question(question), which
        updates hand_info in place to reflect the answer and returns the
        remaining information amount. Later questions may depend on
        earlier answers through hand_info. Note that self is not modified
        and reflects the state before any player asked any question.

        The product of the info_amount() of all questions may not exceed
        total_info: a question is only valid if its info_amount() is at
        most the remaining amount.

        Args:
            player: Player whose hand the questions are about
            hand_info: Public knowledge about that hand (will be modified)
            ask_question: Callback asking one question
            total_info: Information available at the start
        """
        pass

    def update_other_info(self) -> None:
        """Hook to refresh derived state after set_player_info() calls."""
        pass

    def set_player_infos(self, infos: List[Tuple[int, HandInfo]]) -> None:
        for player, hand_info in infos:
            self.set_player_info(player, hand_info)
        self.update_other_info()

    def clone(self) -> "PublicInformation":
        return copy.deepcopy(self)

    def get_hat_info_for_player(
        self,
        player: int,
        hand_info: HandInfo,
        total_info: int,
        view: OwnedGameView,
    ) -> ModulusInformation:
        """
        Pack the answers about another player's hand into one number.

        Args:
            player: Player whose hand is answered (not the viewer)
            hand_info: Public knowledge about that hand (updated with the answers)
            total_info: Number of states the result may take
            view: View of the player doing the computation

        Returns:
            Packed answers, with modulus total_info
        """
        require(player != view.player, f"Player {player} cannot answer questions about their own hand")
        hand = view.get_hand(player)
        board = view.get_board()
        answer_info = ModulusInformation.none()

        def ask_question(question: Question) -> int:
            new_answer_info = question.answer_info(hand, board)
            question.acknowledge_answer_info(new_answer_info, hand_info, board)
            answer_info.combine(new_answer_info, total_info)
            return answer_info.info_remaining(total_info)

        self.ask_questions(player, hand_info, ask_question, total_info)
        answer_info.cast_up(total_info)
        return answer_info

    def update_from_hat_info_for_player(
        self,
        player: int,
        hand_info: HandInfo,
        board: BoardState,
        info: ModulusInformation,
    ) -> None:
        """
        Unpack answers about a player's hand and apply them to hand_info.

        Inverse of get_hat_info_for_player(). The same questions are asked,
        but answers are split off info instead of read from the hand.

        Args:
            player: Player whose hand the answers are about
            hand_info: Public knowledge about that hand (will be modified)
            board: Current board state
            info: Packed answers (consumed)
        """
        total_info = info.modulus

        def ask_question(question: Question) -> int:
            answer_info = info.split(question.info_amount())
            question.acknowledge_answer_info(answer_info, hand_info, board)
            return info.modulus

        self.ask_questions(player, hand_info, ask_question, total_info)
        require(info.value == 0, f"Hat information for player {player} was not fully consumed: {info!r}")

    def get_hat_sum(self, total_info: int, view: OwnedGameView) -> ModulusInformation:
        """
        Compute which of total_info choices to take.

        At the same time mutates self to simulate the choice becoming
        common knowledge.

        Args:
            total_info: Number of choices available
            view: View of the acting player

        Returns:
            Sum of every other player's hat information, modulus total_info
        """
        if total_info == 1:
            return ModulusInformation.none()
        infos = []
        new_player_hands = []
        for player in view.get_other_players():
            hand_info = self.get_player_info(player)
            info = self.get_hat_info_for_player(player, hand_info, total_info, view)
            infos.append(info)
            new_player_hands.append((player, hand_info))
        self.set_player_infos(new_player_hands)

        sum_info = ModulusInformation(total_info, 0)
        for info in infos:
            sum_info.add(info)
        logger.debug(f"Player {view.player} computed hat sum {sum_info.value}/{total_info}")
        return sum_info

    def update_from_hat_sum(self, info: ModulusInformation, view: OwnedGameView) -> None:
        """
        Update from the hat sum the current player acted on.

        If we infer that the player making the move called get_hat_sum()
        and got the result info, this applies that fact to self.

        Args:
            info: Observed hat sum (consumed)
            view: View of the observing player
        """
        if info.modulus == 1:
            return
        info_source = view.board.player
        observed = info.value
        new_player_hands = []
        for player in view.get_other_players():
            if player == info_source:
                continue
            hand_info = self.get_player_info(player)
            player_info = self.get_hat_info_for_player(player, hand_info, info.modulus, view)
            info.subtract(player_info)
            new_player_hands.append((player, hand_info))

        me = view.player
        if me == info_source:
            require(info.value == 0, f"Player {me} does not agree with their own hat sum: {info!r}")
        else:
            my_hand = self.get_player_info(me)
            self.update_from_hat_info_for_player(me, my_hand, view.board, info)
            new_player_hands.append((me, my_hand))
        self.set_player_infos(new_player_hands)
        logger.debug(f"Player {me} decoded hat sum {observed} from player {info_source}")

    def get_private_info(self, view: OwnedGameView) -> HandInfo:
        """
        Get what the viewer knows about their own hand.

        Starts from the public knowledge and removes every card visible in
        other hands.

        Args:
            view: View of the player

        Returns:
            Private hand info of view.player
        """
        info = self.get_player_info(view.player)
        for card_table in info:
            for player in view.get_other_players():
                for card in view.get_hand(player):
                    card_table.decrement_weight_if_possible(card)
        return info

    def decide_action_not_known_to_be_possible(self, num_states: int, view: OwnedGameView) -> bool:
        """
        Decide whether to take an action only we know we can take.

        Suppose the current player can do some action that others don't
        know is possible, but that they will recognize once they see it
        (say, discarding a card privately known to be dead). If the hat
        sum over num_states is 0, we take the action and thereby transmit
        that sum; otherwise we don't and nothing is transmitted.

        This happens with probability of roughly 1/num_states, and then
        transmits log(num_states) bits to each player. Other players need
        to know how num_states was chosen. Calling this twice in a row
        without a state change gives the same answer.

        Args:
            num_states: Number of states of the hat sum
            view: View of the acting player

        Returns:
            True if the action should be taken (self is then updated)
        """
        hat_sum = self.clone().get_hat_sum(num_states, view)
        if hat_sum.value == 0:
            self.get_hat_sum(num_states, view)
            return True
        return False

    def update_from_action_not_known_to_be_possible(self, num_states: int, view: OwnedGameView) -> None:
        """
        Update after seeing decide_action_not_known_to_be_possible() return True.

        Args:
            num_states: Number of states the actor used
            view: View of the observing player
        """
        self.update_from_hat_sum(ModulusInformation(num_states, 0), view)
