"""
Command-line interface for checking hat-sum synchronization.

Deals a game, lets the current player compute a hat sum, lets every other
player decode it, and reports whether everyone ends up with the same
public information.
"""

import argparse
import logging
from typing import List, Optional
from .config import Config, GameConfig, LoggingConfig
from .game.game_state import GameState
from .strategies.information import HanabiPublicInformation
from .utils.helpers import format_cards, format_hand_info, setup_logging

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function to run the synchronization check from command line.

    Args:
        argv: Command-line arguments (sys.argv if None)

    Returns:
        Exit code (0 if every player agrees, 1 otherwise)
    """
    parser = argparse.ArgumentParser(description="Check that every player decodes a hat sum consistently")
    parser.add_argument(
        "--players",
        type=int,
        default=3,
        help="Number of players (2-5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed used to shuffle the deck",
    )
    parser.add_argument(
        "--ceiling",
        type=int,
        default=8,
        help="Number of distinguishable actions the hat sum selects from",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG shows every hat sum computed and decoded)",
    )

    args = parser.parse_args(argv)
    if args.ceiling < 1:
        parser.error("--ceiling must be positive")

    config = Config(
        game=GameConfig(num_players=args.players, seed=args.seed),
        logging=LoggingConfig(level=args.log_level),
    )
    setup_logging(config.logging)

    game = GameState(config.game)
    players = game.board.get_players()
    actor = game.board.player
    infos = {player: HanabiPublicInformation.from_board(game.board) for player in players}

    hat_sum = infos[actor].get_hat_sum(args.ceiling, game.get_view(actor))
    print(f"Player {actor} hat sum: {hat_sum.value} (of {hat_sum.modulus})")

    for player in players:
        if player != actor:
            infos[player].update_from_hat_sum(hat_sum.copy(), game.get_view(player))

    for player in players:
        print(f"Player {player} hand: {format_cards(game.get_hand(player))}")
        print(f"  public: {format_hand_info(infos[actor].hand_info[player])}")

    disagreeing = [player for player in players if not infos[player].agrees_with(infos[actor])]
    if disagreeing:
        logger.error(f"Players {disagreeing} disagree with player {actor} after decoding")
        print("DESYNC")
        return 1
    print("OK: all players agree")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
