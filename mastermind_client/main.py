'''
Terminal Mastermind client

Remote endpoints used:
POST   /game            -> start a game
POST   /guess           -> score a guess
DELETE /game/{id}       -> drop the game when we are done

Run:
  mastermind [--api-url URL] [--timeout SECONDS] [--log-level LEVEL]
'''

import argparse
import logging
from typing import Callable, List, Optional

from .api_client import MastermindAPIClient
from .config import get_settings
from .session import GameController, InputFn, OutputFn
from .types import GameOutcome

logger = logging.getLogger(__name__)

AFFIRMATIVE = ("y", "yes")


class GameManager:
    """Replay loop: every round gets a brand new controller and remote game."""

    def __init__(
        self,
        api_factory: Callable[[], MastermindAPIClient],
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self.api_factory = api_factory
        self._input = input_fn
        self._print = output_fn
        self.outcomes: List[GameOutcome] = []

    def run(self) -> List[GameOutcome]:
        play_again = True
        while play_again:
            game = GameController(self.api_factory(), self._input, self._print)
            outcome = game.play()
            self.outcomes.append(outcome)
            logger.info("Game finished: %s", outcome)
            play_again = self._ask_play_again()

        self._print("👋 Thank you for playing!")
        return self.outcomes

    def _ask_play_again(self) -> bool:
        try:
            answer = self._input("\n🔄 Would you like to play again? (y/n): ")
        except EOFError:
            return False
        return answer.strip().lower() in AFFIRMATIVE


def positive_float(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a number of seconds")
    if not seconds > 0:
        raise argparse.ArgumentTypeError("timeout must be greater than zero")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mastermind",
        description="Play Mastermind against a remote game server.",
    )
    parser.add_argument("--api-url", help="Base URL of the Mastermind server")
    parser.add_argument("--timeout", type=positive_float, help="Seconds to wait for each request")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = get_settings()
    except RuntimeError as err:
        # exits with status 2 and a usage line instead of a traceback
        parser.error(str(err))

    log_level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    api_url = args.api_url or settings.api_url
    timeout = args.timeout if args.timeout is not None else settings.timeout

    # One HTTP connection pool for the whole run; the client itself holds no game state.
    api = MastermindAPIClient(base_url=api_url, timeout=timeout)
    manager = GameManager(lambda: api)
    try:
        manager.run()
    except KeyboardInterrupt:
        print("\n👋 Interrupted. Thank you for playing!")
        return 130
    finally:
        api.close()
    return 0
