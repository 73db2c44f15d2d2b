"""
One play-through of Mastermind against the remote server.

GameSession holds what we know locally (server id + attempt count).
GameController runs the turn loop: prompt, validate, call the API, print.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .api_client import MastermindAPIClient
from .engine import format_feedback, is_win, validate_guess
from .errors import ApiError, GuessValidationError
from .schemas import GuessResponse
from .types import GameId, GameOutcome

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10
EXIT_COMMAND = "exit"

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


@dataclass
class GameSession:
    game_id: GameId
    attempts: int = 0
    max_attempts: int = MAX_ATTEMPTS

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.attempts

    @property
    def is_exhausted(self) -> bool:
        return self.attempts >= self.max_attempts

    def record_attempt(self) -> None:
        self.attempts += 1


class GameController:
    def __init__(
        self,
        api: MastermindAPIClient,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self.api = api
        self._input = input_fn
        self._print = output_fn
        self.session: Optional[GameSession] = None

    # --- Public API ---

    def play(self) -> GameOutcome:
        """Run one game from creation to won / lost / exited."""
        self._print_welcome()

        if not self._create_session():
            self._print("💔 Cannot start game without server connection")
            return "not_started"

        try:
            return self._turn_loop(self.session)
        except KeyboardInterrupt:
            # Ctrl-C mid-game: still drop the remote game before unwinding.
            self._cleanup()
            raise

    def _turn_loop(self, session: GameSession) -> GameOutcome:
        while not session.is_exhausted:
            self._print_state()

            raw = self._read_guess()
            if raw is None or raw.lower() == EXIT_COMMAND:
                self._print("👋 Goodbye!")
                self._cleanup()
                return "exited"

            try:
                guess = validate_guess(raw)
            except GuessValidationError as err:
                self._print(f"❌ {err}")
                continue

            score = self._submit(guess)
            if score is None:
                self._print("❌ Failed to process guess. Try again.")
                continue

            session.record_attempt()
            self._print_result(guess, score)

            if is_win(score.black):
                self._print("\n🎉🎉🎉 Congratulations! You won! 🎉🎉🎉")
                self._print(f"⚡ Number of attempts: {session.attempts}")
                self._cleanup()
                return "won"

            if session.attempts_left > 0:
                self._print(f"⏳ {session.attempts_left} attempts remaining")

        self._print("\n💔 Unfortunately, you lost!")
        self._cleanup()
        return "lost"

    # --- Remote calls ---

    def _create_session(self) -> bool:
        self._print("🔄 Creating new game...")
        try:
            game_id = self.api.create_game()
        except ApiError as err:
            self._print(f"❌ Failed to create game: {err}")
            return False

        self.session = GameSession(game_id=game_id)
        self._print(f"✅ Game created successfully! Game ID: {game_id}")
        return True

    def _submit(self, guess: str) -> Optional[GuessResponse]:
        self._print("🔄 Sending guess to server...")
        try:
            return self.api.submit_guess(self.session.game_id, guess)
        except ApiError as err:
            logger.warning("Guess %s for game %s failed: %r", guess, self.session.game_id, err)
            self._print(f"❌ Failed to make guess: {err}")
            return None

    def _cleanup(self) -> None:
        # The outcome is already decided; a failed delete is only reported.
        try:
            self.api.delete_game(self.session.game_id)
        except ApiError as err:
            self._print(f"⚠️ Failed to delete game: {err}")
        else:
            self._print("🗑️ Game deleted successfully")

    # --- Console ---

    def _read_guess(self) -> Optional[str]:
        try:
            return self._input("\n🤔 Enter your guess (example: 1234): ").strip()
        except EOFError:
            return None

    def _print_welcome(self) -> None:
        self._print("🎮 Welcome to Online Mastermind Game!")
        self._print(f"🌐 Using API: {self.api.base_url}")
        self._print("🎯 The server will generate a secret 4-digit code (numbers 1-6)")
        self._print(f"🎪 You have {MAX_ATTEMPTS} attempts to guess it")

    def _print_state(self) -> None:
        session = self.session
        self._print("\n" + "=" * 40)
        self._print("🎯 Mastermind Game (Online)")
        self._print(f"🆔 Game ID: {session.game_id}")
        self._print(f"📊 Attempt: {session.attempts}/{session.max_attempts}")
        self._print("💡 Guide: B = Correct position, W = Correct digit wrong position")
        self._print(f"⌨️  Type '{EXIT_COMMAND}' to quit")
        self._print("=" * 40)

    def _print_result(self, guess: str, score: GuessResponse) -> None:
        self._print(f"\n📋 Your guess: {guess}")
        self._print(f"📈 Result: {format_feedback(score.black, score.white)}")
        self._print(f"📊 Server response: {score.black} blacks, {score.white} whites")
