"""
Pure client-side helpers (no HTTP, no console).
The server does the scoring. Here we only:
- check a guess before it is sent
- turn black/white counts into the B/W feedback string
- decide whether a score is a win
"""

from .errors import GuessValidationError
from .types import GuessCode

CODE_LENGTH = 4
MIN_DIGIT = 1
MAX_DIGIT = 6


def validate_guess(guess: GuessCode) -> GuessCode:
    """
    Raises GuessValidationError with the rule that was broken:
      "12345" -> length
      "1270"  -> range
    Returns the guess unchanged when it is fine.
    """

    # 1. Length first
    if len(guess) != CODE_LENGTH:
        raise GuessValidationError(f"Code must be exactly {CODE_LENGTH} digits")

    # 2. Every character must be a digit in range
    i = 0
    while i < len(guess):
        char = guess[i]
        if not (char.isdigit() and char.isascii()) or not MIN_DIGIT <= int(char) <= MAX_DIGIT:
            raise GuessValidationError(
                f"Each digit must be between {MIN_DIGIT} and {MAX_DIGIT}"
            )
        i += 1

    return guess


def is_valid_guess(guess: GuessCode) -> bool:
    try:
        validate_guess(guess)
    except GuessValidationError:
        return False
    return True


def format_feedback(black: int, white: int) -> str:
    """
    Example:
      black=2, white=1 -> "BBW"
      black=0, white=0 -> "None"
    """
    feedback = "B" * black + "W" * white
    return feedback if feedback else "None"


def is_win(black: int) -> bool:
    """Win = every position matched."""
    return black == CODE_LENGTH
