"""
Errors raised by the API client and the guess validator.
The controller catches both and prints them; neither ends the program.
"""

from typing import Optional

from .types import ApiErrorKind

_DESCRIPTIONS = {
    "invalid_url": "Invalid URL",
    "no_data": "No data received",
    "game_not_found": "Game not found",
    "server_error": "Server error",
}


class ApiError(Exception):
    """A remote call that did not produce a usable result.

    ``kind`` tells callers what went wrong; ``message`` carries the server's
    own text for ``api_error`` and the underlying failure for ``transport``
    and ``decode``.
    """

    def __init__(self, kind: ApiErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message
        super().__init__(self.describe())

    def describe(self) -> str:
        if self.kind == "api_error":
            return f"API Error: {self.message}"
        if self.kind in _DESCRIPTIONS:
            return _DESCRIPTIONS[self.kind]
        return self.message or self.kind

    def __repr__(self) -> str:
        return f"ApiError(kind={self.kind!r}, message={self.message!r})"


class GuessValidationError(ValueError):
    """Raised for a guess that must not be sent to the server."""
