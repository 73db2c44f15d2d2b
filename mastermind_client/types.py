"""
Labels for clarity.
"""

from typing import Literal

GameId = str  # opaque id issued by the server
GuessCode = str  # 4 characters, each "1" -> "6"
GameOutcome = Literal["won", "lost", "exited", "not_started"]
ApiErrorKind = Literal[
    "invalid_url",
    "transport",
    "no_data",
    "api_error",
    "decode",
    "game_not_found",
    "server_error",
]
