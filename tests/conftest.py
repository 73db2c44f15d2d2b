"""
- Fake HTTP layer: a stand-in for requests.Session that replays canned responses
  and records every request, so no test touches the network.
- Fake API: a scripted MastermindAPIClient replacement for the controller tests.
- Console helpers: feed lines to input_fn and collect what output_fn prints.
"""
import json
from typing import Any, Iterable, List, Optional

import pytest

from mastermind_client.api_client import MastermindAPIClient
from mastermind_client.errors import ApiError
from mastermind_client.schemas import GuessResponse

BASE_URL = "http://mastermind.test"


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None):
        self.status_code = status_code
        if body is None:
            self.content = b""
        elif isinstance(body, (bytes, str)):
            self.content = body if isinstance(body, bytes) else body.encode()
        else:
            self.content = json.dumps(body).encode()


class FakeHTTPSession:
    """Quacks like requests.Session for the one method the client uses."""

    def __init__(self, responses: Iterable[Any] = ()):
        self.responses = list(responses)
        self.calls: List[dict] = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self):
        self.closed = True


class FakeApi:
    """
    Scripted API for the controller.
    - scores: list of (black, white) tuples or ApiError, consumed per guess
    """

    def __init__(self, scores: Iterable[Any] = (), create_error: Optional[ApiError] = None,
                 delete_error: Optional[ApiError] = None, game_id: str = "game-1"):
        self.base_url = BASE_URL
        self.scores = list(scores)
        self.create_error = create_error
        self.delete_error = delete_error
        self.game_id = game_id
        self.created = 0
        self.guesses: List[str] = []
        self.deleted: List[str] = []

    def create_game(self):
        if self.create_error:
            raise self.create_error
        self.created += 1
        return self.game_id

    def submit_guess(self, game_id, guess):
        self.guesses.append(guess)
        outcome = self.scores.pop(0)
        if isinstance(outcome, ApiError):
            raise outcome
        black, white = outcome
        return GuessResponse(black=black, white=white)

    def delete_game(self, game_id):
        self.deleted.append(game_id)
        if self.delete_error:
            raise self.delete_error


class Console:
    """input_fn / output_fn pair. Running out of lines behaves like Ctrl-D."""

    def __init__(self, lines: Iterable[str] = ()):
        self.lines = list(lines)
        self.prompts: List[str] = []
        self.output: List[str] = []

    def input(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def print(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def http():
    return FakeHTTPSession()


@pytest.fixture
def client(http):
    return MastermindAPIClient(base_url=BASE_URL, timeout=2.0, session=http)
