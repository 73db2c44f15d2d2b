"""
- Blocking HTTP calls to the remote Mastermind server
The server owns the secret code and the scoring. We only create a game,
send guesses, and delete the game when the player is done.

Every failure comes back as an ApiError so the caller has one thing to catch.
"""

import logging
from typing import Optional, Type, TypeVar
from urllib.parse import quote

import requests
from pydantic import BaseModel, ValidationError

from .config import get_settings
from .errors import ApiError
from .schemas import CreateGameResponse, ErrorResponse, GuessRequest, GuessResponse
from .types import GameId, GuessCode

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class MastermindAPIClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if base_url is None or timeout is None:
            settings = get_settings()
            base_url = settings.api_url if base_url is None else base_url
            timeout = settings.timeout if timeout is None else timeout
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # --- Public API ---

    def create_game(self) -> GameId:
        """POST /game -> the id of a fresh game on the server."""
        response = self._send("POST", "/game")
        created = self._decode(response, CreateGameResponse)
        logger.info("Created game %s", created.game_id)
        return created.game_id

    def submit_guess(self, game_id: GameId, guess: GuessCode) -> GuessResponse:
        """POST /guess -> black/white counts for this guess."""
        try:
            body = GuessRequest(game_id=game_id, guess=guess)
        except ValidationError as exc:
            raise ApiError("decode", f"Could not encode guess: {exc.errors()[0]['msg']}") from exc

        response = self._send("POST", "/guess", json=body.model_dump())
        return self._decode(response, GuessResponse)

    def delete_game(self, game_id: GameId) -> None:
        """
        DELETE /game/{id}
          204 -> deleted
          404 -> ApiError("game_not_found")
          any other status -> ApiError("server_error")
        """
        response = self._send("DELETE", f"/game/{quote(game_id, safe='')}")
        if response.status_code == 204:
            logger.info("Deleted game %s", game_id)
            return
        if response.status_code == 404:
            raise ApiError("game_not_found")
        logger.warning("Delete of game %s returned HTTP %s", game_id, response.status_code)
        raise ApiError("server_error")

    def close(self) -> None:
        self.session.close()

    # --- Helpers ---

    def _send(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except (requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as exc:
            raise ApiError("invalid_url") from exc
        except requests.RequestException as exc:
            # connection refused, DNS, timeout, ...
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError("transport", str(exc)) from exc

        logger.debug("%s %s -> HTTP %s", method, url, response.status_code)
        return response

    def _decode(self, response: requests.Response, model: Type[ModelT]) -> ModelT:
        body = response.content
        if not body:
            raise ApiError("no_data")

        # Success shape first, then the {"error": ...} shape.
        # If neither fits, report why the success shape did not.
        try:
            return model.model_validate_json(body)
        except ValidationError as exc:
            try:
                error = ErrorResponse.model_validate_json(body)
            except ValidationError:
                reason = exc.errors()[0]["msg"]
                raise ApiError("decode", f"Could not read {model.__name__}: {reason}") from exc
            raise ApiError("api_error", error.error) from exc
