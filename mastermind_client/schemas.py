"""
Pydantic models for the remote Mastermind API
- Used to build request bodies and to decode response bodies.
- The server owns the secret and the scoring; these models only describe
  what travels over the wire.
"""

from pydantic import BaseModel, Field, field_validator

# 1. Response when a new game is created
class CreateGameResponse(BaseModel):
    game_id: str = Field(..., description="Opaque ID issued by the server")

# 2. Body of POST /guess
class GuessRequest(BaseModel):
    game_id: str = Field(..., description="Game the guess belongs to")
    guess: str = Field(..., description="Four digits, each between 1 and 6")

    @field_validator("guess")
    @classmethod
    def validate_digits(cls, guess: str) -> str:
        """
        The controller validates before we get here; this keeps a malformed
        guess from ever being serialized.
        """
        if len(guess) != 4 or any(char not in "123456" for char in guess):
            raise ValueError("Guess must be four digits between 1 and 6.")
        return guess

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"game_id": "c0ffee", "guess": "1234"},
            ]
        }
    }

# 3. Score for a single guess
class GuessResponse(BaseModel):
    black: int = Field(..., ge=0, description="Correct digit in the correct position")
    white: int = Field(..., ge=0, description="Correct digit in the wrong position")

# 4. Error payload the server may send instead of a success body
class ErrorResponse(BaseModel):
    error: str = Field(..., description="Server-side error message")
