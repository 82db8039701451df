"""Domain errors raised by the services and rendered by the app's handlers."""

from fastapi import status


class DiceGameError(Exception):
    status_code = 422
    message = "Dice game error"

    def __init__(self, message: str | None = None, errors: dict | None = None):
        self.message = message or self.message
        self.errors = errors
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class NotFoundError(DiceGameError):
    message = "User not found"


class AuthorizationError(DiceGameError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class ValidationError(DiceGameError):
    message = "Validation failed"


class EmptyResultError(DiceGameError):
    """Nothing to report on: no users, or no user has played a game."""

    message = "No players have played yet"
