"""Errors raised by the backend API client."""


class APIError(Exception):
    """Base class for every failure surfaced by :class:`~adminbot.api.client.AdminAPI`."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message


class BackendError(APIError):
    """The backend answered with a well-formed ``{"error": ...}`` envelope."""


class TransportError(APIError):
    """The request failed before a structured error envelope could be read."""


def normalize_error_message(message: str) -> str:
    # "user not found" -> "User not found."
    return f"{message[:1].upper()}{message[1:]}."
