from __future__ import annotations

from typing import Literal


ErrorKind = Literal["transport", "invalid_response", "api_error"]


class ChessApiError(RuntimeError):
    """Raised for every chess-api failure: transport, malformed response or inline API error."""

    kind: ErrorKind | None = None

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind
        self.status_code = status_code

    @property
    def message(self) -> str:
        return str(self)


class TransportError(ChessApiError):
    kind: ErrorKind = "transport"


class InvalidResponseError(ChessApiError):
    kind: ErrorKind = "invalid_response"


class ApiError(ChessApiError):
    """The service answered with a success status but reported an error in its `text` field."""

    kind: ErrorKind = "api_error"
