from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Sequence

from chessapi.errors import ApiError, ChessApiError, InvalidResponseError, TransportError
from chessapi.transport.base import (
    DefaultRequestFactory,
    HttpSender,
    RequestFactory,
    StreamFactory,
    Utf8StreamFactory,
)
from chessapi.transport.urlopen import UrlopenSender


logger = logging.getLogger(__name__)

BASE_URL = "https://chess-api.com/v1"

INVALID_JSON_MESSAGE = "Invalid API response: expected JSON object"
INVALID_SAN_MESSAGE = 'Invalid API response: missing or invalid "san" field'


@dataclass(frozen=True)
class QueryRequest:
    fen: str
    search_moves: str | None = None
    depth: int | None = None

    @classmethod
    def build(
        cls, fen: str, allowed_moves: Sequence[str] = (), depth: int | None = None
    ) -> QueryRequest:
        search_moves = " ".join(allowed_moves) if allowed_moves else None
        return cls(fen=fen, search_moves=search_moves, depth=int(depth) if depth is not None else None)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"fen": self.fen}
        if self.search_moves is not None:
            payload["searchmoves"] = self.search_moves
        if self.depth is not None:
            payload["depth"] = self.depth
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_payload())


def decode_best_move(status_code: int, body_text: str) -> str:
    """Validate one chess-api response and return the SAN of the chosen move.

    Raises TransportError for non-2xx statuses, ApiError when the service
    reports an error inline in its `text` field, and InvalidResponseError for
    anything that is not a JSON object with a string `san`.
    """
    if status_code < 200 or status_code >= 300:
        raise TransportError(
            f"API request failed with status code {status_code}",
            status_code=status_code,
        )

    try:
        data = json.loads(body_text)
    except (ValueError, RecursionError) as exc:
        raise InvalidResponseError(INVALID_JSON_MESSAGE, status_code=status_code) from exc
    if not isinstance(data, dict):
        raise InvalidResponseError(INVALID_JSON_MESSAGE, status_code=status_code)

    # The service reports failures with a 200 status and a message in `text`.
    text = data.get("text")
    if isinstance(text, str) and "error" in text:
        raise ApiError(text, status_code=status_code)

    san = data.get("san")
    if not isinstance(san, str):
        raise InvalidResponseError(INVALID_SAN_MESSAGE, status_code=status_code)
    return san


class MoveQueryClient:
    """Client for the chess-api.com best-move endpoint."""

    def __init__(
        self,
        sender: HttpSender,
        request_factory: RequestFactory | None = None,
        stream_factory: StreamFactory | None = None,
        *,
        base_url: str = BASE_URL,
    ) -> None:
        self._sender = sender
        self._request_factory = request_factory or DefaultRequestFactory()
        self._stream_factory = stream_factory or Utf8StreamFactory()
        self._base_url = base_url

    @property
    def base_url(self) -> str:
        return self._base_url

    @classmethod
    def from_config(
        cls, config: dict[str, Any], sender: HttpSender | None = None
    ) -> MoveQueryClient:
        api = config.get("api", {})
        if sender is None:
            sender = UrlopenSender(timeout_seconds=api.get("timeout_seconds"))
        return cls(sender, base_url=str(api.get("base_url") or BASE_URL))

    def get_best_move(
        self,
        fen: str,
        allowed_moves: Sequence[str] = (),
        depth: int | None = None,
    ) -> str:
        query = QueryRequest.build(fen, allowed_moves, depth)
        body = self._stream_factory.create_stream(query.to_json())
        request = (
            self._request_factory.create_request("POST", self._base_url)
            .with_header("Content-Type", "application/json")
            .with_body(body)
        )
        logger.debug("POST %s payload=%s", self._base_url, query.to_payload())

        response = self._sender.send_request(request)
        try:
            return decode_best_move(response.status_code, response.text())
        except ChessApiError as exc:
            logger.warning("chess-api %s failure for fen=%r: %s", exc.kind, fen, exc)
            raise
