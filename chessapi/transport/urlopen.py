from __future__ import annotations

import http.client
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from chessapi.errors import TransportError
from chessapi.transport.base import HttpRequest, HttpResponse


DEFAULT_TIMEOUT_SECONDS = 30.0


class UrlopenSender:
    """HTTP sender backed by urllib.request.

    Non-2xx answers come back as regular responses; status classification
    belongs to the caller.
    """

    def __init__(self, timeout_seconds: float | None = None) -> None:
        if timeout_seconds is None:
            self.timeout_seconds = DEFAULT_TIMEOUT_SECONDS
        else:
            self.timeout_seconds = float(timeout_seconds)

    def send_request(self, request: HttpRequest) -> HttpResponse:
        req = Request(
            url=request.url,
            data=request.body or None,
            headers=dict(request.headers),
            method=request.method,
        )
        try:
            with urlopen(req, timeout=self.timeout_seconds) as resp:
                return HttpResponse(status_code=int(resp.status), body=resp.read())
        except HTTPError as exc:
            return HttpResponse(status_code=int(exc.code), body=exc.read() or b"")
        except URLError as exc:
            if isinstance(exc.reason, TimeoutError):
                raise TransportError("chess-api request timeout") from exc
            raise TransportError(f"chess-api network error: {exc.reason}") from exc
        except TimeoutError as exc:
            raise TransportError("chess-api request timeout") from exc
        except (http.client.HTTPException, OSError) as exc:
            raise TransportError(f"chess-api network error: {exc}") from exc
