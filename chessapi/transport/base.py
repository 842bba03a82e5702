from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Protocol


@dataclass(frozen=True)
class HttpRequest:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def with_header(self, name: str, value: str) -> HttpRequest:
        headers = dict(self.headers)
        headers[name] = value
        return replace(self, headers=headers)

    def with_body(self, body: bytes) -> HttpRequest:
        return replace(self, body=body)


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: bytes = b""

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class RequestFactory(Protocol):
    def create_request(self, method: str, url: str) -> HttpRequest:
        """Create an empty request for method and url."""


class StreamFactory(Protocol):
    def create_stream(self, content: str) -> bytes:
        """Turn serialized text into a request body."""


class HttpSender(Protocol):
    def send_request(self, request: HttpRequest) -> HttpResponse:
        """Send one request and return the response, whatever its status."""


class DefaultRequestFactory:
    def create_request(self, method: str, url: str) -> HttpRequest:
        return HttpRequest(method=method.upper(), url=url)


class Utf8StreamFactory:
    def create_stream(self, content: str) -> bytes:
        return content.encode("utf-8")
