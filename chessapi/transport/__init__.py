from chessapi.transport.base import (
    DefaultRequestFactory,
    HttpRequest,
    HttpResponse,
    HttpSender,
    RequestFactory,
    StreamFactory,
    Utf8StreamFactory,
)
from chessapi.transport.urlopen import UrlopenSender


__all__ = [
    "DefaultRequestFactory",
    "HttpRequest",
    "HttpResponse",
    "HttpSender",
    "RequestFactory",
    "StreamFactory",
    "UrlopenSender",
    "Utf8StreamFactory",
]
