from chessapi.client import BASE_URL, MoveQueryClient, QueryRequest, decode_best_move
from chessapi.errors import ApiError, ChessApiError, InvalidResponseError, TransportError


__all__ = [
    "ApiError",
    "BASE_URL",
    "ChessApiError",
    "InvalidResponseError",
    "MoveQueryClient",
    "QueryRequest",
    "TransportError",
    "decode_best_move",
]
