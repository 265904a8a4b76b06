from .client import AdminAPI, RequestSpec, TotalStats
from .errors import APIError, BackendError, TransportError, normalize_error_message

__all__ = [
    "AdminAPI",
    "RequestSpec",
    "TotalStats",
    "APIError",
    "BackendError",
    "TransportError",
    "normalize_error_message",
]
