"""Request bounded context - Liskov substitution example."""

from .request_service import fetch_data, fetch_object_or_error
from .value_objects import ErrorInfo, ErrorKind, FetchResult, NetworkRequest, ObjectResult

__all__ = [
    "NetworkRequest",
    "ErrorKind",
    "ErrorInfo",
    "FetchResult",
    "ObjectResult",
    "fetch_data",
    "fetch_object_or_error",
]
