# ood_principles/domain/request/value_objects.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from ood_principles.domain.base.exceptions import ValidationError


@dataclass(frozen=True)
class NetworkRequest:
    """Description of a request to fetch data from somewhere."""
    url: str
    method: str = "GET"

    def __post_init__(self):
        if not isinstance(self.url, str) or not self.url:
            raise ValidationError("Request URL must be a non-empty string")

    def __str__(self) -> str:
        return f"{self.method} {self.url}"


class ErrorKind(str, Enum):
    """Discriminant telling which extra context an error carries."""
    GENERIC = "generic"
    REQUEST = "request"


class ErrorInfo(BaseModel):
    """
    Error value with an explicit kind.

    Every error exposes ``domain`` and ``code``. An error of kind REQUEST also
    carries the request that failed; callers that care read it after checking
    ``kind``, callers that don't simply ignore it.
    """
    model_config = ConfigDict(frozen=True)

    domain: str
    code: int
    kind: ErrorKind = ErrorKind.GENERIC
    request: Optional[NetworkRequest] = None

    @model_validator(mode='after')
    def check_payload_matches_kind(self) -> ErrorInfo:
        if self.kind == ErrorKind.REQUEST and self.request is None:
            raise ValueError("REQUEST errors must carry the failed request")
        if self.kind == ErrorKind.GENERIC and self.request is not None:
            raise ValueError("GENERIC errors cannot carry a request")
        return self

    @classmethod
    def for_request(cls, domain: str, code: int, request: NetworkRequest) -> ErrorInfo:
        return cls(domain=domain, code=code, kind=ErrorKind.REQUEST, request=request)

    @property
    def is_request_error(self) -> bool:
        return self.kind == ErrorKind.REQUEST


class FetchResult(BaseModel):
    """Outcome of a fetch: data on success, error otherwise."""
    model_config = ConfigDict(frozen=True)

    data: Optional[bytes] = None
    error: Optional[ErrorInfo] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class ObjectResult(BaseModel):
    """Outcome of a generic operation returning any object or an error."""
    model_config = ConfigDict(frozen=True)

    object: Optional[Any] = None
    error: Optional[ErrorInfo] = None
