"""Fetching functions showing substitutable error values.

``fetch_data`` produces request-specific errors. ``fetch_object_or_error``
passes them on as plain errors without knowing they are special, and any
caller can still reach the extra context through the error's kind.
"""
from ood_principles.domain.request.value_objects import (
    ErrorInfo,
    FetchResult,
    NetworkRequest,
    ObjectResult,
)
from ood_principles.helpers.logger import get_logger

logger = get_logger(__name__)

ERROR_DOMAIN = "DOMAIN"
ERROR_CODE = 1
DEFAULT_URL = "about:blank"


def fetch_data(request: NetworkRequest) -> FetchResult:
    """Fail to fetch data, reporting which request failed."""
    logger.debug("Fetching data", request=str(request))
    return FetchResult(
        data=None,
        error=ErrorInfo.for_request(ERROR_DOMAIN, ERROR_CODE, request),
    )


def fetch_object_or_error(url: str = DEFAULT_URL) -> ObjectResult:
    """Fetch an object, returning whatever error occurred as a plain error."""
    result = fetch_data(NetworkRequest(url=url))
    return ObjectResult(object=result.data, error=result.error)
