"""HTTP status classification, applied before any body is parsed."""

from enum import Enum
from typing import Mapping, Optional

from ..errors import Forbidden, HttpError, NotAuthorized, ServerError, Throttled


class StatusClass(str, Enum):
    SUCCESS = "success"
    NOT_AUTHORIZED = "not_authorized"
    FORBIDDEN = "forbidden"
    THROTTLED = "throttled"
    OTHER_CLIENT_ERROR = "other_client_error"
    SERVER_ERROR = "server_error"


def classify_status(status_code: int) -> StatusClass:
    """Map an HTTP status code to a ``StatusClass``. Anything below 400 is a success."""
    if 400 <= status_code < 500:
        if status_code == 401:
            return StatusClass.NOT_AUTHORIZED
        if status_code == 403:
            return StatusClass.FORBIDDEN
        if status_code == 429:
            return StatusClass.THROTTLED
        return StatusClass.OTHER_CLIENT_ERROR
    if status_code >= 500:
        return StatusClass.SERVER_ERROR
    return StatusClass.SUCCESS


def raise_for_status(status_code: int, headers: Optional[Mapping[str, str]] = None) -> None:
    """Raise the error matching ``status_code``; return quietly on success."""
    status = classify_status(status_code)
    if status is StatusClass.SUCCESS:
        return
    if status is StatusClass.NOT_AUTHORIZED:
        raise NotAuthorized("Request not authorized (401).", status_code)
    if status is StatusClass.FORBIDDEN:
        raise Forbidden("Request forbidden (403).", status_code)
    if status is StatusClass.THROTTLED:
        retry_after = (headers or {}).get("Retry-After")
        if retry_after:
            raise Throttled(f"Request throttled (429). Retry-After: {retry_after}s.", status_code, retry_after)
        raise Throttled("Request throttled (429).", status_code)
    if status is StatusClass.SERVER_ERROR:
        raise ServerError(f"Server error with status code: {status_code}", status_code)
    raise HttpError(f"Request failed with status code: {status_code}", status_code)
