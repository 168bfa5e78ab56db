"""Request encoding and response decoding."""

import logging
from typing import Any, BinaryIO, Optional, Type, TypeVar, Union

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from .errors import DecodeError, SerializationError
from .models import Owned, Request, Response

logger = logging.getLogger(__name__)

T = TypeVar("T")


def encode_request(request: Request, sink: Optional[BinaryIO] = None) -> bytes:
    """Serialize a request to its compact JSON body.

    ``operationName`` is omitted entirely when unset. When ``sink`` is given the
    body is also written to it.
    """
    try:
        body = request.model_dump_json(exclude_none=True).encode("utf-8")
    except PydanticSerializationError as e:
        raise SerializationError(f"Could not serialize request: {e}") from e
    if sink is not None:
        try:
            sink.write(body)
        except (OSError, ValueError) as e:
            raise SerializationError(f"Could not write request body: {e}") from e
    return body


def decode_response(body: Union[bytes, str], shape: Type[T]) -> Owned[Response[T]]:
    """Parse a response body into an owned ``Response[shape]``.

    Unknown fields are ignored. Invalid JSON, a ``data`` object that does not
    fit ``shape``, or an envelope with neither ``data`` nor ``errors`` raise
    ``DecodeError``.
    """
    logger.debug(f"parsing body {_preview(body)}")
    try:
        response = Response[shape].model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Could not decode response as {_shape_name(shape)}: {e}") from e
    raw = body.encode("utf-8") if isinstance(body, str) else bytes(body)
    return Owned(response, backing=raw)


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", repr(shape))


def _preview(body: Union[bytes, str], limit: int = 200) -> str:
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    return repr(body[:limit])
