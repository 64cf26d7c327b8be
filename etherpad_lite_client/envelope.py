# envelope.py - decodes the {"code", "message", "data"} response envelope
import json
from enum import IntEnum
from typing import Any, Dict

from .errors import (
    InternalServerError,
    InvalidApiKeyError,
    InvalidMethodError,
    InvalidParametersError,
    ProtocolError,
)
from .utils import get_logger

logger = get_logger(__name__)

Payload = Dict[str, Any]


class StatusCode(IntEnum):
    OK = 0
    INVALID_PARAMETERS = 1
    INTERNAL_ERROR = 2
    INVALID_METHOD = 3
    INVALID_API_KEY = 4


REMOTE_ERRORS = {
    StatusCode.INVALID_PARAMETERS: InvalidParametersError,
    StatusCode.INTERNAL_ERROR: InternalServerError,
    StatusCode.INVALID_METHOD: InvalidMethodError,
    StatusCode.INVALID_API_KEY: InvalidApiKeyError,
}


def _status(raw: Any):
    # bool is an int subclass; true/false is never a status
    if isinstance(raw, bool) or not isinstance(raw, int):
        return None
    try:
        return StatusCode(raw)
    except ValueError:
        return None


def decode_response(text: str, lenient_json: bool = False) -> Payload:
    """
    Turn a raw response body into the call's payload or raise.

    Returns ``data`` for status OK (``{}`` when the procedure returns none).
    Failure statuses raise the matching ``RemoteError`` subclass with the
    service's message. A body that is not JSON raises ``ProtocolError``
    unless ``lenient_json`` is set, in which case it yields ``{}``.
    """
    try:
        envelope = json.loads(text)
    except (TypeError, ValueError) as e:
        if lenient_json:
            logger.warning("Unable to parse JSON response (%.200r): %s", text, e)
            return {}
        raise ProtocolError("malformed response", body=text) from e

    if not isinstance(envelope, dict) or envelope.get("code") is None:
        raise ProtocolError("missing status code", body=text)

    status = _status(envelope["code"])
    if status is None:
        raise ProtocolError(f"unrecognized status code: {envelope['code']!r}", body=text)

    if status is StatusCode.OK:
        data = envelope.get("data")
        return {} if data is None else data

    message = envelope.get("message")
    raise REMOTE_ERRORS[status](status, None if message is None else str(message))
