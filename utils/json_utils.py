import datetime
import collections.abc
import json
import logging
from typing import Any, Union

from pydantic import BaseModel

from protocols.errors import InternalError, JSONParseError
from protocols.exceptions import A2ARpcError

logger = logging.getLogger(f"a2aProtocol.{__name__}")


def convert_datetime_to_iso_string(obj):
    """
    Recursively convert datetime objects in a dictionary or list to ISO 8601 strings.
    """
    if isinstance(obj, (datetime.datetime, datetime.date)):
        return obj.isoformat()
    elif isinstance(obj, collections.abc.Mapping):
        return {k: convert_datetime_to_iso_string(v) for k, v in obj.items()}
    elif isinstance(obj, collections.abc.Sequence) and not isinstance(obj, (str, bytes)):
        return [convert_datetime_to_iso_string(elem) for elem in obj]
    else:
        return obj


def parse_json_payload(raw: Union[str, bytes]) -> Any:
    """
    Parse a raw JSON payload received from a peer.

    Raises:
        A2ARpcError: carrying a JSONParseError when the payload is not valid JSON.
    """
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
        logger.warning(f"Rejected malformed JSON payload: {e}")
        raise A2ARpcError(JSONParseError(message=f"Invalid JSON payload: {e}")) from e


def serialize_response(obj: Any) -> str:
    """
    Serialize a record or plain value to a JSON string for sending to a peer.

    Records use their wire field names with absent optional fields left out.
    Datetimes inside plain values become ISO 8601 strings.
    """
    try:
        if isinstance(obj, BaseModel):
            return obj.model_dump_json(by_alias=True, exclude_none=True)
        return json.dumps(convert_datetime_to_iso_string(obj))
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to serialize response of type {type(obj).__name__}: {e}", exc_info=True)
        raise A2ARpcError(InternalError(message=f"Internal error: {e}")) from e
