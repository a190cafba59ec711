"""
Encode and decode entry points.

Records decode through their own from_dict(); the helpers here cover the values
that are unions rather than classes (parts, file content, security schemes,
errors, requests and streaming results). Every decoder raises A2ADecodeError on
a structural mismatch and never runs semantic validation.
"""

import logging
from typing import Any, Dict, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from protocols.a2a_schemas import FileContent, FileWithBytes, FileWithUri, Part
from protocols.base import WIRE_CONTEXT
from protocols.errors import A2AError, A2AErrorAdapter
from protocols.exceptions import A2ADecodeError
from protocols.requests import A2ARequestAdapter, StreamingResult
from protocols.security import SecurityScheme

logger = logging.getLogger(f"a2aProtocol.{__name__}")

ModelT = TypeVar("ModelT", bound=BaseModel)

_PartAdapter: TypeAdapter = TypeAdapter(Part)
_FileContentAdapter: TypeAdapter = TypeAdapter(FileContent)
_SecuritySchemeAdapter: TypeAdapter = TypeAdapter(SecurityScheme)
_StreamingResultAdapter: TypeAdapter = TypeAdapter(StreamingResult)


def encode(value: Any) -> Dict[str, Any]:
    """Encode a record (or union value) to its wire shape."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    raise TypeError(f"Cannot encode value of type {type(value).__name__}")


def _validate_with(adapter: TypeAdapter, data: Any, label: str):
    try:
        return adapter.validate_python(data, context=WIRE_CONTEXT)
    except ValidationError as e:
        logger.debug(f"Failed to decode {label}: {e}")
        raise A2ADecodeError(f"Could not decode {label}: {e}", errors=e.errors()) from e


def decode(model: Type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data, context=WIRE_CONTEXT)
    except ValidationError as e:
        logger.debug(f"Failed to decode {model.__name__}: {e}")
        raise A2ADecodeError(f"Could not decode {model.__name__}: {e}", errors=e.errors()) from e


def decode_part(data: Any) -> Part:
    return _validate_with(_PartAdapter, data, "Part")


def decode_file_content(data: Any) -> Union[FileWithBytes, FileWithUri]:
    return _validate_with(_FileContentAdapter, data, "FileContent")


def decode_security_scheme(data: Any) -> SecurityScheme:
    return _validate_with(_SecuritySchemeAdapter, data, "SecurityScheme")


def decode_error(data: Any) -> A2AError:
    """Decode an error object, choosing the error kind from its `code`."""
    return _validate_with(A2AErrorAdapter, data, "A2AError")


def decode_request(data: Any):
    """Decode a JSON-RPC request, choosing the request record from its `method`."""
    return _validate_with(A2ARequestAdapter, data, "A2ARequest")


def decode_stream_result(data: Any):
    return _validate_with(_StreamingResultAdapter, data, "StreamingResult")
