"""
A2A error taxonomy.

Eleven error kinds, each with a fixed JSON-RPC error code. On the wire an error
is a flat object {code, message, data?}; the code is the only discriminant, so
decoding reads `code` first and picks the matching kind. Payloads whose code is
missing or not one of the eleven values are rejected, except in Task.error
(see TaskError), where other codes stay generic.

-32700 .. -32600 mirror the JSON-RPC 2.0 standard codes, -32001 .. -32006 are
A2A-specific.
"""

from enum import IntEnum
from typing import Any, ClassVar, Dict, Literal, Optional, Type, Union

from pydantic import Discriminator, StrictInt, Tag, TypeAdapter, ValidationInfo, model_validator
from typing_extensions import Annotated

from protocols.base import A2ABaseModel, is_wire_decode


class A2AErrorCode(IntEnum):
    JSON_PARSE = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL = -32603
    TASK_NOT_FOUND = -32001
    TASK_NOT_CANCELABLE = -32002
    PUSH_NOTIFICATION_NOT_SUPPORTED = -32003
    UNSUPPORTED_OPERATION = -32004
    CONTENT_TYPE_NOT_SUPPORTED = -32005
    INVALID_AGENT_RESPONSE = -32006


class JSONRPCError(A2ABaseModel):
    """Generic JSON-RPC error object. Task.error falls back to it for codes outside the eleven kinds."""

    label: ClassVar[str] = "JSON-RPC error"
    # Used when building an error in code without a message. Decoded errors must carry one.
    default_message: ClassVar[Optional[str]] = None

    code: StrictInt
    message: str
    data: Optional[Any] = None

    @model_validator(mode="before")
    @classmethod
    def fill_default_message(cls, data: Any, info: ValidationInfo) -> Any:
        if is_wire_decode(info) or cls.default_message is None:
            return data
        if isinstance(data, dict) and "message" not in data:
            return {**data, "message": cls.default_message}
        return data

    def __str__(self) -> str:
        return f"{self.label}: {self.message}"


class JSONParseError(JSONRPCError):
    label: ClassVar[str] = "JSON parse error"
    code: Literal[-32700] = -32700
    default_message: ClassVar[str] = "Invalid JSON payload"


class InvalidRequestError(JSONRPCError):
    label: ClassVar[str] = "Invalid request"
    code: Literal[-32600] = -32600
    default_message: ClassVar[str] = "Request payload validation error"


class MethodNotFoundError(JSONRPCError):
    label: ClassVar[str] = "Method not found"
    code: Literal[-32601] = -32601
    default_message: ClassVar[str] = "Method not found"


class InvalidParamsError(JSONRPCError):
    label: ClassVar[str] = "Invalid parameters"
    code: Literal[-32602] = -32602
    default_message: ClassVar[str] = "Invalid parameters"


class InternalError(JSONRPCError):
    label: ClassVar[str] = "Internal error"
    code: Literal[-32603] = -32603
    default_message: ClassVar[str] = "Internal error"


class TaskNotFoundError(JSONRPCError):
    label: ClassVar[str] = "Task not found"
    code: Literal[-32001] = -32001
    default_message: ClassVar[str] = "Task not found"


class TaskNotCancelableError(JSONRPCError):
    label: ClassVar[str] = "Task not cancelable"
    code: Literal[-32002] = -32002
    default_message: ClassVar[str] = "Task cannot be canceled"


class PushNotificationNotSupportedError(JSONRPCError):
    label: ClassVar[str] = "Push notification not supported"
    code: Literal[-32003] = -32003
    default_message: ClassVar[str] = "Push Notification is not supported"


class UnsupportedOperationError(JSONRPCError):
    label: ClassVar[str] = "Unsupported operation"
    code: Literal[-32004] = -32004
    default_message: ClassVar[str] = "This operation is not supported"


class ContentTypeNotSupportedError(JSONRPCError):
    label: ClassVar[str] = "Content type not supported"
    code: Literal[-32005] = -32005
    default_message: ClassVar[str] = "Incompatible content types"


class InvalidAgentResponseError(JSONRPCError):
    label: ClassVar[str] = "Invalid agent response"
    code: Literal[-32006] = -32006
    default_message: ClassVar[str] = "Invalid agent response"


ERROR_TYPES_BY_CODE: Dict[A2AErrorCode, Type[JSONRPCError]] = {
    A2AErrorCode.JSON_PARSE: JSONParseError,
    A2AErrorCode.INVALID_REQUEST: InvalidRequestError,
    A2AErrorCode.METHOD_NOT_FOUND: MethodNotFoundError,
    A2AErrorCode.INVALID_PARAMS: InvalidParamsError,
    A2AErrorCode.INTERNAL: InternalError,
    A2AErrorCode.TASK_NOT_FOUND: TaskNotFoundError,
    A2AErrorCode.TASK_NOT_CANCELABLE: TaskNotCancelableError,
    A2AErrorCode.PUSH_NOTIFICATION_NOT_SUPPORTED: PushNotificationNotSupportedError,
    A2AErrorCode.UNSUPPORTED_OPERATION: UnsupportedOperationError,
    A2AErrorCode.CONTENT_TYPE_NOT_SUPPORTED: ContentTypeNotSupportedError,
    A2AErrorCode.INVALID_AGENT_RESPONSE: InvalidAgentResponseError,
}

CODES_BY_ERROR_TYPE: Dict[Type[JSONRPCError], A2AErrorCode] = {
    error_type: code for code, error_type in ERROR_TYPES_BY_CODE.items()
}


def error_type_for_code(code: int) -> Optional[Type[JSONRPCError]]:
    try:
        return ERROR_TYPES_BY_CODE[A2AErrorCode(code)]
    except ValueError:
        return None


def code_for_error_type(error_type: Type[JSONRPCError]) -> A2AErrorCode:
    return CODES_BY_ERROR_TYPE[error_type]


def _error_code_tag(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        code = value.get("code")
    else:
        code = getattr(value, "code", None)
    # bool is an int subclass but never a valid error code
    if isinstance(code, bool) or not isinstance(code, int):
        return None
    return str(code)


_TAGGED_ERROR_TYPES = tuple(
    Annotated[error_type, Tag(str(code.value))] for code, error_type in ERROR_TYPES_BY_CODE.items()
)

A2AError = Annotated[
    Union[_TAGGED_ERROR_TYPES],
    Discriminator(
        _error_code_tag,
        custom_error_type="unknown_error_code",
        custom_error_message="Error code is missing or is not a known A2A error code",
    ),
]

A2AErrorAdapter: TypeAdapter = TypeAdapter(A2AError)

GENERIC_ERROR_TAG = "generic"


def _task_error_tag(value: Any) -> str:
    if isinstance(value, JSONRPCError):
        code = CODES_BY_ERROR_TYPE.get(type(value))
        return GENERIC_ERROR_TAG if code is None else str(code.value)
    tag = _error_code_tag(value)
    if tag is None or error_type_for_code(int(tag)) is None:
        return GENERIC_ERROR_TAG
    return tag


# Task.error: known codes decode to their kind, any other code stays a plain JSONRPCError.
TaskError = Annotated[
    Union[_TAGGED_ERROR_TYPES + (Annotated[JSONRPCError, Tag(GENERIC_ERROR_TAG)],)],
    Discriminator(_task_error_tag),
]
