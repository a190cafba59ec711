"""
JSON-RPC request and response records for every A2A method.

These are thin envelopes: `jsonrpc`, a caller-supplied `id`, and either
`method` + `params` or `result` / `error`. Routing a request to a handler is the
transport's job and is not done here.
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BeforeValidator, Discriminator, Field, Tag, TypeAdapter
from typing_extensions import Annotated

from protocols.a2a_schemas import Message, MessageRole, Task, TextPart
from protocols.base import A2ABaseModel
from protocols.constants import JSONRPC_VERSION
from protocols.errors import A2AError, MethodNotFoundError
from protocols.events import TaskArtifactUpdateEvent, TaskStatusUpdateEvent
from protocols.exceptions import A2ARpcError, A2AValidationError
from protocols.validation import validate_task_id, validate_url


class RequestMethod(str, Enum):
    MESSAGE_SEND = "message/send"
    MESSAGE_STREAM = "message/stream"
    TASKS_GET = "tasks/get"
    TASKS_CANCEL = "tasks/cancel"
    TASKS_PUSH_NOTIFICATION_CONFIG_SET = "tasks/pushNotificationConfig/set"
    TASKS_PUSH_NOTIFICATION_CONFIG_GET = "tasks/pushNotificationConfig/get"
    TASKS_PUSH_NOTIFICATION_CONFIG_LIST = "tasks/pushNotificationConfig/list"
    TASKS_PUSH_NOTIFICATION_CONFIG_DELETE = "tasks/pushNotificationConfig/delete"
    TASKS_RESUBSCRIBE = "tasks/resubscribe"

    @classmethod
    def _missing_(cls, value):
        # Legacy names decode to the canonical member; encoding always uses .value
        if isinstance(value, str):
            return LEGACY_METHOD_ALIASES.get(value)
        return None

    def __str__(self) -> str:
        return self.value


# Decode-only. Never used when encoding.
LEGACY_METHOD_ALIASES: Dict[str, RequestMethod] = {
    "sendMessage": RequestMethod.MESSAGE_SEND,
    "getTask": RequestMethod.TASKS_GET,
    "cancelTask": RequestMethod.TASKS_CANCEL,
}


def resolve_method(name: str) -> RequestMethod:
    """Map a wire method name (canonical or legacy) to RequestMethod."""
    try:
        return RequestMethod(name)
    except ValueError:
        raise A2ARpcError(MethodNotFoundError(message=f"Method not found: {name}")) from None


def _coerce_method(value: Any) -> Any:
    if isinstance(value, str) and not isinstance(value, RequestMethod):
        return RequestMethod(value)
    return value


MethodField = Annotated[RequestMethod, BeforeValidator(_coerce_method)]
RequestId = Union[str, int]


# --- params -----------------------------------------------------------------


class TaskIdParams(A2ABaseModel):
    id: str
    metadata: Optional[Any] = None

    def validate(self) -> None:
        validate_task_id(self.id)


class PushNotificationAuthenticationInfo(A2ABaseModel):
    schemes: List[str]
    credentials: Optional[str] = None


class PushNotificationConfig(A2ABaseModel):
    url: str
    authentication: Optional[PushNotificationAuthenticationInfo] = None
    id: Optional[str] = None
    token: Optional[str] = None

    def validate(self) -> None:
        validate_url(self.url)
        if self.authentication is not None and not self.authentication.schemes:
            raise A2AValidationError("Push notification authentication must list at least one scheme")


class MessageSendConfiguration(A2ABaseModel):
    accepted_output_modes: List[str]
    blocking: Optional[bool] = None
    history_length: Optional[int] = None
    push_notification_config: Optional[PushNotificationConfig] = None

    def validate(self) -> None:
        if self.history_length is not None and self.history_length < 0:
            raise A2AValidationError("History length cannot be negative")
        if self.push_notification_config is not None:
            self.push_notification_config.validate()


class MessageSendParams(A2ABaseModel):
    message: Message
    configuration: Optional[MessageSendConfiguration] = None
    metadata: Optional[Any] = None

    def validate(self) -> None:
        self.message.validate()
        if self.configuration is not None:
            self.configuration.validate()


class _TaskScopedParams(A2ABaseModel):
    task_id: str

    def validate(self) -> None:
        validate_task_id(self.task_id)


class GetTaskParams(_TaskScopedParams):
    pass


class CancelTaskParams(_TaskScopedParams):
    pass


class TaskResubscriptionParams(_TaskScopedParams):
    pass


class ListTaskPushNotificationConfigParams(_TaskScopedParams):
    pass


class SetTaskPushNotificationConfigParams(_TaskScopedParams):
    config: PushNotificationConfig

    def validate(self) -> None:
        super().validate()
        self.config.validate()


class GetTaskPushNotificationConfigParams(_TaskScopedParams):
    config_id: str


class DeleteTaskPushNotificationConfigParams(_TaskScopedParams):
    config_id: str


# --- requests ---------------------------------------------------------------


class JSONRPCMessage(A2ABaseModel):
    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: RequestId


class JSONRPCRequest(JSONRPCMessage):
    method: MethodField

    def validate(self) -> None:
        params = getattr(self, "params", None)
        if params is not None:
            params.validate()


class SendMessageRequest(JSONRPCRequest):
    method: MethodField = RequestMethod.MESSAGE_SEND
    params: MessageSendParams

    @classmethod
    def from_text(
        cls,
        id: RequestId,
        message_id: str,
        text: str,
        role: MessageRole,
        configuration: Optional[MessageSendConfiguration] = None,
        metadata: Optional[Any] = None,
    ) -> "SendMessageRequest":
        message = Message(message_id=message_id, parts=[TextPart(text=text)], role=role)
        return cls(
            id=id,
            params=MessageSendParams(message=message, configuration=configuration, metadata=metadata),
        )


class SendStreamingMessageRequest(JSONRPCRequest):
    method: MethodField = RequestMethod.MESSAGE_STREAM
    params: MessageSendParams


class GetTaskRequest(JSONRPCRequest):
    method: MethodField = RequestMethod.TASKS_GET
    params: GetTaskParams

    @classmethod
    def for_task(cls, id: RequestId, task_id: str) -> "GetTaskRequest":
        return cls(id=id, params=GetTaskParams(task_id=task_id))


class CancelTaskRequest(JSONRPCRequest):
    method: MethodField = RequestMethod.TASKS_CANCEL
    params: CancelTaskParams

    @classmethod
    def for_task(cls, id: RequestId, task_id: str) -> "CancelTaskRequest":
        return cls(id=id, params=CancelTaskParams(task_id=task_id))


class SetTaskPushNotificationConfigRequest(JSONRPCRequest):
    method: MethodField = RequestMethod.TASKS_PUSH_NOTIFICATION_CONFIG_SET
    params: SetTaskPushNotificationConfigParams


class GetTaskPushNotificationConfigRequest(JSONRPCRequest):
    method: MethodField = RequestMethod.TASKS_PUSH_NOTIFICATION_CONFIG_GET
    params: GetTaskPushNotificationConfigParams


class ListTaskPushNotificationConfigRequest(JSONRPCRequest):
    method: MethodField = RequestMethod.TASKS_PUSH_NOTIFICATION_CONFIG_LIST
    params: ListTaskPushNotificationConfigParams


class DeleteTaskPushNotificationConfigRequest(JSONRPCRequest):
    method: MethodField = RequestMethod.TASKS_PUSH_NOTIFICATION_CONFIG_DELETE
    params: DeleteTaskPushNotificationConfigParams


class TaskResubscriptionRequest(JSONRPCRequest):
    method: MethodField = RequestMethod.TASKS_RESUBSCRIBE
    params: TaskResubscriptionParams


def _request_method_tag(value: Any) -> Optional[str]:
    method = value.get("method") if isinstance(value, dict) else getattr(value, "method", None)
    if not isinstance(method, str):
        return None
    try:
        return RequestMethod(method).value
    except ValueError:
        return method


A2ARequest = Annotated[
    Union[
        Annotated[SendMessageRequest, Tag(RequestMethod.MESSAGE_SEND.value)],
        Annotated[SendStreamingMessageRequest, Tag(RequestMethod.MESSAGE_STREAM.value)],
        Annotated[GetTaskRequest, Tag(RequestMethod.TASKS_GET.value)],
        Annotated[CancelTaskRequest, Tag(RequestMethod.TASKS_CANCEL.value)],
        Annotated[SetTaskPushNotificationConfigRequest, Tag(RequestMethod.TASKS_PUSH_NOTIFICATION_CONFIG_SET.value)],
        Annotated[GetTaskPushNotificationConfigRequest, Tag(RequestMethod.TASKS_PUSH_NOTIFICATION_CONFIG_GET.value)],
        Annotated[ListTaskPushNotificationConfigRequest, Tag(RequestMethod.TASKS_PUSH_NOTIFICATION_CONFIG_LIST.value)],
        Annotated[
            DeleteTaskPushNotificationConfigRequest,
            Tag(RequestMethod.TASKS_PUSH_NOTIFICATION_CONFIG_DELETE.value),
        ],
        Annotated[TaskResubscriptionRequest, Tag(RequestMethod.TASKS_RESUBSCRIBE.value)],
    ],
    Discriminator(
        _request_method_tag,
        custom_error_type="unknown_method",
        custom_error_message="Request method is missing or is not a known A2A method",
    ),
]

A2ARequestAdapter: TypeAdapter = TypeAdapter(A2ARequest)


# --- responses --------------------------------------------------------------


class JSONRPCResponse(JSONRPCMessage):
    def validate(self) -> None:
        result = getattr(self, "result", None)
        for item in result if isinstance(result, list) else [result]:
            if isinstance(item, A2ABaseModel):
                item.validate()


class SendMessageResult(A2ABaseModel):
    task_id: str
    message_id: Optional[str] = None
    conversation_id: Optional[str] = None


class SendMessageResponse(JSONRPCResponse):
    result: SendMessageResult


StreamingResult = Annotated[
    Union[Task, Message, TaskStatusUpdateEvent, TaskArtifactUpdateEvent],
    Field(discriminator="kind"),
]


class SendStreamingMessageResponse(JSONRPCResponse):
    result: StreamingResult


class GetTaskResponse(JSONRPCResponse):
    result: Task


class CancelTaskResponse(JSONRPCResponse):
    result: Task


class TaskResubscriptionResponse(JSONRPCResponse):
    result: Task


class PushNotificationConfigResult(A2ABaseModel):
    task_id: str
    config_id: str


class PushNotificationConfigInfo(A2ABaseModel):
    config_id: str
    url: str


class SetTaskPushNotificationConfigResponse(JSONRPCResponse):
    result: PushNotificationConfigResult


class GetTaskPushNotificationConfigResponse(JSONRPCResponse):
    result: PushNotificationConfig


class ListTaskPushNotificationConfigResponse(JSONRPCResponse):
    result: List[PushNotificationConfigInfo]


class DeleteTaskPushNotificationConfigResponse(JSONRPCResponse):
    result: bool


class JSONRPCErrorResponse(JSONRPCMessage):
    # id is null when the request id could not be read
    id: Optional[RequestId] = None
    error: A2AError
