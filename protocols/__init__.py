# This file makes the 'protocols' directory a Python package.
from .a2a_schemas import (
    Artifact,
    DataPart,
    FileContent,
    FilePart,
    FileWithBytes,
    FileWithUri,
    Message,
    MessageRole,
    Part,
    Task,
    TaskState,
    TaskStatus,
    TextPart,
)
from .agent_card import (
    AgentCapabilities,
    AgentCard,
    AgentExtension,
    AgentInterface,
    AgentProvider,
    AgentSkill,
)
from .constants import JSONRPC_VERSION, PROTOCOL_VERSION
from .errors import (
    A2AError,
    A2AErrorCode,
    ContentTypeNotSupportedError,
    InternalError,
    InvalidAgentResponseError,
    InvalidParamsError,
    InvalidRequestError,
    JSONParseError,
    JSONRPCError,
    MethodNotFoundError,
    PushNotificationNotSupportedError,
    TaskNotCancelableError,
    TaskError,
    TaskNotFoundError,
    UnsupportedOperationError,
)
from .events import TaskArtifactUpdateEvent, TaskStatusUpdateEvent
from .exceptions import A2ADecodeError, A2AException, A2ARpcError, A2AValidationError, InvalidTransitionError
from .requests import (
    A2ARequest,
    CancelTaskRequest,
    GetTaskRequest,
    JSONRPCErrorResponse,
    MessageSendParams,
    PushNotificationConfig,
    RequestMethod,
    SendMessageRequest,
    SendStreamingMessageRequest,
    SendStreamingMessageResponse,
    resolve_method,
)
from .security import (
    ApiKeyLocation,
    ApiKeySecurityScheme,
    AuthorizationCodeOAuthFlow,
    ClientCredentialsOAuthFlow,
    HttpSecurityScheme,
    ImplicitOAuthFlow,
    OAuth2Flows,
    OAuth2SecurityScheme,
    OpenIdConnectSecurityScheme,
    PasswordOAuthFlow,
    SecurityScheme,
)
from .task_lifecycle import validate_transition

__all__ = [
    "A2ADecodeError",
    "A2AError",
    "A2AErrorCode",
    "A2AException",
    "A2ARequest",
    "A2ARpcError",
    "A2AValidationError",
    "AgentCapabilities",
    "AgentCard",
    "AgentExtension",
    "AgentInterface",
    "AgentProvider",
    "AgentSkill",
    "ApiKeyLocation",
    "ApiKeySecurityScheme",
    "Artifact",
    "AuthorizationCodeOAuthFlow",
    "CancelTaskRequest",
    "ClientCredentialsOAuthFlow",
    "ContentTypeNotSupportedError",
    "DataPart",
    "FileContent",
    "FilePart",
    "FileWithBytes",
    "FileWithUri",
    "GetTaskRequest",
    "HttpSecurityScheme",
    "ImplicitOAuthFlow",
    "InternalError",
    "InvalidAgentResponseError",
    "InvalidParamsError",
    "InvalidRequestError",
    "InvalidTransitionError",
    "JSONParseError",
    "JSONRPC_VERSION",
    "JSONRPCError",
    "JSONRPCErrorResponse",
    "Message",
    "MessageRole",
    "MessageSendParams",
    "MethodNotFoundError",
    "OAuth2Flows",
    "OAuth2SecurityScheme",
    "OpenIdConnectSecurityScheme",
    "PROTOCOL_VERSION",
    "Part",
    "PasswordOAuthFlow",
    "PushNotificationConfig",
    "PushNotificationNotSupportedError",
    "RequestMethod",
    "SecurityScheme",
    "SendMessageRequest",
    "SendStreamingMessageRequest",
    "SendStreamingMessageResponse",
    "Task",
    "TaskArtifactUpdateEvent",
    "TaskNotCancelableError",
    "TaskError",
    "TaskNotFoundError",
    "TaskState",
    "TaskStatus",
    "TaskStatusUpdateEvent",
    "TextPart",
    "UnsupportedOperationError",
    "resolve_method",
    "validate_transition",
]
