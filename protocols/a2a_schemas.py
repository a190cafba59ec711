"""
Core A2A records: messages and their parts, tasks, task status and artifacts.

Part is a closed union tagged by `kind` ("text", "file", "data"); unknown kinds
fail decoding. FileContent has no tag: the inline-bytes variant is tried first,
then the URI variant, and decoding fails only if neither required field is
present.
"""

from enum import Enum
from typing import Any, FrozenSet, List, Literal, Optional, Union

from pydantic import Field
from typing_extensions import Annotated

from protocols.base import A2ABaseModel
from protocols.errors import TaskError
from protocols.exceptions import A2AValidationError
from protocols.validation import validate_media_type, validate_message_id, validate_task_id


class MessageRole(str, Enum):
    AGENT = "agent"
    USER = "user"


class TaskState(str, Enum):
    SUBMITTED = "submitted"
    WORKING = "working"
    INPUT_REQUIRED = "input-required"
    COMPLETED = "completed"
    CANCELED = "canceled"
    FAILED = "failed"
    REJECTED = "rejected"
    AUTH_REQUIRED = "auth-required"
    UNKNOWN = "unknown"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_TASK_STATES


TERMINAL_TASK_STATES: FrozenSet[TaskState] = frozenset(
    {TaskState.COMPLETED, TaskState.FAILED, TaskState.CANCELED, TaskState.REJECTED}
)


class FileWithBytes(A2ABaseModel):
    bytes: str  # base64 encoded content
    name: Optional[str] = None
    mime_type: Optional[str] = None

    def validate(self) -> None:
        if self.mime_type is not None:
            validate_media_type(self.mime_type)


class FileWithUri(A2ABaseModel):
    uri: str
    name: Optional[str] = None
    mime_type: Optional[str] = None

    def validate(self) -> None:
        if self.mime_type is not None:
            validate_media_type(self.mime_type)


FileContent = Annotated[Union[FileWithBytes, FileWithUri], Field(union_mode="left_to_right")]


class TextPart(A2ABaseModel):
    kind: Literal["text"] = "text"
    text: str
    metadata: Optional[Any] = None


class FilePart(A2ABaseModel):
    kind: Literal["file"] = "file"
    file: FileContent
    metadata: Optional[Any] = None

    def validate(self) -> None:
        self.file.validate()


class DataPart(A2ABaseModel):
    kind: Literal["data"] = "data"
    data: Any
    metadata: Optional[Any] = None


Part = Annotated[Union[TextPart, FilePart, DataPart], Field(discriminator="kind")]


class Message(A2ABaseModel):
    """
    A single message exchanged between user and agent.

    Owned by whichever side builds it and never changed once sent.
    """

    kind: Literal["message"] = "message"
    message_id: str
    parts: List[Part]
    role: MessageRole
    context_id: Optional[str] = None
    extensions: Optional[List[str]] = None
    metadata: Optional[Any] = None
    reference_task_ids: Optional[List[str]] = None
    task_id: Optional[str] = None

    def validate(self) -> None:
        validate_message_id(self.message_id)
        if self.task_id is not None:
            validate_task_id(self.task_id)
        if self.context_id is not None and not self.context_id:
            raise A2AValidationError("Context ID cannot be empty")
        for reference_id in self.reference_task_ids or []:
            validate_task_id(reference_id)
        for part in self.parts:
            part.validate()


class TaskStatus(A2ABaseModel):
    state: TaskState
    message: Optional[Message] = None
    timestamp: Optional[str] = None  # ISO 8601

    @property
    def is_terminal(self) -> bool:
        return self.state.is_terminal

    def validate(self) -> None:
        if self.message is not None:
            self.message.validate()


class Artifact(A2ABaseModel):
    artifact_id: str
    parts: List[Part]
    description: Optional[str] = None
    extensions: Optional[List[str]] = None
    metadata: Optional[Any] = None
    name: Optional[str] = None

    def validate(self) -> None:
        if not self.artifact_id:
            raise A2AValidationError("Artifact ID cannot be empty")
        if not self.parts:
            raise A2AValidationError("Artifact must contain at least one part")
        for part in self.parts:
            part.validate()


class Task(A2ABaseModel):
    """
    Unit of work tracked by an agent.

    Created in the submitted state and only changed through status transitions
    (see protocols.task_lifecycle). Once terminal, only metadata may change.
    """

    id: str
    kind: Literal["task"] = "task"
    status: TaskStatus
    context_id: str
    artifacts: Optional[List[Artifact]] = None
    history: Optional[List[Message]] = None
    metadata: Optional[Any] = None
    result: Optional[Any] = None
    error: Optional[TaskError] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    status_history: Optional[List[TaskStatus]] = None

    def validate(self) -> None:
        validate_task_id(self.id)
        if not self.context_id:
            raise A2AValidationError("Context ID cannot be empty")
        self.status.validate()
        for message in self.history or []:
            message.validate()
        for artifact in self.artifacts or []:
            artifact.validate()
