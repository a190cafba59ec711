"""
Streaming events sent during message/stream and tasks/resubscribe.

An artifact may arrive in several chunks: `append` marks a chunk that extends
the artifact already received under the same artifact id, `last_chunk` marks
the closing chunk. A single event cannot be both. A status event flagged
`final` closes the stream and must therefore carry a terminal task state.
"""

from typing import Any, Literal, Optional

from protocols.a2a_schemas import Artifact, TaskStatus
from protocols.base import A2ABaseModel
from protocols.exceptions import A2AValidationError
from protocols.validation import validate_task_id


def _validate_event_ids(task_id: str, context_id: str) -> None:
    validate_task_id(task_id)
    if not context_id:
        raise A2AValidationError("Context ID cannot be empty")


class TaskArtifactUpdateEvent(A2ABaseModel):
    kind: Literal["artifact-update"] = "artifact-update"
    task_id: str
    context_id: str
    artifact: Artifact
    append: Optional[bool] = None
    last_chunk: Optional[bool] = None
    metadata: Optional[Any] = None

    def validate(self) -> None:
        _validate_event_ids(self.task_id, self.context_id)
        self.artifact.validate()
        if self.append and self.last_chunk:
            raise A2AValidationError("Artifact cannot both append and be the last chunk")

    def is_streaming_chunk(self) -> bool:
        return bool(self.append) or bool(self.last_chunk)

    def is_final_chunk(self) -> bool:
        return bool(self.last_chunk)


class TaskStatusUpdateEvent(A2ABaseModel):
    kind: Literal["status-update"] = "status-update"
    task_id: str
    context_id: str
    status: TaskStatus
    final: bool
    metadata: Optional[Any] = None

    def validate(self) -> None:
        _validate_event_ids(self.task_id, self.context_id)
        self.status.validate()
        if self.final and not self.status.state.is_terminal:
            raise A2AValidationError("Final status update events must have terminal task states")

    def is_terminal_state(self) -> bool:
        return self.status.state.is_terminal

    def is_final_event(self) -> bool:
        return self.final
