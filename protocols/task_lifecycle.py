"""
Task lifecycle: the allowed state transitions and helpers that move a Task
through them.

validate_transition is a pure check over two states. The apply_* helpers never
mutate their input; they return a new Task and leave persisting it to the
caller.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, List, Optional

from protocols.a2a_schemas import Artifact, Message, Task, TaskState, TaskStatus
from protocols.events import TaskArtifactUpdateEvent, TaskStatusUpdateEvent
from protocols.exceptions import A2AValidationError, InvalidTransitionError

logger = logging.getLogger(f"a2aProtocol.{__name__}")

_NO_TRANSITIONS: FrozenSet[TaskState] = frozenset()

ALLOWED_TRANSITIONS: Dict[TaskState, FrozenSet[TaskState]] = {
    TaskState.SUBMITTED: frozenset(
        {TaskState.WORKING, TaskState.REJECTED, TaskState.CANCELED, TaskState.AUTH_REQUIRED}
    ),
    TaskState.WORKING: frozenset(
        {TaskState.COMPLETED, TaskState.FAILED, TaskState.CANCELED, TaskState.INPUT_REQUIRED}
    ),
    TaskState.INPUT_REQUIRED: frozenset({TaskState.WORKING, TaskState.CANCELED, TaskState.FAILED}),
    TaskState.AUTH_REQUIRED: frozenset({TaskState.WORKING, TaskState.REJECTED, TaskState.CANCELED}),
    TaskState.COMPLETED: _NO_TRANSITIONS,
    TaskState.FAILED: _NO_TRANSITIONS,
    TaskState.CANCELED: _NO_TRANSITIONS,
    TaskState.REJECTED: _NO_TRANSITIONS,
    # Recovery path for a task whose state was lost or desynchronised.
    TaskState.UNKNOWN: frozenset(
        {
            TaskState.SUBMITTED,
            TaskState.WORKING,
            TaskState.COMPLETED,
            TaskState.FAILED,
            TaskState.CANCELED,
            TaskState.REJECTED,
            TaskState.AUTH_REQUIRED,
            TaskState.INPUT_REQUIRED,
        }
    ),
}


def allowed_transitions(state: TaskState) -> FrozenSet[TaskState]:
    return ALLOWED_TRANSITIONS[state]


def can_transition(from_state: TaskState, to_state: TaskState) -> bool:
    return to_state in ALLOWED_TRANSITIONS[from_state]


def validate_transition(from_state: TaskState, to_state: TaskState) -> None:
    """Raise InvalidTransitionError unless `to_state` is reachable from `from_state`."""
    if not can_transition(from_state, to_state):
        raise InvalidTransitionError(from_state, to_state)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def new_task(
    context_id: Optional[str] = None,
    task_id: Optional[str] = None,
    message: Optional[Message] = None,
    metadata: Optional[Any] = None,
) -> Task:
    """Create a task in the submitted state, generating ids where none are given."""
    now = _timestamp()
    status = TaskStatus(state=TaskState.SUBMITTED, timestamp=now)
    task = Task(
        id=task_id or str(uuid.uuid4()),
        context_id=context_id or str(uuid.uuid4()),
        status=status,
        history=[message] if message is not None else None,
        metadata=metadata,
        created_at=now,
        updated_at=now,
        status_history=[status],
    )
    logger.debug(f"Created task {task.id} in context {task.context_id}")
    return task


def apply_transition(
    task: Task,
    state: TaskState,
    message: Optional[Message] = None,
    timestamp: Optional[str] = None,
) -> Task:
    """
    Return a copy of `task` moved to `state`.

    Re-entering the current state is accepted as a status refresh (new message
    and timestamp, no history entry) as long as that state is not terminal.
    Anything else must be an allowed transition.
    """
    current = task.status.state
    refresh = state == current and not current.is_terminal
    if not refresh:
        validate_transition(current, state)

    now = timestamp or _timestamp()
    status = TaskStatus(state=state, message=message, timestamp=now)
    status_history: List[TaskStatus] = list(task.status_history or [])
    if not refresh:
        status_history.append(status)
        logger.info(f"Task {task.id} status updated from {current.value} to {state.value}")

    return task.model_copy(update={"status": status, "updated_at": now, "status_history": status_history})


def _check_event_task(task: Task, event_task_id: str) -> None:
    if event_task_id != task.id:
        raise A2AValidationError(f"Event for task {event_task_id} cannot be applied to task {task.id}")


def apply_status_update(task: Task, event: TaskStatusUpdateEvent) -> Task:
    _check_event_task(task, event.task_id)
    return apply_transition(task, event.status.state, event.status.message, event.status.timestamp)


def apply_artifact_update(task: Task, event: TaskArtifactUpdateEvent) -> Task:
    """
    Fold a streamed artifact chunk into a copy of `task`.

    With `append` set, the chunk's parts are added to the artifact already held
    under the same id. Otherwise the chunk replaces that artifact, or is added
    as a new one.
    """
    _check_event_task(task, event.task_id)
    if task.status.state.is_terminal:
        raise A2AValidationError(f"Cannot add artifacts to task {task.id} in terminal state {task.status.state.value}")

    incoming = event.artifact
    artifacts: List[Artifact] = list(task.artifacts or [])
    for index, existing in enumerate(artifacts):
        if existing.artifact_id != incoming.artifact_id:
            continue
        if event.append:
            artifacts[index] = existing.model_copy(update={"parts": list(existing.parts) + list(incoming.parts)})
        else:
            artifacts[index] = incoming
        break
    else:
        artifacts.append(incoming)

    logger.debug(f"Applied artifact {incoming.artifact_id} to task {task.id} (append={bool(event.append)})")
    return task.model_copy(update={"artifacts": artifacts, "updated_at": _timestamp()})
