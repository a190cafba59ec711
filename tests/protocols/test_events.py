import pytest

from protocols.a2a_schemas import Artifact, Message, MessageRole, TaskState, TaskStatus, TextPart
from protocols.codec import decode, encode
from protocols.events import TaskArtifactUpdateEvent, TaskStatusUpdateEvent
from protocols.exceptions import A2ADecodeError, A2AValidationError


@pytest.fixture
def artifact():
    return Artifact(artifact_id="artifact-123", parts=[TextPart(text="Generated content")], name="Generated Artifact")


def make_artifact_event(artifact, **kwargs):
    return TaskArtifactUpdateEvent(task_id="task-456", context_id="context-789", artifact=artifact, **kwargs)


def make_status_event(state, final):
    return TaskStatusUpdateEvent(
        task_id="task-456", context_id="context-789", status=TaskStatus(state=state), final=final
    )


def test_artifact_event_defaults(artifact):
    event = make_artifact_event(artifact)
    event.validate()
    assert event.kind == "artifact-update"
    assert event.is_streaming_chunk() is False
    assert event.is_final_chunk() is False


@pytest.mark.parametrize(
    "append, last_chunk, streaming, final",
    [
        (True, None, True, False),
        (None, True, True, True),
        (False, False, False, False),
    ],
)
def test_artifact_chunk_flags(artifact, append, last_chunk, streaming, final):
    event = make_artifact_event(artifact, append=append, last_chunk=last_chunk)
    event.validate()
    assert event.is_streaming_chunk() is streaming
    assert event.is_final_chunk() is final


def test_artifact_event_cannot_append_and_close(artifact):
    with pytest.raises(A2AValidationError, match="Artifact cannot both append and be the last chunk"):
        make_artifact_event(artifact, append=True, last_chunk=True).validate()


def test_artifact_event_validates_ids_and_artifact(artifact):
    with pytest.raises(A2AValidationError, match="Task ID"):
        make_artifact_event(artifact).model_copy(update={"task_id": "task 456"}).validate()
    with pytest.raises(A2AValidationError, match="Context ID cannot be empty"):
        make_artifact_event(artifact).model_copy(update={"context_id": ""}).validate()
    with pytest.raises(A2AValidationError, match="at least one part"):
        make_artifact_event(artifact.model_copy(update={"parts": []})).validate()


def test_artifact_event_wire_shape(artifact):
    data = make_artifact_event(artifact, last_chunk=True).to_dict()
    assert data["kind"] == "artifact-update"
    assert data["taskId"] == "task-456"
    assert data["lastChunk"] is True
    assert "append" not in data
    assert TaskArtifactUpdateEvent.from_dict(data) == make_artifact_event(artifact, last_chunk=True)


@pytest.mark.parametrize("state", [TaskState.COMPLETED, TaskState.FAILED, TaskState.CANCELED, TaskState.REJECTED])
def test_final_status_event_with_terminal_state(state):
    event = make_status_event(state, final=True)
    event.validate()
    assert event.is_terminal_state() is True
    assert event.is_final_event() is True


@pytest.mark.parametrize("state", [TaskState.WORKING, TaskState.INPUT_REQUIRED, TaskState.SUBMITTED])
def test_final_status_event_with_non_terminal_state_is_invalid(state):
    with pytest.raises(A2AValidationError, match="Final status update events must have terminal task states"):
        make_status_event(state, final=True).validate()


def test_non_final_status_event_may_carry_any_state():
    make_status_event(TaskState.WORKING, final=False).validate()
    make_status_event(TaskState.COMPLETED, final=False).validate()


def test_status_event_requires_final_on_the_wire():
    with pytest.raises(A2ADecodeError):
        TaskStatusUpdateEvent.from_dict(
            {"kind": "status-update", "taskId": "t", "contextId": "c", "status": {"state": "working"}}
        )


@pytest.mark.parametrize("final", [True, False])
def test_status_event_round_trip(final):
    event = TaskStatusUpdateEvent(
        task_id="task-456",
        context_id="ctx-789",
        status=TaskStatus(
            state=TaskState.COMPLETED,
            message=Message(message_id="m-1", role=MessageRole.AGENT, parts=[TextPart(text="done")]),
            timestamp="2025-01-01T00:00:00+00:00",
        ),
        final=final,
        metadata={"attempt": 2},
    )
    data = encode(event)
    assert data["kind"] == "status-update"
    assert data["final"] is final
    assert decode(TaskStatusUpdateEvent, data) == event
