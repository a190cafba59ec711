"""
Demonstration of the A2A protocol records and their validation.
Walks through extensions, field validators, OAuth2 flows, security schemes,
streaming events and task state transitions.
"""

import logging

from core.config import load_settings
from core.logger import setup_logging
from protocols import (
    AgentExtension,
    ApiKeyLocation,
    ApiKeySecurityScheme,
    Artifact,
    AuthorizationCodeOAuthFlow,
    MessageRole,
    SendMessageRequest,
    TaskArtifactUpdateEvent,
    TaskState,
    TextPart,
    validate_transition,
)
from protocols.exceptions import A2AValidationError
from protocols.task_lifecycle import apply_artifact_update, apply_transition, new_task
from protocols.validation import validate_media_type, validate_task_id, validate_url

logger = logging.getLogger(f"a2aProtocol.{__name__}")


def expect_valid(label: str, check) -> None:
    try:
        check()
        logger.info(f"OK      {label}")
    except A2AValidationError as e:
        logger.error(f"FAILED  {label}: {e}")


def expect_invalid(label: str, check) -> None:
    try:
        check()
        logger.error(f"FAILED  {label}: should have been rejected")
    except A2AValidationError as e:
        logger.info(f"OK      {label} rejected: {e}")


def demo_extensions():
    logger.info("1. Extensions")
    extension = AgentExtension.with_config(
        "https://example.com/oauth-extension",
        params={"clientId": "demo-client", "scopes": ["read"]},
    )
    expect_valid("OAuth extension", extension.validate)
    expect_invalid("extension with a non-URL uri", AgentExtension(uri="invalid-url").validate)


def demo_field_validation():
    logger.info("2. Field validation")
    expect_valid("URL https://example.com/api", lambda: validate_url("https://example.com/api"))
    expect_valid("media type application/json", lambda: validate_media_type("application/json"))
    expect_valid("task id task-123", lambda: validate_task_id("task-123"))
    expect_invalid("task id 'task 123'", lambda: validate_task_id("task 123"))


def demo_oauth_flow():
    logger.info("3. OAuth2 flows")
    flow = AuthorizationCodeOAuthFlow(
        authorization_url="https://auth.example.com/authorize",
        token_url="https://auth.example.com/token",
        scopes={"read": "Read access", "write": "Write access"},
    )
    expect_valid("authorization code flow", flow.validate)


def demo_security_schemes():
    logger.info("4. Security schemes")
    expect_valid(
        "API key in X-API-Key header",
        ApiKeySecurityScheme(in_=ApiKeyLocation.HEADER, name="X-API-Key").validate,
    )
    expect_invalid(
        "API key in Authorization header",
        ApiKeySecurityScheme(in_=ApiKeyLocation.HEADER, name="Authorization").validate,
    )


def demo_streaming():
    logger.info("5. Streaming events")
    task = new_task(context_id="context-789", task_id="task-456")
    task = apply_transition(task, TaskState.WORKING)

    artifact = Artifact(
        artifact_id="artifact-123",
        parts=[TextPart(text="Generated content")],
        name="Generated Artifact",
    )
    event = TaskArtifactUpdateEvent(task_id=task.id, context_id=task.context_id, artifact=artifact)
    expect_valid("artifact update event", event.validate)

    chunk = TaskArtifactUpdateEvent(
        task_id=task.id,
        context_id=task.context_id,
        artifact=artifact.model_copy(update={"parts": [TextPart(text=" and more")]}),
        append=True,
    )
    task = apply_artifact_update(apply_artifact_update(task, event), chunk)
    logger.info(f"Artifact now has {len(task.artifacts[0].parts)} parts")

    both = chunk.model_copy(update={"last_chunk": True})
    expect_invalid("chunk that both appends and closes", both.validate)


def demo_transitions():
    logger.info("6. Task state transitions")
    expect_valid("submitted -> working", lambda: validate_transition(TaskState.SUBMITTED, TaskState.WORKING))
    expect_invalid("completed -> working", lambda: validate_transition(TaskState.COMPLETED, TaskState.WORKING))


def demo_request():
    logger.info("7. Requests")
    request = SendMessageRequest.from_text("req-1", "msg-1", "Hello agent", MessageRole.USER)
    expect_valid("message/send request", request.validate)
    logger.info(f"Wire form: {request.to_json()}")


if __name__ == "__main__":
    setup_logging(load_settings())
    demo_extensions()
    demo_field_validation()
    demo_oauth_flow()
    demo_security_schemes()
    demo_streaming()
    demo_transitions()
    demo_request()
    logger.info("Demo finished.")
