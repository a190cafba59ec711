"""
Field validators for A2A protocol values.

Every validator is a pure function over a single string. It returns None when
the value is acceptable and raises A2AValidationError describing the first rule
that fails. Callers that need a full report call the validators one by one.
"""

from typing import FrozenSet

from protocols.exceptions import A2AValidationError

MEDIA_MAIN_TYPES: FrozenSet[str] = frozenset(
    {"text", "image", "audio", "video", "application", "multipart", "message"}
)

MAX_IDENTIFIER_LENGTH = 255
MAX_SKILL_ID_LENGTH = 100
MAX_AGENT_NAME_LENGTH = 100
MAX_VERSION_LENGTH = 50
MAX_VERSION_PARTS = 4


def validate_url(url: str) -> None:
    if not url:
        raise A2AValidationError("URL cannot be empty")
    if not url.startswith(("http://", "https://")):
        raise A2AValidationError("URL must start with http:// or https://")
    if len(url) < 10:
        raise A2AValidationError("URL appears to be too short")

    host_and_path = url[len("https://"):] if url.startswith("https://") else url[len("http://"):]
    if not host_and_path:
        raise A2AValidationError("URL must contain a domain")
    if " " in url:
        raise A2AValidationError("URL cannot contain spaces")


def validate_media_type(media_type: str) -> None:
    """Check a `type/subtype` media type against the registered top-level types."""
    if not media_type:
        raise A2AValidationError("Media type cannot be empty")

    parts = media_type.split("/")
    if len(parts) != 2:
        raise A2AValidationError("Media type must be in format 'type/subtype'")

    main_type, sub_type = parts
    if not main_type or not sub_type:
        raise A2AValidationError("Media type parts cannot be empty")
    if main_type not in MEDIA_MAIN_TYPES and not main_type.startswith("x-"):
        raise A2AValidationError(f"Unknown media type: {main_type}")


def _validate_identifier(value: str, label: str, max_length: int, extra_chars: str) -> None:
    if not value:
        raise A2AValidationError(f"{label} cannot be empty")
    if len(value) > max_length:
        raise A2AValidationError(f"{label} is too long (max {max_length} characters)")
    if not all(c.isalnum() or c in extra_chars for c in value):
        allowed = "alphanumeric characters, hyphens, and underscores"
        if "." in extra_chars:
            allowed = "alphanumeric characters, hyphens, underscores, and dots"
        raise A2AValidationError(f"{label} can only contain {allowed}")


def validate_message_id(message_id: str) -> None:
    _validate_identifier(message_id, "Message ID", MAX_IDENTIFIER_LENGTH, "-_")


def validate_task_id(task_id: str) -> None:
    _validate_identifier(task_id, "Task ID", MAX_IDENTIFIER_LENGTH, "-_")


def validate_skill_id(skill_id: str) -> None:
    _validate_identifier(skill_id, "Skill ID", MAX_SKILL_ID_LENGTH, "-_.")


def validate_agent_name(name: str) -> None:
    if not name:
        raise A2AValidationError("Agent name cannot be empty")
    if len(name) > MAX_AGENT_NAME_LENGTH:
        raise A2AValidationError(f"Agent name is too long (max {MAX_AGENT_NAME_LENGTH} characters)")
    if name.strip() != name:
        raise A2AValidationError("Agent name cannot start or end with whitespace")


def validate_version(version: str) -> None:
    """
    Loose version check: 1-4 dot separated, non-empty parts.

    Numeric ranges are deliberately not enforced, so "1.0.0-beta" and "v2" pass.
    """
    if not version:
        raise A2AValidationError("Version cannot be empty")
    if len(version) > MAX_VERSION_LENGTH:
        raise A2AValidationError(f"Version is too long (max {MAX_VERSION_LENGTH} characters)")

    parts = version.split(".")
    if len(parts) > MAX_VERSION_PARTS:
        raise A2AValidationError("Version should have 1-4 dot-separated parts")
    if any(not part for part in parts):
        raise A2AValidationError("Version parts cannot be empty")


def validate_description_length(description, max_length: int, label: str) -> None:
    if description is not None and len(description) > max_length:
        raise A2AValidationError(f"{label} is too long (max {max_length} characters)")
