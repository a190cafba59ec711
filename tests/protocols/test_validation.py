import pytest

from protocols.exceptions import A2AValidationError
from protocols.validation import (
    validate_agent_name,
    validate_description_length,
    validate_media_type,
    validate_message_id,
    validate_skill_id,
    validate_task_id,
    validate_url,
    validate_version,
)


@pytest.mark.parametrize("url", ["https://example.com", "http://localhost:8080/a2a", "https://a.io/x?y=1"])
def test_validate_url_accepts_http_and_https(url):
    validate_url(url)


@pytest.mark.parametrize(
    "url, message",
    [
        ("", "URL cannot be empty"),
        ("ftp://example.com", "URL must start with http:// or https://"),
        ("example.com", "URL must start with http:// or https://"),
        ("https://a", "URL appears to be too short"),
        ("https://example.com/a b", "URL cannot contain spaces"),
    ],
)
def test_validate_url_rejections(url, message):
    with pytest.raises(A2AValidationError, match=message):
        validate_url(url)


@pytest.mark.parametrize("media_type", ["application/json", "text/plain", "image/png", "x-custom/thing"])
def test_validate_media_type_accepts_known_types(media_type):
    validate_media_type(media_type)


@pytest.mark.parametrize(
    "media_type, message",
    [
        ("", "Media type cannot be empty"),
        ("json", "Media type must be in format 'type/subtype'"),
        ("a/b/c", "Media type must be in format 'type/subtype'"),
        ("text/", "Media type parts cannot be empty"),
        ("foo/bar", "Unknown media type: foo"),
    ],
)
def test_validate_media_type_rejections(media_type, message):
    with pytest.raises(A2AValidationError, match=message):
        validate_media_type(media_type)


def test_task_and_message_ids():
    validate_task_id("task-123_ABC")
    validate_message_id("msg-1")

    with pytest.raises(A2AValidationError, match="Task ID cannot be empty"):
        validate_task_id("")
    with pytest.raises(A2AValidationError, match="Task ID can only contain"):
        validate_task_id("task 123")
    with pytest.raises(A2AValidationError, match="Message ID can only contain"):
        validate_message_id("msg.1")


def test_identifier_length_limit_is_inclusive():
    validate_task_id("a" * 255)
    with pytest.raises(A2AValidationError, match=r"max 255 characters"):
        validate_task_id("a" * 256)


def test_skill_id_allows_dots_and_is_capped_at_100():
    validate_skill_id("search.web-v2")
    with pytest.raises(A2AValidationError, match=r"max 100 characters"):
        validate_skill_id("s" * 101)
    with pytest.raises(A2AValidationError, match="Skill ID can only contain"):
        validate_skill_id("search web")


def test_validate_agent_name():
    validate_agent_name("Research Agent")
    with pytest.raises(A2AValidationError, match="Agent name cannot be empty"):
        validate_agent_name("")
    with pytest.raises(A2AValidationError, match="whitespace"):
        validate_agent_name(" Research Agent")
    with pytest.raises(A2AValidationError, match="too long"):
        validate_agent_name("n" * 101)


@pytest.mark.parametrize("version", ["1", "1.0", "1.0.0", "1.0.0.1", "1.0.0-beta", "v2"])
def test_validate_version_is_loose(version):
    validate_version(version)


@pytest.mark.parametrize(
    "version, message",
    [
        ("", "Version cannot be empty"),
        ("1.2.3.4.5", "Version should have 1-4 dot-separated parts"),
        ("1..2", "Version parts cannot be empty"),
        ("1." + "0" * 60, "Version is too long"),
    ],
)
def test_validate_version_rejections(version, message):
    with pytest.raises(A2AValidationError, match=message):
        validate_version(version)


def test_description_length_counts_characters():
    validate_description_length(None, 5, "Description")
    validate_description_length("ééééé", 5, "Description")
    with pytest.raises(A2AValidationError, match=r"Description is too long \(max 5 characters\)"):
        validate_description_length("abcdef", 5, "Description")
