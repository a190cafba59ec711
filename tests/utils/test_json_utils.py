import datetime
import json

import pytest

from protocols.a2a_schemas import TaskState, TaskStatus
from protocols.errors import InternalError, JSONParseError
from protocols.exceptions import A2ARpcError
from utils.json_utils import convert_datetime_to_iso_string, parse_json_payload, serialize_response


def test_convert_datetime_to_iso_string_nested():
    moment = datetime.datetime(2025, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc)
    converted = convert_datetime_to_iso_string({"at": moment, "history": [moment, "x"], "n": 1})
    assert converted == {
        "at": "2025-01-02T03:04:05+00:00",
        "history": ["2025-01-02T03:04:05+00:00", "x"],
        "n": 1,
    }


def test_parse_json_payload():
    assert parse_json_payload('{"jsonrpc": "2.0", "id": 1}') == {"jsonrpc": "2.0", "id": 1}
    assert parse_json_payload(b"[1, 2]") == [1, 2]


def test_parse_json_payload_rejects_malformed_input():
    with pytest.raises(A2ARpcError) as excinfo:
        parse_json_payload("{not json")
    error = excinfo.value.error
    assert isinstance(error, JSONParseError)
    assert error.code == -32700
    assert error.message.startswith("Invalid JSON payload: ")


def test_serialize_response_for_records():
    status = TaskStatus(state=TaskState.INPUT_REQUIRED)
    assert json.loads(serialize_response(status)) == {"state": "input-required"}


def test_serialize_response_for_plain_values():
    moment = datetime.datetime(2025, 1, 2, 3, 4, 5)
    assert json.loads(serialize_response({"at": moment})) == {"at": "2025-01-02T03:04:05"}


def test_serialize_response_failure_is_internal_error():
    with pytest.raises(A2ARpcError) as excinfo:
        serialize_response({"value": object()})
    assert isinstance(excinfo.value.error, InternalError)
    assert excinfo.value.error.message.startswith("Internal error: ")
