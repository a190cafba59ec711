import pytest

from protocols.codec import decode_error
from protocols.errors import (
    A2AErrorCode,
    ERROR_TYPES_BY_CODE,
    InternalError,
    JSONParseError,
    JSONRPCError,
    MethodNotFoundError,
    TaskNotCancelableError,
    TaskNotFoundError,
    code_for_error_type,
    error_type_for_code,
)
from protocols.exceptions import A2ADecodeError


def test_every_code_has_exactly_one_error_type():
    assert len(ERROR_TYPES_BY_CODE) == len(A2AErrorCode) == 11
    assert len(set(ERROR_TYPES_BY_CODE.values())) == 11
    for code, error_type in ERROR_TYPES_BY_CODE.items():
        assert error_type().code == code
        assert code_for_error_type(error_type) == code


def test_default_codes_and_messages():
    assert TaskNotFoundError().code == -32001
    assert TaskNotFoundError().message == "Task not found"
    assert JSONParseError().code == -32700
    assert TaskNotCancelableError().message == "Task cannot be canceled"


def test_error_type_for_code():
    assert error_type_for_code(-32601) is MethodNotFoundError
    assert error_type_for_code(-32099) is None


def test_error_str_uses_label_and_message():
    assert str(InternalError(message="boom")) == "Internal error: boom"
    assert str(JSONRPCError(code=1, message="x")) == "JSON-RPC error: x"


@pytest.mark.parametrize("error_type", list(ERROR_TYPES_BY_CODE.values()))
def test_error_round_trip_keeps_kind(error_type):
    error = error_type(data={"detail": "context"})
    decoded = decode_error(error.to_dict())
    assert type(decoded) is error_type
    assert decoded == error


def test_decode_error_picks_kind_from_code():
    decoded = decode_error({"code": -32001, "message": "Task not found", "data": {"taskId": "t-1"}})
    assert isinstance(decoded, TaskNotFoundError)
    assert decoded.data == {"taskId": "t-1"}


def test_error_wire_shape_is_flat():
    assert TaskNotFoundError().to_dict() == {"code": -32001, "message": "Task not found"}


@pytest.mark.parametrize(
    "payload",
    [
        {"code": -32099, "message": "x"},
        {"message": "no code"},
        {"code": "-32001", "message": "string code"},
        {"code": True, "message": "bool code"},
    ],
)
def test_decode_error_rejects_unknown_or_malformed_codes(payload):
    with pytest.raises(A2ADecodeError):
        decode_error(payload)


def test_decoded_error_requires_message():
    with pytest.raises(A2ADecodeError):
        decode_error({"code": -32001})
    with pytest.raises(A2ADecodeError):
        TaskNotFoundError.from_dict({"code": -32001})
    with pytest.raises(A2ADecodeError):
        JSONRPCError.from_json('{"code": 7}')


def test_default_message_only_applies_when_built_in_code():
    assert TaskNotFoundError().message == "Task not found"
    assert TaskNotFoundError(message="gone").message == "gone"
    with pytest.raises(ValueError):
        JSONRPCError(code=7)
