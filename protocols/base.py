import logging
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo
from pydantic.alias_generators import to_camel

from protocols.exceptions import A2ADecodeError

logger = logging.getLogger(f"a2aProtocol.{__name__}")

ModelT = TypeVar("ModelT", bound="A2ABaseModel")

# Validation context for everything decoded from the wire, as opposed to built in code.
WIRE_CONTEXT: Dict[str, Any] = {"wire": True}


def is_wire_decode(info: ValidationInfo) -> bool:
    return bool(info.context) and bool(info.context.get("wire"))


class A2ABaseModel(BaseModel):
    """
    Common base for every wire record.

    Field names are snake_case in Python and camelCase on the wire. Unknown wire
    fields are ignored and instances are frozen: changing a record means building
    a new one (see model_copy).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def validate(self) -> None:
        """Check semantic rules beyond structure. Records without such rules accept any decoded value."""

    def to_dict(self) -> Dict[str, Any]:
        """Encode to the wire shape, omitting absent optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent=None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    @classmethod
    def from_dict(cls: Type[ModelT], data: Any) -> ModelT:
        """Decode a JSON value tree. Raises A2ADecodeError on structural mismatch."""
        try:
            return cls.model_validate(data, context=WIRE_CONTEXT)
        except ValidationError as e:
            logger.debug(f"Failed to decode {cls.__name__}: {e}")
            raise A2ADecodeError(f"Could not decode {cls.__name__}: {e}", errors=e.errors()) from e

    @classmethod
    def from_json(cls: Type[ModelT], json_str) -> ModelT:
        try:
            return cls.model_validate_json(json_str, context=WIRE_CONTEXT)
        except ValidationError as e:
            logger.debug(f"Failed to decode {cls.__name__} from JSON: {e}")
            raise A2ADecodeError(f"Could not decode {cls.__name__}: {e}", errors=e.errors()) from e
