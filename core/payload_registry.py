"""
Payload Registry to look up the decoder for each A2A payload type.
"""

from typing import Any, Callable, Dict, List

from protocols import codec
from protocols.a2a_schemas import Artifact, Message, Task
from protocols.agent_card import AgentCard
from protocols.events import TaskArtifactUpdateEvent, TaskStatusUpdateEvent
from protocols.requests import JSONRPCErrorResponse, PushNotificationConfig, SendStreamingMessageResponse

# For logging
import logging
logger = logging.getLogger(f"a2aProtocol.{__name__}")

Decoder = Callable[[Any], Any]


class PayloadRegistry:
    _registry: Dict[str, Decoder] = {
        "message": Message.from_dict,
        "task": Task.from_dict,
        "artifact": Artifact.from_dict,
        "agent-card": AgentCard.from_dict,
        "part": codec.decode_part,
        "file-content": codec.decode_file_content,
        "security-scheme": codec.decode_security_scheme,
        "error": codec.decode_error,
        "request": codec.decode_request,
        "error-response": JSONRPCErrorResponse.from_dict,
        "stream-response": SendStreamingMessageResponse.from_dict,
        "push-notification-config": PushNotificationConfig.from_dict,
        "artifact-update": TaskArtifactUpdateEvent.from_dict,
        "status-update": TaskStatusUpdateEvent.from_dict,
    }

    @classmethod
    def register_payload_type(cls, type_key: str, decoder: Decoder):
        """Allows dynamic registration of payload types."""
        if not callable(decoder):
            raise TypeError(f"Decoder for payload type '{type_key}' must be callable.")
        if type_key in cls._registry:
            logger.warning(f"Payload type '{type_key}' is already registered. Overwriting.")
        cls._registry[type_key] = decoder
        logger.info(f"Payload type '{type_key}' registered.")

    @classmethod
    def available_types(cls) -> List[str]:
        return sorted(cls._registry)

    @classmethod
    def decode(cls, type_key: str, data: Any) -> Any:
        """
        Decodes a JSON value tree as the payload type registered under type_key.

        Args:
            type_key (str): The payload type key (e.g., "agent-card").
            data (Any): The parsed JSON value.

        Returns:
            Any: The decoded record.

        Raises:
            ValueError: If the type_key is not registered.
            A2ADecodeError: If the data does not match the payload type.
        """
        decoder = cls._registry.get(type_key)
        if decoder is None:
            logger.error(f"Payload type '{type_key}' not found in registry. Available types: {cls.available_types()}")
            raise ValueError(f"Payload type '{type_key}' not registered.")

        logger.debug(f"Decoding payload of type '{type_key}'")
        return decoder(data)
