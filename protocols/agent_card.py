"""
AgentCard and the records nested in it.

An agent builds its card once at startup and serves it read-only afterwards.
AgentCard.validate() walks the whole card: identity fields, URLs, provider,
interfaces, capabilities and their extensions, skills and security schemes.
"""

import logging
from typing import Any, Dict, List, Optional

from protocols.base import A2ABaseModel
from protocols.constants import MAX_EXTENSION_DESCRIPTION_LENGTH, PROTOCOL_VERSION
from protocols.exceptions import A2AValidationError
from protocols.security import SecurityScheme
from protocols.validation import (
    validate_agent_name,
    validate_description_length,
    validate_skill_id,
    validate_url,
    validate_version,
)

logger = logging.getLogger(f"a2aProtocol.{__name__}")

AUTH_EXTENSION_MARKERS = ("oauth", "auth")
WEBHOOK_EXTENSION_MARKERS = ("webhook", "notification")


def _is_http_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


class AgentExtension(A2ABaseModel):
    """
    An extension the agent supports, identified by URI.

    `params` gets a best-effort check: URIs mentioning auth are expected to carry
    auth-style params (clientId, scopes, redirectUri), URIs mentioning webhooks or
    notifications webhook-style params (url, secret, events). Any other URI only
    needs params to be a JSON object; its contents are not inspected.
    """

    uri: str
    required: Optional[bool] = None
    description: Optional[str] = None
    params: Optional[Any] = None

    @classmethod
    def with_config(
        cls,
        uri: str,
        description: Optional[str] = None,
        required: Optional[bool] = None,
        params: Optional[Any] = None,
    ) -> "AgentExtension":
        return cls(uri=uri, description=description, required=required, params=params)

    def validate_uri(self) -> None:
        if not self.uri:
            raise A2AValidationError("Extension URI cannot be empty")
        try:
            validate_url(self.uri)
        except A2AValidationError as e:
            raise A2AValidationError(f"Extension URI must be a valid HTTP or HTTPS URL: {e}") from e

    def validate_params(self) -> None:
        if self.params is None:
            return
        if not isinstance(self.params, dict):
            raise A2AValidationError("Extension params must be a JSON object")

        if any(marker in self.uri for marker in AUTH_EXTENSION_MARKERS):
            self._validate_auth_params(self.params)
        elif any(marker in self.uri for marker in WEBHOOK_EXTENSION_MARKERS):
            self._validate_webhook_params(self.params)

    @staticmethod
    def _validate_auth_params(params: Dict[str, Any]) -> None:
        if "clientId" in params:
            client_id = params["clientId"]
            if not isinstance(client_id, str) or not client_id:
                raise A2AValidationError("Auth extension clientId must be a non-empty string")
        if "scopes" in params and not isinstance(params["scopes"], list):
            raise A2AValidationError("Auth extension scopes must be an array")
        if "redirectUri" in params:
            redirect_uri = params["redirectUri"]
            if not isinstance(redirect_uri, str):
                raise A2AValidationError("Auth extension redirectUri must be a string")
            if not _is_http_url(redirect_uri):
                raise A2AValidationError("Auth extension redirectUri must be a valid URL")

    @staticmethod
    def _validate_webhook_params(params: Dict[str, Any]) -> None:
        if "url" in params:
            url = params["url"]
            if not isinstance(url, str) or not url:
                raise A2AValidationError("Webhook extension url must be a non-empty string")
            if not _is_http_url(url):
                raise A2AValidationError("Webhook extension url must be a valid HTTP or HTTPS URL")
        if "secret" in params and not isinstance(params["secret"], str):
            raise A2AValidationError("Webhook extension secret must be a string")
        if "events" in params and not isinstance(params["events"], list):
            raise A2AValidationError("Webhook extension events must be an array")

    def validate(self) -> None:
        self.validate_uri()
        self.validate_params()
        validate_description_length(self.description, MAX_EXTENSION_DESCRIPTION_LENGTH, "Extension description")


class AgentCapabilities(A2ABaseModel):
    extensions: Optional[List[AgentExtension]] = None
    push_notifications: Optional[bool] = None
    state_transition_history: Optional[bool] = None
    streaming: Optional[bool] = None

    def validate(self) -> None:
        for extension in self.extensions or []:
            extension.validate()


class AgentInterface(A2ABaseModel):
    url: str
    transport: str

    def validate(self) -> None:
        validate_url(self.url)
        if not self.transport:
            raise A2AValidationError("Interface transport cannot be empty")


class AgentProvider(A2ABaseModel):
    organization: str
    url: str

    def validate(self) -> None:
        if not self.organization:
            raise A2AValidationError("Provider organization cannot be empty")
        validate_url(self.url)


class AgentSkill(A2ABaseModel):
    name: str
    description: str
    id: Optional[str] = None
    tags: Optional[List[str]] = None
    input_modes: Optional[List[str]] = None
    output_modes: Optional[List[str]] = None
    examples: Optional[List[str]] = None

    def validate(self) -> None:
        if not self.name:
            raise A2AValidationError("Skill name cannot be empty")
        if self.id is not None:
            validate_skill_id(self.id)


class AgentCard(A2ABaseModel):
    name: str
    description: str
    version: str
    protocol_version: str = PROTOCOL_VERSION
    url: str
    preferred_transport: Optional[str] = None
    capabilities: AgentCapabilities
    default_input_modes: List[str]
    default_output_modes: List[str]
    skills: List[AgentSkill]
    provider: Optional[AgentProvider] = None
    documentation_url: Optional[str] = None
    icon_url: Optional[str] = None
    supports_authenticated_extended_card: Optional[bool] = None
    additional_interfaces: Optional[List[AgentInterface]] = None
    security: Optional[List[Dict[str, List[str]]]] = None
    security_schemes: Optional[Dict[str, SecurityScheme]] = None

    def validate(self) -> None:
        try:
            self._validate()
        except A2AValidationError as e:
            logger.debug(f"Agent card '{self.name}' failed validation: {e}")
            raise

    def _validate(self) -> None:
        validate_agent_name(self.name)
        validate_version(self.version)
        validate_version(self.protocol_version)
        validate_url(self.url)
        if self.documentation_url is not None:
            validate_url(self.documentation_url)
        if self.icon_url is not None:
            validate_url(self.icon_url)
        if self.provider is not None:
            self.provider.validate()
        for interface in self.additional_interfaces or []:
            interface.validate()

        self.capabilities.validate()
        for skill in self.skills:
            skill.validate()

        schemes = self.security_schemes or {}
        for scheme_name, scheme in schemes.items():
            try:
                scheme.validate()
            except A2AValidationError as e:
                raise A2AValidationError(f"Security scheme '{scheme_name}': {e}") from e

        for requirement in self.security or []:
            for scheme_name in requirement:
                if scheme_name not in schemes:
                    raise A2AValidationError(
                        f"Security requirement references undeclared scheme '{scheme_name}'"
                    )
