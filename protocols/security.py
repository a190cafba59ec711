"""
Security scheme descriptors advertised in an AgentCard.

These only describe how a client must authenticate; nothing here performs
authentication or runs an OAuth2 flow. Each scheme and flow exposes validate(),
which raises A2AValidationError for the first rule it finds broken.
"""

from enum import Enum
from typing import ClassVar, Dict, Literal, Optional, Union

from pydantic import Field
from typing_extensions import Annotated

from protocols.base import A2ABaseModel
from protocols.constants import MAX_SCHEME_DESCRIPTION_LENGTH
from protocols.exceptions import A2AValidationError
from protocols.validation import validate_description_length, validate_url

HTTP_AUTH_SCHEMES = ("basic", "bearer", "digest", "negotiate", "ntlm")
OPENID_DISCOVERY_PATHS = ("/.well-known/openid_configuration", "/.well-known/openid-configuration")


def _validate_scheme_description(description: Optional[str]) -> None:
    validate_description_length(description, MAX_SCHEME_DESCRIPTION_LENGTH, "Security scheme description")


def _check_url(url: Optional[str], label: str) -> None:
    if url is None:
        return
    try:
        validate_url(url)
    except A2AValidationError as e:
        raise A2AValidationError(f"Invalid {label} URL: {e}") from e


class ApiKeyLocation(str, Enum):
    COOKIE = "cookie"
    HEADER = "header"
    QUERY = "query"


class ApiKeySecurityScheme(A2ABaseModel):
    type: Literal["apiKey"] = "apiKey"
    in_: ApiKeyLocation = Field(alias="in")
    name: str
    description: Optional[str] = None

    scheme_type: ClassVar[str] = "apiKey"

    def validate(self) -> None:
        if not self.name:
            raise A2AValidationError("API Key parameter name cannot be empty")

        if self.in_ == ApiKeyLocation.HEADER:
            if " " in self.name:
                raise A2AValidationError("Header names cannot contain spaces")
            if self.name.lower() == "authorization":
                raise A2AValidationError("Use HTTP security scheme for Authorization header")
        elif self.in_ == ApiKeyLocation.QUERY:
            if any(c in self.name for c in " &="):
                raise A2AValidationError("Query parameter names cannot contain spaces, &, or =")
        elif self.in_ == ApiKeyLocation.COOKIE:
            if any(c in self.name for c in " ;="):
                raise A2AValidationError("Cookie names cannot contain spaces, ;, or =")

        _validate_scheme_description(self.description)

    def requires_user_interaction(self) -> bool:
        return False


class HttpSecurityScheme(A2ABaseModel):
    type: Literal["http"] = "http"
    scheme: str
    bearer_format: Optional[str] = None
    description: Optional[str] = None

    scheme_type: ClassVar[str] = "http"

    @classmethod
    def bearer(cls, bearer_format: Optional[str] = None) -> "HttpSecurityScheme":
        return cls(scheme="bearer", bearer_format=bearer_format)

    def validate(self) -> None:
        if not self.scheme:
            raise A2AValidationError("HTTP scheme name cannot be empty")

        scheme = self.scheme.lower()
        if scheme not in HTTP_AUTH_SCHEMES and not scheme.startswith("x-"):
            raise A2AValidationError(f"Unknown HTTP authentication scheme: {self.scheme}")

        if self.bearer_format is not None:
            if scheme != "bearer":
                raise A2AValidationError("Bearer format can only be specified for bearer scheme")
            if not self.bearer_format:
                raise A2AValidationError("Bearer format cannot be empty if specified")

        _validate_scheme_description(self.description)

    def requires_user_interaction(self) -> bool:
        return False


class OAuthFlow(A2ABaseModel):
    """
    Fields and checks shared by the four OAuth2 flows.

    `scopes` maps a scope name to a human readable description and must not be
    empty.
    """

    refresh_url: Optional[str] = None
    scopes: Dict[str, str]

    def _validate_endpoints(self) -> None:
        pass

    def validate(self) -> None:
        self._validate_endpoints()
        _check_url(self.refresh_url, "refresh")

        if not self.scopes:
            raise A2AValidationError("OAuth2 flow must define at least one scope")
        for scope_name, scope_description in self.scopes.items():
            if not scope_name:
                raise A2AValidationError("OAuth2 scope name cannot be empty")
            if not scope_description:
                raise A2AValidationError("OAuth2 scope description cannot be empty")
            if " " in scope_name:
                raise A2AValidationError("OAuth2 scope names cannot contain spaces")


class ImplicitOAuthFlow(OAuthFlow):
    authorization_url: str

    def _validate_endpoints(self) -> None:
        _check_url(self.authorization_url, "authorization")


class PasswordOAuthFlow(OAuthFlow):
    token_url: str

    def _validate_endpoints(self) -> None:
        _check_url(self.token_url, "token")


class ClientCredentialsOAuthFlow(OAuthFlow):
    token_url: str

    def _validate_endpoints(self) -> None:
        _check_url(self.token_url, "token")


class AuthorizationCodeOAuthFlow(OAuthFlow):
    authorization_url: str
    token_url: str

    def _validate_endpoints(self) -> None:
        _check_url(self.authorization_url, "authorization")
        _check_url(self.token_url, "token")


class OAuth2Flows(A2ABaseModel):
    implicit: Optional[ImplicitOAuthFlow] = None
    password: Optional[PasswordOAuthFlow] = None
    client_credentials: Optional[ClientCredentialsOAuthFlow] = None
    authorization_code: Optional[AuthorizationCodeOAuthFlow] = None

    def defined_flows(self):
        """Yield (label, flow) for each flow present, in a fixed order."""
        for label, flow in (
            ("implicit", self.implicit),
            ("password", self.password),
            ("client credentials", self.client_credentials),
            ("authorization code", self.authorization_code),
        ):
            if flow is not None:
                yield label, flow


class OAuth2SecurityScheme(A2ABaseModel):
    type: Literal["oauth2"] = "oauth2"
    flows: OAuth2Flows
    description: Optional[str] = None

    scheme_type: ClassVar[str] = "oauth2"

    def validate(self) -> None:
        flows = list(self.flows.defined_flows())
        if not flows:
            raise A2AValidationError("OAuth2 security scheme must define at least one flow")

        for label, flow in flows:
            try:
                flow.validate()
            except A2AValidationError as e:
                raise A2AValidationError(f"Invalid {label} flow: {e}") from e

        _validate_scheme_description(self.description)

    def supports_client_only_flows(self) -> bool:
        return self.flows.client_credentials is not None

    def requires_user_interaction(self) -> bool:
        return self.flows.implicit is not None or self.flows.authorization_code is not None


class OpenIdConnectSecurityScheme(A2ABaseModel):
    type: Literal["openIdConnect"] = "openIdConnect"
    open_id_connect_url: str
    description: Optional[str] = None

    scheme_type: ClassVar[str] = "openIdConnect"

    def validate(self) -> None:
        _check_url(self.open_id_connect_url, "OpenID Connect")

        if not self.open_id_connect_url.startswith("https://"):
            raise A2AValidationError("OpenID Connect URL must use HTTPS")
        if not any(path in self.open_id_connect_url for path in OPENID_DISCOVERY_PATHS):
            raise A2AValidationError("OpenID Connect URL should point to a well-known configuration endpoint")

        _validate_scheme_description(self.description)

    def provider_base_url(self) -> str:
        marker = self.open_id_connect_url.find("/.well-known/")
        if marker == -1:
            return self.open_id_connect_url
        return self.open_id_connect_url[:marker]

    def requires_user_interaction(self) -> bool:
        return True


SecurityScheme = Annotated[
    Union[ApiKeySecurityScheme, HttpSecurityScheme, OAuth2SecurityScheme, OpenIdConnectSecurityScheme],
    Field(discriminator="type"),
]
