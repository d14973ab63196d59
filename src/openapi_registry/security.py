"""Security scheme models and the handler-to-scheme association table.

Authentication handlers are associated with a named scheme by reference,
so the same handler can guard many routes while the documentation layer
still knows which scheme it implements. The handler itself is never
modified.
"""

import weakref
from typing import Annotated, Any, Callable, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

H = TypeVar("H", bound=Callable[..., Any])


class _SchemeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    description: str | None = None

    def to_openapi(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ApiKeyScheme(_SchemeModel):
    type: Literal["apiKey"] = "apiKey"
    in_: Literal["query", "header", "cookie"] = Field(default="header", alias="in")
    name: str


class HttpScheme(_SchemeModel):
    type: Literal["http"] = "http"
    scheme: str
    bearer_format: str | None = Field(default=None, alias="bearerFormat")


class OAuthFlow(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    authorization_url: str | None = Field(default=None, alias="authorizationUrl")
    token_url: str | None = Field(default=None, alias="tokenUrl")
    refresh_url: str | None = Field(default=None, alias="refreshUrl")
    scopes: dict[str, str] = {}


class OAuthFlows(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    implicit: OAuthFlow | None = None
    password: OAuthFlow | None = None
    client_credentials: OAuthFlow | None = Field(default=None, alias="clientCredentials")
    authorization_code: OAuthFlow | None = Field(default=None, alias="authorizationCode")


class OAuth2Scheme(_SchemeModel):
    type: Literal["oauth2"] = "oauth2"
    flows: OAuthFlows


class OpenIdConnectScheme(_SchemeModel):
    type: Literal["openIdConnect"] = "openIdConnect"
    open_id_connect_url: str = Field(alias="openIdConnectUrl")


SecuritySchemeObject = Annotated[
    Union[ApiKeyScheme, HttpScheme, OAuth2Scheme, OpenIdConnectScheme],
    Field(discriminator="type"),
]


class SecuritySchemeDefinition(BaseModel):
    """A named scheme plus the scopes a route guarded by it requires."""

    name: str
    scheme: SecuritySchemeObject
    scopes: list[str] | None = None


class SecuritySchemeTable:
    """Identity-keyed map from auth handler to its scheme definition."""

    def __init__(self):
        self._schemes: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()

    def associate(self, handler: Any, definition: SecuritySchemeDefinition) -> None:
        self._schemes[handler] = definition

    def lookup(self, handler: Any) -> SecuritySchemeDefinition | None:
        try:
            return self._schemes.get(handler)
        except TypeError:
            return None


default_table = SecuritySchemeTable()


def with_security_scheme(
    definition: SecuritySchemeDefinition | dict,
    table: SecuritySchemeTable | None = None,
) -> Callable[[H], H]:
    """Decorator associating ``definition`` with the decorated auth handler."""
    if not isinstance(definition, SecuritySchemeDefinition):
        definition = SecuritySchemeDefinition.model_validate(definition)
    target = table if table is not None else default_table

    def decorator(handler: H) -> H:
        target.associate(handler, definition)
        return handler

    return decorator


def bearer_auth(name: str = "bearerAuth", scopes: list[str] | None = None) -> Callable[[H], H]:
    return with_security_scheme(
        SecuritySchemeDefinition(
            name=name,
            scheme=HttpScheme(scheme="bearer", bearer_format="JWT"),
            scopes=scopes,
        )
    )


def api_key_auth(
    name: str = "apiKey",
    location: Literal["query", "header", "cookie"] = "header",
    param_name: str = "X-API-Key",
    scopes: list[str] | None = None,
) -> Callable[[H], H]:
    return with_security_scheme(
        SecuritySchemeDefinition(
            name=name,
            scheme=ApiKeyScheme(in_=location, name=param_name),
            scopes=scopes,
        )
    )


def basic_auth(name: str = "basicAuth", scopes: list[str] | None = None) -> Callable[[H], H]:
    return with_security_scheme(
        SecuritySchemeDefinition(name=name, scheme=HttpScheme(scheme="basic"), scopes=scopes)
    )


def oauth2_auth(
    name: str = "oauth2Auth",
    flows: OAuthFlows | dict | None = None,
    scopes: list[str] | None = None,
) -> Callable[[H], H]:
    if not isinstance(flows, OAuthFlows):
        flows = OAuthFlows.model_validate(flows or {})
    return with_security_scheme(
        SecuritySchemeDefinition(name=name, scheme=OAuth2Scheme(flows=flows), scopes=scopes)
    )


def oidc_auth(
    name: str = "oidcAuth",
    open_id_connect_url: str = "",
    scopes: list[str] | None = None,
) -> Callable[[H], H]:
    return with_security_scheme(
        SecuritySchemeDefinition(
            name=name,
            scheme=OpenIdConnectScheme(open_id_connect_url=open_id_connect_url),
            scopes=scopes,
        )
    )
