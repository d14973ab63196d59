"""Registry configuration."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DOCS_PATH = "/api/docs"


class Contact(BaseModel):
    name: str | None = None
    email: str | None = None
    url: str | None = None


class License(BaseModel):
    name: str | None = None
    url: str | None = None


class Server(BaseModel):
    url: str
    description: str | None = None


class SwaggerUiOptions(BaseModel):
    """Options handed to the Swagger UI page as-is."""

    title: str | None = None
    swagger_js_url: str | None = None
    swagger_css_url: str | None = None
    swagger_favicon_url: str | None = None
    oauth2_redirect_url: str | None = None
    init_oauth: dict[str, Any] | None = None
    swagger_ui_parameters: dict[str, Any] = {}


class OpenApiRegistryConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = True
    path: str = DEFAULT_DOCS_PATH
    version: str | None = None
    title: str | None = None
    description: str | None = None
    contact: Contact | None = None
    license: License | None = None
    servers: list[Server] | None = None
    swagger_ui: SwaggerUiOptions | None = Field(default=None, alias="swaggerUi")
    swagger_json_path: str | None = Field(default=None, alias="swaggerJsonPath")


def load_config(file_path: Path) -> OpenApiRegistryConfig:
    """Load a registry config from a YAML or JSON file."""
    text = file_path.read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    return OpenApiRegistryConfig.model_validate(data)
