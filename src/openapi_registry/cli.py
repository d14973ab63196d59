"""CLI entry point for openapi-registry."""

import importlib
import json
from pathlib import Path
from typing import Any

import click
import yaml
from pydantic import ValidationError

from openapi_registry.app import create_app
from openapi_registry.config import OpenApiRegistryConfig, load_config
from openapi_registry.logging_config import setup_logging
from openapi_registry.registry import OpenApiRegistry, create_openapi_registry


def _resolve(ref: str) -> Any:
    """Import ``package.module:attribute``."""
    module_name, _, attr = ref.partition(":")
    if not module_name or not attr:
        raise click.BadParameter(f"expected 'module:attribute', got {ref!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import {module_name}: {e}") from e
    try:
        return getattr(module, attr)
    except AttributeError as e:
        raise click.BadParameter(f"{module_name} has no attribute {attr!r}") from e


def _load_config(config_path: Path | None) -> OpenApiRegistryConfig:
    if config_path is None:
        return OpenApiRegistryConfig()
    try:
        return load_config(config_path)
    except (yaml.YAMLError, ValidationError) as e:
        raise click.ClickException(f"invalid config {config_path}: {e}") from e


def _build_registry(
    routes_ref: str, config_path: Path | None, error_handlers: tuple[str, ...]
) -> tuple[OpenApiRegistry, dict]:
    routes = _resolve(routes_ref)
    registry = create_openapi_registry(_load_config(config_path))
    documented = registry.register_routes(routes)
    for ref in error_handlers:
        registry.register_error_handler(_resolve(ref))
    return registry, documented


@click.group()
def main():
    """OpenAPI Registry: generate OpenAPI documents from route contracts."""
    pass


@main.command()
@click.argument("routes_ref")
@click.option("-c", "--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML/JSON registry config.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file (stdout if omitted).")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("--error-handler", "error_handlers", multiple=True, help="module:attribute of an error handler with an error contract.")
@click.option("-v", "--verbose", is_flag=True, help="Log skipped routes.")
def export(routes_ref: str, config_path: Path | None, output: Path | None, fmt: str, error_handlers: tuple[str, ...], verbose: bool):
    """Write the OpenAPI document for the route table ROUTES_REF."""
    setup_logging(verbose)
    registry, _ = _build_registry(routes_ref, config_path, error_handlers)
    document = registry.get_openapi_schema()

    if fmt == "yaml":
        text = yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    else:
        text = json.dumps(document, indent=2, ensure_ascii=False) + "\n"

    if output is None:
        click.echo(text, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"OpenAPI document saved to {output}", err=True)


@main.command()
@click.argument("routes_ref")
@click.option("-c", "--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML/JSON registry config.")
@click.option("--error-handler", default=None, help="module:attribute of the app-wide error handler; its error contract is documented.")
@click.option("--host", default="127.0.0.1", help="Bind address.")
@click.option("--port", default=3030, type=int, help="Bind port.")
@click.option("-v", "--verbose", is_flag=True, help="Log skipped routes.")
def serve(routes_ref: str, config_path: Path | None, error_handler: str | None, host: str, port: int, verbose: bool):
    """Serve ROUTES_REF with interactive docs mounted."""
    import uvicorn

    setup_logging(verbose)
    handler_refs = (error_handler,) if error_handler else ()
    registry, documented = _build_registry(routes_ref, config_path, handler_refs)
    click.echo(f"Docs at http://{host}:{port}{registry.config.path}")
    handler = _resolve(error_handler) if error_handler else None
    uvicorn.run(create_app(documented, error_handler=handler), host=host, port=port)
