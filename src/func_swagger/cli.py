"""CLI entry point for func-swagger."""

import importlib
import importlib.util
import logging
import sys
from pathlib import Path

import click
import yaml

from func_swagger.config import ENV_PREFIX, JSON_MEDIA_TYPE
from func_swagger.errors import SwaggerGenerationError
from func_swagger.generator.document import build_swagger_document
from func_swagger.generator.validator import validate_document
from func_swagger.metadata.base import RequestContext


def _load_target(target: str):
    """Load ``module:attr`` or ``path/to/file.py:attr``."""
    location, sep, attr = target.rpartition(":")
    if not sep or not location or not attr:
        raise click.BadParameter("expected MODULE:ATTR or FILE.py:ATTR", param_hint="TARGET")

    if location.endswith(".py"):
        path = Path(location)
        if not path.exists():
            raise click.BadParameter(f"file not found: {path}", param_hint="TARGET")
        spec = importlib.util.spec_from_file_location(path.stem, path)
        module = importlib.util.module_from_spec(spec)
        sys.modules[path.stem] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            sys.modules.pop(path.stem, None)
            raise click.BadParameter(f"cannot load {path}: {e}", param_hint="TARGET") from e
    else:
        try:
            module = importlib.import_module(location)
        except ImportError as e:
            raise click.BadParameter(f"cannot import {location}: {e}", param_hint="TARGET") from e

    try:
        return getattr(module, attr)
    except AttributeError:
        raise click.BadParameter(f"{location} has no attribute {attr}", param_hint="TARGET") from None


def _render(document: dict, fmt: str, json_text: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    return json_text


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log discovery and registration details.")
def main(verbose: bool):
    """func-swagger — generate Swagger 2.0 documents from registered HTTP functions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("target")
@click.option("--title", required=True, envvar=f"{ENV_PREFIX}_TITLE", help="API title, also used as the operation tag.")
@click.option("--description", required=True, envvar=f"{ENV_PREFIX}_DESCRIPTION", help="API description.")
@click.option("--definition-name", required=True, envvar=f"{ENV_PREFIX}_DEFINITION_NAME", help="Name of the function serving the document; it is left out.")
@click.option("--host", default="localhost", show_default=True, envvar=f"{ENV_PREFIX}_HOST", help="Host the API is served from.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file path (default: stdout).")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("--check", is_flag=True, help="Fail when the document references missing definitions or path parameters.")
def generate(
    target: str,
    title: str,
    description: str,
    definition_name: str,
    host: str,
    output: Path | None,
    fmt: str,
    check: bool,
):
    """Generate a Swagger document for the functions registered in TARGET."""
    candidates = _load_target(target)
    request = RequestContext(host=host, content_type=JSON_MEDIA_TYPE)

    try:
        document = build_swagger_document(request, title, description, definition_name, candidates)
    except SwaggerGenerationError as e:
        raise click.ClickException(str(e)) from e

    data = document.to_dict()
    if check:
        errors = validate_document(data)
        for pointer, message in errors.items():
            click.echo(f"  {pointer}: {message}", err=True)
        if errors:
            raise click.ClickException(f"Document has {len(errors)} consistency errors")

    text = _render(data, fmt, document.to_json(indent=2))
    if output is None:
        click.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Documented {len(data['paths'])} paths, {len(data['definitions'])} definitions.")
    click.echo(f"Swagger document saved to {output}")
