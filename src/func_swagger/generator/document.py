"""Build and serialize the complete Swagger 2.0 document."""

import logging
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from func_swagger.config import (
    API_VERSION,
    BASE_PATH,
    LOOPBACK_HOSTS,
    SECURITY_DEFINITIONS,
    SWAGGER_VERSION,
)
from func_swagger.errors import InvalidArgumentError
from func_swagger.generator.paths import build_paths
from func_swagger.generator.schema import DefinitionRegistry
from func_swagger.metadata.base import EndpointCandidate, RequestContext
from func_swagger.metadata.registry import FunctionRegistry

logger = logging.getLogger(__name__)


class Info(BaseModel):
    title: str
    version: str = API_VERSION
    description: str


class SwaggerDocument(BaseModel):
    """The generated document envelope, serialized with Swagger field names."""

    model_config = ConfigDict(populate_by_name=True)

    swagger: str = SWAGGER_VERSION
    info: Info
    host: str = ""
    base_path: str = Field(default=BASE_PATH, alias="basePath")
    schemes: list[str]
    definitions: dict[str, dict] = {}
    paths: dict[str, dict[str, dict]] = {}
    security_definitions: dict[str, dict] = Field(default=SECURITY_DEFINITIONS, alias="securityDefinitions")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)


def schemes_for(host: str) -> list[str]:
    if any(loopback in host for loopback in LOOPBACK_HOSTS):
        return ["http"]
    return ["https"]


def _require(value: str | None, argument: str) -> None:
    if not value:
        raise InvalidArgumentError(argument)


def build_swagger_document(
    request: RequestContext | None,
    api_title: str,
    api_description: str,
    api_definition_name: str,
    candidates: FunctionRegistry | Iterable[EndpointCandidate] | None,
) -> SwaggerDocument:
    """Generate the document for every documentable candidate.

    Raises InvalidArgumentError before doing any work when an input is
    missing, and DuplicateOperationError when two candidates claim the same
    route and verb.
    """
    if request is None:
        raise InvalidArgumentError("request")
    _require(api_title, "api_title")
    _require(api_description, "api_description")
    _require(api_definition_name, "api_definition_name")
    if candidates is None:
        raise InvalidArgumentError("candidates")
    if isinstance(candidates, FunctionRegistry):
        candidates = candidates.candidates()
    candidates = list(candidates)
    if not candidates:
        raise InvalidArgumentError("candidates")

    host = request.host or ""
    definitions = DefinitionRegistry()
    paths = build_paths(candidates, api_title, api_definition_name, definitions)
    logger.info("Documented %d paths and %d definitions for %s", len(paths), len(definitions), api_title)

    return SwaggerDocument(
        info=Info(title=api_title, description=api_description),
        host=host,
        schemes=schemes_for(host),
        definitions=definitions.to_dict(),
        paths=paths,
    )


def generate_swagger_document(
    request: RequestContext | None,
    api_title: str,
    api_description: str,
    api_definition_name: str,
    candidates: FunctionRegistry | Iterable[EndpointCandidate] | None,
) -> str:
    """Generate the document and serialize it to JSON text."""
    document = build_swagger_document(request, api_title, api_description, api_definition_name, candidates)
    return document.to_json()
