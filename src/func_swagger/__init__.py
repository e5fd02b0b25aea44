"""Generate Swagger 2.0 documents from HTTP-triggered function metadata."""

from func_swagger.errors import (
    CandidateError,
    DuplicateOperationError,
    InvalidArgumentError,
    SwaggerGenerationError,
)
from func_swagger.generator.document import (
    SwaggerDocument,
    build_swagger_document,
    generate_swagger_document,
)
from func_swagger.metadata.base import (
    EndpointCandidate,
    HttpTrigger,
    ParameterDeclaration,
    PropertyDeclaration,
    RequestContext,
    ResponseDeclaration,
    TypeReference,
)
from func_swagger.metadata.markers import ActionResult, FromQuery, HttpRequest, Inject, Required
from func_swagger.metadata.registry import FunctionRegistry, Response

__version__ = "0.1.0"

__all__ = [
    "ActionResult",
    "CandidateError",
    "DuplicateOperationError",
    "EndpointCandidate",
    "FromQuery",
    "FunctionRegistry",
    "HttpRequest",
    "HttpTrigger",
    "Inject",
    "InvalidArgumentError",
    "ParameterDeclaration",
    "PropertyDeclaration",
    "RequestContext",
    "Required",
    "Response",
    "ResponseDeclaration",
    "SwaggerDocument",
    "SwaggerGenerationError",
    "TypeReference",
    "build_swagger_document",
    "generate_swagger_document",
]
