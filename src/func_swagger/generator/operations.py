"""One Swagger operation object per route and verb."""

from func_swagger.config import JSON_MEDIA_TYPE, SECURITY_SCHEME, SUMMARY_MAX_LENGTH
from func_swagger.generator.parameters import build_parameters
from func_swagger.generator.responses import resolve_responses
from func_swagger.generator.schema import DefinitionRegistry
from func_swagger.metadata.base import EndpointCandidate


def to_title_case(text: str) -> str:
    """Capitalize each word and lower the rest; all-caps words are left alone."""
    words = text.split(" ")
    return " ".join(w if w.isupper() else w[:1].upper() + w[1:].lower() for w in words)


def operation_summary(candidate: EndpointCandidate) -> str:
    name = candidate.display_name
    if name and name.strip():
        return name[:SUMMARY_MAX_LENGTH]
    return f"Run {candidate.name}"


def operation_description(candidate: EndpointCandidate) -> str:
    description = candidate.display_description
    if description and description.strip():
        return description
    return f"This function will run {candidate.name}"


def build_operation(
    candidate: EndpointCandidate,
    route: str,
    api_title: str,
    definitions: DefinitionRegistry,
) -> dict:
    """Build the operation object for ``candidate`` mounted at ``route``."""
    return {
        "operationId": to_title_case(candidate.name),
        "produces": [JSON_MEDIA_TYPE],
        "consumes": [JSON_MEDIA_TYPE],
        "parameters": build_parameters(candidate, route, definitions),
        "summary": operation_summary(candidate),
        "description": operation_description(candidate),
        "responses": resolve_responses(candidate, definitions),
        "tags": [api_title],
        "security": [{SECURITY_SCHEME: []}],
    }
