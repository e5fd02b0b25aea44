"""Build the status-coded responses of an operation."""

from func_swagger.generator.schema import DefinitionRegistry, map_type, object_schema
from func_swagger.metadata.base import EndpointCandidate, TypeReference


def effective_return_type(candidate: EndpointCandidate) -> TypeReference | None:
    """The type the operation actually responds with, or None for no payload.

    One level of generic wrapping is removed, and a framework result is
    replaced by the declared response type override.
    """
    return_type = candidate.return_type
    if return_type is None:
        return None

    if return_type.kind == "generic" and return_type.arguments:
        return_type = return_type.arguments[0]

    if return_type.kind == "result":
        return_type = candidate.response_type_override

    if return_type is None or return_type.kind in ("void", "result"):
        return None
    return return_type


def response_schema(return_type: TypeReference, definitions: DefinitionRegistry) -> dict:
    # Thin generic wrappers around primitives stay out of the shared definitions
    if return_type.kind == "generic" and return_type.arguments and return_type.arguments[0].kind == "primitive":
        return object_schema(return_type, None)
    return map_type(return_type, definitions)


def resolve_responses(candidate: EndpointCandidate, definitions: DefinitionRegistry) -> dict[str, dict]:
    """Map each declared status code to its response object."""
    return_type = effective_return_type(candidate)
    schema = response_schema(return_type, definitions) if return_type is not None else None

    responses = {}
    for declaration in candidate.responses:
        response = {"description": declaration.description}
        if declaration.show_schema and schema is not None:
            response["schema"] = schema
        responses[str(declaration.status_code)] = response
    return responses
