"""Place each declared parameter in path, query, header or body."""

import re

from func_swagger.config import TENANT_HEADER
from func_swagger.generator.schema import DefinitionRegistry, map_type, property_description
from func_swagger.metadata.base import EndpointCandidate, ParameterDeclaration, TypeReference


def tenant_header() -> dict:
    return {"name": TENANT_HEADER, "in": "header", "required": True, "type": "string"}


def has_placeholder(route: str, name: str) -> bool:
    """True when the route has a ``{name}`` placeholder, constrained (``{name:int}``) or optional."""
    return re.search(r"\{" + re.escape(name) + r"(:[^}]*)?\??\}", route) is not None


def is_query_value(type_ref: TypeReference) -> bool:
    """Primitives, enums and arrays of either fit in a single query parameter."""
    if type_ref.kind == "array":
        return type_ref.items is not None and type_ref.items.kind in ("primitive", "enum")
    return type_ref.kind in ("primitive", "enum")


def build_parameters(candidate: EndpointCandidate, route: str, definitions: DefinitionRegistry) -> list[dict]:
    """All parameters of one operation, tenant header first."""
    params = [tenant_header()]
    for param in candidate.parameters:
        params.extend(classify_parameter(param, route, definitions))
    return params


def classify_parameter(param: ParameterDeclaration, route: str, definitions: DefinitionRegistry) -> list[dict]:
    """Return the Swagger parameter objects for one declared parameter.

    Injected parameters produce nothing and query-bound objects produce one
    entry per leaf property, so the result is a list.
    """
    if param.is_framework_injected or param.trigger is not None:
        return []

    declared = param.declared_type

    if has_placeholder(route, param.name):
        entry = {"name": param.name, "in": "path", "required": True}
        entry.update(map_type(declared, None))
        return [entry]

    if param.source_hint == "query" and is_query_value(declared):
        entry = {"name": param.name, "in": "query", "required": param.is_required}
        entry.update(map_type(declared, definitions))
        return [entry]

    if param.source_hint == "query" and declared.is_structured:
        return flatten_query_object(declared, definitions)

    return [
        {
            "name": param.name,
            "in": "body",
            "required": True,
            "schema": map_type(declared, definitions),
        }
    ]


def flatten_query_object(
    type_ref: TypeReference,
    definitions: DefinitionRegistry,
    prefix: str = "",
    ancestors: tuple = (),
) -> list[dict]:
    """Expand a structured query type into dot-named leaf query parameters."""
    params = []
    ancestors = ancestors + (type_ref.name,)
    for prop in type_ref.properties:
        name = f"{prefix}.{prop.name}" if prefix else prop.name
        declared = prop.declared_type
        if declared.is_structured:
            if declared.name in ancestors:
                continue
            params.extend(flatten_query_object(declared, definitions, name, ancestors))
            continue
        if not is_query_value(declared):
            continue

        entry = {
            "name": name,
            "in": "query",
            "required": prop.is_required,
            "description": property_description(prop),
        }
        entry.update(map_type(declared, definitions))
        params.append(entry)
    return params
