"""Validates generated documents for internal consistency."""

import re

from func_swagger.generator.schema import DEFINITIONS_PREFIX

PLACEHOLDER = re.compile(r"\{([^}:?]+)[^}]*\}")


def _walk_refs(node, pointer: str):
    if isinstance(node, dict):
        for key, value in node.items():
            child = f"{pointer}/{key}"
            if key == "$ref" and isinstance(value, str):
                yield child, value
            else:
                yield from _walk_refs(value, child)
    elif isinstance(node, list):
        for index, value in enumerate(node):
            yield from _walk_refs(value, f"{pointer}/{index}")


def validate_references(document: dict) -> dict[str, str]:
    """Check that every ``$ref`` points at an existing definition.

    Returns dict of {json_pointer: error_message} for broken references.
    """
    definitions = document.get("definitions", {})
    errors = {}
    for pointer, ref in _walk_refs(document, "#"):
        if not ref.startswith(DEFINITIONS_PREFIX):
            errors[pointer] = f"Unsupported reference: {ref}"
        elif ref[len(DEFINITIONS_PREFIX):] not in definitions:
            errors[pointer] = f"Missing definition: {ref}"
    return errors


def validate_path_parameters(document: dict) -> dict[str, str]:
    """Check that every route placeholder is documented as a path parameter.

    Returns dict of {json_pointer: error_message} for undocumented placeholders.
    """
    errors = {}
    for route, operations in document.get("paths", {}).items():
        placeholders = PLACEHOLDER.findall(route)
        for verb, operation in operations.items():
            documented = {p["name"] for p in operation.get("parameters", []) if p.get("in") == "path"}
            for name in placeholders:
                if name not in documented:
                    errors[f"#/paths/{route}/{verb}/{name}"] = f"Path parameter '{name}' is not documented"
    return errors


def validate_document(document: dict) -> dict[str, str]:
    """Run all consistency checks on a generated document."""
    errors = {}
    errors.update(validate_references(document))
    errors.update(validate_path_parameters(document))
    return errors
