"""Type schema mapper — turns TypeReferences into Swagger schema fragments.

Structured types are shared through a DefinitionRegistry and referenced with
``$ref``; everything else is mapped inline.
"""

import logging

from func_swagger.metadata.base import EnumMember, PropertyDeclaration, TypeReference

logger = logging.getLogger(__name__)

DEFINITIONS_PREFIX = "#/definitions/"

PRIMITIVE_SCHEMAS = {
    "string": {"type": "string"},
    "date": {"type": "string", "format": "date"},
    "int32": {"type": "integer", "format": "int32"},
    "int64": {"type": "integer", "format": "int64"},
    "float": {"type": "number", "format": "float"},
    "double": {"type": "number", "format": "double"},
    "boolean": {"type": "boolean"},
}


class DefinitionRegistry:
    """Named object schemas shared by every operation of one document.

    Names are the only key: the first type registered under a name wins and
    later registrations are ignored, even when the types differ.
    """

    def __init__(self):
        self._definitions: dict[str, dict] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __getitem__(self, name: str) -> dict:
        return self._definitions[name]

    def register(self, type_ref: TypeReference) -> None:
        """Register the object schema of ``type_ref`` unless its name is taken."""
        if type_ref.name in self._definitions:
            return
        # Reserve the name first so self-referencing types terminate
        schema: dict = {}
        self._definitions[type_ref.name] = schema
        schema.update(object_schema(type_ref, self))
        logger.debug("Registered definition %s", type_ref.name)

    def to_dict(self) -> dict[str, dict]:
        return dict(self._definitions)


def definition_ref(name: str) -> dict:
    return {"$ref": DEFINITIONS_PREFIX + name}


def enum_label(member: EnumMember) -> str:
    return f"{member.value} - {member.description or member.name}"


def map_type(type_ref: TypeReference, definitions: DefinitionRegistry | None = None) -> dict:
    """Map a declared type to a schema fragment.

    Without a registry, structured types are inlined in full.
    """
    return _map_type(type_ref, definitions, ())


def _map_type(type_ref: TypeReference, definitions: DefinitionRegistry | None, inlining: tuple) -> dict:
    if type_ref.kind == "primitive":
        return dict(PRIMITIVE_SCHEMAS.get(type_ref.primitive, PRIMITIVE_SCHEMAS["string"]))

    if type_ref.kind == "array":
        items = type_ref.items
        return {
            "type": "array",
            "items": _map_type(items, definitions, inlining) if items is not None else {"type": "string"},
        }

    if type_ref.kind == "enum":
        return {"type": "string", "enum": [enum_label(m) for m in type_ref.members]}

    if type_ref.is_structured:
        if definitions is None:
            if type_ref.name in inlining:
                return {"type": "object"}
            return object_schema(type_ref, None, inlining + (type_ref.name,))
        definitions.register(type_ref)
        return definition_ref(type_ref.name)

    # void and framework results carry no payload
    return {}


def object_schema(
    type_ref: TypeReference,
    definitions: DefinitionRegistry | None,
    inlining: tuple = (),
) -> dict:
    """Build the full ``type: object`` schema of a structured type."""
    properties = {}
    required = []
    for prop in type_ref.properties:
        if prop.is_required:
            required.append(prop.name)
        properties[prop.name] = _property_schema(prop, definitions, inlining)

    schema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


def _property_schema(prop: PropertyDeclaration, definitions: DefinitionRegistry | None, inlining: tuple) -> dict:
    schema = {"description": property_description(prop)}
    if prop.example is not None:
        schema["example"] = prop.example
    if prop.min_length is not None:
        schema["minLength"] = prop.min_length
    if prop.max_length is not None:
        schema["maxLength"] = prop.max_length
    if prop.pattern:
        schema["pattern"] = prop.pattern
    schema.update(_map_type(prop.declared_type, definitions, inlining))
    return schema


def property_description(prop: PropertyDeclaration) -> str:
    if prop.description and prop.description.strip():
        return prop.description
    return f"This returns {prop.declared_type.display_name}"
