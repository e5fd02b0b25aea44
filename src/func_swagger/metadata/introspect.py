"""Python type introspection.

Converts Python annotations into TypeReference models: builtins become
primitives, sequences arrays, Enum subclasses enums, and pydantic models or
dataclasses structured objects.
"""

import collections.abc
import dataclasses
import datetime
import decimal
import enum
import types
import typing
import uuid
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from func_swagger.metadata.base import (
    EnumMember,
    PropertyDeclaration,
    TypeReference,
    action_result,
    array_of,
    generic_of,
    object_of,
    primitive,
    void,
)
from func_swagger.metadata.markers import ActionResult

SCALAR_TAGS = {
    str: "string",
    bool: "boolean",
    int: "int32",
    float: "float",
    decimal.Decimal: "double",
    datetime.datetime: "date",
    datetime.date: "date",
    uuid.UUID: "uuid",
    bytes: "byte",
}

ARRAY_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.Set,
    collections.abc.Iterable,
)

MAPPING_ORIGINS = (dict, collections.abc.Mapping)


def unwrap_annotated(annotation: Any) -> tuple[Any, tuple]:
    """Split ``Annotated[T, *markers]`` into ``T`` and the markers."""
    if get_origin(annotation) is Annotated:
        args = get_args(annotation)
        return args[0], tuple(args[1:])
    return annotation, ()


class TypeIntrospector:
    """Builds TypeReferences, sharing one reference per structured class.

    Sharing lets self-referencing models terminate: the reference is cached
    before its properties are read.
    """

    def __init__(self):
        self._structured: dict[Any, TypeReference] = {}

    def type_reference(self, annotation: Any) -> TypeReference:
        if annotation is None or annotation is type(None):
            return void()
        if annotation is Any or isinstance(annotation, typing.TypeVar):
            return primitive("string")

        annotation, _ = unwrap_annotated(annotation)
        origin = get_origin(annotation)

        if origin is Union or origin is types.UnionType:
            args = [a for a in get_args(annotation) if a is not type(None)]
            if len(args) == 1:
                return self.type_reference(args[0])
            return primitive("string")

        if origin in ARRAY_ORIGINS:
            args = [a for a in get_args(annotation) if a is not Ellipsis]
            return array_of(self.type_reference(args[0]) if args else primitive("string"))

        if origin in MAPPING_ORIGINS:
            return primitive("object")

        if origin is not None:
            return self._generic(annotation, origin)

        if isinstance(annotation, type):
            return self._class_reference(annotation)

        return primitive("string")

    def _class_reference(self, cls: type) -> TypeReference:
        if issubclass(cls, ActionResult):
            return action_result()
        if issubclass(cls, enum.Enum):
            return self._enum(cls)
        for base in cls.__mro__:
            if base in SCALAR_TAGS:
                return primitive(SCALAR_TAGS[base])
        if issubclass(cls, (list, tuple, set, frozenset)):
            return array_of(primitive("string"))
        if issubclass(cls, dict):
            return primitive("object")
        if issubclass(cls, BaseModel):
            return self._model(cls)
        if dataclasses.is_dataclass(cls):
            return self._dataclass(cls)
        return self._plain_class(cls)

    def _generic(self, annotation: Any, origin: Any) -> TypeReference:
        name = getattr(origin, "__name__", str(origin))
        return generic_of(name, [self.type_reference(a) for a in get_args(annotation)])

    def _enum(self, cls: type[enum.Enum]) -> TypeReference:
        members = []
        for index, member in enumerate(cls):
            value = member.value
            if not isinstance(value, int) or isinstance(value, bool):
                value = index
            description = getattr(member, "description", None)
            members.append(
                EnumMember(
                    value=int(value),
                    name=member.name,
                    description=description if isinstance(description, str) else None,
                )
            )
        return TypeReference(kind="enum", name=cls.__name__, members=members)

    def _model(self, cls: type[BaseModel]) -> TypeReference:
        if cls in self._structured:
            return self._structured[cls]

        generic_meta = getattr(cls, "__pydantic_generic_metadata__", None) or {}
        origin = generic_meta.get("origin")
        if origin is not None:
            ref = generic_of(origin.__name__, [])
        else:
            ref = object_of(cls.__name__, [])
        self._structured[cls] = ref

        ref.arguments = [self.type_reference(a) for a in generic_meta.get("args", ())]
        ref.properties = [self._model_property(name, field) for name, field in cls.model_fields.items()]
        return ref

    def _model_property(self, name: str, field: FieldInfo) -> PropertyDeclaration:
        min_length = max_length = pattern = None
        for item in field.metadata:
            min_length = getattr(item, "min_length", min_length)
            max_length = getattr(item, "max_length", max_length)
            pattern = getattr(item, "pattern", pattern)
        if pattern is not None and not isinstance(pattern, str):
            pattern = pattern.pattern

        return PropertyDeclaration(
            name=field.serialization_alias or field.alias or name,
            declared_type=self.type_reference(field.annotation),
            is_required=field.is_required(),
            description=field.description,
            example=field.examples[0] if field.examples else None,
            min_length=min_length,
            max_length=max_length,
            pattern=pattern,
        )

    def _dataclass(self, cls: type) -> TypeReference:
        if cls in self._structured:
            return self._structured[cls]
        ref = object_of(cls.__name__, [])
        self._structured[cls] = ref

        hints = get_type_hints(cls, include_extras=True)
        properties = []
        for field in dataclasses.fields(cls):
            required = field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING
            properties.append(
                PropertyDeclaration(
                    name=field.name,
                    declared_type=self.type_reference(hints.get(field.name, field.type)),
                    is_required=required,
                    description=field.metadata.get("description"),
                    example=field.metadata.get("example"),
                    min_length=field.metadata.get("min_length"),
                    max_length=field.metadata.get("max_length"),
                    pattern=field.metadata.get("pattern"),
                )
            )
        ref.properties = properties
        return ref

    def _plain_class(self, cls: type) -> TypeReference:
        try:
            hints = get_type_hints(cls, include_extras=True)
        except (NameError, TypeError):
            hints = {}
        if not hints:
            # Opaque scalar-like class; documented as a string
            return primitive(cls.__name__.lower())

        if cls in self._structured:
            return self._structured[cls]
        ref = object_of(cls.__name__, [])
        self._structured[cls] = ref
        ref.properties = [
            PropertyDeclaration(name=name, declared_type=self.type_reference(hint))
            for name, hint in hints.items()
            if not name.startswith("_")
        ]
        return ref


def type_reference(annotation: Any) -> TypeReference:
    """Convert one annotation into a TypeReference."""
    return TypeIntrospector().type_reference(annotation)
