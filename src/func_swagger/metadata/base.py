"""Unified metadata models for endpoint candidates.

The registration API (or any other discovery mechanism) converts annotated
callables into these models; the generator only ever reads them.
"""

from typing import Any, Literal

from pydantic import BaseModel

from func_swagger.config import DEFAULT_VERBS
from func_swagger.errors import CandidateError

TypeKind = Literal["primitive", "array", "enum", "object", "generic", "void", "result"]


class EnumMember(BaseModel):
    """One member of an enumeration."""

    value: int
    name: str
    description: str | None = None


class TypeReference(BaseModel):
    """A declared type, as far as the document cares about it."""

    kind: TypeKind
    name: str = ""
    primitive: str = ""  # string / int32 / int64 / float / double / boolean / date
    items: "TypeReference | None" = None
    members: list[EnumMember] = []
    properties: list["PropertyDeclaration"] = []
    arguments: list["TypeReference"] = []

    @property
    def display_name(self) -> str:
        if self.kind == "primitive":
            return self.primitive
        if self.kind == "array" and self.items is not None:
            return f"{self.items.display_name}[]"
        return self.name or self.kind

    @property
    def is_structured(self) -> bool:
        return self.kind in ("object", "generic")


class PropertyDeclaration(BaseModel):
    """A public property of a structured type."""

    name: str
    declared_type: TypeReference
    is_required: bool = False
    description: str | None = None
    example: Any = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None


TypeReference.model_rebuild()


class HttpTrigger(BaseModel):
    """Routing-trigger marker: which route and verbs reach the endpoint."""

    route: str | None = None
    methods: list[str] | None = None


class ParameterDeclaration(BaseModel):
    """A single declared parameter of an endpoint."""

    name: str
    declared_type: TypeReference
    is_required: bool = False
    source_hint: Literal["query"] | None = None
    is_framework_injected: bool = False
    trigger: HttpTrigger | None = None


class ResponseDeclaration(BaseModel):
    """A documented response status for an endpoint."""

    status_code: int
    description: str = ""
    show_schema: bool = True


class EndpointCandidate(BaseModel):
    """One discoverable HTTP-triggered function and all of its metadata."""

    name: str
    parameters: list[ParameterDeclaration] = []
    return_type: TypeReference | None = None  # None means void
    response_type_override: TypeReference | None = None
    responses: list[ResponseDeclaration] = []
    display_name: str | None = None
    display_description: str | None = None
    disabled: bool = False

    def find_trigger(self) -> HttpTrigger | None:
        """Return the trigger marker, or None when the candidate has none."""
        triggers = [p.trigger for p in self.parameters if p.trigger is not None]
        if len(triggers) > 1:
            raise CandidateError(f"function '{self.name}' declares {len(triggers)} HTTP triggers")
        return triggers[0] if triggers else None

    @property
    def route(self) -> str | None:
        trigger = self.find_trigger()
        if trigger is None or not (trigger.route or "").strip():
            return None
        return trigger.route

    @property
    def verbs(self) -> list[str]:
        trigger = self.find_trigger()
        methods = trigger.methods if trigger is not None and trigger.methods else DEFAULT_VERBS
        verbs: list[str] = []
        for method in methods:
            verb = method.lower()
            if verb not in verbs:
                verbs.append(verb)
        return verbs


class RequestContext(BaseModel):
    """The incoming request the document is generated for."""

    host: str | None = None
    content_type: str | None = None


def primitive(tag: str) -> TypeReference:
    return TypeReference(kind="primitive", primitive=tag)


def array_of(items: TypeReference) -> TypeReference:
    return TypeReference(kind="array", items=items)


def enum_of(name: str, members: list[EnumMember]) -> TypeReference:
    return TypeReference(kind="enum", name=name, members=members)


def object_of(name: str, properties: list[PropertyDeclaration]) -> TypeReference:
    return TypeReference(kind="object", name=name, properties=properties)


def generic_of(
    name: str,
    arguments: list[TypeReference],
    properties: list[PropertyDeclaration] | None = None,
) -> TypeReference:
    return TypeReference(kind="generic", name=name, arguments=arguments, properties=properties or [])


def void() -> TypeReference:
    return TypeReference(kind="void")


def action_result() -> TypeReference:
    return TypeReference(kind="result")
