"""Declarative registration of HTTP-triggered functions.

Functions are registered with a decorator and turned into EndpointCandidate
models on demand, reading routing, parameter and response metadata from
their signatures::

    registry = FunctionRegistry()

    @registry.function("GetWidget", responses=[Response(status_code=200, description="Found")])
    def get_widget(
        req: Annotated[HttpRequest, HttpTrigger(methods=["get"], route="widgets/{widget_id}")],
        widget_id: str,
    ) -> Widget: ...
"""

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, get_type_hints

from func_swagger.errors import CandidateError
from func_swagger.metadata.base import (
    EndpointCandidate,
    HttpTrigger,
    ParameterDeclaration,
    ResponseDeclaration,
    TypeReference,
    object_of,
)
from func_swagger.metadata.introspect import TypeIntrospector, unwrap_annotated
from func_swagger.metadata.markers import FromQuery, HttpRequest, Inject, Required, has_marker

logger = logging.getLogger(__name__)

Response = ResponseDeclaration

INJECTED_TYPES = (HttpRequest, logging.Logger, logging.LoggerAdapter)


@dataclass
class RegisteredFunction:
    """A decorated function and the options given to the decorator."""

    func: Callable
    name: str
    disabled: bool = False
    display_name: str | None = None
    display_description: str | None = None
    responses: list[ResponseDeclaration] = field(default_factory=list)
    produces: Any = None


class FunctionRegistry:
    """Collects HTTP-triggered functions for documentation."""

    def __init__(self):
        self._functions: dict[str, RegisteredFunction] = {}

    def __len__(self) -> int:
        return len(self._functions)

    def __iter__(self) -> Iterator[RegisteredFunction]:
        return iter(self._functions.values())

    def __contains__(self, name: str) -> bool:
        return name in self._functions

    def function(
        self,
        name: str | None = None,
        *,
        disabled: bool = False,
        display_name: str | None = None,
        display_description: str | None = None,
        responses: Iterable[ResponseDeclaration] = (),
        produces: Any = None,
    ) -> Callable[[Callable], Callable]:
        """Register the decorated function under ``name`` (default: its own name)."""

        def decorator(func: Callable) -> Callable:
            function_name = name or func.__name__
            if function_name in self._functions:
                raise CandidateError(f"function name '{function_name}' is already registered")
            self._functions[function_name] = RegisteredFunction(
                func=func,
                name=function_name,
                disabled=disabled,
                display_name=display_name,
                display_description=display_description,
                responses=list(responses),
                produces=produces,
            )
            return func

        return decorator

    def candidates(self) -> list[EndpointCandidate]:
        """Describe every registered function, resolving annotations now."""
        introspector = TypeIntrospector()
        return [describe_function(registered, introspector) for registered in self._functions.values()]


def describe_function(registered: RegisteredFunction, introspector: TypeIntrospector | None = None) -> EndpointCandidate:
    introspector = introspector or TypeIntrospector()
    try:
        hints = get_type_hints(registered.func, include_extras=True)
    except (NameError, TypeError) as e:
        raise CandidateError(f"function '{registered.name}' has unresolvable annotations: {e}") from e

    parameters = [
        describe_parameter(param_name, hints.get(param_name, str), introspector)
        for param_name in inspect.signature(registered.func).parameters
    ]

    override = None
    if registered.produces is not None:
        override = introspector.type_reference(registered.produces)

    logger.debug("Described function %s with %d parameters", registered.name, len(parameters))
    return EndpointCandidate(
        name=registered.name,
        parameters=parameters,
        return_type=introspector.type_reference(hints.get("return")),
        response_type_override=override,
        responses=registered.responses,
        display_name=registered.display_name,
        display_description=registered.display_description,
        disabled=registered.disabled,
    )


def describe_parameter(name: str, annotation: Any, introspector: TypeIntrospector) -> ParameterDeclaration:
    base, markers = unwrap_annotated(annotation)
    trigger = next((m for m in markers if isinstance(m, HttpTrigger)), None)

    injected = trigger is not None or has_marker(markers, Inject) or _is_injected_type(base)
    if injected:
        declared: TypeReference = object_of(getattr(base, "__name__", "object"), [])
    else:
        declared = introspector.type_reference(base)

    return ParameterDeclaration(
        name=name,
        declared_type=declared,
        is_required=has_marker(markers, Required),
        source_hint="query" if has_marker(markers, FromQuery) else None,
        is_framework_injected=injected,
        trigger=trigger,
    )


def _is_injected_type(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, INJECTED_TYPES)
