"""Marker types used in function signatures registered with FunctionRegistry.

Markers go inside ``typing.Annotated``, either as a class or an instance::

    def list_widgets(
        req: Annotated[HttpRequest, HttpTrigger(methods=["get"], route="widgets")],
        colour: Annotated[Colour, FromQuery, Required],
        log: logging.Logger,
    ) -> list[Widget]: ...
"""


class HttpRequest:
    """The hosting framework's request object; never documented."""


class ActionResult:
    """An opaque framework result; documented through the ``produces`` override."""


class FromQuery:
    """Bind the parameter from the query string."""


class Required:
    """Mark a query parameter as required."""


class Inject:
    """The parameter is supplied by dependency injection."""


def has_marker(markers: tuple, marker: type) -> bool:
    return any(m is marker or isinstance(m, marker) for m in markers)
