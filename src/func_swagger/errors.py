"""Exceptions raised while generating a Swagger document."""


class SwaggerGenerationError(Exception):
    """Base class for all generation failures."""


class InvalidArgumentError(SwaggerGenerationError, ValueError):
    """A required input was missing or empty."""

    def __init__(self, argument: str, message: str | None = None):
        self.argument = argument
        super().__init__(message or f"{argument} must not be empty")


class CandidateError(SwaggerGenerationError):
    """An endpoint candidate is malformed."""


class DuplicateOperationError(CandidateError):
    """Two candidates declare the same verb on the same route."""

    def __init__(self, route: str, verb: str):
        self.route = route
        self.verb = verb
        super().__init__(f"duplicate operation '{verb}' on route '{route}'")
