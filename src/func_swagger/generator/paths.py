"""Discover documentable candidates and group their operations by route."""

import logging
from typing import Iterable, NamedTuple

from func_swagger.config import ROUTE_PREFIX
from func_swagger.errors import DuplicateOperationError
from func_swagger.generator.operations import build_operation
from func_swagger.generator.schema import DefinitionRegistry
from func_swagger.metadata.base import EndpointCandidate

logger = logging.getLogger(__name__)


class RoutedOperation(NamedTuple):
    route: str
    verb: str
    operation: dict


def route_key(candidate: EndpointCandidate) -> str:
    return ROUTE_PREFIX + (candidate.route or candidate.name)


def is_documented(candidate: EndpointCandidate, api_definition_name: str) -> bool:
    """Whether ``candidate`` belongs in the document at all."""
    if candidate.disabled:
        logger.debug("Skipping disabled function %s", candidate.name)
        return False
    if candidate.name == api_definition_name:
        logger.debug("Skipping API definition function %s", candidate.name)
        return False
    if candidate.find_trigger() is None:
        logger.debug("Skipping function %s without an HTTP trigger", candidate.name)
        return False
    return True


def collect_operations(
    candidates: Iterable[EndpointCandidate],
    api_title: str,
    api_definition_name: str,
    definitions: DefinitionRegistry,
) -> list[RoutedOperation]:
    """First pass: one entry per (route, verb) of every documented candidate."""
    routed = []
    for candidate in candidates:
        if not is_documented(candidate, api_definition_name):
            continue
        route = route_key(candidate)
        for verb in candidate.verbs:
            routed.append(RoutedOperation(route, verb, build_operation(candidate, route, api_title, definitions)))
    return routed


def group_by_route(routed: list[RoutedOperation]) -> dict[str, dict[str, dict]]:
    """Second pass: merge operations sharing a route, rejecting repeated verbs."""
    paths: dict[str, dict[str, dict]] = {}
    for entry in routed:
        operations = paths.setdefault(entry.route, {})
        if entry.verb in operations:
            raise DuplicateOperationError(entry.route, entry.verb)
        operations[entry.verb] = entry.operation
    return paths


def build_paths(
    candidates: Iterable[EndpointCandidate],
    api_title: str,
    api_definition_name: str,
    definitions: DefinitionRegistry,
) -> dict[str, dict[str, dict]]:
    return group_by_route(collect_operations(candidates, api_title, api_definition_name, definitions))
