from dataclasses import dataclass
from typing import Callable

from swarmconsole.handlers.envelope import RequestEnvelope, ResponseEnvelope
from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.services.cluster_api import ClusterApi, StatsSource


@dataclass(frozen=True)
class Collaborators:
    api: ClusterApi
    stats: StatsSource


RouteHandler = Callable[[Collaborators, RequestEnvelope], ResponseEnvelope]

HANDLERS: dict[RouteId, RouteHandler] = {}


def handles(route_id: RouteId) -> Callable[[RouteHandler], RouteHandler]:
    """Register the decorated function as the handler of ``route_id``."""

    def decorator(fn: RouteHandler) -> RouteHandler:
        if route_id in HANDLERS:
            raise RuntimeError(
                f"Route {route_id.value} already handled by {HANDLERS[route_id].__name__}"
            )
        HANDLERS[route_id] = fn
        return fn

    return decorator
