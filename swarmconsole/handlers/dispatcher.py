"""Route dispatcher.

Maps a ``RouteId`` onto a request handler bound to the collaborators. The
returned handler converts every ``ConsoleError`` into a response envelope;
any other exception propagates to the caller.
"""

from typing import Callable, Union

from swarmconsole.errors import ConsoleError
from swarmconsole.handlers import (  # noqa: F401  (registers handlers)
    nodes,
    registries,
    repositories,
    resources,
    services,
    stacks,
    system,
    users,
)
from swarmconsole.handlers.envelope import RequestEnvelope, ResponseEnvelope
from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.handlers.table import HANDLERS, Collaborators, RouteHandler
from swarmconsole.services.cluster_api import ClusterApi, StatsSource
from swarmconsole.utils.response_helpers import resp_from_error

Handler = Callable[[RequestEnvelope], ResponseEnvelope]


def unhandled_routes() -> list[RouteId]:
    return [route_id for route_id in RouteId if route_id not in HANDLERS]


class Dispatcher:
    def __init__(self, api: ClusterApi, stats: StatsSource):
        missing = unhandled_routes()
        if missing:
            raise RuntimeError(
                f"Routes without handler: {', '.join(r.value for r in missing)}"
            )
        self.collaborators = Collaborators(api=api, stats=stats)

    def dispatch(self, route_id: Union[RouteId, str]) -> Handler:
        """Return the handler for ``route_id``.

        Raises:
            ValueError: ``route_id`` is not a known route identifier.
        """
        route_handler = HANDLERS[RouteId(route_id)]
        return self._bind(route_handler)

    def _bind(self, route_handler: RouteHandler) -> Handler:
        collaborators = self.collaborators

        def handler(request: RequestEnvelope) -> ResponseEnvelope:
            try:
                return route_handler(collaborators, request)
            except ConsoleError as e:
                return resp_from_error(e)

        handler.__name__ = route_handler.__name__
        return handler
