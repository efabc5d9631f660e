from unittest.mock import patch

import pytest

from swarmconsole.errors import NotFoundError, RemoteProviderError
from swarmconsole.handlers.dispatcher import Dispatcher, unhandled_routes
from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.handlers.table import HANDLERS, handles
from swarmconsole.tests.fixtures_handlers import make_request


def test_every_route_has_a_handler():
    assert unhandled_routes() == []
    assert set(HANDLERS) == set(RouteId)


def test_dispatcher_refuses_partial_table(api, stats):
    partial = {k: v for k, v in HANDLERS.items() if k != RouteId.STACKS}
    with patch.dict(HANDLERS, partial, clear=True):
        with pytest.raises(RuntimeError, match="stacks"):
            Dispatcher(api=api, stats=stats)


def test_duplicate_registration_is_rejected():
    with pytest.raises(RuntimeError, match="already handled"):

        @handles(RouteId.VERSION)
        def another_version(ctx, request):
            pass


def test_dispatch_unknown_route_id_raises(dispatcher):
    with pytest.raises(ValueError):
        dispatcher.dispatch("index")


def test_dispatch_accepts_plain_string(dispatcher, api):
    api.services.return_value = [{"id": "s1"}]

    response = dispatcher.dispatch("services")(make_request())

    assert response.status == 200
    assert response.body == [{"id": "s1"}]


def test_console_errors_become_responses(dispatcher, api):
    api.networks.side_effect = NotFoundError("network doesn't exist")

    response = dispatcher.dispatch(RouteId.NETWORKS)(make_request())

    assert response.status == 404
    assert response.body == {"error": "network doesn't exist"}


def test_remote_errors_become_400_with_embedded_message(dispatcher, api):
    api.nodes.side_effect = RemoteProviderError(
        {"error": "Docker engine unreachable"}
    )

    response = dispatcher.dispatch(RouteId.NODES)(make_request())

    assert response.status == 400
    assert response.body == {"error": "Docker engine unreachable"}


def test_unexpected_errors_propagate(dispatcher, api):
    api.tasks.side_effect = KeyError("boom")

    with pytest.raises(KeyError):
        dispatcher.dispatch(RouteId.TASKS)(make_request())


def test_bound_handler_keeps_name(dispatcher):
    handler = dispatcher.dispatch(RouteId.STACK_DELETE)
    assert handler.__name__ == "stack_delete"


def test_handlers_share_collaborators(api, stats):
    dispatcher = Dispatcher(api=api, stats=stats)
    assert dispatcher.collaborators.api is api
    assert dispatcher.collaborators.stats is stats
