import pytest

from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.tests.fixtures_handlers import make_request


def test_stats_not_ready(dispatcher, stats):
    stats.ready.return_value = False

    response = dispatcher.dispatch(RouteId.STATS)(make_request())

    assert response.status == 400
    assert response.body == {"error": "Statistics not ready"}
    stats.cluster.assert_not_called()


def test_stats(dispatcher, stats):
    stats.ready.return_value = True
    stats.cluster.return_value = {"cpu": {"usage": 12.5}}

    response = dispatcher.dispatch(RouteId.STATS)(make_request())

    assert response.status == 200
    assert response.body == {"cpu": {"usage": 12.5}}


def test_plugin_network_hides_reserved_drivers(dispatcher, api):
    api.plugins_by_type.return_value = ["bridge", "host", "null", "overlay"]

    response = dispatcher.dispatch(RouteId.PLUGIN_NETWORK)(make_request())

    assert response.body == ["bridge", "overlay"]
    api.plugins_by_type.assert_called_once_with("Network")


@pytest.mark.parametrize(
    "route_id, plugin_type",
    [(RouteId.PLUGIN_LOG, "Log"), (RouteId.PLUGIN_VOLUME, "Volume")],
)
def test_plugins(dispatcher, api, route_id, plugin_type):
    api.plugins_by_type.return_value = ["local", "host"]

    response = dispatcher.dispatch(route_id)(make_request())

    assert response.body == ["local", "host"]
    api.plugins_by_type.assert_called_once_with(plugin_type)


@pytest.mark.parametrize(
    "route_id, lookup, kind",
    [(RouteId.NODE, "node", "node"), (RouteId.TASK, "task", "task")],
)
def test_missing_node_or_task_is_404(dispatcher, api, route_id, lookup, kind):
    getattr(api, lookup).return_value = None

    response = dispatcher.dispatch(route_id)(make_request(route_params={"id": "x1"}))

    assert response.status == 404
    assert response.body == {"error": f"{kind} doesn't exist"}


def test_node_update(dispatcher, api):
    response = dispatcher.dispatch(RouteId.NODE_UPDATE)(
        make_request(route_params={"id": "n1"}, params={"availability": "drain"})
    )

    assert response.status == 200
    api.update_node.assert_called_once_with("n1", {"availability": "drain"})


def test_node_tasks(dispatcher, api):
    api.node_tasks.return_value = [{"id": "t1"}]

    response = dispatcher.dispatch(RouteId.NODE_TASKS)(make_request(route_params={"id": "n1"}))

    assert response.body == [{"id": "t1"}]


def test_timeseries(dispatcher, stats):
    stats.hosts_timeseries.return_value = [{"name": "node-1", "cpu": [1, 2]}]
    stats.task_timeseries.return_value = {"task": "web.1", "memory": [3]}

    hosts = dispatcher.dispatch(RouteId.NODES_TS)(make_request())
    task = dispatcher.dispatch(RouteId.TASK_TS)(make_request(route_params={"name": "web.1"}))

    assert hosts.body == [{"name": "node-1", "cpu": [1, 2]}]
    assert task.body == {"task": "web.1", "memory": [3]}
    stats.task_timeseries.assert_called_once_with("web.1")


@pytest.mark.parametrize(
    "route_id, api_call",
    [
        (RouteId.NODES, "nodes"),
        (RouteId.TASKS, "tasks"),
        (RouteId.PLACEMENT, "placement"),
    ],
)
def test_lists(dispatcher, api, route_id, api_call):
    getattr(api, api_call).return_value = ["a"]

    response = dispatcher.dispatch(route_id)(make_request())

    assert response.status == 200
    assert response.body == ["a"]
