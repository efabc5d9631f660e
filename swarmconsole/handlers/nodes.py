"""Nodes, tasks, cluster statistics, placement and plugin discovery."""

from swarmconsole.errors import ValidationError
from swarmconsole.handlers.params import require_found
from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.handlers.table import handles
from swarmconsole.utils.response_helpers import resp_ok

# drivers that cannot back a user-defined network
RESERVED_NETWORK_DRIVERS = {"null", "host"}


@handles(RouteId.NODES)
def nodes(ctx, request):
    return resp_ok(ctx.api.nodes())


@handles(RouteId.NODES_TS)
def nodes_ts(ctx, request):
    return resp_ok(ctx.stats.hosts_timeseries())


@handles(RouteId.NODE)
def node(ctx, request):
    return resp_ok(require_found(ctx.api.node(request.route_params["id"]), "node"))


@handles(RouteId.NODE_UPDATE)
def node_update(ctx, request):
    ctx.api.update_node(request.route_params["id"], request.payload)
    return resp_ok()


@handles(RouteId.NODE_TASKS)
def node_tasks(ctx, request):
    return resp_ok(ctx.api.node_tasks(request.route_params["id"]))


@handles(RouteId.STATS)
def stats(ctx, request):
    if not ctx.stats.ready():
        raise ValidationError("Statistics not ready")
    return resp_ok(ctx.stats.cluster())


@handles(RouteId.PLACEMENT)
def placement(ctx, request):
    return resp_ok(ctx.api.placement())


@handles(RouteId.PLUGIN_NETWORK)
def plugin_network(ctx, request):
    drivers = ctx.api.plugins_by_type("Network")
    return resp_ok([d for d in drivers if d not in RESERVED_NETWORK_DRIVERS])


@handles(RouteId.PLUGIN_LOG)
def plugin_log(ctx, request):
    return resp_ok(ctx.api.plugins_by_type("Log"))


@handles(RouteId.PLUGIN_VOLUME)
def plugin_volume(ctx, request):
    return resp_ok(ctx.api.plugins_by_type("Volume"))


@handles(RouteId.TASKS)
def tasks(ctx, request):
    return resp_ok(ctx.api.tasks())


@handles(RouteId.TASK)
def task(ctx, request):
    return resp_ok(require_found(ctx.api.task(request.route_params["id"]), "task"))


@handles(RouteId.TASK_TS)
def task_ts(ctx, request):
    return resp_ok(ctx.stats.task_timeseries(request.route_params["name"]))
