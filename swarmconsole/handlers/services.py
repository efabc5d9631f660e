from swarmconsole.errors import ValidationError
from swarmconsole.handlers.params import require_found
from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.handlers.table import handles
from swarmconsole.utils.response_helpers import resp_accepted, resp_created, resp_ok


@handles(RouteId.SERVICES)
def services(ctx, request):
    return resp_ok(ctx.api.services())


@handles(RouteId.SERVICE)
def service(ctx, request):
    return resp_ok(require_found(ctx.api.service(request.route_params["id"]), "service"))


@handles(RouteId.SERVICE_NETWORKS)
def service_networks(ctx, request):
    return resp_ok(ctx.api.service_networks(request.route_params["id"]))


@handles(RouteId.SERVICE_TASKS)
def service_tasks(ctx, request):
    return resp_ok(ctx.api.service_tasks(request.route_params["id"]))


@handles(RouteId.SERVICE_LOGS)
def service_logs(ctx, request):
    since = request.query.get("since")
    return resp_ok(ctx.api.service_logs(request.route_params["id"], since))


@handles(RouteId.SERVICE_CREATE)
def service_create(ctx, request):
    return resp_created(ctx.api.create_service(request.owner, request.payload))


@handles(RouteId.SERVICE_UPDATE)
def service_update(ctx, request):
    ctx.api.update_service(request.owner, request.payload)
    return resp_ok()


@handles(RouteId.SERVICE_REDEPLOY)
def service_redeploy(ctx, request):
    ctx.api.redeploy_service(request.owner, request.route_params["id"])
    return resp_accepted()


@handles(RouteId.SERVICE_ROLLBACK)
def service_rollback(ctx, request):
    ctx.api.rollback_service(request.owner, request.route_params["id"])
    return resp_accepted()


@handles(RouteId.SERVICE_DELETE)
def service_delete(ctx, request):
    ctx.api.delete_service(request.route_params["id"])
    return resp_ok()


@handles(RouteId.SERVICE_COMPOSE)
def service_compose(ctx, request):
    service_id = request.route_params["id"]
    compose = ctx.api.service_compose(service_id)
    if compose is None:
        raise ValidationError("Failed to create compose file")
    return resp_ok({"name": service_id, "spec": {"compose": compose}})


@handles(RouteId.LABELS_SERVICE)
def labels_service(ctx, request):
    return resp_ok(ctx.api.labels_service())
