"""Stack routes.

Stack names are unique. Deletion is confirmed by looking the stack up again
after the delete call, not by trusting what the delete call reports.
"""

from swarmconsole.errors import ConflictError, ValidationError
from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.handlers.table import handles
from swarmconsole.utils.response_helpers import resp_created, resp_error, resp_ok


@handles(RouteId.STACKS)
def stacks(ctx, request):
    return resp_ok(ctx.api.stacks())


@handles(RouteId.STACK_CREATE)
def stack_create(ctx, request):
    payload = request.payload
    if ctx.api.stack(payload.get("name")) is not None:
        raise ConflictError("Stack already exist.")
    ctx.api.create_stack(request.owner, payload)
    return resp_created()


@handles(RouteId.STACK_UPDATE)
def stack_update(ctx, request):
    payload = request.payload
    if request.route_params["name"] != payload.get("name"):
        raise ValidationError("Stack invalid.")
    ctx.api.update_stack(request.owner, payload)
    return resp_ok()


@handles(RouteId.STACK_REDEPLOY)
def stack_redeploy(ctx, request):
    ctx.api.redeploy_stack(request.owner, request.route_params["name"])
    return resp_ok()


@handles(RouteId.STACK_ROLLBACK)
def stack_rollback(ctx, request):
    ctx.api.rollback_stack(request.owner, request.route_params["name"])
    return resp_ok()


@handles(RouteId.STACK_DELETE)
def stack_delete(ctx, request):
    name = request.route_params["name"]
    result = (ctx.api.delete_stack(name) or {}).get("result")
    if ctx.api.stack(name) is None:
        return resp_ok()
    return resp_error(400, result)


@handles(RouteId.STACK_FILE)
def stack_file(ctx, request):
    stackfile = ctx.api.stackfile(request.route_params["name"])
    if stackfile is None:
        raise ValidationError("Stackfile not found")
    return resp_ok(stackfile)


@handles(RouteId.STACK_COMPOSE)
def stack_compose(ctx, request):
    name = request.route_params["name"]
    compose = ctx.api.stack_compose(name)
    if compose is None:
        raise ValidationError("Failed to create compose file")
    return resp_ok({"name": name, "spec": {"compose": compose}})


@handles(RouteId.STACK_SERVICES)
def stack_services(ctx, request):
    return resp_ok(ctx.api.stack_services(request.route_params["name"]))


def _stack_resources(ctx, request, resource, source):
    services = ctx.api.stack_services(request.route_params["name"])
    return resp_ok(ctx.api.resources_by_services(services, resource, source))


@handles(RouteId.STACK_NETWORKS)
def stack_networks(ctx, request):
    return _stack_resources(ctx, request, "networks", ctx.api.networks)


@handles(RouteId.STACK_CONFIGS)
def stack_configs(ctx, request):
    return _stack_resources(ctx, request, "configs", ctx.api.configs)


@handles(RouteId.STACK_SECRETS)
def stack_secrets(ctx, request):
    return _stack_resources(ctx, request, "secrets", ctx.api.secrets)


@handles(RouteId.STACK_VOLUMES)
def stack_volumes(ctx, request):
    services = ctx.api.stack_services(request.route_params["name"])
    return resp_ok(ctx.api.volumes_by_services(services))
