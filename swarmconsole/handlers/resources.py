"""Networks, volumes, secrets and configs.

Volumes are addressed by name, the other resources by id.
"""

from swarmconsole.handlers.params import require_found
from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.handlers.table import handles
from swarmconsole.utils.response_helpers import resp_created, resp_ok

# --- Networks ---


@handles(RouteId.NETWORKS)
def networks(ctx, request):
    return resp_ok(ctx.api.networks())


@handles(RouteId.NETWORK)
def network(ctx, request):
    return resp_ok(require_found(ctx.api.network(request.route_params["id"]), "network"))


@handles(RouteId.NETWORK_SERVICES)
def network_services(ctx, request):
    return resp_ok(ctx.api.services_by_network(request.route_params["id"]))


@handles(RouteId.NETWORK_CREATE)
def network_create(ctx, request):
    return resp_created(ctx.api.create_network(request.payload))


@handles(RouteId.NETWORK_DELETE)
def network_delete(ctx, request):
    ctx.api.delete_network(request.route_params["id"])
    return resp_ok()


# --- Volumes ---


@handles(RouteId.VOLUMES)
def volumes(ctx, request):
    return resp_ok(ctx.api.volumes())


@handles(RouteId.VOLUME)
def volume(ctx, request):
    return resp_ok(require_found(ctx.api.volume(request.route_params["name"]), "volume"))


@handles(RouteId.VOLUME_SERVICES)
def volume_services(ctx, request):
    return resp_ok(ctx.api.services_by_volume(request.route_params["name"]))


@handles(RouteId.VOLUME_CREATE)
def volume_create(ctx, request):
    return resp_created(ctx.api.create_volume(request.payload))


@handles(RouteId.VOLUME_DELETE)
def volume_delete(ctx, request):
    ctx.api.delete_volume(request.route_params["name"])
    return resp_ok()


# --- Secrets ---


@handles(RouteId.SECRETS)
def secrets(ctx, request):
    return resp_ok(ctx.api.secrets())


@handles(RouteId.SECRET)
def secret(ctx, request):
    return resp_ok(require_found(ctx.api.secret(request.route_params["id"]), "secret"))


@handles(RouteId.SECRET_SERVICES)
def secret_services(ctx, request):
    return resp_ok(ctx.api.services_by_secret(request.route_params["id"]))


@handles(RouteId.SECRET_CREATE)
def secret_create(ctx, request):
    return resp_created(ctx.api.create_secret(request.payload))


@handles(RouteId.SECRET_UPDATE)
def secret_update(ctx, request):
    ctx.api.update_secret(request.route_params["id"], request.payload)
    return resp_ok()


@handles(RouteId.SECRET_DELETE)
def secret_delete(ctx, request):
    ctx.api.delete_secret(request.route_params["id"])
    return resp_ok()


# --- Configs ---


@handles(RouteId.CONFIGS)
def configs(ctx, request):
    return resp_ok(ctx.api.configs())


@handles(RouteId.CONFIG)
def config(ctx, request):
    return resp_ok(require_found(ctx.api.config(request.route_params["id"]), "config"))


@handles(RouteId.CONFIG_SERVICES)
def config_services(ctx, request):
    return resp_ok(ctx.api.services_by_config(request.route_params["id"]))


@handles(RouteId.CONFIG_CREATE)
def config_create(ctx, request):
    return resp_created(ctx.api.create_config(request.payload))


@handles(RouteId.CONFIG_DELETE)
def config_delete(ctx, request):
    ctx.api.delete_config(request.route_params["id"])
    return resp_ok()
