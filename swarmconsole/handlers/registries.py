"""Registry routes, parameterized by the ``registryType`` path segment.

Every route resolves its provider before touching the cluster API, so an
unknown type is rejected without any collaborator call.
"""

from swarmconsole.errors import UnsupportedTypeError
from swarmconsole.handlers.envelope import RequestEnvelope
from swarmconsole.handlers.params import require_found
from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.handlers.table import Collaborators, handles
from swarmconsole.models import RegistryType
from swarmconsole.services.registry_providers import RegistryProvider, get_registry_provider
from swarmconsole.utils.response_helpers import resp_created, resp_ok


def _provider(ctx: Collaborators, request: RequestEnvelope) -> RegistryProvider:
    tag = request.route_params.get("registryType")
    registry_type = RegistryType.parse(tag)
    if registry_type is None:
        raise UnsupportedTypeError(tag or "")
    return get_registry_provider(registry_type, ctx.api)


@handles(RouteId.REGISTRIES)
def registries(ctx, request):
    provider = _provider(ctx, request)
    return resp_ok(provider.list(request.owner))


@handles(RouteId.REGISTRY)
def registry(ctx, request):
    provider = _provider(ctx, request)
    return resp_ok(require_found(provider.get(request.route_params["id"]), "registry"))


@handles(RouteId.REGISTRY_DELETE)
def registry_delete(ctx, request):
    provider = _provider(ctx, request)
    provider.delete(request.route_params["id"])
    return resp_ok()


@handles(RouteId.REGISTRY_REPOSITORIES)
def registry_repositories(ctx, request):
    provider = _provider(ctx, request)
    return resp_ok(provider.repositories(request.route_params["id"]))


@handles(RouteId.REGISTRY_CREATE)
def registry_create(ctx, request):
    provider = _provider(ctx, request)
    payload = {
        **request.payload,
        "owner": request.owner,
        "type": provider.registry_type.value,
    }
    return resp_created(provider.create(payload))


@handles(RouteId.REGISTRY_UPDATE)
def registry_update(ctx, request):
    provider = _provider(ctx, request)
    provider.update(request.route_params["id"], request.payload)
    return resp_ok()
