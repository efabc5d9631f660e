from swarmconsole.errors import AuthorizationError, ConflictError
from swarmconsole.handlers.params import require_found
from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.handlers.table import handles
from swarmconsole.utils.response_helpers import resp_created, resp_ok, select_keys


@handles(RouteId.USERS)
def users(ctx, request):
    return resp_ok(ctx.api.users())


@handles(RouteId.USER)
def user(ctx, request):
    return resp_ok(require_found(ctx.api.user(request.route_params["id"]), "user"))


@handles(RouteId.USER_CREATE)
def user_create(ctx, request):
    payload = {**request.payload, "type": "user"}
    response = ctx.api.create_user(payload)
    if response is None:
        raise ConflictError("User already exist")
    return resp_created(select_keys(response, ["id"]))


@handles(RouteId.USER_UPDATE)
def user_update(ctx, request):
    ctx.api.update_user(request.route_params["id"], request.payload)
    return resp_ok()


@handles(RouteId.USER_DELETE)
def user_delete(ctx, request):
    """Delete a user together with the registries it owns.

    The acting user may not delete its own account.
    """
    user_id = request.route_params["id"]
    acting_user = ctx.api.user_by_username(request.owner)
    if acting_user is not None and acting_user.get("id") == user_id:
        raise AuthorizationError("Operation not allowed")

    target = require_found(ctx.api.user(user_id), "user")
    ctx.api.delete_user(user_id)
    ctx.api.delete_user_registries(target["username"])
    return resp_ok()
