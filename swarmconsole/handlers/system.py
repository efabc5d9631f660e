from swarmconsole.errors import (
    AuthenticationError,
    ConflictError,
    PermissionDeniedError,
    ValidationError,
)
from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.handlers.table import handles
from swarmconsole.models import UserRole
from swarmconsole.settings import settings
from swarmconsole.utils.jwt_utils import decode_basic, generate_jwt, generate_slt
from swarmconsole.utils.response_helpers import resp_created, resp_ok, select_keys


@handles(RouteId.VERSION)
def version(ctx, request):
    return resp_ok(
        {
            "name": "swarmconsole",
            "version": settings.APP_VERSION,
            "revision": settings.REVISION,
        }
    )


@handles(RouteId.SLT)
def slt(ctx, request):
    return resp_ok({"slt": generate_slt()})


@handles(RouteId.LOGIN)
def login(ctx, request):
    header = request.header("authorization")
    if header is None:
        raise ValidationError("Missing token")

    try:
        credentials = decode_basic(header)
    except ValueError:
        raise AuthenticationError("Invalid credentials")

    user = ctx.api.user_by_credentials(credentials)
    if user is None:
        raise AuthenticationError("Invalid credentials")
    return resp_ok({"token": generate_jwt(user)})


@handles(RouteId.PASSWORD)
def password(ctx, request):
    username = request.owner
    payload = request.payload

    if not ctx.api.user_by_credentials({**payload, "username": username}):
        raise PermissionDeniedError("Invalid old password provided")
    if not payload.get("new-password"):
        raise ValidationError("Parameter new-password missing")

    user = ctx.api.user_by_username(username)
    ctx.api.change_password(user, payload["new-password"])
    return resp_ok()


@handles(RouteId.API_TOKEN_GENERATE)
def api_token_generate(ctx, request):
    user = ctx.api.user_by_username(request.owner)
    return resp_ok(ctx.api.generate_api_token(user))


@handles(RouteId.API_TOKEN_REMOVE)
def api_token_remove(ctx, request):
    user = ctx.api.user_by_username(request.owner)
    ctx.api.remove_api_token(user)
    return resp_ok()


@handles(RouteId.INITIALIZE)
def initialize(ctx, request):
    if ctx.api.admin_exists():
        raise PermissionDeniedError("Admin already exists")

    user = {**request.payload, "type": "user", "role": UserRole.ADMIN.value}
    response = ctx.api.create_user(user)
    if response is None:
        raise ConflictError("User already exist")
    return resp_created(select_keys(response, ["id"]))


@handles(RouteId.ME)
def me(ctx, request):
    user = ctx.api.user_by_username(request.owner)
    return resp_ok(select_keys(user, ["username", "email", "role", "api-token"]))
