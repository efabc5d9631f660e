import base64

from httpx import AsyncClient

from swarmconsole.errors import RemoteProviderError
from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.routes.table import ROUTES
from swarmconsole.tests.fixtures_clients import IdentityClient


def test_route_table_covers_every_route_once():
    route_ids = [route.route_id for route in ROUTES]

    assert sorted(route_ids) == sorted(RouteId)
    assert len({(route.method, route.path) for route in ROUTES}) == len(ROUTES)


def test_only_user_management_is_admin_only():
    admin_routes = {route.route_id for route in ROUTES if route.admin}

    assert admin_routes == {
        RouteId.USERS,
        RouteId.USER,
        RouteId.USER_CREATE,
        RouteId.USER_UPDATE,
        RouteId.USER_DELETE,
    }


async def test_version_is_public(client: AsyncClient):
    response = await client.get("/version")

    assert response.status_code == 200
    assert response.json()["name"] == "swarmconsole"


async def test_missing_token_is_401(client: AsyncClient, api):
    response = await client.get("/api/services")

    assert response.status_code == 401
    assert response.json() == {"error": "Missing token"}
    api.services.assert_not_called()


async def test_invalid_token_is_401(client: AsyncClient):
    response = await client.get("/api/services", headers={"Authorization": "Bearer garbage"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid token"}


async def test_non_admin_is_403_on_user_management(user_client: IdentityClient, api):
    response = await user_client.get("/api/users")

    assert response.status_code == 403
    assert response.json() == {"error": "Unauthorized access"}
    api.users.assert_not_called()


async def test_admin_lists_users(admin_client: IdentityClient, api):
    api.users.return_value = [{"id": "u1", "username": "root"}]

    response = await admin_client.get("/api/users")

    assert response.status_code == 200
    assert response.json() == [{"id": "u1", "username": "root"}]


async def test_login_reads_authorization_header(client: AsyncClient, api):
    api.user_by_credentials.return_value = {"username": "bob", "role": "user"}
    basic = base64.b64encode(b"bob:pw").decode()

    response = await client.post("/login", headers={"Authorization": f"Basic {basic}"})

    assert response.status_code == 200
    assert "token" in response.json()
    api.user_by_credentials.assert_called_once_with({"username": "bob", "password": "pw"})


async def test_login_then_use_token(client: AsyncClient, api):
    api.user_by_credentials.return_value = {"username": "bob", "role": "user"}
    api.nodes.return_value = [{"id": "n1"}]
    basic = base64.b64encode(b"bob:pw").decode()

    token = (await client.post("/login", headers={"Authorization": f"Basic {basic}"})).json()[
        "token"
    ]
    response = await client.get("/api/nodes", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json() == [{"id": "n1"}]


async def test_path_query_and_body_reach_the_handler(user_client: IdentityClient, api):
    api.create_dockerhub.return_value = {"id": "d1"}
    api.dockerhub_login.return_value = {"token": "hub-token"}
    api.dockerhub_info.return_value = {"username": "bob"}
    api.dockerhub_namespace.return_value = ["bob"]

    response = await user_client.post(
        "/api/registry/dockerhub", json={"username": "bob", "password": "pw"}
    )

    assert response.status_code == 201
    assert response.json() == {"id": "d1"}
    payload = api.create_dockerhub.call_args.args[0]
    assert payload == {"username": "bob", "password": "pw", "owner": "alice", "type": "dockerhub"}


async def test_unknown_registry_type(user_client: IdentityClient, api):
    response = await user_client.get("/api/registry/quay")

    assert response.status_code == 400
    assert response.json() == {"error": "Unknown registry type [quay]"}
    assert api.mock_calls == []


async def test_query_params(user_client: IdentityClient, api):
    api.service_logs.return_value = []

    response = await user_client.get("/api/services/svc1/logs", params={"since": "5m"})

    assert response.status_code == 200
    api.service_logs.assert_called_once_with("svc1", "5m")


async def test_nodes_ts_is_not_a_node_id(user_client: IdentityClient, api, stats):
    stats.hosts_timeseries.return_value = []

    response = await user_client.get("/api/nodes/ts")

    assert response.status_code == 200
    api.node.assert_not_called()


async def test_empty_body_responses(user_client: IdentityClient, api):
    api.stack.return_value = None

    response = await user_client.post("/api/stacks", json={"name": "web"})

    assert response.status_code == 201
    assert response.content == b""


async def test_accepted(user_client: IdentityClient, api):
    response = await user_client.post("/api/services/svc1/redeploy")

    assert response.status_code == 202
    api.redeploy_service.assert_called_once_with("alice", "svc1")


async def test_invalid_json_body(user_client: IdentityClient, api):
    response = await user_client.post(
        "/api/stacks", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}
    api.create_stack.assert_not_called()


async def test_non_object_body(user_client: IdentityClient, api):
    response = await user_client.post("/api/stacks", json=["web"])

    assert response.status_code == 400
    assert response.json() == {"error": "Request body must be a JSON object"}


async def test_remote_error_is_400(user_client: IdentityClient, api):
    api.services.side_effect = RemoteProviderError({"error": "Docker daemon unavailable"})

    response = await user_client.get("/api/services")

    assert response.status_code == 400
    assert response.json() == {"error": "Docker daemon unavailable"}


async def test_unexpected_error_is_500(lenient_client: IdentityClient, api):
    api.services.side_effect = RuntimeError("boom")

    response = await lenient_client.get("/api/services")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


async def test_unknown_path_is_404(client: AsyncClient):
    response = await client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
