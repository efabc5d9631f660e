import base64

from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.models import UserRole
from swarmconsole.tests.fixtures_handlers import make_request
from swarmconsole.utils.jwt_utils import decode_jwt


def _basic(username, password):
    return "Basic " + base64.b64encode(f"{username}:{password}".encode()).decode()


def test_version(dispatcher):
    response = dispatcher.dispatch(RouteId.VERSION)(make_request(identity=None))

    assert response.status == 200
    assert response.body["name"] == "swarmconsole"
    assert set(response.body) == {"name", "version", "revision"}


def test_slt(dispatcher):
    response = dispatcher.dispatch(RouteId.SLT)(make_request())

    assert response.status == 200
    assert decode_jwt(response.body["slt"])["purpose"] == "slt"


class TestLogin:
    def test_missing_header(self, dispatcher, api):
        response = dispatcher.dispatch(RouteId.LOGIN)(make_request(identity=None))

        assert response.status == 400
        assert response.body == {"error": "Missing token"}
        api.user_by_credentials.assert_not_called()

    def test_malformed_header(self, dispatcher, api):
        response = dispatcher.dispatch(RouteId.LOGIN)(
            make_request(headers={"authorization": "Basic ???"}, identity=None)
        )

        assert response.status == 401
        assert response.body == {"error": "Invalid credentials"}

    def test_unknown_credentials(self, dispatcher, api):
        api.user_by_credentials.return_value = None

        response = dispatcher.dispatch(RouteId.LOGIN)(
            make_request(headers={"Authorization": _basic("bob", "wrong")}, identity=None)
        )

        assert response.status == 401
        api.user_by_credentials.assert_called_once_with(
            {"username": "bob", "password": "wrong"}
        )

    def test_issues_token(self, dispatcher, api):
        api.user_by_credentials.return_value = {"username": "bob", "role": "admin"}

        response = dispatcher.dispatch(RouteId.LOGIN)(
            make_request(headers={"authorization": _basic("bob", "pw")}, identity=None)
        )

        assert response.status == 200
        claims = decode_jwt(response.body["token"])
        assert claims["usr"] == {"username": "bob", "role": "admin"}


class TestPassword:
    def test_wrong_old_password(self, dispatcher, api):
        api.user_by_credentials.return_value = None

        response = dispatcher.dispatch(RouteId.PASSWORD)(
            make_request(params={"password": "old", "new-password": "new"})
        )

        assert response.status == 403
        assert response.body == {"error": "Invalid old password provided"}
        api.change_password.assert_not_called()

    def test_missing_new_password(self, dispatcher, api):
        api.user_by_credentials.return_value = {"username": "alice"}

        response = dispatcher.dispatch(RouteId.PASSWORD)(
            make_request(params={"password": "old"})
        )

        assert response.status == 400
        assert response.body == {"error": "Parameter new-password missing"}

    def test_changes_password(self, dispatcher, api):
        user = {"id": "u1", "username": "alice"}
        api.user_by_credentials.return_value = user
        api.user_by_username.return_value = user

        response = dispatcher.dispatch(RouteId.PASSWORD)(
            make_request(params={"password": "old", "new-password": "new"})
        )

        assert response.status == 200
        api.user_by_credentials.assert_called_once_with(
            {"password": "old", "new-password": "new", "username": "alice"}
        )
        api.change_password.assert_called_once_with(user, "new")


class TestInitialize:
    def test_admin_exists(self, dispatcher, api):
        api.admin_exists.return_value = True

        response = dispatcher.dispatch(RouteId.INITIALIZE)(
            make_request(params={"username": "root"}, identity=None)
        )

        assert response.status == 403
        assert response.body == {"error": "Admin already exists"}
        api.create_user.assert_not_called()

    def test_creates_admin(self, dispatcher, api):
        api.admin_exists.return_value = False
        api.create_user.return_value = {"id": "u1", "username": "root"}

        response = dispatcher.dispatch(RouteId.INITIALIZE)(
            make_request(params={"username": "root", "password": "pw"}, identity=None)
        )

        assert response.status == 201
        assert response.body == {"id": "u1"}
        api.create_user.assert_called_once_with(
            {
                "username": "root",
                "password": "pw",
                "type": "user",
                "role": UserRole.ADMIN.value,
            }
        )

    def test_duplicate(self, dispatcher, api):
        api.admin_exists.return_value = False
        api.create_user.return_value = None

        response = dispatcher.dispatch(RouteId.INITIALIZE)(
            make_request(params={"username": "root"}, identity=None)
        )

        assert response.status == 400
        assert response.body == {"error": "User already exist"}


def test_me_exposes_public_fields_only(dispatcher, api):
    api.user_by_username.return_value = {
        "id": "u1",
        "username": "alice",
        "email": "alice@example.com",
        "role": "user",
        "api-token": {"jti": "t1"},
        "password": "hash",
    }

    response = dispatcher.dispatch(RouteId.ME)(make_request())

    assert response.body == {
        "username": "alice",
        "email": "alice@example.com",
        "role": "user",
        "api-token": {"jti": "t1"},
    }


def test_api_token_generate_and_remove(dispatcher, api):
    user = {"id": "u1", "username": "alice"}
    api.user_by_username.return_value = user
    api.generate_api_token.return_value = {"token": "Bearer xyz", "mask": "...xyz"}

    generated = dispatcher.dispatch(RouteId.API_TOKEN_GENERATE)(make_request())
    removed = dispatcher.dispatch(RouteId.API_TOKEN_REMOVE)(make_request())

    assert generated.body == {"token": "Bearer xyz", "mask": "...xyz"}
    assert removed.status == 200
    api.remove_api_token.assert_called_once_with(user)
