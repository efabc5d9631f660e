"""Registry clients used to verify registry accounts before they are linked.

Every failure reported by a remote registry is raised as
``RegistryRequestError`` carrying ``{"error": <message>}``.
"""

import base64
import re
from typing import Any, Optional

import httpx
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from .types import RegistryConfig, RegistryCredentials, RegistryRequestError

logger = structlog.stdlib.get_logger(__name__)

_CHALLENGE_PARAM = re.compile(r'(\w+)="([^"]*)"')


def _error_message(response: httpx.Response) -> str:
    """Extract a human readable message from a registry error response.

    Registries answer either with the OCI distribution error shape
    (``{"errors": [{"code", "message"}]}``) or a flat ``detail``/``message``.
    """
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        errors = data.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            message = errors[0].get("message")
            if message:
                return message
        for key in ("detail", "message", "error"):
            if isinstance(data.get(key), str):
                return data[key]

    return response.reason_phrase or f"Registry responded with {response.status_code}"


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    message = _error_message(response)
    logger.warning(
        "Registry request failed",
        url=str(response.request.url),
        status_code=response.status_code,
        error=message,
    )
    raise RegistryRequestError(response.status_code, {"error": message})


def _basic_auth_header(username: str, password: str) -> str:
    credentials = f"{username}:{password}"
    return f"Basic {base64.b64encode(credentials.encode()).decode()}"


def parse_bearer_challenge(header: Optional[str]) -> Optional[dict[str, str]]:
    """Parse a ``WWW-Authenticate: Bearer realm=...`` challenge.

    Returns:
        The challenge parameters (realm, service, scope) or None when the
        header is not a bearer challenge
    """
    if not header or not header.lower().startswith("bearer "):
        return None
    params = dict(_CHALLENGE_PARAM.findall(header))
    if "realm" not in params:
        return None
    return params


class _HttpClient:
    def __init__(
        self,
        config: Optional[RegistryConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config or RegistryConfig()
        self.transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            transport=self.transport,
            follow_redirects=True,
        )

    def _send(self, client: httpx.Client, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            return client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("Registry unreachable", url=url, error=str(e))
            raise RegistryRequestError(None, {"error": f"Registry unreachable: {e}"})


class RegistryV2Client(_HttpClient):
    """Docker Registry HTTP API v2 client.

    Handles plain basic auth as well as the token flow, where the registry
    answers 401 with a bearer challenge pointing at its token service. The
    GitLab container registry uses the latter.
    """

    def __init__(
        self,
        credentials: RegistryCredentials,
        config: Optional[RegistryConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(config, transport)
        self.credentials = credentials

    def _url(self, path: str) -> str:
        return f"{self.credentials.url.rstrip('/')}{path}"

    def _auth_headers(self) -> dict[str, str]:
        if not self.credentials.has_auth:
            return {}
        return {
            "Authorization": _basic_auth_header(
                self.credentials.username, self.credentials.password
            )
        }

    def _fetch_bearer_token(self, client: httpx.Client, challenge: dict[str, str]) -> str:
        params = {k: v for k, v in challenge.items() if k in ("service", "scope")}
        response = self._send(
            client, "GET", challenge["realm"], params=params, headers=self._auth_headers()
        )
        _raise_for_status(response)
        data = response.json()
        token = data.get("token") or data.get("access_token")
        if not token:
            raise RegistryRequestError(
                response.status_code, {"error": "Registry token service returned no token"}
            )
        return token

    def _get(self, path: str) -> httpx.Response:
        url = self._url(path)
        with self._client() as client:
            response = self._send(client, "GET", url, headers=self._auth_headers())
            if response.status_code == 401:
                challenge = parse_bearer_challenge(response.headers.get("WWW-Authenticate"))
                if challenge is not None:
                    logger.debug("Registry requested bearer token", realm=challenge["realm"])
                    token = self._fetch_bearer_token(client, challenge)
                    response = self._send(
                        client, "GET", url, headers={"Authorization": f"Bearer {token}"}
                    )
        _raise_for_status(response)
        return response

    def info(self) -> dict[str, Any]:
        """Ping the ``/v2/`` base endpoint; succeeds when the account may log in."""
        response = self._get("/v2/")
        logger.info("Registry verified", url=self.credentials.url)
        return response.json() if response.content else {}

    def repositories(self) -> list[str]:
        return self._get("/v2/_catalog").json().get("repositories") or []


class DockerhubClient(_HttpClient):
    """Docker Hub account client (login, account info, namespaces)."""

    def __init__(
        self,
        base_url: str = "https://hub.docker.com",
        config: Optional[RegistryConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(config, transport)
        self.base_url = base_url.rstrip("/")

    def login(self, username: str, password: str) -> dict[str, Any]:
        """Exchange account credentials for a hub token.

        Returns:
            ``{"token": <jwt>}``
        """
        with self._client() as client:
            response = self._send(
                client,
                "POST",
                f"{self.base_url}/v2/users/login/",
                json={"username": username, "password": password},
            )
        _raise_for_status(response)
        logger.info("Dockerhub login succeeded", username=username)
        return {"token": response.json().get("token")}

    def info(self, username: str) -> dict[str, Any]:
        with self._client() as client:
            response = self._send(client, "GET", f"{self.base_url}/v2/users/{username}/")
        _raise_for_status(response)
        return response.json()

    def namespaces(self, token: Optional[str]) -> list[str]:
        headers = {"Authorization": f"JWT {token}"} if token else {}
        with self._client() as client:
            response = self._send(
                client,
                "GET",
                f"{self.base_url}/v2/repositories/namespaces/",
                headers=headers,
            )
        _raise_for_status(response)
        return response.json().get("namespaces") or []


def get_ecr_authorization_token(ecr_client: Any) -> dict[str, Any]:
    """Fetch registry credentials for an AWS ECR account.

    Args:
        ecr_client: Boto3 ECR client instance

    Returns:
        ``{"username", "password", "proxyEndpoint", "expiresAt"}``

    Raises:
        RegistryRequestError: AWS refused the request or returned no token
    """
    try:
        response = ecr_client.get_authorization_token()
    except ClientError as e:
        error = e.response["Error"]
        logger.error(
            "Failed to get ECR authorization token",
            error_code=error.get("Code"),
            error_message=error.get("Message"),
        )
        status_code = e.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        raise RegistryRequestError(status_code, {"error": error.get("Message") or str(e)})
    except BotoCoreError as e:
        logger.error("Unexpected error getting ECR token", error=str(e))
        raise RegistryRequestError(None, {"error": str(e)})

    if not response.get("authorizationData"):
        raise RegistryRequestError(None, {"error": "No authorization data in ECR response"})

    auth_data = response["authorizationData"][0]
    username, _, password = (
        base64.b64decode(auth_data["authorizationToken"]).decode().partition(":")
    )
    logger.debug("Retrieved ECR authorization token", proxy_endpoint=auth_data["proxyEndpoint"])
    return {
        "username": username,
        "password": password,
        "proxyEndpoint": auth_data["proxyEndpoint"],
        "expiresAt": auth_data.get("expiresAt"),
    }


def acr_login_server(registry_name: str) -> str:
    """Login server URL of an Azure container registry."""
    return f"https://{registry_name.lower()}.azurecr.io"
