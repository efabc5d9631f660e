"""Registry probe calls of the cluster API.

``RegistryProbes`` implements the ``*_info``/login/token members of
``ClusterApi``, and the catalog listings of stored v2, ACR and GitLab
registries, on top of ``swarmconsole.packages.registry_clients``.
``cluster_api_factory`` puts ``ProbingClusterApi`` in front of the configured
cluster API. Remote failures are re-raised as ``RemoteProviderError`` with the
remote ``{"error": ...}`` body.

Payload fields per registry type:

- v2: ``url``, ``username``, ``password``, ``withAuth``
- dockerhub: ``username``, ``password``
- ecr: ``region``, ``accessKeyId``, ``accessKey``
- acr: ``name``, ``spId``, ``spPassword`` (``url`` once derived)
- gitlab: ``url``, ``username``, ``token``
"""

import functools
from typing import Any, Optional

import boto3
import httpx
from botocore.exceptions import BotoCoreError

from swarmconsole.errors import NotFoundError, RemoteProviderError
from swarmconsole.packages.registry_clients import (
    DockerhubClient,
    RegistryConfig,
    RegistryCredentials,
    RegistryRequestError,
    RegistryV2Client,
    acr_login_server,
    get_ecr_authorization_token,
)
from swarmconsole.services.cluster_api import Record, Records
from swarmconsole.settings import settings


def remote_call(fn):
    """Re-raise registry client failures as ``RemoteProviderError``."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except RegistryRequestError as e:
            raise RemoteProviderError(e.body) from e

    return wrapper


class RegistryProbes:
    transport: Optional[httpx.BaseTransport] = None
    """Custom httpx transport for the probe requests, None for the default"""

    @property
    def registry_config(self) -> RegistryConfig:
        return RegistryConfig(
            timeout=settings.REGISTRY_PROBE_TIMEOUT_SECONDS,
            verify_ssl=settings.REGISTRY_VERIFY_SSL,
        )

    def _v2_client(self, url: str, username: str = "", password: str = "") -> RegistryV2Client:
        return RegistryV2Client(
            RegistryCredentials(url=url, username=username, password=password),
            config=self.registry_config,
            transport=self.transport,
        )

    def _dockerhub_client(self) -> DockerhubClient:
        return DockerhubClient(
            settings.DOCKERHUB_URL, config=self.registry_config, transport=self.transport
        )

    def ecr_client(self, payload: Record) -> Any:
        return boto3.client(
            "ecr",
            region_name=payload.get("region"),
            aws_access_key_id=payload.get("accessKeyId"),
            aws_secret_access_key=payload.get("accessKey"),
        )

    # --- v2 ---

    @remote_call
    def registry_v2_info(self, payload: Record) -> Record:
        if payload.get("withAuth", True):
            client = self._v2_client(
                payload.get("url", ""), payload.get("username", ""), payload.get("password", "")
            )
        else:
            client = self._v2_client(payload.get("url", ""))
        return client.info()

    # --- Dockerhub ---

    @remote_call
    def dockerhub_login(self, payload: Record) -> Record:
        return self._dockerhub_client().login(
            payload.get("username", ""), payload.get("password", "")
        )

    @remote_call
    def dockerhub_info(self, payload: Record) -> Record:
        return self._dockerhub_client().info(payload.get("username", ""))

    @remote_call
    def dockerhub_namespace(self, token: Optional[str]) -> list[str]:
        return self._dockerhub_client().namespaces(token)

    # --- AWS ECR ---

    @remote_call
    def registry_ecr_token(self, payload: Record) -> Record:
        try:
            ecr_client = self.ecr_client(payload)
        except BotoCoreError as e:
            raise RemoteProviderError({"error": str(e)}) from e
        return get_ecr_authorization_token(ecr_client)

    # --- Azure ACR ---

    def acr_url(self, payload: Record) -> str:
        return acr_login_server(payload.get("name", ""))

    @remote_call
    def registry_acr_info(self, payload: Record) -> Record:
        url = payload.get("url") or self.acr_url(payload)
        client = self._v2_client(url, payload.get("spId", ""), payload.get("spPassword", ""))
        return client.info()

    # --- GitLab ---

    @remote_call
    def registry_gitlab_info(self, payload: Record) -> Record:
        client = self._v2_client(
            payload.get("url", ""), payload.get("username", ""), payload.get("token", "")
        )
        return client.info()

    # --- Catalog listings of stored registries ---

    def _catalog(self, record: Optional[Record], username_key: str, password_key: str) -> Records:
        if record is None:
            raise NotFoundError("registry doesn't exist")
        client = self._v2_client(
            record.get("url", ""), record.get(username_key, ""), record.get(password_key, "")
        )
        return [{"name": name} for name in client.repositories()]

    @remote_call
    def registry_v2_repositories(self, registry_id: str) -> Records:
        record = self.registry_v2(registry_id)
        if record is not None and not record.get("withAuth", True):
            record = {"url": record.get("url", "")}
        return self._catalog(record, "username", "password")

    @remote_call
    def registry_acr_repositories(self, registry_id: str) -> Records:
        return self._catalog(self.registry_acr(registry_id), "spId", "spPassword")

    @remote_call
    def registry_gitlab_repositories(self, registry_id: str) -> Records:
        return self._catalog(self.registry_gitlab(registry_id), "username", "token")


class ProbingClusterApi(RegistryProbes):
    """Cluster API whose registry probes and catalog listings run in the console.

    Every other member is served by the wrapped implementation, which also
    provides the stored registry records the listings read.
    """

    def __init__(self, delegate: Any):
        self.delegate = delegate

    def __getattr__(self, name: str) -> Any:
        return getattr(self.delegate, name)
