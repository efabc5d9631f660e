"""Registry provider strategies.

Each supported ``RegistryType`` maps to one ``RegistryProvider`` subclass.
Create and update run the provider's probe sequence against the remote
registry before persisting through the cluster API; list, get, delete and
repositories are plain relays to the matching per-type API call.

Remote probe failures surface as ``RemoteProviderError`` and are not caught
here; the handler boundary turns them into a 400 carrying the remote message.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from swarmconsole.errors import ConflictError
from swarmconsole.models import RegistryType
from swarmconsole.services.cluster_api import ClusterApi, Record, Records
from swarmconsole.utils.response_helpers import select_keys


class RegistryProvider(ABC):
    registry_type: ClassVar[RegistryType]
    conflict_message: ClassVar[str]

    def __init__(self, api: ClusterApi):
        self.api = api

    @abstractmethod
    def list(self, owner: str) -> Records: ...

    @abstractmethod
    def get(self, registry_id: str) -> Optional[Record]: ...

    @abstractmethod
    def delete(self, registry_id: str) -> Any: ...

    @abstractmethod
    def repositories(self, registry_id: str) -> Records: ...

    @abstractmethod
    def create(self, payload: Record) -> Record:
        """Probe the remote registry, persist it, and return the new `id`."""

    @abstractmethod
    def update(self, registry_id: str, payload: Record) -> None: ...

    def _created(self, response: Optional[Record]) -> Record:
        if response is None:
            raise ConflictError(self.conflict_message)
        return select_keys(response, ["id"])


class V2RegistryProvider(RegistryProvider):
    registry_type = RegistryType.V2
    conflict_message = "Registry account already linked"

    def list(self, owner):
        return self.api.registries_v2(owner)

    def get(self, registry_id):
        return self.api.registry_v2(registry_id)

    def delete(self, registry_id):
        return self.api.delete_v2_registry(registry_id)

    def repositories(self, registry_id):
        return self.api.registry_v2_repositories(registry_id)

    def create(self, payload):
        self.api.registry_v2_info(payload)
        return self._created(self.api.create_v2_registry(payload))

    def update(self, registry_id, payload):
        self.api.registry_v2_info(payload)
        self.api.update_v2_registry(registry_id, payload)


class DockerhubProvider(RegistryProvider):
    registry_type = RegistryType.DOCKERHUB
    conflict_message = "Dockerhub account already linked"

    def list(self, owner):
        return self.api.dockerhubs(owner)

    def get(self, registry_id):
        return self.api.dockerhub(registry_id)

    def delete(self, registry_id):
        return self.api.delete_dockerhub(registry_id)

    def repositories(self, registry_id):
        return self.api.dockerhub_repositories(registry_id)

    def create(self, payload):
        token = self.api.dockerhub_login(payload).get("token")
        info = self.api.dockerhub_info(payload)
        namespace = self.api.dockerhub_namespace(token)
        return self._created(self.api.create_dockerhub(payload, info, namespace))

    def update(self, registry_id, payload):
        # credentials are only re-verified when the password changes
        if payload.get("password"):
            self.api.dockerhub_login(payload)
        self.api.update_dockerhub(registry_id, payload)


class EcrRegistryProvider(RegistryProvider):
    registry_type = RegistryType.ECR
    conflict_message = "AWS ECR account already linked"

    def list(self, owner):
        return self.api.registries_ecr(owner)

    def get(self, registry_id):
        return self.api.registry_ecr(registry_id)

    def delete(self, registry_id):
        return self.api.delete_ecr_registry(registry_id)

    def repositories(self, registry_id):
        return self.api.registry_ecr_repositories(registry_id)

    def create(self, payload):
        payload = self._with_proxy_endpoint(payload)
        return self._created(self.api.create_ecr_registry(payload))

    def update(self, registry_id, payload):
        self.api.update_ecr_registry(registry_id, self._with_proxy_endpoint(payload))

    def _with_proxy_endpoint(self, payload: Record) -> Record:
        token = self.api.registry_ecr_token(payload)
        return {**payload, "url": token.get("proxyEndpoint")}


class AcrRegistryProvider(RegistryProvider):
    registry_type = RegistryType.ACR
    conflict_message = "Azure ACR account with given service principals already linked"

    def list(self, owner):
        return self.api.registries_acr(owner)

    def get(self, registry_id):
        return self.api.registry_acr(registry_id)

    def delete(self, registry_id):
        return self.api.delete_acr_registry(registry_id)

    def repositories(self, registry_id):
        return self.api.registry_acr_repositories(registry_id)

    def create(self, payload):
        payload = {**payload, "url": self.api.acr_url(payload)}
        self.api.registry_acr_info(payload)
        return self._created(self.api.create_acr_registry(payload))

    def update(self, registry_id, payload):
        self.api.registry_acr_info(payload)
        self.api.update_acr_registry(registry_id, payload)


class GitlabRegistryProvider(RegistryProvider):
    registry_type = RegistryType.GITLAB
    conflict_message = "Gitlab registry account already linked"

    def list(self, owner):
        return self.api.registries_gitlab(owner)

    def get(self, registry_id):
        return self.api.registry_gitlab(registry_id)

    def delete(self, registry_id):
        return self.api.delete_gitlab_registry(registry_id)

    def repositories(self, registry_id):
        return self.api.registry_gitlab_repositories(registry_id)

    def create(self, payload):
        self.api.registry_gitlab_info(payload)
        return self._created(self.api.create_gitlab_registry(payload))

    def update(self, registry_id, payload):
        self.api.registry_gitlab_info(payload)
        self.api.update_gitlab_registry(registry_id, payload)


ALL_REGISTRY_PROVIDERS = [
    V2RegistryProvider,
    DockerhubProvider,
    EcrRegistryProvider,
    AcrRegistryProvider,
    GitlabRegistryProvider,
]


REGISTRY_PROVIDERS_MAP: dict[RegistryType, type[RegistryProvider]] = {
    provider.registry_type: provider for provider in ALL_REGISTRY_PROVIDERS
}


def get_registry_provider(registry_type: RegistryType, api: ClusterApi) -> RegistryProvider:
    return REGISTRY_PROVIDERS_MAP[registry_type](api)
