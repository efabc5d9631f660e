"""Collaborator contracts consumed by the route handlers.

The console never talks to the Docker engine or its record store directly;
it goes through an object implementing ``ClusterApi`` (and ``StatsSource`` for
timeseries). Implementations are plugged in through the
``CLUSTER_API_FACTORY`` / ``STATS_FACTORY`` settings.

Every call is synchronous. Remote failures are raised as
``swarmconsole.errors.RemoteProviderError`` carrying ``{"error": <message>}``.
Lookups return ``None`` when the resource does not exist; creates return
``None`` when the resource already exists.
"""

from typing import Any, Callable, Optional, Protocol

Record = dict[str, Any]
Records = list[Record]


class ClusterApi(Protocol):
    # --- Users ---

    def admin_exists(self) -> bool: ...

    def users(self) -> Records: ...

    def user(self, user_id: str) -> Optional[Record]: ...

    def user_by_username(self, username: str) -> Optional[Record]: ...

    def user_by_credentials(self, credentials: Record) -> Optional[Record]: ...

    def create_user(self, payload: Record) -> Optional[Record]: ...

    def update_user(self, user_id: str, payload: Record) -> Any: ...

    def delete_user(self, user_id: str) -> Any: ...

    def delete_user_registries(self, username: str) -> Any: ...

    def change_password(self, user: Record, new_password: str) -> Any: ...

    def generate_api_token(self, user: Record) -> Record: ...

    def remove_api_token(self, user: Record) -> Any: ...

    # --- Services ---

    def services(self) -> Records: ...

    def service(self, service_id: str) -> Optional[Record]: ...

    def service_networks(self, service_id: str) -> Records: ...

    def service_tasks(self, service_id: str) -> Records: ...

    def service_logs(self, service_id: str, since: Optional[str]) -> Records: ...

    def service_compose(self, service_id: str) -> Optional[str]: ...

    def create_service(self, owner: str, payload: Record) -> Record: ...

    def update_service(self, owner: str, payload: Record) -> Any: ...

    def redeploy_service(self, owner: str, service_id: str) -> Any: ...

    def rollback_service(self, owner: str, service_id: str) -> Any: ...

    def delete_service(self, service_id: str) -> Any: ...

    def labels_service(self) -> list[str]: ...

    # --- Networks ---

    def networks(self) -> Records: ...

    def network(self, network_id: str) -> Optional[Record]: ...

    def services_by_network(self, network_id: str) -> Records: ...

    def create_network(self, payload: Record) -> Record: ...

    def delete_network(self, network_id: str) -> Any: ...

    # --- Volumes ---

    def volumes(self) -> Records: ...

    def volume(self, name: str) -> Optional[Record]: ...

    def services_by_volume(self, name: str) -> Records: ...

    def create_volume(self, payload: Record) -> Record: ...

    def delete_volume(self, name: str) -> Any: ...

    # --- Secrets ---

    def secrets(self) -> Records: ...

    def secret(self, secret_id: str) -> Optional[Record]: ...

    def services_by_secret(self, secret_id: str) -> Records: ...

    def create_secret(self, payload: Record) -> Record: ...

    def update_secret(self, secret_id: str, payload: Record) -> Any: ...

    def delete_secret(self, secret_id: str) -> Any: ...

    # --- Configs ---

    def configs(self) -> Records: ...

    def config(self, config_id: str) -> Optional[Record]: ...

    def services_by_config(self, config_id: str) -> Records: ...

    def create_config(self, payload: Record) -> Record: ...

    def delete_config(self, config_id: str) -> Any: ...

    # --- Nodes, tasks, placement and plugins ---

    def nodes(self) -> Records: ...

    def node(self, node_id: str) -> Optional[Record]: ...

    def update_node(self, node_id: str, payload: Record) -> Any: ...

    def node_tasks(self, node_id: str) -> Records: ...

    def tasks(self) -> Records: ...

    def task(self, task_id: str) -> Optional[Record]: ...

    def placement(self) -> list[str]: ...

    def plugins_by_type(self, plugin_type: str) -> list[str]: ...

    # --- Registries: generic v2 ---

    def registries_v2(self, owner: str) -> Records: ...

    def registry_v2(self, registry_id: str) -> Optional[Record]: ...

    def registry_v2_info(self, payload: Record) -> Record: ...

    def registry_v2_repositories(self, registry_id: str) -> Records: ...

    def create_v2_registry(self, payload: Record) -> Optional[Record]: ...

    def update_v2_registry(self, registry_id: str, payload: Record) -> Any: ...

    def delete_v2_registry(self, registry_id: str) -> Any: ...

    # --- Registries: Dockerhub ---

    def dockerhubs(self, owner: str) -> Records: ...

    def dockerhub(self, registry_id: str) -> Optional[Record]: ...

    def dockerhub_login(self, payload: Record) -> Record: ...

    def dockerhub_info(self, payload: Record) -> Record: ...

    def dockerhub_namespace(self, token: Optional[str]) -> list[str]: ...

    def dockerhub_repositories(self, registry_id: str) -> Records: ...

    def create_dockerhub(
        self, payload: Record, info: Record, namespace: list[str]
    ) -> Optional[Record]: ...

    def update_dockerhub(self, registry_id: str, payload: Record) -> Any: ...

    def delete_dockerhub(self, registry_id: str) -> Any: ...

    # --- Registries: AWS ECR ---

    def registries_ecr(self, owner: str) -> Records: ...

    def registry_ecr(self, registry_id: str) -> Optional[Record]: ...

    def registry_ecr_token(self, payload: Record) -> Record: ...

    def registry_ecr_repositories(self, registry_id: str) -> Records: ...

    def create_ecr_registry(self, payload: Record) -> Optional[Record]: ...

    def update_ecr_registry(self, registry_id: str, payload: Record) -> Any: ...

    def delete_ecr_registry(self, registry_id: str) -> Any: ...

    # --- Registries: Azure ACR ---

    def registries_acr(self, owner: str) -> Records: ...

    def registry_acr(self, registry_id: str) -> Optional[Record]: ...

    def acr_url(self, payload: Record) -> str: ...

    def registry_acr_info(self, payload: Record) -> Record: ...

    def registry_acr_repositories(self, registry_id: str) -> Records: ...

    def create_acr_registry(self, payload: Record) -> Optional[Record]: ...

    def update_acr_registry(self, registry_id: str, payload: Record) -> Any: ...

    def delete_acr_registry(self, registry_id: str) -> Any: ...

    # --- Registries: GitLab ---

    def registries_gitlab(self, owner: str) -> Records: ...

    def registry_gitlab(self, registry_id: str) -> Optional[Record]: ...

    def registry_gitlab_info(self, payload: Record) -> Record: ...

    def registry_gitlab_repositories(self, registry_id: str) -> Records: ...

    def create_gitlab_registry(self, payload: Record) -> Optional[Record]: ...

    def update_gitlab_registry(self, registry_id: str, payload: Record) -> Any: ...

    def delete_gitlab_registry(self, registry_id: str) -> Any: ...

    # --- Repositories ---

    def public_repositories(self, query: Optional[str], page: Optional[str]) -> Record: ...

    def repository_tags(self, owner: str, repository: str) -> list[str]: ...

    def repository_ports(self, owner: str, repository: str, tag: str) -> Records: ...

    # --- Stacks ---

    def stacks(self) -> Records: ...

    def stack(self, name: str) -> Optional[Record]: ...

    def stackfile(self, name: str) -> Optional[Record]: ...

    def stack_compose(self, name: str) -> Optional[str]: ...

    def stack_services(self, name: str) -> Records: ...

    def create_stack(self, owner: str, payload: Record) -> Any: ...

    def update_stack(self, owner: str, payload: Record) -> Any: ...

    def redeploy_stack(self, owner: str, name: str) -> Any: ...

    def rollback_stack(self, owner: str, name: str) -> Any: ...

    def delete_stack(self, name: str) -> Record: ...

    def resources_by_services(
        self, services: Records, resource: str, source: Callable[[], Records]
    ) -> Records: ...

    def volumes_by_services(self, services: Records) -> Records: ...


class StatsSource(Protocol):
    def ready(self) -> bool: ...

    def cluster(self) -> Record: ...

    def hosts_timeseries(self) -> Records: ...

    def task_timeseries(self, name: str) -> Record: ...
