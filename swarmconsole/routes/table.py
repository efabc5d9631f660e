"""HTTP routing table of the console.

Maps literal paths onto route identifiers. Order matters where a literal
segment shares a position with a path parameter (``/api/nodes/ts`` before
``/api/nodes/{id}``).
"""

from dataclasses import dataclass

from swarmconsole.handlers.route_ids import RouteId


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    route_id: RouteId
    public: bool = False
    """Served without a console token"""

    admin: bool = False
    """Restricted to identities with the admin role"""


ROUTES: list[Route] = [
    # System
    Route("GET", "/version", RouteId.VERSION, public=True),
    Route("POST", "/login", RouteId.LOGIN, public=True),
    Route("POST", "/initialize", RouteId.INITIALIZE, public=True),
    Route("GET", "/slt", RouteId.SLT),
    Route("POST", "/api/password", RouteId.PASSWORD),
    Route("GET", "/api/me", RouteId.ME),
    Route("POST", "/api/me/api-token", RouteId.API_TOKEN_GENERATE),
    Route("DELETE", "/api/me/api-token", RouteId.API_TOKEN_REMOVE),
    # Users
    Route("GET", "/api/users", RouteId.USERS, admin=True),
    Route("POST", "/api/users", RouteId.USER_CREATE, admin=True),
    Route("GET", "/api/users/{id}", RouteId.USER, admin=True),
    Route("POST", "/api/users/{id}", RouteId.USER_UPDATE, admin=True),
    Route("DELETE", "/api/users/{id}", RouteId.USER_DELETE, admin=True),
    # Services
    Route("GET", "/api/services", RouteId.SERVICES),
    Route("POST", "/api/services", RouteId.SERVICE_CREATE),
    Route("GET", "/api/services/{id}", RouteId.SERVICE),
    Route("POST", "/api/services/{id}", RouteId.SERVICE_UPDATE),
    Route("DELETE", "/api/services/{id}", RouteId.SERVICE_DELETE),
    Route("POST", "/api/services/{id}/redeploy", RouteId.SERVICE_REDEPLOY),
    Route("POST", "/api/services/{id}/rollback", RouteId.SERVICE_ROLLBACK),
    Route("GET", "/api/services/{id}/networks", RouteId.SERVICE_NETWORKS),
    Route("GET", "/api/services/{id}/tasks", RouteId.SERVICE_TASKS),
    Route("GET", "/api/services/{id}/logs", RouteId.SERVICE_LOGS),
    Route("GET", "/api/services/{id}/compose", RouteId.SERVICE_COMPOSE),
    Route("GET", "/api/labels/service", RouteId.LABELS_SERVICE),
    # Networks
    Route("GET", "/api/networks", RouteId.NETWORKS),
    Route("POST", "/api/networks", RouteId.NETWORK_CREATE),
    Route("GET", "/api/networks/{id}", RouteId.NETWORK),
    Route("DELETE", "/api/networks/{id}", RouteId.NETWORK_DELETE),
    Route("GET", "/api/networks/{id}/services", RouteId.NETWORK_SERVICES),
    # Volumes
    Route("GET", "/api/volumes", RouteId.VOLUMES),
    Route("POST", "/api/volumes", RouteId.VOLUME_CREATE),
    Route("GET", "/api/volumes/{name}", RouteId.VOLUME),
    Route("DELETE", "/api/volumes/{name}", RouteId.VOLUME_DELETE),
    Route("GET", "/api/volumes/{name}/services", RouteId.VOLUME_SERVICES),
    # Secrets
    Route("GET", "/api/secrets", RouteId.SECRETS),
    Route("POST", "/api/secrets", RouteId.SECRET_CREATE),
    Route("GET", "/api/secrets/{id}", RouteId.SECRET),
    Route("POST", "/api/secrets/{id}", RouteId.SECRET_UPDATE),
    Route("DELETE", "/api/secrets/{id}", RouteId.SECRET_DELETE),
    Route("GET", "/api/secrets/{id}/services", RouteId.SECRET_SERVICES),
    # Configs
    Route("GET", "/api/configs", RouteId.CONFIGS),
    Route("POST", "/api/configs", RouteId.CONFIG_CREATE),
    Route("GET", "/api/configs/{id}", RouteId.CONFIG),
    Route("DELETE", "/api/configs/{id}", RouteId.CONFIG_DELETE),
    Route("GET", "/api/configs/{id}/services", RouteId.CONFIG_SERVICES),
    # Nodes
    Route("GET", "/api/nodes", RouteId.NODES),
    Route("GET", "/api/nodes/ts", RouteId.NODES_TS),
    Route("GET", "/api/nodes/{id}", RouteId.NODE),
    Route("POST", "/api/nodes/{id}", RouteId.NODE_UPDATE),
    Route("GET", "/api/nodes/{id}/tasks", RouteId.NODE_TASKS),
    # Cluster
    Route("GET", "/api/stats", RouteId.STATS),
    Route("GET", "/api/placement", RouteId.PLACEMENT),
    Route("GET", "/api/plugin/network", RouteId.PLUGIN_NETWORK),
    Route("GET", "/api/plugin/log", RouteId.PLUGIN_LOG),
    Route("GET", "/api/plugin/volume", RouteId.PLUGIN_VOLUME),
    # Tasks
    Route("GET", "/api/tasks", RouteId.TASKS),
    Route("GET", "/api/tasks/{id}", RouteId.TASK),
    Route("GET", "/api/tasks/{name}/ts", RouteId.TASK_TS),
    # Registries
    Route("GET", "/api/registry/{registryType}", RouteId.REGISTRIES),
    Route("POST", "/api/registry/{registryType}", RouteId.REGISTRY_CREATE),
    Route("GET", "/api/registry/{registryType}/{id}", RouteId.REGISTRY),
    Route("POST", "/api/registry/{registryType}/{id}", RouteId.REGISTRY_UPDATE),
    Route("DELETE", "/api/registry/{registryType}/{id}", RouteId.REGISTRY_DELETE),
    Route(
        "GET",
        "/api/registry/{registryType}/{id}/repositories",
        RouteId.REGISTRY_REPOSITORIES,
    ),
    # Repositories
    Route("GET", "/api/public/repositories", RouteId.PUBLIC_REPOSITORIES),
    Route("GET", "/api/repository/tags", RouteId.REPOSITORY_TAGS),
    Route("GET", "/api/repository/ports", RouteId.REPOSITORY_PORTS),
    # Stacks
    Route("GET", "/api/stacks", RouteId.STACKS),
    Route("POST", "/api/stacks", RouteId.STACK_CREATE),
    Route("POST", "/api/stacks/{name}", RouteId.STACK_UPDATE),
    Route("DELETE", "/api/stacks/{name}", RouteId.STACK_DELETE),
    Route("POST", "/api/stacks/{name}/redeploy", RouteId.STACK_REDEPLOY),
    Route("POST", "/api/stacks/{name}/rollback", RouteId.STACK_ROLLBACK),
    Route("GET", "/api/stacks/{name}/file", RouteId.STACK_FILE),
    Route("GET", "/api/stacks/{name}/compose", RouteId.STACK_COMPOSE),
    Route("GET", "/api/stacks/{name}/services", RouteId.STACK_SERVICES),
    Route("GET", "/api/stacks/{name}/networks", RouteId.STACK_NETWORKS),
    Route("GET", "/api/stacks/{name}/volumes", RouteId.STACK_VOLUMES),
    Route("GET", "/api/stacks/{name}/configs", RouteId.STACK_CONFIGS),
    Route("GET", "/api/stacks/{name}/secrets", RouteId.STACK_SECRETS),
]
