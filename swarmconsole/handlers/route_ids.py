from enum import Enum


class RouteId(str, Enum):
    # System
    VERSION = "version"
    SLT = "slt"
    LOGIN = "login"
    PASSWORD = "password"
    API_TOKEN_GENERATE = "api-token-generate"
    API_TOKEN_REMOVE = "api-token-remove"
    INITIALIZE = "initialize"
    ME = "me"

    # Users
    USERS = "users"
    USER = "user"
    USER_CREATE = "user-create"
    USER_UPDATE = "user-update"
    USER_DELETE = "user-delete"

    # Services
    SERVICES = "services"
    SERVICE = "service"
    SERVICE_NETWORKS = "service-networks"
    SERVICE_TASKS = "service-tasks"
    SERVICE_LOGS = "service-logs"
    SERVICE_CREATE = "service-create"
    SERVICE_UPDATE = "service-update"
    SERVICE_REDEPLOY = "service-redeploy"
    SERVICE_ROLLBACK = "service-rollback"
    SERVICE_DELETE = "service-delete"
    SERVICE_COMPOSE = "service-compose"
    LABELS_SERVICE = "labels-service"

    # Networks
    NETWORKS = "networks"
    NETWORK = "network"
    NETWORK_SERVICES = "network-services"
    NETWORK_CREATE = "network-create"
    NETWORK_DELETE = "network-delete"

    # Volumes
    VOLUMES = "volumes"
    VOLUME = "volume"
    VOLUME_SERVICES = "volume-services"
    VOLUME_CREATE = "volume-create"
    VOLUME_DELETE = "volume-delete"

    # Secrets
    SECRETS = "secrets"
    SECRET = "secret"
    SECRET_SERVICES = "secret-services"
    SECRET_CREATE = "secret-create"
    SECRET_UPDATE = "secret-update"
    SECRET_DELETE = "secret-delete"

    # Configs
    CONFIGS = "configs"
    CONFIG = "config"
    CONFIG_SERVICES = "config-services"
    CONFIG_CREATE = "config-create"
    CONFIG_DELETE = "config-delete"

    # Nodes
    NODES = "nodes"
    NODES_TS = "nodes-ts"
    NODE = "node"
    NODE_UPDATE = "node-update"
    NODE_TASKS = "node-tasks"

    # Cluster
    STATS = "stats"
    PLACEMENT = "placement"
    PLUGIN_NETWORK = "plugin-network"
    PLUGIN_LOG = "plugin-log"
    PLUGIN_VOLUME = "plugin-volume"

    # Tasks
    TASKS = "tasks"
    TASK = "task"
    TASK_TS = "task-ts"

    # Registries
    REGISTRIES = "registries"
    REGISTRY = "registry"
    REGISTRY_CREATE = "registry-create"
    REGISTRY_UPDATE = "registry-update"
    REGISTRY_DELETE = "registry-delete"
    REGISTRY_REPOSITORIES = "registry-repositories"

    # Repositories
    PUBLIC_REPOSITORIES = "public-repositories"
    REPOSITORY_TAGS = "repository-tags"
    REPOSITORY_PORTS = "repository-ports"

    # Stacks
    STACKS = "stacks"
    STACK_CREATE = "stack-create"
    STACK_UPDATE = "stack-update"
    STACK_REDEPLOY = "stack-redeploy"
    STACK_ROLLBACK = "stack-rollback"
    STACK_DELETE = "stack-delete"
    STACK_FILE = "stack-file"
    STACK_COMPOSE = "stack-compose"
    STACK_SERVICES = "stack-services"
    STACK_NETWORKS = "stack-networks"
    STACK_VOLUMES = "stack-volumes"
    STACK_CONFIGS = "stack-configs"
    STACK_SECRETS = "stack-secrets"
