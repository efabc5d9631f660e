"""Registry clients for verifying registry accounts.

This package talks to remote registries (Docker Registry v2, Docker Hub,
AWS ECR, Azure ACR, GitLab) and has no dependencies on swarmconsole.*
modules outside itself.
"""

from .clients import (
    DockerhubClient,
    RegistryV2Client,
    acr_login_server,
    get_ecr_authorization_token,
    parse_bearer_challenge,
)
from .types import RegistryConfig, RegistryCredentials, RegistryRequestError

__all__ = [
    # Clients
    "RegistryV2Client",
    "DockerhubClient",
    "get_ecr_authorization_token",
    "acr_login_server",
    "parse_bearer_challenge",
    # Types
    "RegistryConfig",
    "RegistryCredentials",
    "RegistryRequestError",
]
