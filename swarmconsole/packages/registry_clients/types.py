"""Registry client types and data structures.

Shared by every client in this package. No dependencies on swarmconsole.*
modules outside the package.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class RegistryConfig:
    """Connection settings shared by the HTTP based registry clients.

    Attributes:
        timeout: Seconds before a probe request is abandoned
        verify_ssl: Whether TLS certificates of the remote registry are checked
    """

    timeout: float = 10.0
    verify_ssl: bool = True


@dataclass
class RegistryCredentials:
    """Address and credentials of one registry account.

    Attributes:
        url: Registry base URL (e.g., "https://registry.example.com")
        username: Account name, empty for anonymous access
        password: Password or access token, empty for anonymous access
    """

    url: str
    username: str = ""
    password: str = field(default="", repr=False)

    @property
    def has_auth(self) -> bool:
        return bool(self.username and self.password)


class RegistryRequestError(Exception):
    """A remote registry refused or failed a probe request.

    Attributes:
        status_code: HTTP status reported by the remote side, None when the
            request never got an answer
        body: ``{"error": <message>}``
    """

    def __init__(self, status_code: Optional[int], body: dict[str, Any]):
        super().__init__(body.get("error"))
        self.status_code = status_code
        self.body = body

    @property
    def message(self) -> Optional[str]:
        return self.body.get("error")
