from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RegistryType(str, Enum):
    V2 = "v2"
    DOCKERHUB = "dockerhub"
    ECR = "ecr"
    ACR = "acr"
    GITLAB = "gitlab"

    @classmethod
    def parse(cls, tag: Optional[str]) -> Optional["RegistryType"]:
        """Return the member for ``tag``, or None when the tag is unsupported."""
        try:
            return cls(tag)
        except ValueError:
            return None


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


class Identity(BaseModel):
    """Authenticated caller, as decoded from the console token."""

    model_config = ConfigDict(frozen=True)

    username: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
