"""Request and response envelopes exchanged with route handlers."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from swarmconsole.models import Identity


def keywordize_keys(value: Any) -> Any:
    """Normalize mapping keys, recursively, into the canonical string key space.

    Keys arrive as str from JSON bodies, as bytes from raw query strings and
    occasionally as ints from form encoders; handlers only ever look values
    up by their string name.
    """
    if isinstance(value, Mapping):
        return {_canonical_key(k): keywordize_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [keywordize_keys(v) for v in value]
    return value


def _canonical_key(key: Any) -> str:
    if isinstance(key, bytes):
        return key.decode("utf-8")
    return str(key)


class RequestEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    route_params: dict[str, Any] = Field(default_factory=dict)
    query_params: dict[str, Any] = Field(default_factory=dict)
    params: dict[str, Any] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)
    identity: Optional[Identity] = None

    @property
    def payload(self) -> dict[str, Any]:
        """Body parameters with normalized keys."""
        return keywordize_keys(self.params)

    @property
    def query(self) -> dict[str, Any]:
        """Query parameters with normalized keys."""
        return keywordize_keys(self.query_params)

    @property
    def owner(self) -> Optional[str]:
        return self.identity.username if self.identity else None

    def header(self, name: str) -> Optional[str]:
        name = name.lower()
        for key, value in self.headers.items():
            if key.lower() == name:
                return value
        return None


@dataclass(frozen=True)
class ResponseEnvelope:
    status: int
    body: Any = None
