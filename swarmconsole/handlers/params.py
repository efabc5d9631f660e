from typing import Optional, TypeVar

from swarmconsole.errors import NotFoundError

T = TypeVar("T")


def require_found(resource: Optional[T], kind: str) -> T:
    """Turn a lookup that came back empty into a 404."""
    if resource is None:
        raise NotFoundError(f"{kind} doesn't exist")
    return resource
