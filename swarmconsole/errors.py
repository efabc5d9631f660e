"""Error taxonomy of the console handler layer.

Every error here maps onto a response envelope at the handler boundary;
anything that is not a ``ConsoleError`` escapes to the HTTP layer's generic
fault handler.
"""

from typing import Any, Optional


class ConsoleError(Exception):
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ConsoleError):
    """Malformed or missing request parameter."""


class ConflictError(ConsoleError):
    """The resource being created already exists."""


class NotFoundError(ConsoleError):
    status_code = 404


class AuthenticationError(ConsoleError):
    status_code = 401


class AuthorizationError(ConsoleError):
    """Self-referential operation the caller may not perform on itself.

    Answered with 400, not 403.
    """


class PermissionDeniedError(ConsoleError):
    status_code = 403


class UnsupportedTypeError(ConsoleError):
    def __init__(self, tag: Any):
        super().__init__(f"Unknown registry type [{tag}]")
        self.tag = tag


class RemoteProviderError(ConsoleError):
    """Structured failure reported by a remote registry or the cluster API.

    ``body`` mirrors the remote error payload, ``{"error": <message>}``; the
    response always carries that embedded message with status 400, whatever
    the remote status was.
    """

    def __init__(self, body: Optional[dict[str, Any]]):
        self.body = body or {}
        super().__init__(self.body.get("error"))
