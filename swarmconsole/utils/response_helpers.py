from typing import Any, Iterable, Mapping, Optional

from swarmconsole.errors import ConsoleError
from swarmconsole.handlers.envelope import ResponseEnvelope


def resp_ok(body: Any = None) -> ResponseEnvelope:
    return ResponseEnvelope(status=200, body=body)


def resp_created(body: Any = None) -> ResponseEnvelope:
    """201 response; body is usually the `id` subset of the created resource."""
    return ResponseEnvelope(status=201, body=body)


def resp_accepted(body: Any = None) -> ResponseEnvelope:
    """202 response for operations enqueued downstream."""
    return ResponseEnvelope(status=202, body=body)


def resp_error(status: int, message: Optional[str]) -> ResponseEnvelope:
    return ResponseEnvelope(status=status, body={"error": message})


def resp_from_error(error: ConsoleError) -> ResponseEnvelope:
    return resp_error(error.status_code, error.message)


def select_keys(resource: Optional[Mapping[str, Any]], keys: Iterable[str]) -> dict:
    if not resource:
        return {}
    return {key: resource[key] for key in keys if key in resource}
