"""FastAPI surface of the route table.

Every entry of ``ROUTES`` becomes one endpoint that builds a request envelope,
runs the (blocking) handler on the threadpool and encodes the response
envelope as JSON.
"""

import json
from typing import Annotated, Any, Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from swarmconsole.deps.auth import get_admin_identity, get_identity
from swarmconsole.deps.dispatch import DispatcherDep
from swarmconsole.handlers.envelope import RequestEnvelope, ResponseEnvelope
from swarmconsole.models import Identity
from swarmconsole.routes.table import ROUTES, Route

logger = structlog.stdlib.get_logger(__name__)


async def _no_identity() -> None:
    return None


def _identity_dependency(route: Route):
    if route.public:
        return _no_identity
    if route.admin:
        return get_admin_identity
    return get_identity


async def read_payload(request: Request) -> dict[str, Any]:
    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON body"
        )
    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be a JSON object",
        )
    return payload


async def build_envelope(request: Request, identity: Optional[Identity]) -> RequestEnvelope:
    return RequestEnvelope(
        route_params=dict(request.path_params),
        query_params=dict(request.query_params),
        params=await read_payload(request),
        headers=dict(request.headers),
        identity=identity,
    )


def encode_response(response: ResponseEnvelope) -> Response:
    if response.body is None:
        return Response(status_code=response.status)
    return JSONResponse(status_code=response.status, content=jsonable_encoder(response.body))


def _make_endpoint(route: Route):
    async def endpoint(
        request: Request,
        identity: Annotated[Optional[Identity], Depends(_identity_dependency(route))],
        dispatcher: DispatcherDep,
    ) -> Response:
        envelope = await build_envelope(request, identity)
        handler = dispatcher.dispatch(route.route_id)
        response = await run_in_threadpool(handler, envelope)
        if response.status >= 400:
            logger.info(
                "Route answered with error",
                route_id=route.route_id.value,
                status_code=response.status,
                error=(response.body or {}).get("error"),
            )
        return encode_response(response)

    endpoint.__name__ = route.route_id.value.replace("-", "_")
    return endpoint


def build_router(routes: list[Route] = ROUTES) -> APIRouter:
    router = APIRouter(tags=["Console"])
    for route in routes:
        router.add_api_route(
            route.path,
            _make_endpoint(route),
            methods=[route.method],
            name=route.route_id.value,
        )
    return router


router = build_router()
