from typing import Literal

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from typing_extensions import NotRequired, TypedDict

from swarmconsole.factories import cluster_api_factory, stats_factory
from swarmconsole.settings import settings

logger = structlog.stdlib.get_logger(__name__)

router = APIRouter(tags=["Health"])


class HealthResponse(TypedDict):
    status: Literal["pass", "fail"]
    missing_settings: NotRequired[list[str]]
    collaborator_errors: NotRequired[dict[str, str]]


COLLABORATOR_SETTINGS = {
    "CLUSTER_API_FACTORY": cluster_api_factory,
    "STATS_FACTORY": stats_factory,
}


@router.get("/health", responses={200: {"model": HealthResponse}})
async def health():
    """Report whether the console can reach its collaborators.

    A setting counts as configured however it was provided (env, `_FILE`
    secret, `.env`). Configured factories are resolved, so a bad dotted path
    fails the check instead of the first console request.
    """
    missing_settings = [name for name in COLLABORATOR_SETTINGS if not getattr(settings, name)]
    if missing_settings:
        return JSONResponse(
            status_code=500,
            content={"status": "fail", "missing_settings": missing_settings},
        )

    collaborator_errors = {}
    for name, factory in COLLABORATOR_SETTINGS.items():
        try:
            factory()
        except Exception as e:
            logger.error("Collaborator failed to load", setting=name, error=str(e))
            collaborator_errors[name] = str(e)

    if collaborator_errors:
        return JSONResponse(
            status_code=500,
            content={"status": "fail", "collaborator_errors": collaborator_errors},
        )

    return {"status": "pass"}
