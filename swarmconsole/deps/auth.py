from typing import Annotated, Optional

import jwt
import structlog
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from swarmconsole.models import Identity
from swarmconsole.utils.jwt_utils import identity_from_token

logger = structlog.stdlib.get_logger(__name__)

security = HTTPBearer(auto_error=False)


def _credentials_exception(message: str):
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_identity(
    credentials: Annotated[
        Optional[HTTPAuthorizationCredentials], Depends(security)
    ] = None,
) -> Identity:
    if not credentials or not credentials.credentials:
        raise _credentials_exception("Missing token")

    try:
        identity = identity_from_token(credentials.credentials)
    except jwt.PyJWTError as e:
        logger.info("Rejected console token", reason=str(e))
        raise _credentials_exception("Invalid token")

    structlog.contextvars.bind_contextvars(username=identity.username)
    return identity


CurrentIdentity = Annotated[Identity, Depends(get_identity)]


async def get_admin_identity(identity: CurrentIdentity) -> Identity:
    if not identity.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized access",
        )
    return identity
