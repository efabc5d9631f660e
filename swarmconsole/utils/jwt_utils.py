import base64
import binascii
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

import jwt
from pydantic import ValidationError

from swarmconsole.models import Identity, UserRole
from swarmconsole.settings import settings

SLT_PURPOSE = "slt"


def generate_jwt(user: Mapping[str, Any]) -> str:
    """Issue a console token for a stored user record."""
    now = datetime.now(timezone.utc)
    claims = {
        "iss": settings.JWT_ISSUER,
        "iat": now,
        "exp": now + timedelta(seconds=settings.JWT_EXPIRATION_SECONDS),
        "usr": {
            "username": user["username"],
            "role": user.get("role", UserRole.USER.value),
        },
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_jwt(token: str) -> dict:
    """Verify signature, issuer and expiry of a console token.

    Raises:
        jwt.PyJWTError: token is invalid or expired
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        issuer=settings.JWT_ISSUER,
    )


def identity_from_token(token: str) -> Identity:
    claims = decode_jwt(token)
    usr = claims.get("usr")
    if not isinstance(usr, dict) or not usr.get("username"):
        raise jwt.InvalidTokenError("Token carries no user")
    try:
        return Identity(username=usr["username"], role=usr.get("role", UserRole.USER))
    except ValidationError as e:
        raise jwt.InvalidTokenError("Token carries an invalid user") from e


def strip_scheme(header: str, scheme: str) -> str:
    prefix = f"{scheme} "
    if header[: len(prefix)].lower() == prefix.lower():
        return header[len(prefix) :].strip()
    return header.strip()


def decode_basic(header: str) -> dict[str, str]:
    """Parse an HTTP Basic authorization header into credentials.

    Raises:
        ValueError: header is not valid base64 `username:password`
    """
    encoded = strip_scheme(header, "Basic")
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError("Malformed basic authorization header") from e

    username, separator, password = decoded.partition(":")
    if not separator:
        raise ValueError("Malformed basic authorization header")
    return {"username": username, "password": password}


def generate_slt() -> str:
    """Issue a short-lived token, e.g. for subscribing to server-sent events."""
    now = datetime.now(timezone.utc)
    claims = {
        "iss": settings.JWT_ISSUER,
        "iat": now,
        "exp": now + timedelta(seconds=settings.SLT_EXPIRATION_SECONDS),
        "purpose": SLT_PURPOSE,
        "jti": secrets.token_urlsafe(16),
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
