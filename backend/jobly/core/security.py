from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.hash import pbkdf2_sha256

from jobly.core.errors import UnauthorizedError
from jobly.core.policy import ANONYMOUS, Action, Caller, is_allowed
from jobly.core.settings import Settings
from jobly.deps import get_app_settings

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

bearer = HTTPBearer(auto_error=False)


def hash_password(plain: str, rounds: int | None = None) -> str:
    hasher = pbkdf2_sha256.using(rounds=rounds) if rounds else pbkdf2_sha256
    return hasher.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    if not hashed:
        return False
    return pbkdf2_sha256.verify(plain, hashed)


def create_access_token(username: str, is_admin: bool, settings: Settings, ttl_s: int | None = None) -> str:
    ttl = int(ttl_s if ttl_s is not None else settings.AUTH_JWT_TTL_MIN * 60)
    now = datetime.now(timezone.utc)
    payload: Dict[str, Any] = {
        "sub": username,
        "isAdmin": bool(is_admin),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=ttl)).timestamp()),
    }
    return jwt.encode(payload, settings.AUTH_JWT_SECRET, algorithm=ALGORITHM)


def decode_token(token: str, settings: Settings) -> Dict[str, Any]:
    try:
        return jwt.decode(token, settings.AUTH_JWT_SECRET, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token expired")
    except jwt.PyJWTError:
        raise UnauthorizedError("Invalid token")


def get_current_caller(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
    settings: Settings = Depends(get_app_settings),
) -> Caller:
    """Resolve the caller from the bearer token.

    A missing or bad token is not an error here: the request simply proceeds
    as anonymous and the policy decides.
    """
    if not creds or (creds.scheme or "").lower() != "bearer":
        return ANONYMOUS

    try:
        claims = decode_token(creds.credentials, settings)
    except UnauthorizedError as exc:
        logger.info("Ignoring bearer token: %s", exc.detail)
        return ANONYMOUS

    username = claims.get("sub")
    if not username:
        return ANONYMOUS
    return Caller(username=str(username), is_admin=bool(claims.get("isAdmin", False)))


def authorize(action: Action) -> Callable[..., Caller]:
    """Dependency enforcing ``action``; user routes are checked against ``{username}``."""

    def dependency(request: Request, caller: Caller = Depends(get_current_caller)) -> Caller:
        target = request.path_params.get("username")
        if not is_allowed(caller, action, target):
            logger.info("Denied %s to %s", action.value, caller.username or "anonymous")
            raise UnauthorizedError()
        return caller

    return dependency
