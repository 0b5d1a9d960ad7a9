from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

logger = logging.getLogger(__name__)

bearer = HTTPBearer(auto_error=False)


def _secret() -> str:
    s = os.getenv("JWT_SECRET", "")
    if not s:
        raise RuntimeError("JWT_SECRET is not set")
    return s


def _algo() -> str:
    return os.getenv("JWT_ALGORITHM", "HS256")


def _exp_minutes() -> int:
    try:
        return int(os.getenv("JWT_EXP_MINUTES", "15"))
    except ValueError:
        return 15


def create_access_token(subject: str) -> str:
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=_exp_minutes())
    payload = {"sub": subject, "iat": int(now.timestamp()), "exp": int(exp.timestamp())}
    return jwt.encode(payload, _secret(), algorithm=_algo())


def decode_token(token: str) -> dict[str, Any]:
    return jwt.decode(token, _secret(), algorithms=[_algo()])


def get_claims(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
) -> Optional[dict[str, Any]]:
    """
    Verified claims of the bearer token, or None.

    Rejection is left to the note handler so that an unauthenticated call still
    gets the regular response envelope.
    """
    if creds is None or creds.scheme.lower() != "bearer":
        return None
    try:
        return decode_token(creds.credentials)
    except JWTError as exc:
        logger.warning("Rejected bearer token: %s", exc)
        return None
