"""
Bearer token verification.

A request is authenticated when its token is a valid JWT signed with
SECRET_KEY carrying an integer `userId` claim AND a matching row exists in
the sessions table. Anything else is Unauthorized.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
import structlog
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotels_api.core.config import get_settings
from hotels_api.core.logging import get_logger
from hotels_api.db.session import get_db
from hotels_api.domain.errors import Unauthorized
from hotels_api.models import Session

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    payload = {"userId": user_id, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> int:
    """Return the userId claim of a valid token, or raise Unauthorized."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.PyJWTError as e:
        logger.info("token_rejected", reason=type(e).__name__)
        raise Unauthorized() from e

    user_id = payload.get("userId")
    # bool is an int subclass
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        logger.info("token_rejected", reason="missing_user_id")
        raise Unauthorized()
    return user_id


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> int:
    """FastAPI dependency yielding the verified user id."""
    if credentials is None or not credentials.credentials:
        raise Unauthorized()

    token = credentials.credentials
    user_id = decode_access_token(token)

    result = await db.execute(
        select(Session.id).where(Session.token == token, Session.user_id == user_id).limit(1)
    )
    if result.scalar_one_or_none() is None:
        logger.info("token_rejected", reason="no_session", user_id=user_id)
        raise Unauthorized()

    structlog.contextvars.bind_contextvars(user_id=user_id)
    return user_id
