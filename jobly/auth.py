'''
jobly.auth
Reads the bearer JWT and decides who may call admin routes.
Issuing tokens is someone else's job; create_token exists for tooling/tests.
'''

import logging
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from jobly.config import SECRET_KEY

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    username: str
    is_admin: bool = False


def create_token(username: str, is_admin: bool = False) -> str:
    payload = {"username": username, "isAdmin": is_admin}
    return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentUser | None:
    """Return the token's user, or None when no valid token was sent."""
    if credentials is None:
        return None
    try:
        payload = jwt.decode(credentials.credentials, SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.PyJWTError as exc:
        logger.warning("rejected token: %s", exc)
        return None

    username = payload.get("username")
    if not username:
        return None
    return CurrentUser(username=username, is_admin=bool(payload.get("isAdmin")))


def ensure_admin(user: CurrentUser | None = Depends(get_current_user)) -> CurrentUser:
    if user is None or not user.is_admin:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user
