from typing import Optional, Annotated
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session
import hmac
import logging

from database.db import get_db
from models.users import User as UserModel

logger = logging.getLogger(__name__)

AuthHeader = Annotated[Optional[str], Header(alias="Authorization")]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=401,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(authorization: AuthHeader = None, db: Session = Depends(get_db)) -> UserModel:
    if not authorization:
        raise _unauthorized("Missing Authorization header")

    # "Bearer <token>"
    try:
        scheme, token = authorization.split(" ", 1)
    except ValueError:
        raise _unauthorized("Invalid Authorization header format")

    if scheme.lower() != "bearer":
        raise _unauthorized("Invalid auth scheme")

    token = token.strip()
    user = db.query(UserModel).filter(UserModel.api_token == token).first()

    # timing-safe comparison
    if user is None or not hmac.compare_digest(token, user.api_token or ""):
        logger.warning("Rejected bearer token (prefix %s...)", token[:6])
        raise _unauthorized("Invalid token")

    return user


CurrentUser = Annotated[UserModel, Depends(get_current_user)]
