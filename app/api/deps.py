# File: app/api/deps.py

"""
FastAPI dependencies: the composition root for request-scoped objects.

Repositories and services are built per request from the request's
session and the process-wide settings.
"""

import logging
from typing import Any

import jwt
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.errors import AuthenticationInvalid, AuthenticationMissing
from app.core.security import decode_access_token
from app.db.session import get_db
from app.repositories.sql import SqlProductRepository, SqlUserRepository
from app.services.auth_service import AuthService
from app.services.product_service import ProductService
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


def get_user_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(SqlUserRepository(db), salt_rounds=settings.bcrypt_rounds)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(SqlProductRepository(db))


def get_auth_service(
    user_service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(user_service, settings)


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization")
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def verify_token(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """
    Gate for protected routes.

    Rejects with 401 "No token provided" when there is no bearer token and
    401 "Invalid token" when the signature, format or expiry check fails.
    Returns the decoded claims.
    """
    token = _bearer_token(request)
    if token is None:
        raise AuthenticationMissing()
    try:
        return decode_access_token(token, settings=settings)
    except jwt.InvalidTokenError as exc:
        logger.debug("Rejected token on %s: %s", request.url.path, exc)
        raise AuthenticationInvalid() from exc
