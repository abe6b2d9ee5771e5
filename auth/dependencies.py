"""
FastAPI dependencies for authentication.

The hasher, token issuer and session factory are built once by the app
factory and live on ``app.state``; these dependencies hand them to routes.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import InvalidToken, TokenIssuer
from auth.password import PasswordHasher
from database.session import get_db_session
from database.users import UserRepository

_bearer_scheme = HTTPBearer(auto_error=False)


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserRepository:
    return UserRepository(session, hasher)


async def get_current_username(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> str:
    """
    Extract and verify the Bearer token, returning the authenticated
    ``username``.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        payload = issuer.verify(credentials.credentials)
    except InvalidToken as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {exc}",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
    return payload["username"]
