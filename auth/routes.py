"""
Auth API routes — register, login.

Both return ``{"token": ...}``; failures are rendered by ``api.errors``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.errors import error_response
from auth.dependencies import get_token_issuer, get_user_repository
from auth.jwt import TokenIssuer
from database.users import UserRepository
from utils.result import ErrorKind, Result
from utils.schemas import LoginRequest, RegisterRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


async def login_flow(
    req: LoginRequest,
    users: UserRepository,
    issuer: TokenIssuer,
) -> Result[str]:
    """
    Check credentials, sign a token, then record the login time.

    The token is signed before the timestamp update; if that update fails
    its error is returned and the signed token is discarded.
    """
    auth = await users.authenticate(req.username, req.password)
    if not auth.ok:
        return Result(error=auth.error)
    if not auth.value:
        return Result.failure(ErrorKind.INVALID_CREDENTIALS, "Invalid username or password")

    token = issuer.sign({"username": req.username})
    stamped = await users.update_login_timestamp(req.username)
    if not stamped.ok:
        return Result(error=stamped.error)
    return Result.success(token)


async def register_flow(
    req: RegisterRequest,
    users: UserRepository,
    issuer: TokenIssuer,
) -> Result[str]:
    created = await users.register(req)
    if not created.ok:
        return Result(error=created.error)
    return Result.success(issuer.sign({"username": created.value.username}))


@router.post("/login", response_model=TokenResponse)
async def login(
    req: LoginRequest,
    users: UserRepository = Depends(get_user_repository),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> Dict[str, Any]:
    """POST /login - {username, password} => {token}"""
    result = await login_flow(req, users, issuer)
    if not result.ok:
        logger.warning("Login failed for %s: %s", req.username, result.error.kind.value)
        return error_response(result.error)

    logger.info("Login: %s", req.username)
    return {"token": result.value}


@router.post("/register", response_model=TokenResponse)
async def register(
    req: RegisterRequest,
    users: UserRepository = Depends(get_user_repository),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> Dict[str, Any]:
    """POST /register - {username, password, first_name, last_name, phone} => {token}"""
    result = await register_flow(req, users, issuer)
    if not result.ok:
        return error_response(result.error)

    logger.info("Registered user %s", req.username)
    return {"token": result.value}
