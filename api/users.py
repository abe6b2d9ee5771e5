"""
User listing routes — any holder of a valid token may read them.

Route prefix: /users
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from api.errors import error_response
from auth.dependencies import get_current_username, get_user_repository
from database.users import UserRepository
from utils.schemas import (
    ReceivedMessagesResponse,
    SentMessagesResponse,
    UserDetailResponse,
    UserListResponse,
)

router = APIRouter(tags=["users"], dependencies=[Depends(get_current_username)])


@router.get("", response_model=UserListResponse)
async def list_users(users: UserRepository = Depends(get_user_repository)):
    """GET / - {users: [{username, first_name, last_name, phone}, ...]}"""
    result = await users.all()
    return {"users": result.value}


@router.get("/{username}", response_model=UserDetailResponse)
async def get_user(username: str, users: UserRepository = Depends(get_user_repository)):
    result = await users.get(username)
    if not result.ok:
        return error_response(result.error)
    return {"user": result.value}


@router.get("/{username}/from", response_model=SentMessagesResponse)
async def messages_from(username: str, users: UserRepository = Depends(get_user_repository)):
    """GET /:username/from - {messages: [{id, to_user, body, sent_at, read_at}, ...]}"""
    result = await users.messages_from(username)
    return {"messages": result.value}


@router.get("/{username}/to", response_model=ReceivedMessagesResponse)
async def messages_to(username: str, users: UserRepository = Depends(get_user_repository)):
    """GET /:username/to - {messages: [{id, from_user, body, sent_at, read_at}, ...]}"""
    result = await users.messages_to(username)
    return {"messages": result.value}
