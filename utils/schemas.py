"""
Pydantic schemas for the Message.ly backend.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


# ═══════════════════════════════════════════════════════════════════════════════
# Records — what the repository hands back
# ═══════════════════════════════════════════════════════════════════════════════


class UserSummary(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str


class UserProfile(UserSummary):
    join_at: datetime
    last_login_at: Optional[datetime] = None


class RegisteredUser(UserSummary):
    """Row returned by registration; ``password`` is the bcrypt hash."""

    password: str


class SentMessage(BaseModel):
    id: int
    to_user: UserSummary
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class ReceivedMessage(BaseModel):
    id: int
    from_user: UserSummary
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP — request / response bodies
# ═══════════════════════════════════════════════════════════════════════════════


class LoginRequest(BaseModel):
    username: str
    password: str


class RegisterRequest(BaseModel):
    username: str
    password: str
    first_name: str
    last_name: str
    phone: str


class TokenResponse(BaseModel):
    token: str


class UserListResponse(BaseModel):
    users: List[UserSummary]


class UserDetailResponse(BaseModel):
    user: UserProfile


class SentMessagesResponse(BaseModel):
    messages: List[SentMessage]


class ReceivedMessagesResponse(BaseModel):
    messages: List[ReceivedMessage]
