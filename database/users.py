"""
User repository — owns every SQL statement touching ``users`` and the
user side of ``messages``.

Expected failures come back as ``Result`` values; unexpected database
errors propagate as exceptions.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.password import PasswordHasher
from database.mappers import (
    to_received_message,
    to_registered_user,
    to_sent_message,
    to_user_profile,
    to_user_summary,
)
from database.models import Message, User
from utils.result import ErrorKind, Result
from utils.schemas import (
    ReceivedMessage,
    RegisteredUser,
    RegisterRequest,
    SentMessage,
    UserProfile,
    UserSummary,
)

logger = logging.getLogger(__name__)

_SUMMARY_COLUMNS = (User.username, User.first_name, User.last_name, User.phone)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class UserRepository:
    def __init__(self, session: AsyncSession, hasher: PasswordHasher):
        self.session = session
        self.hasher = hasher

    async def register(self, fields: RegisterRequest) -> Result[RegisteredUser]:
        """
        Hash the password and insert a new user.

        ``join_at`` and ``last_login_at`` start out equal.  A duplicate
        username comes back as ``CONSTRAINT_VIOLATION`` with the database's
        own message.
        """
        hashed = await self.hasher.hash(fields.password)
        now = _now()
        stmt = (
            insert(User)
            .values(
                username=fields.username,
                password=hashed,
                first_name=fields.first_name,
                last_name=fields.last_name,
                phone=fields.phone,
                join_at=now,
                last_login_at=now,
            )
            .returning(*_SUMMARY_COLUMNS, User.password)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            await self.session.rollback()
            logger.warning("Registration rejected for %s: %s", fields.username, exc.orig)
            return Result.failure(ErrorKind.CONSTRAINT_VIOLATION, str(exc.orig))

        return Result.success(to_registered_user(result.one()))

    async def authenticate(self, username: str, password: str) -> Result[bool]:
        """Is this username/password valid?  ``NOT_FOUND`` for unknown users."""
        result = await self.session.execute(
            select(User.password).where(User.username == username)
        )
        stored = result.scalar_one_or_none()
        if stored is None:
            return Result.failure(ErrorKind.NOT_FOUND, "Username invalid. User not found")

        return Result.success(await self.hasher.compare(password, stored))

    async def update_login_timestamp(self, username: str) -> Result[None]:
        result = await self.session.execute(
            update(User)
            .where(User.username == username)
            .values(last_login_at=_now())
            .returning(User.username)
            .execution_options(synchronize_session=False)
        )
        if result.first() is None:
            return Result.failure(ErrorKind.NOT_FOUND, "Username invalid. No user found")
        return Result.success(None)

    async def all(self) -> Result[List[UserSummary]]:
        result = await self.session.execute(select(*_SUMMARY_COLUMNS))
        return Result.success([to_user_summary(row) for row in result.all()])

    async def get(self, username: str) -> Result[UserProfile]:
        result = await self.session.execute(
            select(*_SUMMARY_COLUMNS, User.join_at, User.last_login_at)
            .where(User.username == username)
        )
        row = result.first()
        if row is None:
            return Result.failure(ErrorKind.NOT_FOUND, "Username invalid. User not found.")
        return Result.success(to_user_profile(row))

    async def messages_from(self, username: str) -> Result[List[SentMessage]]:
        """Messages sent by ``username``, each with the recipient's profile."""
        result = await self.session.execute(
            select(
                Message.id,
                Message.to_username,
                User.first_name,
                User.last_name,
                User.phone,
                Message.body,
                Message.sent_at,
                Message.read_at,
            )
            .select_from(Message)
            .join(User, Message.to_username == User.username)
            .where(Message.from_username == username)
        )
        return Result.success([to_sent_message(row) for row in result.all()])

    async def messages_to(self, username: str) -> Result[List[ReceivedMessage]]:
        """Messages received by ``username``, each with the sender's profile."""
        result = await self.session.execute(
            select(
                Message.id,
                Message.from_username,
                User.first_name,
                User.last_name,
                User.phone,
                Message.body,
                Message.sent_at,
                Message.read_at,
            )
            .select_from(Message)
            .join(User, Message.from_username == User.username)
            .where(Message.to_username == username)
        )
        return Result.success([to_received_message(row) for row in result.all()])
