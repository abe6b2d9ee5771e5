"""
Pure row → record mappers.

Each function accepts anything with attribute access by column label
(a SQLAlchemy ``Row``, a namedtuple, a ``SimpleNamespace``) so they can be
tested without a database.
"""

from __future__ import annotations

from typing import Any

from utils.schemas import (
    ReceivedMessage,
    RegisteredUser,
    SentMessage,
    UserProfile,
    UserSummary,
)


def to_user_summary(row: Any) -> UserSummary:
    return UserSummary(
        username=row.username,
        first_name=row.first_name,
        last_name=row.last_name,
        phone=row.phone,
    )


def to_user_profile(row: Any) -> UserProfile:
    return UserProfile(
        username=row.username,
        first_name=row.first_name,
        last_name=row.last_name,
        phone=row.phone,
        join_at=row.join_at,
        last_login_at=row.last_login_at,
    )


def to_registered_user(row: Any) -> RegisteredUser:
    return RegisteredUser(
        username=row.username,
        password=row.password,
        first_name=row.first_name,
        last_name=row.last_name,
        phone=row.phone,
    )


def to_sent_message(row: Any) -> SentMessage:
    """Message row joined with its recipient's profile columns."""
    return SentMessage(
        id=row.id,
        to_user=UserSummary(
            username=row.to_username,
            first_name=row.first_name,
            last_name=row.last_name,
            phone=row.phone,
        ),
        body=row.body,
        sent_at=row.sent_at,
        read_at=row.read_at,
    )


def to_received_message(row: Any) -> ReceivedMessage:
    """Message row joined with its sender's profile columns."""
    return ReceivedMessage(
        id=row.id,
        from_user=UserSummary(
            username=row.from_username,
            first_name=row.first_name,
            last_name=row.last_name,
            phone=row.phone,
        ),
        body=row.body,
        sent_at=row.sent_at,
        read_at=row.read_at,
    )
