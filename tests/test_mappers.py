"""
Tests for the row → record mappers (no database involved).
"""

from datetime import datetime, timezone
from types import SimpleNamespace

from database.mappers import (
    to_received_message,
    to_registered_user,
    to_sent_message,
    to_user_profile,
    to_user_summary,
)

NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def _user_row(**extra):
    return SimpleNamespace(
        username="alice", first_name="A", last_name="L", phone="111", **extra
    )


def _message_row(**extra):
    fields = dict(
        id=7, first_name="B", last_name="M", phone="222",
        body="hi", sent_at=NOW, read_at=None,
    )
    fields.update(extra)
    return SimpleNamespace(**fields)


class TestUserMappers:
    def test_summary_drops_everything_else(self):
        summary = to_user_summary(_user_row(password="$2b$hash", join_at=NOW))
        assert summary.model_dump() == {
            "username": "alice", "first_name": "A", "last_name": "L", "phone": "111",
        }

    def test_profile_has_timestamps_but_no_password(self):
        profile = to_user_profile(_user_row(password="$2b$hash", join_at=NOW, last_login_at=NOW))
        dumped = profile.model_dump()
        assert "password" not in dumped
        assert dumped["join_at"] == NOW
        assert dumped["last_login_at"] == NOW

    def test_registered_user_keeps_hash(self):
        record = to_registered_user(_user_row(password="$2b$hash"))
        assert record.password == "$2b$hash"


class TestMessageMappers:
    def test_sent_message_nests_recipient(self):
        msg = to_sent_message(_message_row(to_username="bob"))
        assert msg.id == 7
        assert msg.to_user.model_dump() == {
            "username": "bob", "first_name": "B", "last_name": "M", "phone": "222",
        }
        assert msg.body == "hi"
        assert msg.read_at is None

    def test_received_message_nests_sender(self):
        msg = to_received_message(_message_row(from_username="bob", read_at=NOW))
        assert msg.from_user.username == "bob"
        assert msg.read_at == NOW
        assert "to_user" not in msg.model_dump()
