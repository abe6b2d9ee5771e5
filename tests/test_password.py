"""
Tests for the bcrypt password hasher.
"""

import pytest

from auth.password import PasswordHasher


class TestPasswordHasher:
    def test_hash_is_salted_and_self_contained(self, hasher):
        first = hasher.hash_sync("secret")
        second = hasher.hash_sync("secret")
        assert first != second
        assert first.startswith("$2b$04$")
        assert "secret" not in first

    def test_compare_matches_only_same_password(self, hasher):
        hashed = hasher.hash_sync("secret")
        assert hasher.compare_sync("secret", hashed) is True
        assert hasher.compare_sync("Secret", hashed) is False
        assert hasher.compare_sync("", hashed) is False

    def test_malformed_hash_compares_false(self, hasher):
        assert hasher.compare_sync("secret", "not-a-bcrypt-hash") is False

    def test_work_factor_out_of_range(self):
        with pytest.raises(ValueError, match="work factor"):
            PasswordHasher(work_factor=3)
        with pytest.raises(ValueError, match="work factor"):
            PasswordHasher(work_factor=32)

    @pytest.mark.asyncio
    async def test_async_roundtrip(self, hasher):
        hashed = await hasher.hash("hunter2")
        assert await hasher.compare("hunter2", hashed)
        assert not await hasher.compare("hunter3", hashed)
