"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.
"""

from __future__ import annotations

import asyncio

import bcrypt


class PasswordHasher:
    """bcrypt wrapper bound to one work factor for the life of the process.

    bcrypt is CPU-bound, so both operations run in a worker thread and the
    event loop keeps serving other requests meanwhile.
    """

    def __init__(self, work_factor: int = 12):
        if not 4 <= work_factor <= 31:
            raise ValueError(f"bcrypt work factor must be in 4..31, got {work_factor}")
        self.work_factor = work_factor

    def hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.work_factor)
        return bcrypt.hashpw(password.encode(), salt).decode()

    def compare_sync(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except (ValueError, TypeError):
            return False

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self.hash_sync, password)

    async def compare(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(self.compare_sync, password, password_hash)
