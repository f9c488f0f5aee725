"""
Argon2id password hashing for admin accounts.
"""

from typing import Optional

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

# Argon2id cost: 64 MiB, 2 passes, single lane
DEFAULT_TIME_COST = 2
DEFAULT_MEMORY_COST = 65536  # KiB
DEFAULT_PARALLELISM = 1


class Argon2PasswordHasher:
    def __init__(
        self,
        time_cost: int = DEFAULT_TIME_COST,
        memory_cost: int = DEFAULT_MEMORY_COST,
        parallelism: int = DEFAULT_PARALLELISM,
    ):
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            hash_len=32,
            salt_len=16,
            type=Type.ID,
        )
        self._dummy_hash: Optional[str] = None

    def hash(self, password: str) -> str:
        if not password:
            raise ValueError("Password must not be empty")
        return self._hasher.hash(password)

    def verify(self, stored_hash: str, candidate: str) -> bool:
        """
        Check candidate against stored_hash.

        Mismatches, malformed hashes and empty input all return False; the
        comparison itself is argon2's constant-time one.
        """
        if not stored_hash or not candidate:
            return False
        try:
            return self._hasher.verify(stored_hash, candidate)
        except (VerificationError, InvalidHashError):
            return False

    def verify_dummy(self, candidate: str) -> bool:
        """
        Burn one verification for a login whose account does not exist.

        Keeps "unknown username" as slow as "wrong password".
        """
        if self._dummy_hash is None:
            self._dummy_hash = self._hasher.hash("dummy-password-for-timing")
        self.verify(self._dummy_hash, candidate or "x")
        return False

    def needs_rehash(self, stored_hash: str) -> bool:
        try:
            return self._hasher.check_needs_rehash(stored_hash)
        except InvalidHashError:
            return True


default_password_hasher = Argon2PasswordHasher()
