"""Security helpers (hashing and verification)."""

from __future__ import annotations

import logging

from argon2 import PasswordHasher as _Argon2Hasher, exceptions as argon_exc
from starlette.concurrency import run_in_threadpool

from sup_api.core.config import Settings, get_settings
from sup_api.core.errors import HashingError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """
    Salted one-way hashing backed by argon2.

    Each call to hash() draws a fresh salt; salt and cost parameters are
    embedded in the encoded record, so verify() needs nothing else. Both
    operations run in the worker thread pool to keep the event loop free.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self._ph = _Argon2Hasher(
            time_cost=settings.password_hash_time_cost,
            memory_cost=settings.password_hash_memory_cost,
            parallelism=settings.password_hash_parallelism,
        )

    def _hash(self, plaintext: str) -> str:
        try:
            return self._ph.hash(plaintext)
        except (argon_exc.HashingError, MemoryError, OSError) as exc:
            logger.error("Password hashing failed: %s", exc.__class__.__name__)
            raise HashingError() from exc

    def _verify(self, plaintext: str, hash_record: str | None) -> bool:
        if not hash_record:
            return False
        try:
            return self._ph.verify(hash_record, plaintext)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False
        except (MemoryError, OSError) as exc:
            logger.error("Password verification failed: %s", exc.__class__.__name__)
            raise HashingError() from exc

    async def hash(self, plaintext: str) -> str:
        return await run_in_threadpool(self._hash, plaintext)

    async def verify(self, plaintext: str, hash_record: str | None) -> bool:
        return await run_in_threadpool(self._verify, plaintext, hash_record)
