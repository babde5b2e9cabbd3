"""
Authentication use case: turn a username/password pair into a principal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from starlette.concurrency import run_in_threadpool

from sup_api.core.errors import Unauthenticated
from sup_api.core.security import PasswordHasher
from sup_api.domain.context import RequestContext
from sup_api.repositories.sql_repository import SQLRepository

logger = logging.getLogger(__name__)


@dataclass
class AuthService:
    """Stateless credential check; every call does a full lookup and verify."""

    repository: SQLRepository = field(default_factory=SQLRepository)
    hasher: PasswordHasher = field(default_factory=PasswordHasher)

    async def authenticate(self, username: str, password: str) -> RequestContext:
        account = await run_in_threadpool(self.repository.find_account_by_username, username)
        if not account:
            logger.info("Authentication rejected: unknown username %r", username)
            raise Unauthenticated("Incorrect username")
        if not await self.hasher.verify(password, account.password_hash):
            logger.info("Authentication rejected: bad password for %r", username)
            raise Unauthenticated("Incorrect password")
        return RequestContext(account_id=account.id, username=account.username)
