"""Existence checks for account ids referenced by messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from starlette.concurrency import run_in_threadpool

from sup_api.core.errors import UnprocessableEntity
from sup_api.repositories.sql_repository import SQLRepository


@dataclass
class ReferentialIntegrityChecker:
    repository: SQLRepository = field(default_factory=SQLRepository)

    async def require_account(self, account_id: str, field_name: str) -> None:
        """Raise unless an account with this id exists right now."""
        account = await run_in_threadpool(self.repository.get_account, account_id)
        if account is None:
            raise UnprocessableEntity(f"Incorrect field value: {field_name}")
