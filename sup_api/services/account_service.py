"""
Account use cases: listing, registration, self fetch, password upsert, delete.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from starlette.concurrency import run_in_threadpool

from sup_api.core.errors import NotFound
from sup_api.core.security import PasswordHasher
from sup_api.db.models import Account
from sup_api.domain.context import RequestContext
from sup_api.domain.validation import ACCOUNT_CREATE, ACCOUNT_UPDATE, validate
from sup_api.repositories.sql_repository import SQLRepository
from sup_api.services import authorization

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"


def account_view(account: Optional[Account]) -> Optional[dict]:
    """Public projection of an account. The password hash never leaves here."""
    if account is None:
        return None
    return {"id": account.id, "username": account.username}


@dataclass
class AccountService:
    repository: SQLRepository = field(default_factory=SQLRepository)
    hasher: PasswordHasher = field(default_factory=PasswordHasher)

    async def list_accounts(self, context: RequestContext) -> list[dict]:
        accounts = await run_in_threadpool(self.repository.list_accounts)
        return [account_view(account) for account in accounts]

    async def create_account(self, payload: Mapping[str, Any]) -> str:
        values = validate(payload, ACCOUNT_CREATE)
        password_hash = await self.hasher.hash(values["password"])
        account = await run_in_threadpool(self.repository.create_account, values["username"], password_hash)
        logger.info("Account %s created for %r", account.id, account.username)
        return account.id

    async def get_account(self, context: RequestContext, account_id: str) -> dict:
        account = await run_in_threadpool(self.repository.get_account, account_id)
        if account is None:
            raise NotFound(USER_NOT_FOUND)
        authorization.require_self(context, account_id, authorization.SEND_AS_SELF, 422)
        return account_view(account)

    async def update_password(self, context: RequestContext, account_id: str, payload: Mapping[str, Any]) -> None:
        """Upsert keyed by the path id; repeating the call converges on the same record."""
        values = validate(payload, ACCOUNT_UPDATE)
        authorization.require_self(context, account_id, authorization.EDIT_OWN_PROFILE, 401)
        password_hash = await self.hasher.hash(values["password"])
        await run_in_threadpool(
            self.repository.upsert_account,
            account_id,
            password_hash=password_hash,
            username=values.get("username"),
            default_username=context.username,
        )
        logger.info("Account %s updated", account_id)

    async def delete_account(self, context: RequestContext, account_id: str) -> None:
        account = await run_in_threadpool(self.repository.get_account, account_id)
        if account is None:
            raise NotFound(USER_NOT_FOUND)
        authorization.require_self(context, account_id, authorization.DELETE_OWN_ACCOUNT, 401)
        await run_in_threadpool(self.repository.delete_account, account_id)
        logger.info("Account %s deleted", account_id)
