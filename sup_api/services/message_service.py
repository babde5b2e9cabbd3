"""
Message use cases.

Creation runs the checks strictly in sequence: payload schema, then the
sender must exist, then the sender must be the principal, then the
recipient must exist. The first failure wins, so a request sending as
someone else never looks the recipient up.

Nothing wraps the existence checks and the insert in a transaction; an
account deleted in between leaves a message pointing at a missing id.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from starlette.concurrency import run_in_threadpool

from sup_api.core.errors import NotFound
from sup_api.db.models import Message
from sup_api.domain.context import RequestContext
from sup_api.domain.validation import MESSAGE_CREATE, validate
from sup_api.repositories.sql_repository import SQLRepository
from sup_api.services import authorization
from sup_api.services.account_service import account_view
from sup_api.services.integrity import ReferentialIntegrityChecker

logger = logging.getLogger(__name__)

MESSAGE_NOT_FOUND = "Message not found"


@dataclass
class MessageService:
    repository: SQLRepository = field(default_factory=SQLRepository)
    integrity: ReferentialIntegrityChecker | None = None

    def __post_init__(self):
        if self.integrity is None:
            self.integrity = ReferentialIntegrityChecker(self.repository)

    # -------------------------------------- reads --------------------------------------
    async def _expand(self, messages: list[Message]) -> list[dict]:
        """Replace from/to ids with account projections using one batched lookup."""
        ids = {m.from_id for m in messages} | {m.to_id for m in messages}
        accounts = await run_in_threadpool(self.repository.get_accounts_by_ids, ids)
        return [
            {
                "id": m.id,
                "from": account_view(accounts.get(m.from_id)),
                "to": account_view(accounts.get(m.to_id)),
                "text": m.text,
                "created_at": m.created_at.isoformat() if m.created_at else None,
            }
            for m in messages
        ]

    async def list_messages(self, context: RequestContext, from_id: str | None = None, to_id: str | None = None) -> list[dict]:
        messages = await run_in_threadpool(self.repository.list_messages, from_id, to_id)
        return await self._expand(messages)

    async def get_message(self, context: RequestContext, message_id: str) -> dict:
        message = await run_in_threadpool(self.repository.get_message, message_id)
        if message is None:
            raise NotFound(MESSAGE_NOT_FOUND)
        expanded = await self._expand([message])
        return expanded[0]

    # -------------------------------------- create --------------------------------------
    async def create_message(self, context: RequestContext, payload: Mapping[str, Any]) -> str:
        values = validate(payload, MESSAGE_CREATE)
        from_id, to_id = values["from"], values["to"]
        await self.integrity.require_account(from_id, "from")
        authorization.require_sender(context, from_id)
        await self.integrity.require_account(to_id, "to")
        message = await run_in_threadpool(self.repository.create_message, from_id, to_id, values["text"])
        logger.info("Message %s created from %s to %s", message.id, from_id, to_id)
        return message.id
