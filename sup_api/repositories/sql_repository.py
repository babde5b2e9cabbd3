"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import secrets
from datetime import datetime, timezone
from typing import Iterable, Optional

from sqlalchemy import select, delete

from sup_api.db.models import Account, Message
from sup_api.db.session import get_session


def new_id() -> str:
    """Opaque 24-hex identifier for new records."""
    return secrets.token_hex(12)


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    # -------------------------- accounts --------------------------
    def get_account(self, account_id: str) -> Optional[Account]:
        with get_session() as session:
            return session.get(Account, account_id)

    def find_account_by_username(self, username: str) -> Optional[Account]:
        with get_session() as session:
            stmt = select(Account).where(Account.username == username).limit(1)
            return session.execute(stmt).scalars().first()

    def list_accounts(self) -> list[Account]:
        with get_session() as session:
            return list(session.execute(select(Account).order_by(Account.created_at)).scalars().all())

    def get_accounts_by_ids(self, account_ids: Iterable[str]) -> dict[str, Account]:
        ids = {account_id for account_id in account_ids if account_id}
        if not ids:
            return {}
        with get_session() as session:
            stmt = select(Account).where(Account.id.in_(ids))
            return {account.id: account for account in session.execute(stmt).scalars().all()}

    def create_account(self, username: str, password_hash: str) -> Account:
        now = datetime.now(timezone.utc)
        entity = Account(id=new_id(), username=username, password_hash=password_hash, created_at=now, updated_at=now)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def upsert_account(self, account_id: str, *, password_hash: str, username: str | None = None, default_username: str = "") -> Account:
        """Update the account keyed by id, or insert it with defaults when missing."""
        now = datetime.now(timezone.utc)
        with get_session() as session:
            account = session.get(Account, account_id)
            if not account:
                account = Account(
                    id=account_id,
                    username=username or default_username,
                    password_hash=password_hash,
                    created_at=now,
                    updated_at=now,
                )
                session.add(account)
            else:
                account.password_hash = password_hash
                if username is not None:
                    account.username = username
                account.updated_at = now
            session.commit()
            session.refresh(account)
            return account

    def delete_account(self, account_id: str) -> bool:
        with get_session() as session:
            result = session.execute(delete(Account).where(Account.id == account_id))
            session.commit()
            return bool(result.rowcount)

    # -------------------------- messages --------------------------
    def get_message(self, message_id: str) -> Optional[Message]:
        with get_session() as session:
            return session.get(Message, message_id)

    def list_messages(self, from_id: str | None = None, to_id: str | None = None) -> list[Message]:
        stmt = select(Message)
        if from_id is not None:
            stmt = stmt.where(Message.from_id == from_id)
        if to_id is not None:
            stmt = stmt.where(Message.to_id == to_id)
        with get_session() as session:
            return list(session.execute(stmt.order_by(Message.created_at)).scalars().all())

    def create_message(self, from_id: str, to_id: str, text: str) -> Message:
        entity = Message(id=new_id(), from_id=from_id, to_id=to_id, text=text, created_at=datetime.now(timezone.utc))
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity
