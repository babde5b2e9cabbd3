"""SQLAlchemy models for accounts and messages."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, String, Text, func

from .session import Base


class Account(Base):
    __tablename__ = "accounts"

    id = Column(String(64), primary_key=True)
    # not unique: lookups by username take the first match
    username = Column(String(255), nullable=False, index=True)
    password_hash = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


class Message(Base):
    __tablename__ = "messages"

    id = Column(String(64), primary_key=True)
    # plain ids, accounts can be deleted independently of their messages
    from_id = Column(String(64), nullable=False, index=True)
    to_id = Column(String(64), nullable=False, index=True)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
