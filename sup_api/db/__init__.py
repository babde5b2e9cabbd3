"""SQL persistence: declarative base, engine/session factories and the account/message tables."""

from .session import Base, get_engine, get_session
from .models import Account, Message

__all__ = ["Account", "Base", "Message", "get_engine", "get_session"]
