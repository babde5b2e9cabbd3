from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import pytest

# Garante que o pacote sup_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sup_api.core import config as core_config  # noqa: E402
from sup_api.core.security import PasswordHasher  # noqa: E402
from sup_api.db import models  # noqa: E402
from sup_api.db import session as db_session  # noqa: E402
from sup_api.repositories.sql_repository import SQLRepository  # noqa: E402


@pytest.fixture()
def db_env(tmp_path, monkeypatch):
    """Temporary SQLite database and cheap argon2 parameters; resets settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("PASSWORD_HASH_TIME_COST", "1")
    monkeypatch.setenv("PASSWORD_HASH_MEMORY_COST", "1024")
    monkeypatch.setenv("PASSWORD_HASH_PARALLELISM", "1")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=engine)
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def make_account(db_env):
    """Insert an account directly in the store and return it."""
    repo = SQLRepository()
    hasher = PasswordHasher()

    def _make(username: str, password: str = "12345"):
        password_hash = asyncio.run(hasher.hash(password))
        return repo.create_account(username, password_hash)

    return _make
