from __future__ import annotations

import asyncio

import pytest

from sup_api.core.errors import Forbidden, NotFound, ValidationError
from sup_api.core.security import PasswordHasher
from sup_api.domain.context import RequestContext
from sup_api.repositories.sql_repository import SQLRepository
from sup_api.services.account_service import AccountService


def test_put_on_missing_id_is_idempotent(db_env):
    repo = SQLRepository()
    svc = AccountService()
    # principal whose record is gone from the store
    ctx = RequestContext(account_id="0" * 24, username="ghost")

    asyncio.run(svc.update_password(ctx, ctx.account_id, {"password": "newpass"}))
    first = repo.get_account(ctx.account_id)
    asyncio.run(svc.update_password(ctx, ctx.account_id, {"password": "newpass"}))
    second = repo.get_account(ctx.account_id)

    assert first is not None and second is not None
    assert (first.id, first.username) == (second.id, second.username) == (ctx.account_id, "ghost")
    assert len(repo.list_accounts()) == 1
    assert asyncio.run(PasswordHasher().verify("newpass", second.password_hash)) is True


def test_put_updates_password_and_keeps_username(make_account):
    account = make_account("alice", "12345")
    ctx = RequestContext(account_id=account.id, username="alice")

    asyncio.run(AccountService().update_password(ctx, account.id, {"password": " newpass "}))

    stored = SQLRepository().get_account(account.id)
    assert stored.username == "alice"
    hasher = PasswordHasher()
    assert asyncio.run(hasher.verify("newpass", stored.password_hash)) is True
    assert asyncio.run(hasher.verify("12345", stored.password_hash)) is False


def test_put_validates_before_checking_ownership(make_account):
    alice = make_account("alice")
    bob = make_account("bob")
    ctx = RequestContext(account_id=alice.id, username="alice")
    svc = AccountService()

    with pytest.raises(ValidationError) as info:
        asyncio.run(svc.update_password(ctx, bob.id, {}))
    assert info.value.message == "Missing field: password"

    with pytest.raises(Forbidden) as info:
        asyncio.run(svc.update_password(ctx, bob.id, {"password": "hijack"}))
    assert info.value.message == "You must edit your own profile"
    assert info.value.status_code == 401

    stored = SQLRepository().get_account(bob.id)
    assert asyncio.run(PasswordHasher().verify("12345", stored.password_hash)) is True


def test_delete_other_account_leaves_it_untouched(make_account):
    alice = make_account("alice")
    bob = make_account("bob")
    ctx = RequestContext(account_id=alice.id, username="alice")

    with pytest.raises(Forbidden) as info:
        asyncio.run(AccountService().delete_account(ctx, bob.id))
    assert info.value.message == "You cannot delete other users"
    assert info.value.status_code == 401
    assert SQLRepository().get_account(bob.id) is not None


def test_fetch_reports_missing_before_ownership(make_account):
    alice = make_account("alice")
    bob = make_account("bob")
    ctx = RequestContext(account_id=alice.id, username="alice")
    svc = AccountService()

    with pytest.raises(NotFound) as info:
        asyncio.run(svc.get_account(ctx, "f" * 24))
    assert info.value.message == "User not found"

    with pytest.raises(Forbidden) as info:
        asyncio.run(svc.get_account(ctx, bob.id))
    assert info.value.status_code == 422
    assert info.value.message == "Please send from your username"

    assert asyncio.run(svc.get_account(ctx, alice.id)) == {"id": alice.id, "username": "alice"}
