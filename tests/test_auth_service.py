from __future__ import annotations

import asyncio

import pytest

from sup_api.core.errors import Unauthenticated
from sup_api.services.auth_service import AuthService


def test_authenticate_returns_principal_for_matching_pair(make_account):
    account = make_account("alice", "12345")

    context = asyncio.run(AuthService().authenticate("alice", "12345"))

    assert context.account_id == account.id
    assert context.username == "alice"


@pytest.mark.parametrize("password", ["1234", "123456", "", "12345 "])
def test_authenticate_rejects_any_other_password(make_account, password):
    make_account("alice", "12345")

    with pytest.raises(Unauthenticated) as info:
        asyncio.run(AuthService().authenticate("alice", password))
    assert info.value.message == "Incorrect password"
    assert info.value.status_code == 401


def test_unknown_username_has_same_status_but_different_message(make_account):
    make_account("alice", "12345")

    with pytest.raises(Unauthenticated) as info:
        asyncio.run(AuthService().authenticate("mallory", "12345"))
    assert info.value.message == "Incorrect username"
    assert info.value.status_code == 401
