"""Shared dependencies: Basic credentials, JSON payload, service factories."""
from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from sup_api.core.errors import BadRequest, Unauthenticated
from sup_api.domain.context import RequestContext
from sup_api.services.account_service import AccountService
from sup_api.services.auth_service import AuthService
from sup_api.services.message_service import MessageService

_basic = HTTPBasic(auto_error=False)


def get_auth_service() -> AuthService:
    return AuthService()


def get_account_service() -> AccountService:
    return AccountService()


def get_message_service() -> MessageService:
    return MessageService()


async def current_context(
    credentials: HTTPBasicCredentials | None = Depends(_basic),
    auth_service: AuthService = Depends(get_auth_service),
) -> RequestContext:
    if credentials is None:
        raise Unauthenticated("Missing credentials")
    return await auth_service.authenticate(credentials.username, credentials.password)


async def json_payload(request: Request) -> dict:
    """Body as a dict; an empty body counts as {} so field checks report what is missing."""
    if not (await request.body()).strip():
        return {}
    try:
        data = await request.json()
    except ValueError:
        raise BadRequest("Invalid request body")
    if not isinstance(data, dict):
        raise BadRequest("Invalid request body")
    return data
