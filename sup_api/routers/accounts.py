from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from sup_api.domain.context import RequestContext
from sup_api.routers.deps import current_context, get_account_service, json_payload
from sup_api.services.account_service import AccountService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("")
async def list_accounts(
    context: RequestContext = Depends(current_context),
    service: AccountService = Depends(get_account_service),
):
    return await service.list_accounts(context)


@router.post("")
async def create_account(
    payload: dict = Depends(json_payload),
    service: AccountService = Depends(get_account_service),
):
    account_id = await service.create_account(payload)
    return JSONResponse({}, status_code=201, headers={"Location": f"/accounts/{account_id}"})


@router.get("/{account_id}")
async def get_account(
    account_id: str,
    context: RequestContext = Depends(current_context),
    service: AccountService = Depends(get_account_service),
):
    return await service.get_account(context, account_id)


@router.put("/{account_id}")
async def update_account(
    account_id: str,
    context: RequestContext = Depends(current_context),
    payload: dict = Depends(json_payload),
    service: AccountService = Depends(get_account_service),
):
    await service.update_password(context, account_id, payload)
    return {}


@router.delete("/{account_id}")
async def delete_account(
    account_id: str,
    context: RequestContext = Depends(current_context),
    service: AccountService = Depends(get_account_service),
):
    await service.delete_account(context, account_id)
    return {}
