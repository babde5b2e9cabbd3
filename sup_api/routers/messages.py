from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from sup_api.domain.context import RequestContext
from sup_api.routers.deps import current_context, get_message_service, json_payload
from sup_api.services.message_service import MessageService

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("")
async def list_messages(
    from_id: Optional[str] = Query(None, alias="from"),
    to_id: Optional[str] = Query(None, alias="to"),
    context: RequestContext = Depends(current_context),
    service: MessageService = Depends(get_message_service),
):
    return await service.list_messages(context, from_id=from_id, to_id=to_id)


@router.post("")
async def create_message(
    context: RequestContext = Depends(current_context),
    payload: dict = Depends(json_payload),
    service: MessageService = Depends(get_message_service),
):
    message_id = await service.create_message(context, payload)
    return JSONResponse({}, status_code=201, headers={"Location": f"/messages/{message_id}"})


@router.get("/{message_id}")
async def get_message(
    message_id: str,
    context: RequestContext = Depends(current_context),
    service: MessageService = Depends(get_message_service),
):
    return await service.get_message(context, message_id)
