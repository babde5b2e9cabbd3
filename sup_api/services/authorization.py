"""Ownership checks. There are no roles: the principal must own the resource."""

from __future__ import annotations

import logging

from sup_api.core.errors import Forbidden, UnprocessableEntity
from sup_api.domain.context import RequestContext

logger = logging.getLogger(__name__)

SEND_AS_SELF = "Please send from your username"
EDIT_OWN_PROFILE = "You must edit your own profile"
DELETE_OWN_ACCOUNT = "You cannot delete other users"


def require_self(context: RequestContext, account_id: str, message: str, status_code: int) -> None:
    """Reject when the path-addressed account is not the principal's own."""
    if not context.owns(account_id):
        logger.info("Account %s denied access to account %s", context.account_id, account_id)
        raise Forbidden(message, status_code)


def require_sender(context: RequestContext, from_id: str) -> None:
    if not context.owns(from_id):
        logger.info("Account %s tried to send as %s", context.account_id, from_id)
        raise UnprocessableEntity(SEND_AS_SELF)
