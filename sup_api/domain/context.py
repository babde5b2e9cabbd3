"""Per-request identity passed explicitly through the service calls."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """The authenticated principal for one request."""

    account_id: str
    username: str

    def owns(self, account_id: str | None) -> bool:
        return bool(account_id) and account_id == self.account_id
