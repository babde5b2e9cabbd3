"""
Declarative payload validation.

A schema is an ordered tuple of FieldRule. validate() walks it in order and
stops at the first failing check; for each field the checks run as
presence, type-is-string, trim, non-empty. Messages are stable and name the
offending field, e.g. "Missing field: username".
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from sup_api.core.errors import ValidationError

MISSING = "Missing field: {}"
WRONG_TYPE = "Incorrect field type: {}"
EMPTY = "Incorrect field length: {}"


@dataclass(frozen=True)
class FieldRule:
    name: str
    required: bool = True

    def check(self, payload: Mapping[str, Any]) -> str | None:
        """Return the trimmed value, None for an absent optional field."""
        if self.name not in payload:
            if self.required:
                raise ValidationError(MISSING.format(self.name))
            return None
        value = payload[self.name]
        if not isinstance(value, str):
            raise ValidationError(WRONG_TYPE.format(self.name))
        value = value.strip()
        if value == "":
            raise ValidationError(EMPTY.format(self.name))
        return value


def validate(payload: Mapping[str, Any], schema: tuple[FieldRule, ...]) -> dict[str, str]:
    """Apply schema to payload and return the cleaned values, fail-fast."""
    cleaned: dict[str, str] = {}
    for rule in schema:
        value = rule.check(payload)
        if value is not None:
            cleaned[rule.name] = value
    return cleaned


ACCOUNT_CREATE = (FieldRule("username"), FieldRule("password"))
ACCOUNT_UPDATE = (FieldRule("password"), FieldRule("username", required=False))
MESSAGE_CREATE = (FieldRule("text"), FieldRule("to"), FieldRule("from"))
