"""Presence-only validation for create payloads.

A field passes when it is present and truthy. There is no format checking
(phone numbers, dates and emails are taken as typed) and no coercion.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from site_api.errors import ClientInputError

APPOINTMENT_REQUIRED = ("name", "phone", "date", "service")
MESSAGE_REQUIRED = ("name", "email", "phone", "message")
BLOG_REQUIRED = ("title", "date", "image", "content")


def missing_fields(payload: Mapping[str, Any], required: Iterable[str]) -> list[str]:
    """Return required field names that are absent or falsy, in declared order."""
    return [field for field in required if not payload.get(field)]


def require_fields(payload: Mapping[str, Any], required: Iterable[str]) -> None:
    """Raise ClientInputError unless every required field is present and non-empty."""
    missing = missing_fields(payload, required)
    if missing:
        raise ClientInputError("All fields are required.", detail={"missing": missing})
