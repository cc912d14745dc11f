"""Common schemas used across the API."""

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator


def _as_utc(value: datetime) -> datetime:
    # Some backends (SQLite) hand back naive timestamps; they are stored as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


def _scalar_to_text(value: Any) -> Any:
    # Form clients sometimes send numbers or booleans; they are stored as text.
    # Falsy ones become "" so the presence check still treats them as missing.
    if isinstance(value, bool):
        return "true" if value else ""
    if isinstance(value, (int, float)):
        if not value:
            return ""
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    return value


# Text field that accepts any JSON scalar. Objects and arrays are still rejected.
FormText = Annotated[str | None, BeforeValidator(_scalar_to_text)]


class ErrorDetail(BaseModel):
    """Structured error detail."""

    code: str
    message: str
    detail: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format.

    Format: { "error": { "code": str, "message": str, "detail": object } }
    """

    error: ErrorDetail


class MessageResponse(BaseModel):
    """Plain confirmation, e.g. {"message": "Blog deleted successfully"}."""

    message: str


class UploadResponse(BaseModel):
    """Retrieval URL of a stored upload."""

    url: str
