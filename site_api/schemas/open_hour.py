"""Schemas for business hours endpoints (/api/open-hours)."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from site_api.schemas.common import FormText


class OpenHourWrite(BaseModel):
    """Body for both the upsert (keyed by day) and the replace-by-id call.

    Times are free-form strings; nothing is validated.
    """

    day: FormText = None
    open: FormText = None
    close: FormText = None


class OpenHourRead(BaseModel):
    id: str = Field(validation_alias=AliasChoices("_id", "id"), serialization_alias="_id")
    day: str | None = None
    open: str | None = None
    close: str | None = None

    model_config = ConfigDict(from_attributes=True)
