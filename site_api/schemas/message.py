"""Schemas for contact message endpoints (/api/messages)."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from site_api.schemas.common import FormText, UtcDatetime


class MessageCreate(BaseModel):
    """Request body for a contact form submission."""

    name: FormText = None
    email: FormText = None
    phone: FormText = None
    message: FormText = None


class MessageRead(BaseModel):
    id: str = Field(validation_alias=AliasChoices("_id", "id"), serialization_alias="_id")
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    message: str | None = None
    created_at: UtcDatetime = Field(
        validation_alias=AliasChoices("createdAt", "created_at"),
        serialization_alias="createdAt",
    )

    model_config = ConfigDict(from_attributes=True)
