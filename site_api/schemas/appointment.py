"""Schemas for appointment endpoints (/api/appointments)."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from site_api.schemas.common import FormText, UtcDatetime


class AppointmentCreate(BaseModel):
    """Request body for booking an appointment.

    Fields are optional here so that missing ones reach the presence check
    and come back as a 400 with the standard message.
    """

    name: FormText = None
    phone: FormText = None
    date: FormText = None
    service: FormText = None


class AppointmentRead(BaseModel):
    """Stored appointment as returned to clients."""

    id: str = Field(validation_alias=AliasChoices("_id", "id"), serialization_alias="_id")
    name: str | None = None
    phone: str | None = None
    date: str | None = None
    service: str | None = None
    created_at: UtcDatetime = Field(
        validation_alias=AliasChoices("createdAt", "created_at"),
        serialization_alias="createdAt",
    )

    model_config = ConfigDict(from_attributes=True)


class AppointmentCreated(BaseModel):
    message: str
    appointment: AppointmentRead
