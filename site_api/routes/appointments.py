"""Appointment endpoints.

POST /api/appointments - book an appointment (all fields required)
GET  /api/appointments - all appointments, newest first
"""

import logging

from fastapi import APIRouter, Depends, status

from site_api.routes.deps import get_store
from site_api.schemas import AppointmentCreate, AppointmentCreated, AppointmentRead
from site_api.services.validation import APPOINTMENT_REQUIRED, require_fields
from site_api.stores import RecordStore

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


@router.post("", response_model=AppointmentCreated, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    payload: AppointmentCreate,
    store: RecordStore = Depends(get_store),
) -> AppointmentCreated:
    """Book an appointment.

    Raises:
        ClientInputError: If name, phone, date or service is missing.
    """
    fields = payload.model_dump()
    require_fields(fields, APPOINTMENT_REQUIRED)

    appointment = await store.appointments.insert(fields)
    logger.info(f"Appointment saved id={appointment.id} service={appointment.service!r}")

    return AppointmentCreated(
        message="Appointment saved successfully",
        appointment=AppointmentRead.model_validate(appointment),
    )


@router.get("", response_model=list[AppointmentRead])
async def list_appointments(store: RecordStore = Depends(get_store)) -> list[AppointmentRead]:
    """List all appointments, newest first."""
    appointments = await store.appointments.find_all(sort="newest")
    return [AppointmentRead.model_validate(a) for a in appointments]
