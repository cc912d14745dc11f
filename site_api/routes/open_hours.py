"""Business hours endpoints.

GET  /api/open-hours      - every configured day
POST /api/open-hours      - create or replace the hours of one day (keyed by day)
PUT  /api/open-hours/{id} - overwrite day/open/close of one record
"""

import logging

from fastapi import APIRouter, Depends

from site_api.routes.deps import get_store
from site_api.schemas import OpenHourRead, OpenHourWrite
from site_api.stores import RecordStore

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


@router.get("", response_model=list[OpenHourRead])
async def list_open_hours(store: RecordStore = Depends(get_store)) -> list[OpenHourRead]:
    hours = await store.open_hours.find_all()
    return [OpenHourRead.model_validate(h) for h in hours]


@router.post("", response_model=OpenHourRead)
async def upsert_open_hour(
    payload: OpenHourWrite,
    store: RecordStore = Depends(get_store),
) -> OpenHourRead:
    """Set the hours for a day; repeated calls for one day keep a single record."""
    hour = await store.open_hours.upsert_by_key(
        "day",
        payload.day,
        {"open": payload.open, "close": payload.close},
    )
    logger.info(f"Open hours saved day={hour.day!r} {hour.open}-{hour.close}")
    return OpenHourRead.model_validate(hour)


@router.put("/{hour_id}", response_model=OpenHourRead | None)
async def replace_open_hour(
    hour_id: str,
    payload: OpenHourWrite,
    store: RecordStore = Depends(get_store),
) -> OpenHourRead | None:
    """Replace all fields of one record. Responds with null when the id does not exist."""
    hour = await store.open_hours.update_by_id(hour_id, payload.model_dump())
    if hour is None:
        return None

    logger.info(f"Open hours replaced id={hour_id} day={hour.day!r}")
    return OpenHourRead.model_validate(hour)
