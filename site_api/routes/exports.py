"""Spreadsheet export endpoint.

GET /api/export/{type} with type in {appointments, messages, blogs}
-> <type>.xlsx as an attachment.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from site_api.errors import ClientInputError, NotFoundError
from site_api.routes.deps import get_store
from site_api.schemas import AppointmentRead, BlogRead, MessageRead
from site_api.services.export import XLSX_MEDIA_TYPE, ExportType, build_workbook
from site_api.stores import RecordStore

router = APIRouter()
logger = logging.getLogger("uvicorn.error")

_READ_SCHEMAS = {
    ExportType.APPOINTMENTS: AppointmentRead,
    ExportType.MESSAGES: MessageRead,
    ExportType.BLOGS: BlogRead,
}


def _repository(store: RecordStore, export_type: ExportType):
    return {
        ExportType.APPOINTMENTS: store.appointments,
        ExportType.MESSAGES: store.messages,
        ExportType.BLOGS: store.blogs,
    }[export_type]


@router.get("/export/{export_type}")
async def export_collection(export_type: str, store: RecordStore = Depends(get_store)) -> Response:
    """Download a whole collection as an .xlsx workbook.

    Raises:
        ClientInputError: If export_type is not an exportable collection.
        NotFoundError: If the collection is empty.
    """
    try:
        kind = ExportType(export_type)
    except ValueError:
        raise ClientInputError(
            "Invalid export type",
            detail={"type": export_type, "supported": [t.value for t in ExportType]},
        )

    records = await _repository(store, kind).find_all(sort="oldest")
    if not records:
        raise NotFoundError("No data found to export.", code="NO_DATA", detail={"type": kind.value})

    schema = _READ_SCHEMAS[kind]
    rows = [schema.model_validate(r).model_dump(by_alias=True, exclude_none=True) for r in records]
    content = build_workbook(kind.value, rows)
    logger.info(f"Exported {len(rows)} {kind.value} rows")

    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={kind.value}.xlsx"},
    )
