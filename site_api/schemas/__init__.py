"""Pydantic schemas for API request/response validation."""

from site_api.schemas.appointment import AppointmentCreate, AppointmentCreated, AppointmentRead
from site_api.schemas.blog import BlogCreate, BlogCreated, BlogRead, BlogSummary, BlogUpdate
from site_api.schemas.common import ErrorDetail, ErrorResponse, MessageResponse, UploadResponse
from site_api.schemas.message import MessageCreate, MessageRead
from site_api.schemas.open_hour import OpenHourRead, OpenHourWrite

__all__ = [
    "AppointmentCreate",
    "AppointmentCreated",
    "AppointmentRead",
    "BlogCreate",
    "BlogCreated",
    "BlogRead",
    "BlogSummary",
    "BlogUpdate",
    "ErrorDetail",
    "ErrorResponse",
    "MessageCreate",
    "MessageRead",
    "MessageResponse",
    "OpenHourRead",
    "OpenHourWrite",
    "UploadResponse",
]
