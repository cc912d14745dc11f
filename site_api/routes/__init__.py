"""API routes."""

from fastapi import APIRouter

from site_api.routes import appointments, blogs, exports, messages, open_hours, uploads

api_router = APIRouter(prefix="/api")

api_router.include_router(appointments.router, prefix="/appointments", tags=["appointments"])
api_router.include_router(messages.router, prefix="/messages", tags=["messages"])
api_router.include_router(blogs.router, prefix="/blogs", tags=["blogs"])
api_router.include_router(open_hours.router, prefix="/open-hours", tags=["open-hours"])

# Files (upload + spreadsheet export)
api_router.include_router(uploads.router, tags=["uploads"])
api_router.include_router(exports.router, tags=["export"])
