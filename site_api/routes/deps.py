"""Request dependencies.

The store, settings and upload storage are created once by the application
and stored on ``app.state``; handlers receive them through these functions.
"""

from fastapi import Request

from site_api.settings import Settings
from site_api.stores import RecordStore, UploadStorage


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_upload_storage(request: Request) -> UploadStorage:
    return request.app.state.uploads
