"""Image upload endpoint.

POST /api/upload (multipart, field "image") -> {"url": ".../uploads/<stored name>"}

Stored files are served back by the static mount at /uploads. No type, size
or content checks are made.
"""

from fastapi import APIRouter, Depends, File, Request, UploadFile

from site_api.errors import ClientInputError
from site_api.routes.deps import get_app_settings, get_upload_storage
from site_api.schemas import UploadResponse
from site_api.settings import Settings
from site_api.stores import UploadStorage

router = APIRouter()


@router.post("/upload", response_model=UploadResponse)
async def upload_image(
    request: Request,
    image: UploadFile | None = File(default=None),
    uploads: UploadStorage = Depends(get_upload_storage),
    settings: Settings = Depends(get_app_settings),
) -> UploadResponse:
    """Store one uploaded file and return its public URL.

    Raises:
        ClientInputError: If the request carries no "image" file.
    """
    if image is None or not image.filename:
        raise ClientInputError("No file uploaded")

    data = await image.read()
    filename = await uploads.save(image.filename, data)

    if settings.public_base_url:
        url = f"{settings.public_base_url.rstrip('/')}/uploads/{filename}"
    else:
        url = str(request.url_for("uploads", path=filename))
    return UploadResponse(url=url)
