from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from homedecor.shared.media import CloudinaryClient, get_media_client
from homedecor.shared.security import require_admin

from .schemas import UploadResponse
from .service import UploadService

router = APIRouter(prefix="/api/upload", tags=["Upload"], dependencies=[Depends(require_admin)])


@router.post("", response_model=UploadResponse)
async def upload_image(
    file: Optional[UploadFile] = File(default=None),
    type: Optional[str] = Form(default=None),
    file_name: Optional[str] = Form(default=None),
    product_name: Optional[str] = Form(default=None),
    media: CloudinaryClient = Depends(get_media_client),
):
    # Checked by hand so a missing field is a 400 rather than a validation 422
    if file is None or not type or not file_name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: file, type, file_name",
        )
    content = await file.read()
    url = await UploadService.upload(media, content, type, file_name, product_name)
    return UploadResponse(image_url=url)
