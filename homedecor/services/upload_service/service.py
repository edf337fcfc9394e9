import structlog
from fastapi import HTTPException, status

from homedecor.shared.media import CloudinaryClient, MediaHostError

logger = structlog.get_logger(__name__)

# type -> (folder, width, height); product images go under products/<name>
GENERAL_PRESETS = {
    "logo": ("logos", 200, 200),
    "avatar": ("avatars", 150, 150),
    "hero": ("hero", 1200, 600),
}


class UploadService:

    @staticmethod
    async def upload(
        media: CloudinaryClient,
        content: bytes,
        upload_type: str,
        file_name: str,
        product_name: str | None = None,
    ) -> str:
        if upload_type == "product":
            if not product_name:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Product name is required for product images",
                )
        elif upload_type not in GENERAL_PRESETS:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unsupported upload type '{upload_type}'",
            )

        try:
            if upload_type == "product":
                url = await media.upload_product_image(content, product_name, file_name)
            else:
                folder, width, height = GENERAL_PRESETS[upload_type]
                url = await media.upload_general_image(content, folder, file_name, width=width, height=height)
        except MediaHostError as e:
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to upload image") from e

        logger.info("image_uploaded", type=upload_type, file_name=file_name, url=url)
        return url
