from .cloudinary import (
    CloudinaryClient,
    MediaHostError,
    create_product_folder_name,
    extract_public_id_from_url,
    get_media_client,
)

__all__ = [
    "CloudinaryClient",
    "MediaHostError",
    "create_product_folder_name",
    "extract_public_id_from_url",
    "get_media_client",
]
