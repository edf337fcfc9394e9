from pydantic import BaseModel


class UploadResponse(BaseModel):
    success: bool = True
    image_url: str
    message: str = "Image uploaded successfully"
