"""
Thin async client for the Cloudinary upload API.

Uploads and deletions are signed requests: the parameters (minus the file
and api key) are sorted, joined as `k=v&k=v`, suffixed with the API secret
and SHA-1 hashed.
"""
import hashlib
import re
import time

import httpx
import structlog

from homedecor.shared.config import settings
from homedecor.shared.observability import ecomm_media_operations_total

logger = structlog.get_logger(__name__)

_PUBLIC_ID_RE = re.compile(r"/v\d+/(.+)\.\w+$")


class MediaHostError(Exception):
    """Raised when the media host is unconfigured or rejects a request."""


def create_product_folder_name(product_name: str) -> str:
    """'Oak Side Table (Large)' -> 'oak-side-table-large', capped at 50 characters."""
    folder = re.sub(r"[^a-z0-9]", "-", product_name.lower())
    folder = re.sub(r"-+", "-", folder).strip("-")
    return folder[:50]


def extract_public_id_from_url(url: str) -> str | None:
    """Public id (folders included, extension stripped) of a hosted image URL."""
    match = _PUBLIC_ID_RE.search(url)
    return match.group(1) if match else None


def sign_params(params: dict, api_secret: str) -> str:
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryClient:
    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        base_url: str = "https://api.cloudinary.com/v1_1",
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.base_url = base_url.rstrip("/")
        self.transport = transport
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)

    def _signed(self, params: dict) -> dict:
        params = {k: v for k, v in params.items() if v is not None}
        params["timestamp"] = str(int(time.time()))
        params["signature"] = sign_params(params, self.api_secret)
        params["api_key"] = self.api_key
        return params

    async def _post(self, action: str, data: dict, files: dict | None = None) -> dict:
        if not self.configured:
            raise MediaHostError("Media host credentials are not configured")

        url = f"{self.base_url}/{self.cloud_name}/image/{action}"
        operation = "upload" if action == "upload" else "destroy"
        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                resp = await client.post(url, data=data, files=files)
                resp.raise_for_status()
                payload = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            ecomm_media_operations_total.labels(operation=operation, outcome="failed").inc()
            logger.error("media_host_request_failed", action=action, error=str(e))
            raise MediaHostError(f"Media host {action} failed: {e}") from e

        ecomm_media_operations_total.labels(operation=operation, outcome="success").inc()
        return payload

    async def upload_image(
        self,
        content: bytes,
        folder: str,
        public_id: str,
        width: int,
        height: int,
        crop: str = "limit",
        filename: str | None = None,
    ) -> str:
        """Uploads an image and returns its HTTPS URL."""
        data = self._signed({
            "folder": folder,
            "public_id": public_id,
            "transformation": f"c_{crop},h_{height},w_{width}/q_auto/f_auto",
        })
        files = {"file": (filename or public_id, content)}
        payload = await self._post("upload", data, files)
        try:
            return payload["secure_url"]
        except KeyError:
            raise MediaHostError("Media host response did not include a URL")

    async def upload_product_image(self, content: bytes, product_name: str, file_name: str) -> str:
        folder = f"products/{create_product_folder_name(product_name)}"
        return await self.upload_image(content, folder, file_name, width=800, height=800)

    async def upload_general_image(
        self,
        content: bytes,
        folder: str,
        file_name: str,
        width: int = 400,
        height: int = 400,
        crop: str = "limit",
    ) -> str:
        return await self.upload_image(content, folder, file_name, width=width, height=height, crop=crop)

    async def delete_image(self, public_id: str) -> None:
        await self._post("destroy", self._signed({"public_id": public_id}))


def get_media_client() -> CloudinaryClient:
    """FastAPI dependency; overridden in tests with a client on a mock transport."""
    return CloudinaryClient(
        cloud_name=settings.CLOUDINARY_CLOUD_NAME,
        api_key=settings.CLOUDINARY_API_KEY,
        api_secret=settings.CLOUDINARY_API_SECRET,
        base_url=settings.CLOUDINARY_API_URL,
    )
