import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from homedecor.shared.media import CloudinaryClient, MediaHostError, extract_public_id_from_url

from .models import Product
from .repository import ProductRepository
from .schemas import ProductCreate, ProductUpdate

logger = structlog.get_logger(__name__)


class ProductService:

    @staticmethod
    async def create_product(db: AsyncSession, data: ProductCreate):
        product = Product(**data.model_dump())
        product = await ProductRepository.create_product(db, product)
        logger.info("product_created", product_id=product.id)
        return product

    @staticmethod
    async def list_products(db: AsyncSession, **filters):
        return await ProductRepository.search_products(db, **filters)

    @staticmethod
    async def get_product_by_id(db: AsyncSession, product_id: int):
        return await ProductRepository.get_product_by_id(db, product_id)

    @staticmethod
    async def update_product(db: AsyncSession, product_id: int, data: ProductUpdate):
        product = await ProductRepository.get_product_by_id(db, product_id)
        if not product:
            return None
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(product, field, value)
        return await ProductRepository.update_product(db, product)

    @staticmethod
    async def delete_product(db: AsyncSession, product_id: int, media: CloudinaryClient) -> bool:
        product = await ProductRepository.get_product_by_id(db, product_id)
        if not product:
            return False

        images = list(product.images or [])
        await ProductRepository.delete_product(db, product)
        logger.info("product_deleted", product_id=product_id)

        # Hosted images go after the row; a failure here never undoes the delete
        for url in images:
            public_id = extract_public_id_from_url(url)
            if not public_id:
                continue
            try:
                await media.delete_image(public_id)
            except MediaHostError as e:
                logger.warning("product_image_cleanup_failed", product_id=product_id, url=url, error=str(e))
        return True
