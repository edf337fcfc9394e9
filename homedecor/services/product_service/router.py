from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from homedecor.shared.config.database import get_db
from homedecor.shared.media import CloudinaryClient, get_media_client
from homedecor.shared.pagination import page_meta
from homedecor.shared.security import require_admin

from .schemas import (
    ProductCreate,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
    ProductUpdateResponse,
)
from .service import ProductService

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductListResponse)
async def list_products(
    category: Optional[str] = Query(default=None),
    featured: bool = Query(default=False),
    new_arrivals: bool = Query(default=False),
    search: Optional[str] = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    products, total = await ProductService.list_products(
        db,
        category=category,
        featured=featured,
        new_arrivals=new_arrivals,
        search=search,
        skip=(page - 1) * limit,
        limit=limit,
    )
    return ProductListResponse(
        products=products,
        pagination=page_meta(page, limit, total),
    )


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, db: AsyncSession = Depends(get_db)):
    product = await ProductService.get_product_by_id(db, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_product(product: ProductCreate, db: AsyncSession = Depends(get_db)):
    return await ProductService.create_product(db, product)


@router.put(
    "/{product_id}",
    response_model=ProductUpdateResponse,
    dependencies=[Depends(require_admin)],
)
async def update_product(product_id: int, payload: ProductUpdate, db: AsyncSession = Depends(get_db)):
    product = await ProductService.update_product(db, product_id, payload)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"message": "Product updated successfully", "product": product}


@router.delete("/{product_id}", dependencies=[Depends(require_admin)])
async def delete_product(
    product_id: int,
    db: AsyncSession = Depends(get_db),
    media: CloudinaryClient = Depends(get_media_client),
):
    deleted = await ProductService.delete_product(db, product_id, media)
    if not deleted:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"message": "Product deleted successfully"}
