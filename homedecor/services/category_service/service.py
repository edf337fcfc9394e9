import structlog
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Category, slugify
from .repository import CategoryRepository
from .schemas import CategoryCreate, CategoryUpdate

logger = structlog.get_logger(__name__)


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class CategoryService:

    @staticmethod
    async def list_categories(db: AsyncSession, is_active: bool | None, include_inactive: bool):
        # An explicit is_active filter wins; otherwise hide inactive ones unless asked
        if is_active is None and not include_inactive:
            is_active = True
        return await CategoryRepository.list_categories(db, is_active)

    @staticmethod
    async def get_category(db: AsyncSession, category_id: int) -> Category:
        category = await CategoryRepository.get_by_id(db, category_id)
        if not category:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
        return category

    @staticmethod
    async def _check_parent(db: AsyncSession, parent_id: int | None) -> None:
        if parent_id is not None and not await CategoryRepository.get_by_id(db, parent_id):
            raise _bad_request("Parent category not found")

    @staticmethod
    async def create_category(db: AsyncSession, data: CategoryCreate) -> Category:
        if await CategoryRepository.get_by_name(db, data.name):
            raise _bad_request("Category with this name already exists")

        slug = slugify(data.slug or data.name)
        if not slug:
            raise _bad_request("Category name must contain letters or digits")
        if await CategoryRepository.get_by_slug(db, slug):
            raise _bad_request("Category with this slug already exists")
        await CategoryService._check_parent(db, data.parent_category_id)

        category = Category(**data.model_dump(exclude={"slug"}), slug=slug)
        category = await CategoryRepository.save(db, category)
        logger.info("category_created", category_id=category.id, slug=slug)
        return category

    @staticmethod
    async def update_category(db: AsyncSession, category_id: int, data: CategoryUpdate) -> Category:
        category = await CategoryService.get_category(db, category_id)
        changes = data.model_dump(exclude_unset=True)

        name = changes.get("name")
        if name and name != category.name:
            conflict = await CategoryRepository.get_by_name(db, name)
            if conflict and conflict.id != category_id:
                raise _bad_request("Category with this name already exists")

        if "parent_category_id" in changes:
            parent_id = changes["parent_category_id"]
            if parent_id == category_id:
                raise _bad_request("Category cannot be its own parent")
            await CategoryService._check_parent(db, parent_id)

        for field, value in changes.items():
            setattr(category, field, value)
        return await CategoryRepository.save(db, category)

    @staticmethod
    async def delete_category(db: AsyncSession, category_id: int) -> None:
        category = await CategoryService.get_category(db, category_id)
        if await CategoryRepository.count_children(db, category_id) > 0:
            raise _bad_request(
                "Cannot delete category with child categories. "
                "Please reassign or delete child categories first."
            )
        await CategoryRepository.delete(db, category)
        logger.info("category_deleted", category_id=category_id)
