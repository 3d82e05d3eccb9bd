from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from app.api import deps
from app.db.mock_db import MemoryStore
from app.models.classes import CategoryCreate, CategoryResponse, CategoryUpdate

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[CategoryResponse])
async def read_categories(store: MemoryStore = Depends(deps.get_store)) -> Any:
    """Retrieve class categories."""
    return store.categories.all()


@router.get("/{category_id}", response_model=CategoryResponse)
async def read_category(category_id: int, store: MemoryStore = Depends(deps.get_store)) -> Any:
    category = store.categories.get(category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@admin_router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_in: CategoryCreate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    return store.categories.insert(category_in.model_dump())


@admin_router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    update: CategoryUpdate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    category = store.categories.update(category_id, update.changes())
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@admin_router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: int, store: MemoryStore = Depends(deps.get_store)) -> Response:
    if not store.categories.delete(category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
