from typing import Any, List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from app.api import deps
from app.db.mock_db import MemoryStore
from app.models.classes import (
    AvailabilityUpdate, ClassCreate, ClassUpdate, ClassWithDetails,
)

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[ClassWithDetails])
async def read_classes(
    category: Optional[int] = Query(default=None),
    location: Optional[int] = Query(default=None),
    search: Optional[str] = Query(default=None),
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    """List classes. Filters combine; ``search`` matches title or description."""
    return store.list_classes(category_id=category, location_id=location, search=search)


@router.get("/{class_id}", response_model=ClassWithDetails)
async def read_class(class_id: int, store: MemoryStore = Depends(deps.get_store)) -> Any:
    cls = store.get_class(class_id)
    if not cls:
        raise HTTPException(status_code=404, detail="Class not found")
    return cls


@admin_router.post("", response_model=ClassWithDetails, status_code=status.HTTP_201_CREATED)
async def create_class(
    class_in: ClassCreate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    cls = store.create_class(class_in.model_dump())
    return store.get_class(cls["id"])


@admin_router.put("/{class_id}", response_model=ClassWithDetails)
async def update_class(
    class_id: int,
    update: ClassUpdate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    cls = store.update_class(class_id, update.changes())
    if not cls:
        raise HTTPException(status_code=404, detail="Class not found")
    return store.get_class(class_id)


@admin_router.put("/{class_id}/availability", response_model=ClassWithDetails)
async def update_class_availability(
    class_id: int,
    update: AvailabilityUpdate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    """Overwrite ``availableSpots`` only; bounded by the class's total spots."""
    cls = store.update_class_availability(class_id, update.available_spots)
    if not cls:
        raise HTTPException(status_code=404, detail="Class not found")
    return store.get_class(class_id)


@admin_router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_class(class_id: int, store: MemoryStore = Depends(deps.get_store)) -> Response:
    if not store.delete_class(class_id):
        raise HTTPException(status_code=404, detail="Class not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
