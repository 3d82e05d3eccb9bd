from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from app.api import deps
from app.db.mock_db import MemoryStore
from app.models.classes import LocationCreate, LocationResponse, LocationUpdate

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[LocationResponse])
async def read_locations(store: MemoryStore = Depends(deps.get_store)) -> Any:
    """Retrieve class locations."""
    return store.locations.all()


@router.get("/{location_id}", response_model=LocationResponse)
async def read_location(location_id: int, store: MemoryStore = Depends(deps.get_store)) -> Any:
    location = store.locations.get(location_id)
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    return location


@admin_router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
async def create_location(
    location_in: LocationCreate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    return store.locations.insert(location_in.model_dump())


@admin_router.put("/{location_id}", response_model=LocationResponse)
async def update_location(
    location_id: int,
    update: LocationUpdate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    location = store.locations.update(location_id, update.changes())
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    return location


@admin_router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_location(location_id: int, store: MemoryStore = Depends(deps.get_store)) -> Response:
    if not store.locations.delete(location_id):
        raise HTTPException(status_code=404, detail="Location not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
