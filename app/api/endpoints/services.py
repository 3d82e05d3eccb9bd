from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from app.api import deps
from app.db.mock_db import MemoryStore
from app.models.service import ServiceCreate, ServiceResponse, ServiceUpdate

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[ServiceResponse])
async def read_services(store: MemoryStore = Depends(deps.get_store)) -> Any:
    """Retrieve the services offered."""
    return store.services.all()


@router.get("/slug/{slug}", response_model=ServiceResponse)
async def read_service_by_slug(slug: str, store: MemoryStore = Depends(deps.get_store)) -> Any:
    """Service detail page lookup."""
    service = store.get_service_by_slug(slug)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@router.get("/{service_id}", response_model=ServiceResponse)
async def read_service(service_id: int, store: MemoryStore = Depends(deps.get_store)) -> Any:
    service = store.services.get(service_id)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@admin_router.post("", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
async def create_service(
    service_in: ServiceCreate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    return store.services.insert(service_in.model_dump())


@admin_router.put("/{service_id}", response_model=ServiceResponse)
async def update_service(
    service_id: int,
    update: ServiceUpdate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    service = store.services.update(service_id, update.changes())
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@admin_router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(service_id: int, store: MemoryStore = Depends(deps.get_store)) -> Response:
    if not store.services.delete(service_id):
        raise HTTPException(status_code=404, detail="Service not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
