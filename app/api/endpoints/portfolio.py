from typing import Any, List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from app.api import deps
from app.db.mock_db import MemoryStore
from app.models.service import (
    PortfolioItemCreate, PortfolioItemUpdate, PortfolioItemWithService,
)

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[PortfolioItemWithService])
async def read_portfolio(
    service: Optional[int] = Query(default=None),
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    """Portfolio items, each with the service it showcases."""
    return store.list_portfolio(service_id=service)


@router.get("/{item_id}", response_model=PortfolioItemWithService)
async def read_portfolio_item(item_id: int, store: MemoryStore = Depends(deps.get_store)) -> Any:
    item = store.get_portfolio_item(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Portfolio item not found")
    return item


@admin_router.post("", response_model=PortfolioItemWithService, status_code=status.HTTP_201_CREATED)
async def create_portfolio_item(
    item_in: PortfolioItemCreate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    item = store.create_portfolio_item(item_in.model_dump())
    return store.get_portfolio_item(item["id"])


@admin_router.put("/{item_id}", response_model=PortfolioItemWithService)
async def update_portfolio_item(
    item_id: int,
    update: PortfolioItemUpdate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    item = store.update_portfolio_item(item_id, update.changes())
    if not item:
        raise HTTPException(status_code=404, detail="Portfolio item not found")
    return store.get_portfolio_item(item_id)


@admin_router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_portfolio_item(item_id: int, store: MemoryStore = Depends(deps.get_store)) -> Response:
    if not store.portfolio_items.delete(item_id):
        raise HTTPException(status_code=404, detail="Portfolio item not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
