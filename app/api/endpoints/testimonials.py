from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from app.api import deps
from app.db.mock_db import MemoryStore
from app.models.content import TestimonialCreate, TestimonialResponse, TestimonialUpdate

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[TestimonialResponse])
async def read_testimonials(store: MemoryStore = Depends(deps.get_store)) -> Any:
    return store.testimonials.all()


@router.get("/{testimonial_id}", response_model=TestimonialResponse)
async def read_testimonial(testimonial_id: int, store: MemoryStore = Depends(deps.get_store)) -> Any:
    testimonial = store.testimonials.get(testimonial_id)
    if not testimonial:
        raise HTTPException(status_code=404, detail="Testimonial not found")
    return testimonial


@admin_router.post("", response_model=TestimonialResponse, status_code=status.HTTP_201_CREATED)
async def create_testimonial(
    testimonial_in: TestimonialCreate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    return store.testimonials.insert(testimonial_in.model_dump())


@admin_router.put("/{testimonial_id}", response_model=TestimonialResponse)
async def update_testimonial(
    testimonial_id: int,
    update: TestimonialUpdate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    testimonial = store.testimonials.update(testimonial_id, update.changes())
    if not testimonial:
        raise HTTPException(status_code=404, detail="Testimonial not found")
    return testimonial


@admin_router.delete("/{testimonial_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_testimonial(testimonial_id: int, store: MemoryStore = Depends(deps.get_store)) -> Response:
    if not store.testimonials.delete(testimonial_id):
        raise HTTPException(status_code=404, detail="Testimonial not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
