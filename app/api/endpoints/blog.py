from typing import Any, List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from app.api import deps
from app.db.mock_db import MemoryStore
from app.models.content import BlogPostCreate, BlogPostResponse, BlogPostUpdate

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[BlogPostResponse])
async def read_blog_posts(
    category: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None),
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    """Blog posts in publication order. ``search`` matches title or excerpt."""
    return store.list_blog_posts(category=category, search=search)


@router.get("/slug/{slug}", response_model=BlogPostResponse)
async def read_blog_post_by_slug(slug: str, store: MemoryStore = Depends(deps.get_store)) -> Any:
    post = store.get_blog_post_by_slug(slug)
    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return post


@router.get("/{post_id}", response_model=BlogPostResponse)
async def read_blog_post(post_id: int, store: MemoryStore = Depends(deps.get_store)) -> Any:
    post = store.blog_posts.get(post_id)
    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return post


@admin_router.post("", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED)
async def create_blog_post(
    post_in: BlogPostCreate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    return store.create_blog_post(post_in.model_dump())


@admin_router.put("/{post_id}", response_model=BlogPostResponse)
async def update_blog_post(
    post_id: int,
    update: BlogPostUpdate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    post = store.blog_posts.update(post_id, update.changes())
    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return post


@admin_router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog_post(post_id: int, store: MemoryStore = Depends(deps.get_store)) -> Response:
    if not store.blog_posts.delete(post_id):
        raise HTTPException(status_code=404, detail="Blog post not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
