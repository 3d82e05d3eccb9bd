from datetime import datetime
from typing import List, Optional
from pydantic import EmailStr, Field
from app.models.common import CamelInput, CamelModel


# ─── Team ────────────────────────────────────────────────────────────

class TeamMemberCreate(CamelInput):
    name: str = Field(min_length=1)
    role: str
    bio: str
    image_url: str


class TeamMemberUpdate(CamelInput):
    name: Optional[str] = Field(default=None, min_length=1)
    role: Optional[str] = None
    bio: Optional[str] = None
    image_url: Optional[str] = None


class TeamMemberResponse(CamelModel):
    id: int
    name: str
    role: str
    bio: str
    image_url: str


# ─── Testimonials ────────────────────────────────────────────────────

class TestimonialCreate(CamelInput):
    name: str = Field(min_length=1)
    company: str
    testimonial: str = Field(min_length=1)
    image_url: str = ""


class TestimonialUpdate(CamelInput):
    name: Optional[str] = Field(default=None, min_length=1)
    company: Optional[str] = None
    testimonial: Optional[str] = Field(default=None, min_length=1)
    image_url: Optional[str] = None


class TestimonialResponse(CamelModel):
    id: int
    name: str
    company: str
    testimonial: str
    image_url: str


# ─── Blog ────────────────────────────────────────────────────────────

class BlogPostCreate(CamelInput):
    title: str = Field(min_length=1)
    slug: str = Field(min_length=1, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    content: str
    excerpt: str
    image_url: str
    author: str
    category: str
    tags: List[str] = []


class BlogPostUpdate(CamelInput):
    title: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    content: Optional[str] = None
    excerpt: Optional[str] = None
    image_url: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None


class BlogPostResponse(CamelModel):
    id: int
    title: str
    slug: str
    content: str
    excerpt: str
    image_url: str
    published_at: datetime
    author: str
    category: str
    tags: List[str] = []


# ─── Contact messages ────────────────────────────────────────────────

class MessageCreate(CamelInput):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)


class MessageResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    subject: str
    message: str
    created_at: datetime
