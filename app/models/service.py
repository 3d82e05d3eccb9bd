from typing import Optional
from pydantic import Field
from app.models.common import CamelInput, CamelModel


class ServiceCreate(CamelInput):
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    description: str
    icon: str
    detailed_description: str


class ServiceUpdate(CamelInput):
    name: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    description: Optional[str] = None
    icon: Optional[str] = None
    detailed_description: Optional[str] = None


class ServiceResponse(CamelModel):
    id: int
    name: str
    slug: str
    description: str
    icon: str
    detailed_description: str


class PortfolioItemCreate(CamelInput):
    title: str = Field(min_length=1)
    description: str
    image_url: str
    client: str
    service_id: int = Field(strict=True)
    result: str
    testimonial: str = ""
    testimonial_author: str = ""


class PortfolioItemUpdate(CamelInput):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    client: Optional[str] = None
    service_id: Optional[int] = Field(default=None, strict=True)
    result: Optional[str] = None
    testimonial: Optional[str] = None
    testimonial_author: Optional[str] = None


class PortfolioItemResponse(CamelModel):
    id: int
    title: str
    description: str
    image_url: str
    client: str
    service_id: int
    result: str
    testimonial: str
    testimonial_author: str


class PortfolioItemWithService(PortfolioItemResponse):
    service: ServiceResponse
