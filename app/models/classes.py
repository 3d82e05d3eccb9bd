from typing import ClassVar, FrozenSet, Optional
from pydantic import Field, model_validator
from app.models.common import CamelInput, CamelModel


# ─── Categories & Locations ──────────────────────────────────────────

class CategoryCreate(CamelInput):
    name: str = Field(min_length=1)
    color: str
    text_color: str
    bg_color: str


class CategoryUpdate(CamelInput):
    name: Optional[str] = Field(default=None, min_length=1)
    color: Optional[str] = None
    text_color: Optional[str] = None
    bg_color: Optional[str] = None


class CategoryResponse(CamelModel):
    id: int
    name: str
    color: str
    text_color: str
    bg_color: str


class LocationCreate(CamelInput):
    nullable: ClassVar[FrozenSet[str]] = frozenset({"address"})

    name: str = Field(min_length=1)
    address: Optional[str] = None


class LocationUpdate(CamelInput):
    nullable: ClassVar[FrozenSet[str]] = frozenset({"address"})

    name: Optional[str] = Field(default=None, min_length=1)
    address: Optional[str] = None


class LocationResponse(CamelModel):
    id: int
    name: str
    address: Optional[str] = None


# ─── Classes ─────────────────────────────────────────────────────────

class ClassCreate(CamelInput):
    title: str = Field(min_length=1)
    description: str
    price: int = Field(ge=0, strict=True, description="Minor currency units")
    price_unit: str
    total_spots: int = Field(ge=0, strict=True)
    available_spots: int = Field(ge=0, strict=True)
    image_url: str
    date: str
    time: str
    category_id: int = Field(strict=True)
    location_id: int = Field(strict=True)

    @model_validator(mode="after")
    def check_spots(self) -> "ClassCreate":
        if self.available_spots > self.total_spots:
            raise ValueError("availableSpots cannot exceed totalSpots")
        return self


class ClassUpdate(CamelInput):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[int] = Field(default=None, ge=0, strict=True)
    price_unit: Optional[str] = None
    total_spots: Optional[int] = Field(default=None, ge=0, strict=True)
    available_spots: Optional[int] = Field(default=None, ge=0, strict=True)
    image_url: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    category_id: Optional[int] = Field(default=None, strict=True)
    location_id: Optional[int] = Field(default=None, strict=True)


class AvailabilityUpdate(CamelInput):
    available_spots: int = Field(ge=0, strict=True)


class ClassResponse(CamelModel):
    id: int
    title: str
    description: str
    price: int
    price_unit: str
    total_spots: int
    available_spots: int
    image_url: str
    date: str
    time: str
    category_id: int
    location_id: int


class ClassWithDetails(ClassResponse):
    category: CategoryResponse
    location: LocationResponse
