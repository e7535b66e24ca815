from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar

from pydantic import Field, field_validator, model_validator

from travel_api.api.schemas.common import ApiModel, Price, UtcDatetime
from travel_api.domain.entities.catalog import Package, Resort


class _CatalogUpdate(ApiModel):
    """Partial update; a field that is sent may not be null when the column requires a value."""

    required_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def _reject_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            for name in cls.required_fields:
                field = cls.model_fields[name]
                for key in (name, field.alias):
                    if key in data and data[key] is None:
                        raise ValueError(f"{field.alias or name} cannot be null")
        return data

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, by_alias=False)


# === Packages ===


class PackageCreateRequest(ApiModel):
    title: str = Field(min_length=1)
    price: Price
    description: str | None = None
    location: str | None = None
    duration: str | None = None
    images: list[str] = Field(default_factory=list)
    availability: bool = True
    valid_from: UtcDatetime | None = None
    valid_till: UtcDatetime | None = None

    def to_entity(self) -> Package:
        return Package(**self.model_dump(by_alias=False))


class PackageUpdateRequest(_CatalogUpdate):
    required_fields: ClassVar[tuple[str, ...]] = ("title", "images", "availability")

    title: str | None = Field(default=None, min_length=1)
    price: Price | None = None
    description: str | None = None
    location: str | None = None
    duration: str | None = None
    images: list[str] | None = None
    availability: bool | None = None
    valid_from: UtcDatetime | None = None
    valid_till: UtcDatetime | None = None


class PackageResponse(ApiModel):
    id: str = Field(alias="_id")
    title: str
    price: Decimal | None = None
    description: str | None = None
    location: str | None = None
    duration: str | None = None
    images: list[str] = Field(default_factory=list)
    availability: bool = True
    valid_from: datetime | None = None
    valid_till: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, package: Package) -> "PackageResponse":
        return cls(
            id=package.id,
            title=package.title,
            price=package.price,
            description=package.description,
            location=package.location,
            duration=package.duration,
            images=package.images,
            availability=package.availability,
            valid_from=package.valid_from,
            valid_till=package.valid_till,
            created_at=package.created_at,
            updated_at=package.updated_at,
        )


# === Resorts ===


class ResortCreateRequest(ApiModel):
    name: str = Field(min_length=1)
    location: str = Field(min_length=1)
    price_per_night: Price | None = None
    price: Price | None = None
    description: str | None = None
    amenities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    rating: Decimal | None = Field(default=None, ge=0, le=5)

    def to_entity(self) -> Resort:
        return Resort(**self.model_dump(by_alias=False))


class ResortUpdateRequest(_CatalogUpdate):
    required_fields: ClassVar[tuple[str, ...]] = ("name", "location", "amenities", "images")

    name: str | None = Field(default=None, min_length=1)
    location: str | None = Field(default=None, min_length=1)
    price_per_night: Price | None = None
    price: Price | None = None
    description: str | None = None
    amenities: list[str] | None = None
    images: list[str] | None = None
    rating: Decimal | None = Field(default=None, ge=0, le=5)

    @field_validator("amenities")
    @classmethod
    def _trim_amenities(cls, value: list[str] | None) -> list[str] | None:
        return [amenity.strip() for amenity in value] if value is not None else value


class ResortResponse(ApiModel):
    id: str = Field(alias="_id")
    name: str
    location: str
    price_per_night: Decimal | None = None
    price: Decimal | None = None
    description: str | None = None
    amenities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    rating: Decimal | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, resort: Resort) -> "ResortResponse":
        return cls(
            id=resort.id,
            name=resort.name,
            location=resort.location,
            price_per_night=resort.price_per_night,
            price=resort.price,
            description=resort.description,
            amenities=resort.amenities,
            images=resort.images,
            rating=resort.rating,
            created_at=resort.created_at,
            updated_at=resort.updated_at,
        )


class PackageCreatedResponse(ApiModel):
    message: str
    package: PackageResponse


class ResortCreatedResponse(ApiModel):
    message: str
    resort: ResortResponse
