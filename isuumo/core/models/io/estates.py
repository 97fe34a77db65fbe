"""
Estate I/O models for API requests and responses.

Door dimensions are exposed as ``doorHeight``/``doorWidth``.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from isuumo.core.models.domain.geometry import Coordinate


class EstateRead(BaseModel):
    """Schema for reading an estate from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    thumbnail: str
    address: str
    latitude: float
    longitude: float
    rent: int
    door_height: int = Field(serialization_alias="doorHeight")
    door_width: int = Field(serialization_alias="doorWidth")
    features: str = Field(description="Comma-separated feature names")
    popularity: int


class EstateListResponse(BaseModel):
    """Fixed-size estate listing."""

    estates: List[EstateRead]


class EstateSearchResponse(BaseModel):
    """One page of estate search results plus the total match count."""

    count: int = Field(description="Number of estates matching the search, across all pages")
    estates: List[EstateRead]


class NazotteRequest(BaseModel):
    """Outline drawn on the map."""

    coordinates: List[Coordinate] = Field(min_length=1, description="Polygon vertices in drawing order")


class NazotteResponse(BaseModel):
    """Estates inside the drawn outline; ``count`` is the number returned."""

    estates: List[EstateRead]
    count: int


class DocumentRequest(BaseModel):
    """Body of a document request for an estate."""

    email: str = Field(description="Address the documents are sent to")
