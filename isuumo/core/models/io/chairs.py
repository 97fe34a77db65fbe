"""
Chair I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ChairRead(BaseModel):
    """Schema for reading a chair from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    thumbnail: str
    price: int
    height: int
    width: int
    depth: int
    color: str
    features: str = Field(description="Comma-separated feature names")
    kind: str
    popularity: int
    stock: int


class ChairListResponse(BaseModel):
    """Fixed-size chair listing."""

    chairs: List[ChairRead]


class ChairSearchResponse(BaseModel):
    """One page of chair search results plus the total match count."""

    count: int = Field(description="Number of chairs matching the search, across all pages")
    chairs: List[ChairRead]


class BuyChairRequest(BaseModel):
    """Body of a purchase request."""

    email: str = Field(description="Contact address of the buyer")
