"""
Chair entity models.

A chair row carries the values imported from CSV plus the range buckets
(``*_t`` columns) derived from them at import time. ``chair_features`` holds one
row per feature name so searches can require every requested feature.
"""

from __future__ import annotations

from typing import List, Optional

from sqlmodel import Field

from ..base import Base


class ChairBase(Base):
    """Fields of a chair as they appear in an import CSV."""

    id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False})
    name: str = Field(description="Display name")
    description: str = Field(default="", description="Free-text description")
    thumbnail: str = Field(default="", description="Thumbnail image path")
    price: int = Field(description="Price in yen")
    height: int = Field(description="Height in cm")
    width: int = Field(description="Width in cm")
    depth: int = Field(description="Depth in cm")
    color: str = Field(default="", index=True, description="Color name")
    features: str = Field(default="", description="Comma-separated feature names")
    kind: str = Field(default="", index=True, description="Kind of chair")
    popularity: int = Field(default=0, index=True, description="Popularity score, higher first")
    stock: int = Field(default=0, description="Units left in stock")

    def get_features_list(self) -> List[str]:
        """Get features as a list."""
        return [feature for feature in self.features.split(",") if feature] if self.features else []


class Chair(ChairBase, table=True):
    """Persistent chair listing.

    Table: chair
    """

    __tablename__ = "chair"
    __table_args__ = ({"extend_existing": True},)

    price_t: int = Field(default=0, index=True, description="Price range id")
    height_t: int = Field(default=0, index=True, description="Height range id")
    width_t: int = Field(default=0, index=True, description="Width range id")
    depth_t: int = Field(default=0, index=True, description="Depth range id")

    def sorted_dimensions(self) -> List[int]:
        """Width, height and depth in ascending order."""
        return sorted([self.width, self.height, self.depth])

    def __repr__(self) -> str:
        return f"Chair(id={self.id}, name={self.name}, price={self.price}, stock={self.stock})"


class ChairFeature(Base, table=True):
    """One feature name attached to a chair.

    Table: chair_features
    """

    __tablename__ = "chair_features"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, description="Feature name")
    chair_id: int = Field(index=True, description="Owning chair id")
