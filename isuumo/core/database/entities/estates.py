"""
Estate entity models.

Estates are property listings with a map position and door dimensions. Like
chairs they store the range buckets of rent and door size, and their feature
names are exploded into ``estate_features``.
"""

from __future__ import annotations

from typing import List, Optional

from sqlmodel import Field

from ..base import Base


class EstateBase(Base):
    """Fields of an estate as they appear in an import CSV."""

    id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False})
    name: str = Field(description="Display name")
    description: str = Field(default="", description="Free-text description")
    thumbnail: str = Field(default="", description="Thumbnail image path")
    address: str = Field(default="", description="Postal address")
    latitude: float = Field(index=True, description="Latitude in degrees")
    longitude: float = Field(index=True, description="Longitude in degrees")
    rent: int = Field(index=True, description="Monthly rent in yen")
    door_height: int = Field(index=True, description="Door height in cm")
    door_width: int = Field(index=True, description="Door width in cm")
    features: str = Field(default="", description="Comma-separated feature names")
    popularity: int = Field(default=0, index=True, description="Popularity score, higher first")

    def get_features_list(self) -> List[str]:
        """Get features as a list."""
        return [feature for feature in self.features.split(",") if feature] if self.features else []


class Estate(EstateBase, table=True):
    """Persistent estate listing.

    Table: estate
    """

    __tablename__ = "estate"
    __table_args__ = ({"extend_existing": True},)

    rent_t: int = Field(default=0, index=True, description="Rent range id")
    door_height_t: int = Field(default=0, index=True, description="Door height range id")
    door_width_t: int = Field(default=0, index=True, description="Door width range id")

    def __repr__(self) -> str:
        return f"Estate(id={self.id}, name={self.name}, rent={self.rent})"


class EstateFeature(Base, table=True):
    """One feature name attached to an estate.

    Table: estate_features
    """

    __tablename__ = "estate_features"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, description="Feature name")
    estate_id: int = Field(index=True, description="Owning estate id")
