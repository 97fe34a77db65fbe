from .conditions import (
    ChairSearchCondition,
    EstateSearchCondition,
    ListCondition,
    Range,
    RangeCondition,
    load_chair_condition,
    load_estate_condition,
    require_any_condition,
    split_features,
)
from .geometry import BoundingBox, Coordinate, DrawnArea

__all__ = [
    "BoundingBox",
    "ChairSearchCondition",
    "Coordinate",
    "DrawnArea",
    "EstateSearchCondition",
    "ListCondition",
    "Range",
    "RangeCondition",
    "load_chair_condition",
    "load_estate_condition",
    "require_any_condition",
    "split_features",
]
