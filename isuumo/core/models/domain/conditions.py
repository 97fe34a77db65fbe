"""
Search condition documents.

The search UI is driven by two static JSON documents, one per listing family.
Range conditions split a numeric attribute into ordered buckets; list
conditions enumerate the allowed values of a text attribute. The same range
definitions are used to derive the ``*_t`` bucket columns at import time and to
validate range ids at search time, so the two can never disagree.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from isuumo.core.errors import InvalidSearchConditionError

FIXTURE_DIR = Path(__file__).resolve().parent / "fixture"
CHAIR_CONDITION_FILE = "chair_condition.json"
ESTATE_CONDITION_FILE = "estate_condition.json"

UNBOUNDED = -1


class Range(BaseModel):
    """One bucket of a range condition; ``-1`` marks an open end."""

    id: int
    min: int
    max: int

    def contains(self, value: int) -> bool:
        """Whether ``value`` falls into ``[min, max)`` honouring open ends."""
        if self.min != UNBOUNDED and value < self.min:
            return False
        if self.max != UNBOUNDED and value >= self.max:
            return False
        return True


class RangeCondition(BaseModel):
    """Ordered buckets for a numeric attribute."""

    prefix: str = ""
    suffix: str = ""
    ranges: List[Range]

    def find(self, range_id: int) -> Optional[Range]:
        """Return the range with ``range_id`` or None."""
        return next((r for r in self.ranges if r.id == range_id), None)

    def bucket(self, value: int) -> int:
        """Return the id of the range ``value`` belongs to.

        Values below the first lower bound land in the first range, values past
        the last upper bound in the last one.
        """
        for r in self.ranges:
            if r.contains(value):
                return r.id
        if value < self.ranges[0].min:
            return self.ranges[0].id
        return self.ranges[-1].id

    def resolve(self, parameter: str, raw: Optional[str]) -> Optional[int]:
        """Parse a ``*RangeId`` query value.

        Empty or missing values mean "no condition" and yield None.

        Raises:
            InvalidSearchConditionError: When the value is not an integer or
                names no known range.
        """
        if raw is None or raw == "":
            return None
        try:
            range_id = int(raw, 10)
        except ValueError:
            raise InvalidSearchConditionError(parameter, f"{raw!r} is not an integer") from None
        if self.find(range_id) is None:
            raise InvalidSearchConditionError(parameter, f"unknown range id {range_id}")
        return range_id


class ListCondition(BaseModel):
    """Allowed values of a text attribute."""

    model_config = ConfigDict(populate_by_name=True)

    items: List[str] = Field(default_factory=list, alias="list")


class ChairSearchCondition(BaseModel):
    """Search condition document for chairs."""

    width: RangeCondition
    height: RangeCondition
    depth: RangeCondition
    price: RangeCondition
    color: ListCondition
    feature: ListCondition
    kind: ListCondition


class EstateSearchCondition(BaseModel):
    """Search condition document for estates."""

    model_config = ConfigDict(populate_by_name=True)

    door_width: RangeCondition = Field(alias="doorWidth")
    door_height: RangeCondition = Field(alias="doorHeight")
    rent: RangeCondition
    feature: ListCondition


ConditionT = TypeVar("ConditionT", ChairSearchCondition, EstateSearchCondition)


def _condition_dir(override: Optional[str]) -> Path:
    return Path(override) if override else FIXTURE_DIR


@lru_cache(maxsize=None)
def _load_document(path: Path, model: Type[ConditionT]) -> ConditionT:
    return model.model_validate(json.loads(path.read_text(encoding="utf-8")))


def load_chair_condition(condition_dir: Optional[str] = None) -> ChairSearchCondition:
    """Load the chair condition document, parsed once per resolved file."""
    return _load_document(_condition_dir(condition_dir) / CHAIR_CONDITION_FILE, ChairSearchCondition)


def load_estate_condition(condition_dir: Optional[str] = None) -> EstateSearchCondition:
    """Load the estate condition document, parsed once per resolved file."""
    return _load_document(_condition_dir(condition_dir) / ESTATE_CONDITION_FILE, EstateSearchCondition)


def split_features(raw: Optional[str]) -> List[str]:
    """Split a comma-separated ``features`` query value, dropping empty names."""
    return [name for name in raw.split(",") if name] if raw else []


def require_any_condition(filters: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unset filters and insist that at least one is left.

    Raises:
        InvalidSearchConditionError: When every filter is unset.
    """
    active = {key: value for key, value in filters.items() if value not in (None, "", [])}
    if not active:
        raise InvalidSearchConditionError("search", "no search condition given")
    return active
