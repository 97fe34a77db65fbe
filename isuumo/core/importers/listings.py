"""
CSV import of chair and estate listings.

Each CSV line becomes one listing row with its range buckets filled in, plus
one feature row per comma-separated feature name. Parsing is done completely
before anything touches the database so a bad line rejects the whole upload.

Chair columns:
    id, name, description, thumbnail, price, height, width, depth, color,
    features, kind, popularity, stock

Estate columns:
    id, name, description, thumbnail, address, latitude, longitude, rent,
    door_height, door_width, features, popularity
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple, Type

from pydantic import ValidationError
from sqlmodel import SQLModel

from isuumo.core.database.entities.chairs import ChairBase
from isuumo.core.database.entities.estates import EstateBase
from isuumo.core.errors import CsvImportError
from isuumo.core.logging_config import get_logger
from isuumo.core.models.domain.conditions import ChairSearchCondition, EstateSearchCondition

logger = get_logger(__name__)

CHAIR_COLUMNS: Tuple[str, ...] = (
    "id",
    "name",
    "description",
    "thumbnail",
    "price",
    "height",
    "width",
    "depth",
    "color",
    "features",
    "kind",
    "popularity",
    "stock",
)

ESTATE_COLUMNS: Tuple[str, ...] = (
    "id",
    "name",
    "description",
    "thumbnail",
    "address",
    "latitude",
    "longitude",
    "rent",
    "door_height",
    "door_width",
    "features",
    "popularity",
)


@dataclass
class ListingBatch:
    """Rows ready for bulk insert: listing rows and their feature rows."""

    listings: List[Dict[str, Any]] = field(default_factory=list)
    features: List[Dict[str, Any]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.listings)


def decode_upload(content: bytes | str) -> str:
    """Decode an uploaded file, tolerating a UTF-8 byte order mark."""
    if isinstance(content, str):
        return content
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise CsvImportError(0, f"file is not UTF-8: {e}") from None


def _records(
    content: str, columns: Tuple[str, ...], model: Type[SQLModel]
) -> Iterator[Tuple[int, SQLModel]]:
    reader = csv.reader(io.StringIO(content))
    for row in reader:
        if not row or all(cell == "" for cell in row):
            continue
        line = reader.line_num
        if len(row) != len(columns):
            raise CsvImportError(line, f"expected {len(columns)} columns, got {len(row)}")
        try:
            record = model.model_validate(dict(zip(columns, row)))
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            raise CsvImportError(line, f"invalid value for {fields}") from None
        yield line, record


def parse_chairs(content: bytes | str, condition: ChairSearchCondition) -> ListingBatch:
    """Parse a chair CSV into rows for ``chair`` and ``chair_features``.

    Raises:
        CsvImportError: On a line with the wrong column count or a bad number.
    """
    batch = ListingBatch()
    for _, chair in _records(decode_upload(content), CHAIR_COLUMNS, ChairBase):
        row = chair.model_dump()
        row.update(
            price_t=condition.price.bucket(chair.price),
            height_t=condition.height.bucket(chair.height),
            width_t=condition.width.bucket(chair.width),
            depth_t=condition.depth.bucket(chair.depth),
        )
        batch.listings.append(row)
        batch.features.extend({"name": name, "chair_id": chair.id} for name in chair.get_features_list())
    logger.debug(f"Parsed {len(batch.listings)} chairs with {len(batch.features)} feature rows")
    return batch


def parse_estates(content: bytes | str, condition: EstateSearchCondition) -> ListingBatch:
    """Parse an estate CSV into rows for ``estate`` and ``estate_features``.

    Raises:
        CsvImportError: On a line with the wrong column count or a bad number.
    """
    batch = ListingBatch()
    for _, estate in _records(decode_upload(content), ESTATE_COLUMNS, EstateBase):
        row = estate.model_dump()
        row.update(
            rent_t=condition.rent.bucket(estate.rent),
            door_height_t=condition.door_height.bucket(estate.door_height),
            door_width_t=condition.door_width.bucket(estate.door_width),
        )
        batch.listings.append(row)
        batch.features.extend({"name": name, "estate_id": estate.id} for name in estate.get_features_list())
    logger.debug(f"Parsed {len(batch.listings)} estates with {len(batch.features)} feature rows")
    return batch
