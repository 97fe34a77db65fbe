"""Bulk importers that turn uploaded files into listing rows."""

from .listings import CHAIR_COLUMNS, ESTATE_COLUMNS, ListingBatch, parse_chairs, parse_estates

__all__ = ["CHAIR_COLUMNS", "ESTATE_COLUMNS", "ListingBatch", "parse_chairs", "parse_estates"]
