"""Unit tests for the CSV listing importer."""

import pytest

from isuumo.core.errors import CsvImportError
from isuumo.core.importers import CHAIR_COLUMNS, ESTATE_COLUMNS, parse_chairs, parse_estates
from isuumo.core.models.domain.conditions import load_chair_condition, load_estate_condition


@pytest.fixture
def chair_condition():
    return load_chair_condition()


@pytest.fixture
def estate_condition():
    return load_estate_condition()


class TestParseChairs:
    def test_rows_and_buckets(self, chair_csv: str, chair_condition):
        batch = parse_chairs(chair_csv, chair_condition)

        assert len(batch) == 4
        first = batch.listings[0]
        assert set(CHAIR_COLUMNS) <= set(first)
        assert (first["price_t"], first["height_t"], first["width_t"], first["depth_t"]) == (0, 0, 0, 1)
        assert batch.listings[3]["price_t"] == 5

    def test_feature_rows(self, chair_csv: str, chair_condition):
        batch = parse_chairs(chair_csv, chair_condition)

        assert {"name": "キャスター", "chair_id": 1} in batch.features
        assert [f for f in batch.features if f["chair_id"] == 3] == []
        assert len(batch.features) == 6

    def test_accepts_bytes_with_bom(self, chair_csv: str, chair_condition):
        batch = parse_chairs(b"\xef\xbb\xbf" + chair_csv.encode("utf-8"), chair_condition)
        assert batch.listings[0]["id"] == 1

    def test_blank_lines_are_skipped(self, chair_csv: str, chair_condition):
        batch = parse_chairs("\n" + chair_csv + "\n\n", chair_condition)
        assert len(batch) == 4

    def test_empty_upload(self, chair_condition):
        batch = parse_chairs(b"", chair_condition)
        assert len(batch) == 0
        assert batch.features == []

    def test_wrong_column_count(self, chair_csv: str, chair_condition):
        with pytest.raises(CsvImportError) as exc_info:
            parse_chairs(chair_csv + "5,too,few\n", chair_condition)
        assert exc_info.value.line == 5

    def test_non_numeric_price(self, chair_condition):
        content = "1,椅子,説明,/img.png,安い,70,60,90,黒,,座椅子,10,5\n"
        with pytest.raises(CsvImportError, match="price"):
            parse_chairs(content, chair_condition)

    def test_not_utf8(self, chair_condition):
        with pytest.raises(CsvImportError):
            parse_chairs("1,椅子".encode("shift_jis"), chair_condition)


class TestParseEstates:
    def test_rows_and_buckets(self, estate_csv: str, estate_condition):
        batch = parse_estates(estate_csv, estate_condition)

        assert len(batch) == 4
        second = batch.listings[1]
        assert set(ESTATE_COLUMNS) <= set(second)
        assert (second["rent_t"], second["door_height_t"], second["door_width_t"]) == (2, 3, 3)
        assert second["latitude"] == pytest.approx(35.7)

    def test_feature_rows(self, estate_csv: str, estate_condition):
        batch = parse_estates(estate_csv, estate_condition)

        assert sorted(f["name"] for f in batch.features if f["estate_id"] == 1) == sorted(["駐車場あり", "角部屋"])
        assert len(batch.features) == 4

    def test_non_numeric_latitude(self, estate_condition):
        content = "1,物件,説明,/img.png,住所,north,139.0,50000,100,100,,1\n"
        with pytest.raises(CsvImportError, match="latitude"):
            parse_estates(content, estate_condition)
