# ==============================================
# Tests for Records Module
# ==============================================

import math

import pytest

from src.exceptions import RecordIOError
from src.records import Record, CSV_COLUMNS, read_records, write_records, clean_records


HEADER = "Serial Number,Assessed Value,Sale Amount,Sales Ratio,Residential Type"


class TestRecord:
    """Tests for the Record <-> CSV row mapping."""

    def test_from_row_maps_header_names(self):
        record = Record.from_row({
            "Serial Number": "123",
            "Assessed Value": 100000.0,
            "Sale Amount": 200000.0,
            "Sales Ratio": 0.5,
            "Residential Type": "Single Family",
        })
        assert record == Record("123", 100000.0, 200000.0, 0.5, "Single Family")

    def test_from_row_nan_and_blank_become_none(self):
        record = Record.from_row({
            "Serial Number": "7",
            "Assessed Value": math.nan,
            "Sale Amount": "",
            "Sales Ratio": None,
            "Residential Type": math.nan,
        })
        assert record.assessed_value is None
        assert record.sale_amount is None
        assert record.sales_ratio is None
        assert record.residential_type is None

    def test_from_row_missing_serial_is_empty_string(self):
        assert Record.from_row({}).serial_number == ""

    def test_to_row_keeps_column_order(self):
        row = Record("1", 1.0, 2.0, 0.5, "Condo").to_row()
        assert list(row) == CSV_COLUMNS


class TestCleaner:
    """Tests for clean_records."""

    def test_drops_records_without_residential_type(self, make_record):
        records = [
            make_record(serial_number="a"),
            make_record(serial_number="b", residential_type=None),
            make_record(serial_number="c", residential_type="Condo"),
        ]
        cleaned = clean_records(records)
        assert [r.serial_number for r in cleaned] == ["a", "c"]

    def test_keeps_records_with_other_fields_missing(self, make_record):
        record = make_record(assessed_value=None, sales_ratio=None)
        assert clean_records([record]) == [record]

    def test_empty_input(self):
        assert clean_records([]) == []


class TestCsvIO:
    """Tests for read_records / write_records."""

    def test_read_single_row(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text(f"{HEADER}\n123,100000,200000,0.5,Single Family\n")

        records = read_records(path)

        assert len(records) == 1
        assert records[0].serial_number == "123"
        assert records[0].assessed_value == 100000.0
        assert records[0].sales_ratio == 0.5
        assert records[0].residential_type == "Single Family"

    def test_read_blank_cells_become_none(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text(f"{HEADER}\n124,,150000,,\n")

        record = read_records(path)[0]

        assert record.assessed_value is None
        assert record.sale_amount == 150000.0
        assert record.sales_ratio is None
        assert record.residential_type is None

    def test_read_ignores_extra_columns(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text(
            "Serial Number,Town,Assessed Value,Sale Amount,Sales Ratio,Residential Type\n"
            "9,Ansonia,50000,100000,0.5,Condo\n"
        )
        assert read_records(path) == [Record("9", 50000.0, 100000.0, 0.5, "Condo")]

    def test_write_then_read_preserves_records(self, tmp_path, make_record):
        records = [
            make_record(serial_number="1"),
            make_record(serial_number="2", assessed_value=None, residential_type="Condo"),
            make_record(serial_number="3", sales_ratio=None, residential_type=None),
        ]
        path = tmp_path / "out.csv"

        write_records(records, path)

        assert read_records(path) == records

    def test_write_header_in_input_order(self, tmp_path, make_record):
        path = tmp_path / "out.csv"
        write_records([make_record()], path)
        assert path.read_text().splitlines()[0] == HEADER

    def test_write_empty_writes_header_only(self, tmp_path):
        path = tmp_path / "out.csv"
        write_records([], path)
        assert path.read_text().splitlines() == [HEADER]

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(RecordIOError):
            read_records(tmp_path / "does_not_exist.csv")

    def test_read_unparsable_number(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text(f"{HEADER}\n1,not-a-number,1,1,Condo\n")
        with pytest.raises(RecordIOError):
            read_records(path)

    def test_read_missing_column(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text("Serial Number,Assessed Value\n1,100\n")
        with pytest.raises(RecordIOError):
            read_records(path)

    def test_read_row_with_too_many_fields(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text(f"{HEADER}\n1,100,200,0.5,Condo\n2,100,200,0.5,Condo,extra\n")
        with pytest.raises(RecordIOError):
            read_records(path)

    def test_read_first_row_with_too_many_fields(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text(f"{HEADER}\n2,100,200,0.5,Condo,extra\n")
        with pytest.raises(RecordIOError):
            read_records(path)

    def test_read_row_with_too_few_fields(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text(f"{HEADER}\n1,100\n")
        with pytest.raises(RecordIOError):
            read_records(path)

    def test_read_header_only(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text(f"{HEADER}\n")
        assert read_records(path) == []

    def test_read_keeps_serial_number_text(self, tmp_path):
        path = tmp_path / "in.csv"
        path.write_text(f"{HEADER}\n000123,1,2,0.5,Condo\n")
        assert read_records(path)[0].serial_number == "000123"

    def test_write_into_missing_directory(self, tmp_path, make_record):
        with pytest.raises(RecordIOError):
            write_records([make_record()], tmp_path / "missing" / "out.csv")
