# ==============================================
# CSV I/O
# ==============================================
#
# PURPOSE:
#   Read the raw sales file into Records and write the sampled
#   Records back out with the same five columns.
#
# FUNCTIONS:
# ----------
# - read_records(path) -> list[Record]
#     Only the five known columns are kept; the real dataset carries
#     many more (town, address, dates...) which are ignored. A row with
#     more or fewer fields than the header is rejected.
#
# - write_records(records, path) -> None
#     Header row + one row per record. None is written as a blank cell.
#
# ERRORS:
# -------
#   Every read/write failure is re-raised as RecordIOError.
#   There is no retry and no partial-output cleanup.
#
# ==============================================

from pathlib import Path
from typing import List, Sequence, Union

import pandas as pd

from src.exceptions import RecordIOError
from .record import Record, CSV_COLUMNS


PathLike = Union[str, Path]


def _reject_long_row(fields: List[str]) -> None:
    raise pd.errors.ParserError(f"row has more fields than the header: {fields}")


def _read_error(path: PathLike, message: str) -> RecordIOError:
    return RecordIOError(
        f"Failed to read records from {path}: {message}",
        details={"path": str(path)}
    )


def read_records(path: PathLike) -> List[Record]:
    """
    Read sale records from a delimited text file.

    Every row must have exactly as many fields as the header. Cells are
    read as raw strings and converted by Record.from_row.

    Args:
        path: CSV file with a header row

    Returns:
        Records in file order

    Raises:
        RecordIOError: file missing / unreadable, a row is too long or
            too short, a required column is absent, or a numeric cell
            does not parse
    """
    try:
        # header=None keeps the header line as row 0, so a long first data
        # row is rejected instead of being taken as an index column.
        # Fields missing from short rows come back as None; blank cells as "".
        raw = pd.read_csv(
            path,
            header=None,
            dtype=object,
            na_filter=False,
            engine="python",
            on_bad_lines=_reject_long_row,
        )
    except (OSError, ValueError) as e:
        raise _read_error(path, str(e)) from e

    header = list(raw.iloc[0])
    missing = [column for column in CSV_COLUMNS if column not in header]
    if missing:
        raise _read_error(path, f"missing columns {missing}")

    rows = raw.iloc[1:].set_axis(header, axis=1)
    short_rows = rows.isna().any(axis=1)
    if short_rows.any():
        line = int(short_rows.idxmax()) + 1
        raise _read_error(path, f"row {line} has fewer fields than the header")

    try:
        return [Record.from_row(row) for row in rows[CSV_COLUMNS].to_dict(orient="records")]
    except ValueError as e:
        raise _read_error(path, str(e)) from e


def write_records(records: Sequence[Record], path: PathLike) -> None:
    """
    Write records to a CSV file, in input column order.

    Args:
        records: Records to write (order preserved)
        path: Destination file; its directory must exist

    Raises:
        RecordIOError: the file cannot be written
    """
    df = pd.DataFrame([record.to_row() for record in records], columns=CSV_COLUMNS)
    try:
        df.to_csv(path, index=False)
    except OSError as e:
        raise RecordIOError(
            f"Failed to write records to {path}: {e}",
            details={"path": str(path), "records": len(records)}
        ) from e
