# ==============================================
# RECORDS: Record store, CSV I/O and cleaning
# ==============================================
#
# This package handles everything that happens to the raw
# sale rows BEFORE they reach sampling and binning.
#
# Modules:
# --------
# - record.py   → Record dataclass + CSV column mapping
# - csv_io.py   → Read / write the delimited sales file (pandas)
# - cleaner.py  → Drop rows without a residential type
#
# ==============================================

from .record import Record, CSV_COLUMNS
from .csv_io import read_records, write_records
from .cleaner import clean_records

__all__ = ["Record", "CSV_COLUMNS", "read_records", "write_records", "clean_records"]
