# ==============================================
# BinStatistics
# ==============================================
#
# PURPOSE:
#   Data class holding the aggregates computed for one bin.
#   Derived from a Bin, never stored on it.
#
# CLASS: BinStatistics (dataclass)
# --------------------------------
#   - bin_index: int
#   - record_count: int
#   - avg_assessed_value: float
#   - avg_sales_ratio: float | None         → None when no member has a ratio
#   - most_common_residential_type: str | None
#
#   Methods:
#   --------
#   - has_sales_ratio -> bool  (property)
#   - to_dict() -> dict
#
# ==============================================

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class BinStatistics:
    """Descriptive statistics for one materialized bin."""

    bin_index: int
    record_count: int
    avg_assessed_value: float

    # None means "no data": every member had an unknown sales ratio
    avg_sales_ratio: Optional[float] = None

    # Ties go to the type first seen among the bin's members
    most_common_residential_type: Optional[str] = None

    @property
    def has_sales_ratio(self) -> bool:
        return self.avg_sales_ratio is not None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a plain dictionary for result payloads.

        Returns:
            A JSON-serializable dictionary representation
        """
        return {
            "bin_index": self.bin_index,
            "record_count": self.record_count,
            "avg_assessed_value": self.avg_assessed_value,
            "avg_sales_ratio": self.avg_sales_ratio,
            "most_common_residential_type": self.most_common_residential_type,
        }
