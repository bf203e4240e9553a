# ==============================================
# Record
# ==============================================
#
# PURPOSE:
#   Typed in-memory representation of one sale transaction
#   (one row of the sales CSV).
#
# CLASS: Record (dataclass)
# -------------------------
#   Attributes:
#   -----------
#   - serial_number: str                 → Opaque row key ("" when blank)
#   - assessed_value: float | None       → Drives binning; None = unknown
#   - sale_amount: float | None          → Carried through untouched
#   - sales_ratio: float | None          → Drives sampling trim + bin stats
#   - residential_type: str | None       → Must be set to survive cleaning
#
#   Methods:
#   --------
#   - from_row(row: dict) -> Record  (classmethod)
#       Build from a CSV row keyed by header names. NaN / blank → None.
#
#   - to_row() -> dict
#       Serialize back to header names, in file column order.
#
# ==============================================

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional


# Header names in the order they are written back out
SERIAL_NUMBER = "Serial Number"
ASSESSED_VALUE = "Assessed Value"
SALE_AMOUNT = "Sale Amount"
SALES_RATIO = "Sales Ratio"
RESIDENTIAL_TYPE = "Residential Type"

CSV_COLUMNS = [SERIAL_NUMBER, ASSESSED_VALUE, SALE_AMOUNT, SALES_RATIO, RESIDENTIAL_TYPE]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str) and value.strip() == "":
        return True
    return False


def _optional_float(value: Any) -> Optional[float]:
    if _is_missing(value):
        return None
    return float(value)


def _optional_str(value: Any) -> Optional[str]:
    if _is_missing(value):
        return None
    return str(value)


@dataclass
class Record:
    """
    One real-estate sale.

    Only residential_type is required downstream; every numeric
    field may be unknown.
    """

    serial_number: str
    assessed_value: Optional[float] = None
    sale_amount: Optional[float] = None
    sales_ratio: Optional[float] = None
    residential_type: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Record":
        """
        Build a Record from a row keyed by CSV header names.

        Args:
            row: Mapping of header name → raw cell value

        Returns:
            A Record with blank / NaN cells mapped to None
        """
        return cls(
            serial_number=_optional_str(row.get(SERIAL_NUMBER)) or "",
            assessed_value=_optional_float(row.get(ASSESSED_VALUE)),
            sale_amount=_optional_float(row.get(SALE_AMOUNT)),
            sales_ratio=_optional_float(row.get(SALES_RATIO)),
            residential_type=_optional_str(row.get(RESIDENTIAL_TYPE)),
        )

    def to_row(self) -> Dict[str, Any]:
        """Return the record keyed by CSV header names, in file column order."""
        return {
            SERIAL_NUMBER: self.serial_number,
            ASSESSED_VALUE: self.assessed_value,
            SALE_AMOUNT: self.sale_amount,
            SALES_RATIO: self.sales_ratio,
            RESIDENTIAL_TYPE: self.residential_type,
        }
