# ==============================================
# PropertyGraph — quantile binning + bin aggregation
# ==============================================
#
# PURPOSE:
#   Group sale records into assessed-value bins ("clusters") and
#   compute descriptive statistics per bin. Despite the name there
#   is no graph or similarity computation: a cluster is a flat
#   value range.
#
# HOW BINS ARE BUILT:
#   1. Sort every known assessed value
#   2. Interior edge i (1 <= i < number_of_bins) is
#      values[i * n // number_of_bins], giving roughly equal-population
#      bins that stay sensible on skewed price data
#   3. A value's bin index is the number of edges <= value, so a value
#      equal to an edge lands in the higher bin
#   4. Records without an assessed value are never binned, and a bin
#      nobody lands in is never created
#
# CLASSES / FUNCTIONS:
# --------------------
# - Bin (dataclass)                          → index + member records
# - compute_bin_edges(values, number_of_bins) -> list[float]
# - bin_index_for(value, edges) -> int
# - assign_to_bin(bins, record, bin_index) -> Bin
# - create_bins(records, number_of_bins) -> dict[int, Bin]
# - analyze_bin(bin_) -> BinStatistics
# - analyze_bins(bins) -> dict[int, BinStatistics]
#
# ==============================================

from bisect import bisect_right
from dataclasses import dataclass, field
from statistics import fmean
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from src.exceptions import InvalidInputError
from src.records import Record
from .bin_stats import BinStatistics


@dataclass
class Bin:
    """A contiguous assessed-value range and the records assigned to it."""

    index: int
    records: List[Record] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.records)

    @property
    def value_range(self) -> Optional[Tuple[float, float]]:
        """Smallest and largest member assessed value, or None if there are none."""
        values = [r.assessed_value for r in self.records if r.assessed_value is not None]
        if not values:
            return None
        return min(values), max(values)


def _validate_bin_count(number_of_bins: int) -> None:
    if number_of_bins < 1:
        raise InvalidInputError(
            f"number_of_bins must be at least 1, got {number_of_bins}",
            details={"number_of_bins": number_of_bins}
        )


def compute_bin_edges(values: Sequence[float], number_of_bins: int) -> List[float]:
    """
    Compute the interior quantile edges for a set of assessed values.

    Args:
        values: Assessed values, any order
        number_of_bins: How many bins the edges should split values into

    Returns:
        number_of_bins - 1 ascending edges, or [] when values is empty.
        Heavily repeated values can produce repeated edges.
    """
    _validate_bin_count(number_of_bins)
    ordered = sorted(values)
    n = len(ordered)
    if n == 0:
        return []
    return [ordered[i * n // number_of_bins] for i in range(1, number_of_bins)]


def bin_index_for(value: float, edges: Sequence[float]) -> int:
    """Return the number of edges that value is greater than or equal to."""
    return bisect_right(edges, value)


def assign_to_bin(bins: Dict[int, Bin], record: Record, bin_index: int) -> Bin:
    """
    Append a record to a bin, creating the bin on first use.

    Returns:
        The bin the record was added to
    """
    bin_ = bins.get(bin_index)
    if bin_ is None:
        bin_ = Bin(index=bin_index)
        bins[bin_index] = bin_
    bin_.records.append(record)
    return bin_


def create_bins(records: Iterable[Record], number_of_bins: int) -> Dict[int, Bin]:
    """
    Assign every record with an assessed value to a quantile bin.

    Args:
        records: Records to bin (typically the sample)
        number_of_bins: Target bin count, at least 1

    Returns:
        Mapping of bin index → Bin, ordered by index. Indices with no
        members are absent.

    Raises:
        InvalidInputError: number_of_bins < 1
    """
    _validate_bin_count(number_of_bins)
    records = list(records)

    edges = compute_bin_edges(
        [r.assessed_value for r in records if r.assessed_value is not None],
        number_of_bins
    )

    bins: Dict[int, Bin] = {}
    for record in records:
        if record.assessed_value is None:
            continue
        assign_to_bin(bins, record, bin_index_for(record.assessed_value, edges))

    return dict(sorted(bins.items()))


def _most_common_type(records: Sequence[Record]) -> Optional[str]:
    counts: Dict[str, int] = {}
    for record in records:
        if record.residential_type is None:
            continue
        counts[record.residential_type] = counts.get(record.residential_type, 0) + 1
    if not counts:
        return None
    # max() keeps the first maximum, and dicts keep first-seen order
    return max(counts, key=counts.get)


def analyze_bin(bin_: Bin) -> BinStatistics:
    """
    Compute the statistics of one materialized bin.

    Args:
        bin_: A bin with at least one member that has an assessed value.
              Bins from create_bins always qualify.

    Returns:
        BinStatistics; avg_sales_ratio is None when no member has a ratio

    Raises:
        InvalidInputError: no member has an assessed value
    """
    assessed = [r.assessed_value for r in bin_.records if r.assessed_value is not None]
    if not assessed:
        raise InvalidInputError(
            f"Bin {bin_.index} has no record with an assessed value",
            details={"bin_index": bin_.index, "records": bin_.size}
        )
    ratios = [r.sales_ratio for r in bin_.records if r.sales_ratio is not None]

    return BinStatistics(
        bin_index=bin_.index,
        record_count=bin_.size,
        avg_assessed_value=fmean(assessed),
        avg_sales_ratio=fmean(ratios) if ratios else None,
        most_common_residential_type=_most_common_type(bin_.records),
    )


def analyze_bins(bins: Dict[int, Bin]) -> Dict[int, BinStatistics]:
    """
    Compute statistics for every bin.

    Args:
        bins: Mapping returned by create_bins

    Returns:
        Mapping of bin index → BinStatistics, in ascending index order
    """
    return {index: analyze_bin(bins[index]) for index in sorted(bins)}
