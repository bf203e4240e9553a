# ==============================================
# Reporting
# ==============================================
#
# PURPOSE:
#   Turn bins and bin statistics into human-readable lines and
#   print them. Kept apart from the aggregation code so the
#   statistics can be tested without capturing stdout.
#
# FUNCTIONS:
# ----------
# - format_bin_ranges(bins) -> list[str]
#     "Bin 3: Range 120000.0 - 154000.0" per materialized bin
#
# - format_bin_counts(bins, number_of_bins) -> list[str]
#     "Bin 3: 970 records" for every index, 0 when not materialized
#
# - format_bin_statistics(stats) -> list[str]
#     "Cluster 3: Avg Assessed Value: ..., Avg Sales Ratio: ..., ..."
#
# - print_lines(lines, stream=None) -> None
#
# ==============================================

import sys
from typing import Dict, List, Optional, Sequence, TextIO

from src.analysis import Bin, BinStatistics


NO_DATA = "no data"


def format_bin_ranges(bins: Dict[int, Bin]) -> List[str]:
    lines = []
    for index in sorted(bins):
        value_range = bins[index].value_range
        if value_range is None:
            continue
        low, high = value_range
        lines.append(f"Bin {index}: Range {low} - {high}")
    return lines


def format_bin_counts(bins: Dict[int, Bin], number_of_bins: int) -> List[str]:
    return [
        f"Bin {index}: {bins[index].size if index in bins else 0} records"
        for index in range(number_of_bins)
    ]


def format_bin_statistics(stats: Dict[int, BinStatistics]) -> List[str]:
    """One line per bin; an undefined average or type is shown as 'no data'."""
    lines = []
    for index in sorted(stats):
        s = stats[index]
        ratio = f"{s.avg_sales_ratio:.2f}" if s.has_sales_ratio else NO_DATA
        residential_type = s.most_common_residential_type or NO_DATA
        lines.append(
            f"Cluster {index}: Avg Assessed Value: {s.avg_assessed_value:.2f}, "
            f"Avg Sales Ratio: {ratio}, "
            f"Most Common Residential Type: {residential_type}"
        )
    return lines


def print_lines(lines: Sequence[str], stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    for line in lines:
        print(line, file=stream)
