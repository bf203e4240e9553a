# ==============================================
# ANALYSIS: Sampling, Binning & Aggregation
# ==============================================
#
# This package holds the algorithmic core of the pipeline.
#
# Two-step process:
#   Step 1 (Sampling): Trim sales-ratio outliers → uniform random sample
#   Step 2 (Binning):  Quantile bins on assessed value → per-bin statistics
#
# Modules:
# --------
# - sampler.py         → Fixed-count outlier trim + random sample
# - property_graph.py  → Bin edges, bin assignment, bin aggregation
# - bin_stats.py       → Data class for per-bin statistics
#
# ==============================================

from .sampler import sample_records, trim_outliers, OUTLIER_TRIM_SIZE, TRIM_THRESHOLD
from .bin_stats import BinStatistics
from .property_graph import (
    Bin,
    compute_bin_edges,
    bin_index_for,
    assign_to_bin,
    create_bins,
    analyze_bin,
    analyze_bins,
)

__all__ = [
    "sample_records",
    "trim_outliers",
    "OUTLIER_TRIM_SIZE",
    "TRIM_THRESHOLD",
    "BinStatistics",
    "Bin",
    "compute_bin_edges",
    "bin_index_for",
    "assign_to_bin",
    "create_bins",
    "analyze_bin",
    "analyze_bins",
]
