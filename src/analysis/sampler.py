# ==============================================
# Sampler
# ==============================================
#
# PURPOSE:
#   Remove sales-ratio outliers, then draw a bounded uniform
#   random subset of what is left.
#
# FUNCTION: sample_records(records, target_size, rng=None)
# --------------------------------------------------------
#   1. Keep records with a residential type
#   2. Stable-sort ascending by sales_ratio (None is rejected, not ordered)
#   3. If more than TRIM_THRESHOLD remain, drop OUTLIER_TRIM_SIZE from
#      each end. This is a fixed count, not a percentage.
#   4. Sample min(target_size, len(pool)) without replacement
#
#   Output order is whatever the random sample yields.
#
# ==============================================

import random
from typing import List, Optional, Sequence

from src.exceptions import InvalidInputError
from src.records import Record


OUTLIER_TRIM_SIZE = 150
TRIM_THRESHOLD = 2 * OUTLIER_TRIM_SIZE


def _sales_ratio_key(record: Record) -> float:
    if record.sales_ratio is None:
        raise InvalidInputError(
            f"Record '{record.serial_number}' has no sales ratio and cannot be ordered",
            details={"serial_number": record.serial_number}
        )
    return record.sales_ratio


def trim_outliers(sorted_records: Sequence[Record]) -> List[Record]:
    """
    Drop the OUTLIER_TRIM_SIZE lowest and highest records.

    Args:
        sorted_records: Records already sorted by sales_ratio

    Returns:
        The middle slice, or every record when there are
        TRIM_THRESHOLD or fewer
    """
    if len(sorted_records) > TRIM_THRESHOLD:
        return list(sorted_records[OUTLIER_TRIM_SIZE:len(sorted_records) - OUTLIER_TRIM_SIZE])
    return list(sorted_records)


def sample_records(
    records: Sequence[Record],
    target_size: int,
    rng: Optional[random.Random] = None
) -> List[Record]:
    """
    Draw an outlier-trimmed uniform sample.

    Args:
        records: Cleaned records. Every record with a residential type
                 must have a sales ratio.
        target_size: Desired sample size. The result is smaller when the
                     trimmed pool is smaller.
        rng: Randomness source. Defaults to the process-wide generator.

    Returns:
        At most target_size records from the trimmed pool

    Raises:
        InvalidInputError: negative target_size, or a record without a
            sales ratio reached the sort
    """
    if target_size < 0:
        raise InvalidInputError(
            f"target_size must be non-negative, got {target_size}",
            details={"target_size": target_size}
        )

    rng = rng or random.Random()

    # Step 1: Defensive re-filter (the cleaner normally ran already)
    typed = [record for record in records if record.residential_type is not None]

    # Step 2: Stable sort by sales ratio
    ordered = sorted(typed, key=_sales_ratio_key)

    # Step 3: Fixed-count outlier trim
    pool = trim_outliers(ordered)

    # Step 4: Uniform sample without replacement
    return rng.sample(pool, min(target_size, len(pool)))
