"""
==============================================
RealEstatePipeline — Orchestrator
==============================================

Ties the record, analysis and reporting pieces together into a
single batch run:

    read CSV → clean → sample → bin → analyze → report → write CSV

USAGE EXAMPLES:

1. Run with configuration from .env / environment:
    from src.pipeline import RealEstatePipeline

    pipeline = RealEstatePipeline()
    result = pipeline.run()

2. Run on records already in memory, with a fixed seed:
    import random
    from src.pipeline import RealEstatePipeline

    pipeline = RealEstatePipeline(rng=random.Random(42))
    result = pipeline.run(records)
    print(result["statistics"])
"""

import random
import time
from typing import List, Optional

from src.config import get_config, AppConfig
from src.records import Record, read_records, write_records, clean_records
from src.analysis import sample_records, create_bins, analyze_bins
from src.reporting import (
    format_bin_ranges,
    format_bin_counts,
    format_bin_statistics,
    print_lines,
)


class RealEstatePipeline:
    """
    Batch pipeline over one sales file.

    Each stage consumes the complete output of the previous one.
    Any PipelineError propagates to the caller unchanged.
    """

    def __init__(self, config: Optional[AppConfig] = None, rng: Optional[random.Random] = None):
        """
        Initialize the pipeline.

        Args:
            config: Optional configuration. If None, loads from environment.
            rng: Optional randomness source. If None, one is seeded from
                 config.sampling.random_seed (process default when unset).
        """
        self._config = config or get_config()
        self._rng = rng or random.Random(self._config.sampling.random_seed)

    @property
    def config(self) -> AppConfig:
        return self._config

    def load(self) -> List[Record]:
        """
        Read the configured input file.

        Returns:
            Every record in the file

        Raises:
            RecordIOError: the file could not be read
        """
        records = read_records(self._config.paths.input_path)
        print(f"✓ Read {len(records)} records from {self._config.paths.input_path}")
        return records

    def run(self, records: Optional[List[Record]] = None) -> dict:
        """
        Run the full pipeline once.

        Args:
            records: Records to process. If None, they are read from the
                     configured input path.

        Returns:
            Summary dictionary with stage counts and per-bin statistics

        Raises:
            RecordIOError: reading or writing failed
            InvalidInputError: a record without a sales ratio reached the
                sampler, or the bin count is below 1
        """
        start_time = time.time()
        number_of_bins = self._config.binning.number_of_bins

        if records is None:
            records = self.load()

        cleaned = clean_records(records)
        print(f"✓ Cleaned: kept {len(cleaned)} of {len(records)} records")

        sampled = sample_records(cleaned, self._config.sampling.sample_size, self._rng)
        print(f"✓ Sampled {len(sampled)} records (target {self._config.sampling.sample_size})")

        bins = create_bins(sampled, number_of_bins)
        print_lines(format_bin_ranges(bins))
        print_lines(format_bin_counts(bins, number_of_bins))

        statistics = analyze_bins(bins)
        print_lines(format_bin_statistics(statistics))

        output_path = self._config.paths.output_path
        write_records(sampled, output_path)
        print(f"✓ Wrote {len(sampled)} records to {output_path}")

        elapsed = time.time() - start_time

        return {
            "status": "success",
            "records_read": len(records),
            "records_cleaned": len(cleaned),
            "records_sampled": len(sampled),
            "bins": {index: bin_.size for index, bin_ in bins.items()},
            "statistics": {index: s.to_dict() for index, s in statistics.items()},
            "output_path": str(output_path),
            "elapsed_seconds": round(elapsed, 3),
        }
