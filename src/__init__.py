# ==============================================
# Real-Estate Sample & Bin Pipeline
# ==============================================
#
# Package Structure:
#
# src/
# ├── records/       # Record dataclass, CSV I/O, cleaning
# ├── analysis/      # Outlier-trimmed sampling, quantile bins, bin stats
# ├── reporting.py   # Human-readable bin report lines
# ├── exceptions.py  # PipelineError hierarchy
# ├── config.py      # Configuration management
# ├── pipeline.py    # RealEstatePipeline orchestrator
# └── cli.py         # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
