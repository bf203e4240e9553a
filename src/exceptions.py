# ==============================================
# Pipeline Exceptions
# ==============================================
#
# PURPOSE:
#   One small hierarchy for every error the pipeline raises on
#   purpose. The CLI catches PipelineError at the process boundary.
#
# CLASSES:
# --------
# - PipelineError          → base, carries message + details dict
# - RecordIOError          → reading / writing the CSV failed (fatal)
# - InvalidInputError      → a precondition was violated by the caller
# - ConfigurationError     → a setting in .env / the environment is invalid
#
# NOTE:
#   A bin average over zero values is NOT an exception. It is
#   represented as None on BinStatistics.
#
# ==============================================

from typing import Any, Dict, Optional


class PipelineError(Exception):
    """Base exception for the sampling and binning pipeline."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class RecordIOError(PipelineError):
    """Raised when the input file cannot be read or the output cannot be written."""


class InvalidInputError(PipelineError, ValueError):
    """Raised when records or arguments violate an operation's preconditions."""


class ConfigurationError(PipelineError, ValueError):
    """Raised when an environment / .env setting cannot be parsed."""
