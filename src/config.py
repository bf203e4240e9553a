# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file.
#   Provides typed config objects to the pipeline and the CLI.
#
# CLASSES:
# --------
# - PathConfig (dataclass)
#     input_path: str    (default "data/Real_Estate_Sales_2001-2020_GL.csv")
#     output_path: str   (default "data/realestatesampled10k.csv")
#
# - SamplingConfig (dataclass)
#     sample_size: int            (default 9700)
#     random_seed: int | None     (default None → process-default randomness)
#
# - BinningConfig (dataclass)
#     number_of_bins: int         (default 10)
#
# - AppConfig (dataclass)
#     paths: PathConfig
#     sampling: SamplingConfig
#     binning: BinningConfig
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the singleton so the next get_config() re-reads the environment.
#
# USAGE:
# ------
#   from src.config import get_config
#   config = get_config()
#   print(config.paths.input_path)
#   print(config.binning.number_of_bins)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

from src.exceptions import ConfigurationError


@dataclass
class PathConfig:
    """Input and output file locations."""
    input_path: str = "data/Real_Estate_Sales_2001-2020_GL.csv"
    output_path: str = "data/realestatesampled10k.csv"


@dataclass
class SamplingConfig:
    """Sampler settings."""
    sample_size: int = 9700
    random_seed: Optional[int] = None


@dataclass
class BinningConfig:
    """Binner settings."""
    number_of_bins: int = 10


@dataclass
class AppConfig:
    """Main application configuration."""
    paths: PathConfig = field(default_factory=PathConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    binning: BinningConfig = field(default_factory=BinningConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    """Read an integer setting; blank or unset gives the default."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be an integer, got {raw!r}",
            details={"name": name, "value": raw}
        ) from e


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration

    Raises:
        ConfigurationError: an integer setting does not parse
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    path_config = PathConfig(
        input_path=os.getenv("INPUT_PATH", "data/Real_Estate_Sales_2001-2020_GL.csv"),
        output_path=os.getenv("OUTPUT_PATH", "data/realestatesampled10k.csv")
    )

    sampling_config = SamplingConfig(
        sample_size=_int_env("SAMPLE_SIZE", 9700),
        random_seed=_int_env("RANDOM_SEED", None)
    )

    binning_config = BinningConfig(
        number_of_bins=_int_env("NUMBER_OF_BINS", 10)
    )

    _config_instance = AppConfig(
        paths=path_config,
        sampling=sampling_config,
        binning=binning_config
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration."""
    global _config_instance
    _config_instance = None
