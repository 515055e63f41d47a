"""Runtime settings read from the environment."""

import logging
import os

from dataclasses import dataclass
from dotenv import load_dotenv
from conv.errors import ConfigurationError

load_dotenv()

DEFAULT_WORKERS = 4
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Settings for one run of the filter."""

    workers: int = DEFAULT_WORKERS
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, workers: int | None = None) -> "Settings":
        """Build settings from ``LAPLACIAN_WORKERS`` and ``LAPLACIAN_LOG_LEVEL``.

        Args:
            workers (int | None): Worker count given on the command line.
                When set, ``LAPLACIAN_WORKERS`` is not read.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        if workers is None:
            raw_workers = os.getenv("LAPLACIAN_WORKERS", str(DEFAULT_WORKERS))
            try:
                workers = int(raw_workers)
            except ValueError:
                raise ConfigurationError(f"LAPLACIAN_WORKERS must be an integer, got {raw_workers!r}") from None
            if workers < 1:
                raise ConfigurationError(f"LAPLACIAN_WORKERS must be at least 1, got {workers}")

        log_level = os.getenv("LAPLACIAN_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"unknown LAPLACIAN_LOG_LEVEL {log_level!r}")

        return cls(workers=workers, log_level=log_level)
