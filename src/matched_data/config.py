"""Configuration for the command line and binding adapters."""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

LOG_LEVEL_ENV = "MATCHED_DATA_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class DecryptOutputFormat(Enum):
    """How decrypted matched data is written."""
    RAW = "raw"
    UTF8_LOSSY = "utf8-lossy"


class KeyPairOutputFormat(Enum):
    """How a generated key pair is written."""
    JSON = "json"


@dataclass
class CliConfig:
    """Process-level settings for the command line tool."""
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CliConfig":
        """Build a config from environment variables."""
        environ = os.environ if environ is None else environ
        level = environ.get(LOG_LEVEL_ENV, "").strip().upper()
        if level and isinstance(logging.getLevelName(level), int):
            return cls(log_level=level)
        return cls()


def configure_logging(config: CliConfig, verbose: bool = False) -> None:
    """Send log records to stderr at the configured level."""
    level = logging.DEBUG if verbose else getattr(logging, config.log_level)
    logging.basicConfig(level=level, format=LOG_FORMAT)
