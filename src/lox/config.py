"""Runtime configuration for the Lox command line and runner."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PROMPT = "> "


@dataclass
class LoxConfig:
    """Interpreter front-end configuration.

    Attributes:
        log_level: Name of the ``logging`` level for the ``lox`` loggers
        prompt: Prompt shown by the REPL
    """

    log_level: str = DEFAULT_LOG_LEVEL
    prompt: str = DEFAULT_PROMPT

    @classmethod
    def from_env(cls) -> LoxConfig:
        """Create config from environment variables.

        Resolution order for each setting:
        1. LOX_LOG_LEVEL / LOX_PROMPT env vars
        2. Built-in defaults
        """
        return cls(
            log_level=os.environ.get("LOX_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            prompt=os.environ.get("LOX_PROMPT", DEFAULT_PROMPT),
        )

    @property
    def logging_level(self) -> int:
        """Numeric logging level.

        Raises:
            ValueError: For a name ``logging`` does not know.
        """
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return level


def configure_logging(config: LoxConfig) -> None:
    """Attach a stderr handler to the ``lox`` logger at the configured level."""
    logger = logging.getLogger("lox")
    logger.setLevel(config.logging_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
