"""Config settings – LoggingSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from flagmask.config.settings.base import Settings
from flagmask.config.validation.errors import InvalidSettingValueError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Log output knobs read from ``FLAGMASK_LOG_*`` variables."""

    _prefix: ClassVar[str] = "FLAGMASK_LOG"

    level: str = "INFO"
    json: bool = True

    def _validate(self) -> None:
        self.level = self.level.upper()
        if self.level not in _LEVELS:
            raise InvalidSettingValueError(
                "level", self.level, f"expected one of {', '.join(_LEVELS)}"
            )

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


__all__ = ["LoggingSettings"]
