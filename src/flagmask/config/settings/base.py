"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass of knobs read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which runs
    after every construction, whether by a loader or by hand.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Normalise fields or raise ``InvalidSettingValueError``."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Variable name a loader reads for *field_name*, e.g. ``FLAGMASK_LOG_LEVEL``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def as_env(self) -> dict[str, str]:
        """Render the current values as the variables that would reproduce them."""
        env: dict[str, str] = {}
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool):
                text = "true" if value else "false"
            elif isinstance(value, (list, tuple)):
                text = ",".join(str(item) for item in value)
            else:
                text = str(value)
            env[self.env_key(field.name)] = text
        return env


__all__ = ["Settings"]
