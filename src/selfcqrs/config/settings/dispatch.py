"""Config settings – DispatchSettings for the registry and dispatcher."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from selfcqrs.config.settings.base import Settings
from selfcqrs.config.validation import InvalidSettingValueError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclasses.dataclass
class DispatchSettings(Settings):
    """Knobs of the dispatch facility, read from ``SELFCQRS_*`` variables.

    ``allow_overwrite``
        ``False`` (default): a second handler for the same request type is
        rejected with :class:`~selfcqrs.kernel.errors.DuplicateHandlerError`.
        ``True``: last registration wins.
    ``freeze_on_dispatch``
        Freeze the registry when the composition root hands out its first
        dispatcher.
    """

    _prefix: ClassVar[str] = "SELFCQRS"

    allow_overwrite: bool = False
    freeze_on_dispatch: bool = True
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        level = self.log_level.upper()
        if level not in _LEVELS:
            raise InvalidSettingValueError(
                self.env_key("log_level"),
                self.log_level,
                f"expected one of {', '.join(_LEVELS)}",
                settings_class=type(self),
            )
        self.log_level = level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["DispatchSettings"]
