"""Config settings – AggregatorSettings read from ``AGGREGATOR_*`` variables."""
from __future__ import annotations

import dataclasses
import logging
import os
from typing import Mapping

from aggregator.kernel.errors import ApplicationError

ENV_PREFIX = "AGGREGATOR_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class SettingsError(ApplicationError):
    """An ``AGGREGATOR_*`` value could not be accepted.

    ``variable`` is the environment variable name, so the message points
    at what to fix in the deployment rather than at a Python attribute.
    """

    default_code = "invalid_setting"

    def __init__(self, variable: str, value: object, reason: str) -> None:
        super().__init__(
            f"{variable}={value!r}: {reason}",
            detail={"variable": variable, "value": str(value)},
        )
        self.variable = variable
        self.value = value
        self.reason = reason


def _variable(field_name: str) -> str:
    return f"{ENV_PREFIX}{field_name.upper()}"


def _parse_bool(variable: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise SettingsError(variable, raw, "expected a boolean (true/false, 1/0, yes/no, on/off)")


@dataclasses.dataclass(frozen=True)
class AggregatorSettings:
    """Library-level settings.

    ``log_level`` is normalised to upper case; ``log_json`` chooses between
    JSON and console rendering in :func:`~aggregator.observability.configure_logging`.
    """

    log_level: str = "INFO"
    log_json: bool = True

    def __post_init__(self) -> None:
        level = self.log_level.strip().upper()
        if level not in _LOG_LEVELS:
            raise SettingsError(
                _variable("log_level"), self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )
        object.__setattr__(self, "log_level", level)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AggregatorSettings:
        """Build settings from *environ* (``os.environ`` by default).

        Unset variables keep their defaults. Every rejected value raises
        :class:`SettingsError` naming the variable.
        """
        environ = os.environ if environ is None else environ
        values: dict[str, object] = {}

        raw_level = environ.get(_variable("log_level"))
        if raw_level is not None:
            values["log_level"] = raw_level

        raw_json = environ.get(_variable("log_json"))
        if raw_json is not None:
            values["log_json"] = _parse_bool(_variable("log_json"), raw_json)

        return cls(**values)


__all__ = ["ENV_PREFIX", "AggregatorSettings", "SettingsError"]
