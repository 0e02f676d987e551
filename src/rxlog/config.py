"""Logger configuration schema and Result-based construction."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rxlog.result import Failure, Result, Success
from rxlog.severity import Severity


class LoggerConfig(BaseModel):
    """Immutable settings of one :class:`~rxlog.logger.Logger`.

    Parameters
    ----------
    name
        Label used in diagnostics and as the default target of the stdlib
        logging bridge.
    default_severity
        Severity of records whose statement carries no severity terminal.
        Accepts a member or its name (``"warning"``).
    """

    name: str = Field("rxlog", min_length=1)
    default_severity: Severity = Severity.info

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("default_severity", mode="before")
    @classmethod
    def _severity_from_name(cls, value: object) -> object:
        match value:
            case str() if value in Severity.__members__:
                return Severity[value]
            case _:
                return value


def build_logger_config(**data: object) -> Result[LoggerConfig, ValidationError]:
    """
    Construct a :class:`LoggerConfig` and surface validation issues as a Result.

    Pydantic still raises internally; the exception is caught here so callers
    can pattern match on the outcome instead.
    """
    try:
        return Success(LoggerConfig.model_validate(data))
    except ValidationError as exc:
        return Failure(exc)


__all__ = ["LoggerConfig", "build_logger_config"]
