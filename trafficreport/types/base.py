"""Base enums and the data-only validation error record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional


class Severity(IntEnum):
    """Severity attached to a validation finding; lower is more severe."""

    CRITICAL = 0
    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    VERBOSE = 4

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Return the matching member for ints or names, else ``value`` unchanged.

        Upstream validators are not required to emit known severities, so
        unrecognized values pass through as-is.
        """
        if isinstance(value, cls) or value is None:
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                return value
        return value


class ValidationResultSource(str, Enum):
    """Which part of an exchange a finding was raised against."""

    REQUEST = "request"
    RESPONSE = "response"
    GLOBAL = "global"


@dataclass(frozen=True)
class BaseValidationError:
    """Minimal, data-only description of a validation error.

    Attributes:
        severity: Severity of the finding, if known.
        error_code: Short error code.
        error_details: Free-form details.
        source: Request, response, or global.
        count: Occurrence count for aggregated findings.
    """

    severity: Optional[Severity] = None
    error_code: Optional[str] = None
    error_details: Optional[str] = None
    source: Optional[ValidationResultSource] = None
    count: Optional[int] = None
