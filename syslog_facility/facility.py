"""Syslog facility as defined in RFC 5424, labels per RFC 5427."""

from __future__ import annotations

from enum import Enum, unique
from operator import attrgetter
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


class InvalidFacilityError(ValueError):
    """Base class for facility lookup failures."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid facility '{value}'")
        self.value = value


class InvalidFacilityCode(InvalidFacilityError):
    """Numerical code is not one of 0-23."""


class InvalidFacilityLabel(InvalidFacilityError):
    """Label does not match any known facility."""


@unique
class Facility(Enum):
    """One of the 24 standard syslog facilities.

    The member value is the numerical code, the member name is the label.
    """

    KERN = 0, "kernel messages"
    USER = 1, "user-level messages"
    MAIL = 2, "mail system"
    DAEMON = 3, "system daemons"
    AUTH = 4, "security/authorization messages"
    SYSLOG = 5, "messages generated internally by syslogd"
    LPR = 6, "line printer subsystem"
    NEWS = 7, "network news subsystem"
    UUCP = 8, "UUCP subsystem"
    CRON = 9, "clock daemon"
    AUTHPRIV = 10, "security/authorization messages (private)"
    FTP = 11, "FTP daemon"
    NTP = 12, "NTP subsystem"
    AUDIT = 13, "log audit"
    ALERT = 14, "log alert"
    CLOCK = 15, "clock daemon (note 2)"
    LOCAL0 = 16, "local use 0"
    LOCAL1 = 17, "local use 1"
    LOCAL2 = 18, "local use 2"
    LOCAL3 = 19, "local use 3"
    LOCAL4 = 20, "local use 4"
    LOCAL5 = 21, "local use 5"
    LOCAL6 = 22, "local use 6"
    LOCAL7 = 23, "local use 7"

    def __new__(cls, numerical_code: int, description: str) -> Facility:
        obj = object.__new__(cls)
        obj._value_ = numerical_code
        obj._description = description
        return obj

    @property
    def numerical_code(self) -> int:
        """Syslog facility numerical code."""
        return self._value_

    @property
    def label(self) -> str:
        """Syslog facility textual code, never empty."""
        return self.name

    @property
    def description(self) -> str:
        """RFC 5424 description, for display only."""
        return self._description


# Built once at import, read-only afterwards
_FROM_NUMERICAL_CODE: Mapping[int, Facility] = MappingProxyType({f.numerical_code: f for f in Facility})
_FROM_LABEL: Mapping[str, Facility] = MappingProxyType({f.label: f for f in Facility})


def from_numerical_code(code: int) -> Facility:
    """Return the facility for a numerical code.

    Raises InvalidFacilityCode when the code is not a valid syslog facility
    numerical code. Only real ints are accepted, strings are never coerced.
    """
    if isinstance(code, bool) or not isinstance(code, int):
        raise InvalidFacilityCode(code)
    facility = _FROM_NUMERICAL_CODE.get(code)
    if facility is None:
        raise InvalidFacilityCode(code)
    return facility


def from_label(label: str | None) -> Facility | None:
    """Return the facility for a textual code, or None for None/empty input.

    Matching is exact and case-sensitive. Raises InvalidFacilityLabel for any
    other unknown value.
    """
    if label is None or label == "":
        return None
    facility = _FROM_LABEL.get(label) if isinstance(label, str) else None
    if facility is None:
        raise InvalidFacilityLabel(label)
    return facility


def comparator() -> Callable[[Facility], int]:
    """Sort key ordering facilities by numerical code."""
    return attrgetter("numerical_code")


def facilities() -> tuple[Facility, ...]:
    """All facilities in numerical code order."""
    return tuple(sorted(Facility, key=comparator()))
