import logging
from typing import Any

import voluptuous as vol

from .facility import (
    Facility,
    InvalidFacilityCode,
    InvalidFacilityError,
    from_label,
    from_numerical_code,
)

_LOGGER = logging.getLogger(__name__)


def _is_code_string(value: str) -> bool:
    return value.isascii() and value.isdigit()


def facility_label(value: Any) -> Facility | None:
    """Validate a textual facility setting. None or empty means not configured."""
    if isinstance(value, Facility):
        return value
    if value is not None and not isinstance(value, str):
        raise vol.Invalid(f"Invalid facility '{value}'")
    try:
        return from_label(value)
    except InvalidFacilityError as err:
        raise vol.Invalid(str(err)) from err


def facility_code(value: Any) -> Facility:
    """Validate a numerical facility setting, accepting digit strings."""
    if isinstance(value, Facility):
        return value
    if isinstance(value, str):
        if not _is_code_string(value):
            raise vol.Invalid(f"Invalid facility '{value}'")
        value = vol.Coerce(int)(value)
    try:
        return from_numerical_code(value)
    except InvalidFacilityError as err:
        raise vol.Invalid(str(err)) from err


def facility(value: Any) -> Facility | None:
    """Validate a facility setting given either as a label or as a code."""
    if isinstance(value, int) and not isinstance(value, bool):
        return facility_code(value)
    if isinstance(value, str) and _is_code_string(value):
        return facility_code(value)
    return facility_label(value)


def facility_or_none(code: int) -> Facility | None:
    """Resolve the facility of one inbound record, None if it is malformed."""
    try:
        return from_numerical_code(code)
    except InvalidFacilityCode as err:
        _LOGGER.warning("syslog_facility: skipping record, %s", err)
        return None
