"""Syslog facility classification and validation."""

from .facility import (
    Facility,
    InvalidFacilityCode,
    InvalidFacilityError,
    InvalidFacilityLabel,
    comparator,
    facilities,
    from_label,
    from_numerical_code,
)

__all__ = [
    "Facility",
    "InvalidFacilityCode",
    "InvalidFacilityError",
    "InvalidFacilityLabel",
    "comparator",
    "facilities",
    "from_label",
    "from_numerical_code",
]
