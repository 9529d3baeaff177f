"""Constants for the syslog_facility package."""

import voluptuous as vol

from .helpers import facility

# Config keys
CONF_FACILITY = "facility"

DEFAULT_FACILITY = "LOCAL0"

FACILITY_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_FACILITY, default=DEFAULT_FACILITY): facility,
    },
    extra=vol.ALLOW_EXTRA,
)
