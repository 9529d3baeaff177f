"""Shared fixtures for syslog_facility tests."""

from __future__ import annotations

from typing import Any

import pytest

CANONICAL_LABELS = [
    "KERN",
    "USER",
    "MAIL",
    "DAEMON",
    "AUTH",
    "SYSLOG",
    "LPR",
    "NEWS",
    "UUCP",
    "CRON",
    "AUTHPRIV",
    "FTP",
    "NTP",
    "AUDIT",
    "ALERT",
    "CLOCK",
    "LOCAL0",
    "LOCAL1",
    "LOCAL2",
    "LOCAL3",
    "LOCAL4",
    "LOCAL5",
    "LOCAL6",
    "LOCAL7",
]


@pytest.fixture
def canonical_labels() -> list[str]:
    """Labels in numerical code order."""
    return list(CANONICAL_LABELS)


@pytest.fixture
def syslog_config() -> dict[str, Any]:
    """Create a sample syslog sender config dict carrying a facility setting."""
    return {
        "host": "syslog.example.com",
        "port": 514,
        "protocol": "udp",
        "app_name": "myapp",
        "facility": "DAEMON",
    }
