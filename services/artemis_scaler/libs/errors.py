"""Error taxonomy for metadata resolution and queue probes.

``ConfigError`` is raised once, while a scaler is being built, and is fatal to
that scaler. ``ProbeFailure`` is raised per probe and is never converted into a
zero count: an unreadable queue must not look like an empty one.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ConfigErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    INVALID_NUMBER = "invalid_number"
    INVALID_URL = "invalid_url"
    INVALID_VALUE = "invalid_value"
    UNRESOLVED_SECRET = "unresolved_secret"
    MISSING_USERNAME = "missing_username"


class ProbeFailureKind(str, Enum):
    BAD_TRUST_ANCHOR = "bad_trust_anchor"
    TRANSPORT = "transport"
    PERMISSION_DENIED = "permission_denied"
    UNEXPECTED_STATUS = "unexpected_status"
    PARSE_ERROR = "parse_error"
    BROKER_REPORTED = "broker_reported"
    UNKNOWN_BROKER_ERROR = "unknown_broker_error"


class ArtemisScalerError(RuntimeError):
    """Base class for errors raised by the Artemis scaler."""


class ConfigError(ArtemisScalerError):
    """Raised when trigger metadata cannot be resolved into a configuration."""

    def __init__(self, kind: ConfigErrorKind, key: str, message: str):
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.key = key
        self.message = message


class ProbeFailure(ArtemisScalerError):
    """Raised when a probe cannot produce a queue length."""

    def __init__(self, kind: ProbeFailureKind, message: str = "", status_code: Optional[int] = None):
        super().__init__(f"{kind.value}: {message}" if message else kind.value)
        self.kind = kind
        self.message = message
        self.status_code = status_code
