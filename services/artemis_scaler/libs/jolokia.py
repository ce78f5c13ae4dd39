"""Jolokia read requests and response interpretation for Artemis address counts.

The broker answers a read of ``MessageCount`` in one of two shapes:

- scalar: ``{"value": 7}``, a single MBean matched;
- envelope: ``{"status": 200, "value": {"<mbean>": {"MessageCount": 7}, ...}}``,
  the wildcard broker pattern matched one or more MBeans. A failed read keeps the
  envelope and carries ``status``/``error`` instead of ``value``.

Both shapes go through the same rule: counts ``<= 0`` contribute nothing and the
rest are summed, so one malformed entry cannot hide the real backlog. The total
saturates at ``INT32_MAX``.

Example:
    >>> parse_queue_length(b'{"status":200,"value":{"a":{"MessageCount":3},"b":{"MessageCount":-1}}}', "auto")
    3
    >>> parse_queue_length(b'{"value":4}', "scalar")
    4
"""

from __future__ import annotations

from typing import Annotated, Dict, Iterable, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import INT32_MAX, INT32_MIN, JOLOKIA_READ_PATH, SHAPE_ENVELOPE, SHAPE_SCALAR
from .errors import ProbeFailure, ProbeFailureKind
from .metadata import ResolvedConfig


Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class AddressCount(BaseModel):
    """Attribute values of one matched address MBean."""
    model_config = ConfigDict(strict=True, populate_by_name=True)

    message_count: Int32 = Field(alias="MessageCount")


class ScalarReading(BaseModel):
    """Body of a read that matched exactly one MBean."""
    model_config = ConfigDict(strict=True)

    value: Int32


class EnvelopeReading(BaseModel):
    """Jolokia response envelope around a pattern read."""
    model_config = ConfigDict(strict=True)

    status: int
    error: Optional[str] = None
    value: Union[Dict[str, AddressCount], Int32, None] = None


def build_read_url(config: ResolvedConfig) -> str:
    """Return the Jolokia read URL for ``config.queue_name``'s ``MessageCount``."""
    return config.endpoint_base_url + JOLOKIA_READ_PATH.format(address=quote(config.queue_name, safe=""))


def sum_positive(counts: Iterable[int]) -> int:
    """Sum the positive counts, saturating at ``INT32_MAX``."""
    return min(sum(count for count in counts if count > 0), INT32_MAX)


def parse_queue_length(body: bytes, shape: str) -> int:
    """Interpret a 200 response body as a non-negative queue length.

    ``shape`` is ``scalar``, ``envelope`` or ``auto``; ``auto`` tries the
    envelope first and falls back to the scalar shape.

    Raises ``ProbeFailure`` with ``PARSE_ERROR``, ``BROKER_REPORTED`` or
    ``UNKNOWN_BROKER_ERROR``.
    """
    if shape == SHAPE_SCALAR:
        return _read_scalar(body)
    try:
        envelope = EnvelopeReading.model_validate_json(body)
    except ValidationError as exc:
        if shape == SHAPE_ENVELOPE:
            raise ProbeFailure(ProbeFailureKind.PARSE_ERROR, _describe(exc)) from exc
        return _read_scalar(body)
    return _read_envelope(envelope)


def _read_scalar(body: bytes) -> int:
    try:
        reading = ScalarReading.model_validate_json(body)
    except ValidationError as exc:
        raise ProbeFailure(ProbeFailureKind.PARSE_ERROR, _describe(exc)) from exc
    return sum_positive([reading.value])


def _read_envelope(envelope: EnvelopeReading) -> int:
    if envelope.status != 200:
        if envelope.error:
            raise ProbeFailure(ProbeFailureKind.BROKER_REPORTED, envelope.error)
        raise ProbeFailure(
            ProbeFailureKind.UNKNOWN_BROKER_ERROR,
            f"broker returned status {envelope.status} without an error message",
        )
    value = envelope.value
    if value is None:
        raise ProbeFailure(ProbeFailureKind.PARSE_ERROR, "envelope has status 200 but no value")
    if isinstance(value, int):
        return sum_positive([value])
    return sum_positive(entry.message_count for entry in value.values())


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)
