"""OpenTelemetry tracing helpers for the scaler.

Only the API is used here: spans are recorded when the hosting process has
installed a ``TracerProvider`` and are no-ops otherwise.
"""

from __future__ import annotations

from opentelemetry import trace  # type: ignore
from opentelemetry.trace import Tracer  # type: ignore


def get_tracer(service_name: str = "artemis-scaler") -> Tracer:
    return trace.get_tracer(service_name)
