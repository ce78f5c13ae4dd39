"""Prometheus collectors for Artemis probes.

Collectors register on the default registry; the hosting process decides how
to expose them.
"""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram


QUEUE_LENGTH = Gauge(
    "artemis_scaler_queue_length", "Last successfully probed Artemis queue length", ["queue"]
)
PROBE_TOTAL = Counter(
    "artemis_scaler_probe_total", "Total Jolokia probes by outcome", ["result"]  # ok | <failure kind>
)
PROBE_LATENCY_SECONDS = Histogram(
    "artemis_scaler_probe_latency_seconds",
    "Time to complete a single Jolokia probe",
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)
