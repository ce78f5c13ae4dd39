"""ActiveMQ Artemis scaler: queue depth exposed to an external autoscaler.

The scaler owns one ``ResolvedConfig`` for its lifetime and answers the three
questions the control loop asks:

- ``liveness()``: is there any pending work at all?
- ``current_metric_value()``: how many messages are pending right now?
- ``metric_spec()``: which metric, and what target value per replica?

Probe failures always surface as ``ProbeFailure``; they are never reported as
an empty queue.

Example:
    >>> scaler = ArtemisScaler(
    ...     {"queueName": "orders", "jolokiaHost": "http://admin@artemis:8161", "password": "JOLOKIA_PASSWORD"},
    ...     {"JOLOKIA_PASSWORD": "adminpw"},
    ... )
    >>> scaler.metric_spec()[0].target_average_value
    5
"""

from __future__ import annotations

import datetime as _dt
import logging
from typing import List, Mapping, Optional

import httpx
from pydantic import BaseModel, ConfigDict

from .libs.constants import METRIC_NAME, METRIC_TYPE
from .libs.errors import ConfigError
from .libs.metadata import ResolvedConfig, resolve_metadata
from .libs.probe import QueueProbe


logger = logging.getLogger(__name__)


class MetricSpec(BaseModel):
    """External metric descriptor used by the control loop to size the target."""
    model_config = ConfigDict(frozen=True)

    metric_name: str
    target_average_value: int
    type: str = METRIC_TYPE


class MetricValue(BaseModel):
    """A single queue-length sample."""
    model_config = ConfigDict(frozen=True)

    metric_name: str
    value: int
    timestamp: _dt.datetime


class ArtemisScaler:
    """Queue-depth scaler for one Artemis address.

    ``metadata`` is the trigger metadata and ``resolved_env`` the secrets the
    host already resolved for it. Construction raises ``ConfigError`` when the
    metadata is unusable; such a scaler is never registered.
    """

    def __init__(
        self,
        metadata: Mapping[str, str],
        resolved_env: Mapping[str, str],
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        try:
            self.config: ResolvedConfig = resolve_metadata(metadata, resolved_env)
        except ConfigError as exc:
            logger.error("error parsing ActiveMQ Artemis queue metadata: %s", exc)
            raise
        self._probe = QueueProbe(self.config, timeout=timeout, transport=transport)
        self._metric_specs = [
            MetricSpec(metric_name=METRIC_NAME, target_average_value=self.config.target_queue_length)
        ]

    def liveness(self) -> bool:
        """Return True iff the queue currently holds at least one message."""
        return self._probe.get_queue_length() > 0

    def current_metric_value(self, metric_name: str = METRIC_NAME) -> MetricValue:
        length = self._probe.get_queue_length()
        return MetricValue(
            metric_name=metric_name,
            value=length,
            timestamp=_dt.datetime.now(_dt.timezone.utc),
        )

    def metric_spec(self) -> List[MetricSpec]:
        return list(self._metric_specs)

    def close(self) -> None:
        """No pooled resources to release; each probe closes its own client."""
        return None
