"""Queue-length probe against the Artemis Jolokia management endpoint.

One probe is one synchronous GET: build the client (custom trust anchors when
configured), read the address ``MessageCount``, interpret the body. Nothing is
retried and nothing is cached apart from the parsed trust anchor, so every call
reflects the broker as it is now.

Usage example:
    >>> probe = QueueProbe(resolve_metadata({"queueName": "orders", "jolokiaHost": "http://artemis:8161"}, {}))
    >>> probe.get_queue_length()  # doctest: +SKIP
    12
"""

from __future__ import annotations

import logging
import ssl
from typing import Optional, Union

import httpx

from .config import get_settings
from .errors import ProbeFailure, ProbeFailureKind
from .jolokia import build_read_url, parse_queue_length
from .metadata import ResolvedConfig
from .metrics import PROBE_LATENCY_SECONDS, PROBE_TOTAL, QUEUE_LENGTH
from .tls import build_trust_context
from .tracing import get_tracer


logger = logging.getLogger(__name__)


class QueueProbe:
    """Reads the pending-message count of one Artemis address.

    Instances are safe to share between threads: the configuration is frozen
    and each call opens and closes its own HTTP client. The trust-anchor
    ``SSLContext`` is parsed on first use and reused afterwards; an invalid
    bundle is re-checked (and rejected) on every call.

    ``transport`` replaces the network transport, e.g. with
    ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        config: ResolvedConfig,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.config = config
        self.timeout = timeout if timeout is not None else get_settings().probe_timeout_seconds
        self._transport = transport
        self._ssl_context: Optional[ssl.SSLContext] = None
        self._tracer = get_tracer()

    def get_queue_length(self, timeout: Optional[float] = None) -> int:
        """Return the current queue length, or raise ``ProbeFailure``.

        ``timeout`` overrides the instance deadline for this call only.
        """
        with self._tracer.start_as_current_span("artemis.probe") as span, PROBE_LATENCY_SECONDS.time():
            span.set_attribute("artemis.queue", self.config.queue_name)
            try:
                length = self._read(self.timeout if timeout is None else timeout)
            except ProbeFailure as exc:
                PROBE_TOTAL.labels(result=exc.kind.value).inc()
                span.set_attribute("artemis.probe.result", exc.kind.value)
                logger.warning(
                    "artemis probe failed for queue %s at %s: %s",
                    self.config.queue_name,
                    self.config.redacted_endpoint,
                    exc,
                )
                raise
            PROBE_TOTAL.labels(result="ok").inc()
            QUEUE_LENGTH.labels(queue=self.config.queue_name).set(length)
            span.set_attribute("artemis.probe.result", "ok")
            span.set_attribute("artemis.queue_length", length)
            return length

    def _verify(self) -> Union[ssl.SSLContext, bool]:
        if self.config.trust_anchor is None:
            return True
        if self._ssl_context is None:
            self._ssl_context = build_trust_context(self.config.trust_anchor)
        return self._ssl_context

    def _read(self, timeout: float) -> int:
        # Trust anchors are checked before any connection is attempted
        verify = self._verify()
        url = build_read_url(self.config)
        try:
            with httpx.Client(verify=verify, transport=self._transport, timeout=timeout) as client:
                response = client.get(url, headers={"Accept": "application/json"})
        except httpx.TimeoutException as exc:
            raise ProbeFailure(
                ProbeFailureKind.TRANSPORT,
                f"cancelled: deadline of {timeout}s exceeded: {_reason(exc)}",
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ProbeFailure(ProbeFailureKind.TRANSPORT, _reason(exc)) from exc

        if response.status_code == 403:
            raise ProbeFailure(
                ProbeFailureKind.PERMISSION_DENIED,
                "jolokia rejected the credentials for this read",
                status_code=403,
            )
        if response.status_code != 200:
            raise ProbeFailure(
                ProbeFailureKind.UNEXPECTED_STATUS,
                f"http_{response.status_code}",
                status_code=response.status_code,
            )
        return parse_queue_length(response.content, self.config.response_shape)


def _reason(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__
