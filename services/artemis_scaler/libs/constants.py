"""Shared names for scaler metadata, the Jolokia query and the exposed metric.

Metadata keys (``ScaledObject`` trigger metadata):
- ``queueLength``: target queue length per replica (optional, default 5).
- ``queueName``: Artemis address to read (required).
- ``jolokiaHost``: base URL of the broker web console (required).
- ``caCert``: PEM bundle replacing the default trust store (optional).
- ``password``: name of the resolved secret holding the console password (optional).
- ``responseShape``: ``auto`` | ``scalar`` | ``envelope`` (optional, default ``auto``).
"""

METRIC_NAME = "queueLength"
METRIC_TYPE = "External"
DEFAULT_TARGET_QUEUE_LENGTH = 5

# Metadata keys
QUEUE_LENGTH_KEY = "queueLength"
QUEUE_NAME_KEY = "queueName"
ENDPOINT_KEY = "jolokiaHost"
TRUST_ANCHOR_KEY = "caCert"
CREDENTIAL_KEY = "password"
RESPONSE_SHAPE_KEY = "responseShape"

# Response shapes
SHAPE_AUTO = "auto"
SHAPE_SCALAR = "scalar"
SHAPE_ENVELOPE = "envelope"
RESPONSE_SHAPES = (SHAPE_AUTO, SHAPE_SCALAR, SHAPE_ENVELOPE)

# Wildcard broker, quoted address; ``{address}`` must already be percent-encoded
JOLOKIA_READ_PATH = (
    "/console/jolokia/read/"
    "org.apache.activemq.artemis:broker=%22*%22,component=addresses,address=%22{address}%22"
    "/MessageCount"
)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
