"""Internal libraries for the Artemis scaler.

Modules include metadata resolution, the Jolokia query and response parsing,
TLS trust-anchor handling, the queue probe, metrics and tracing helpers.
"""
