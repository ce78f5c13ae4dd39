"""TLS helpers for the Jolokia client."""

from __future__ import annotations

import ssl

from cryptography import x509
from cryptography.hazmat.primitives import serialization

from .errors import ProbeFailure, ProbeFailureKind


def build_trust_context(pem_bundle: str) -> ssl.SSLContext:
    """Return an ``ssl.SSLContext`` that trusts only the certificates in ``pem_bundle``.

    The platform trust store is not loaded, so the broker certificate must chain
    to one of the supplied anchors. Hostname checks and certificate
    verification stay on. Text outside the PEM blocks (``# Label:`` comments in
    public CA bundles, for instance) is ignored.

    Raises ``ProbeFailure(BAD_TRUST_ANCHOR)`` if the bundle holds no usable
    certificate.

    Example:
        >>> ctx = build_trust_context(open("ca.pem").read())  # doctest: +SKIP
        >>> ctx.verify_mode == ssl.CERT_REQUIRED
        True
    """
    if not pem_bundle.strip():
        raise ProbeFailure(ProbeFailureKind.BAD_TRUST_ANCHOR, "trust anchor is empty")
    try:
        certificates = x509.load_pem_x509_certificates(pem_bundle.encode("utf-8"))
    except ValueError as exc:
        raise ProbeFailure(ProbeFailureKind.BAD_TRUST_ANCHOR, f"cannot load trust anchor: {exc}") from exc
    if not certificates:
        raise ProbeFailure(ProbeFailureKind.BAD_TRUST_ANCHOR, "trust anchor contains no certificate")

    # Re-serialized PEM is pure ASCII, which ssl requires of a str cadata
    cadata = "".join(cert.public_bytes(serialization.Encoding.PEM).decode("ascii") for cert in certificates)
    try:
        # Passing ``cadata`` skips load_default_certs()
        context = ssl.create_default_context(ssl.Purpose.SERVER_AUTH, cadata=cadata)
    except (ssl.SSLError, ValueError, TypeError) as exc:
        raise ProbeFailure(ProbeFailureKind.BAD_TRUST_ANCHOR, f"cannot load trust anchor: {exc}") from exc

    context.check_hostname = True
    context.verify_mode = ssl.CERT_REQUIRED
    return context
