import os

from pydantic import BaseModel, Field


# Per-probe deadline; the only knob that is process-wide rather than per-scaler
ARTEMIS_PROBE_TIMEOUT_SECONDS: float = float(os.getenv("ARTEMIS_PROBE_TIMEOUT_SECONDS", "5"))


class Settings(BaseModel):
    """Process-level settings for the scaler, read from the environment.

    Per-scaler values (queue, endpoint, credentials) come from trigger metadata
    instead; see ``libs.metadata``.

    Example:
      ```bash
      export ARTEMIS_PROBE_TIMEOUT_SECONDS=2.5   # abort a Jolokia read after 2.5s
      ```
    """
    probe_timeout_seconds: float = Field(default=ARTEMIS_PROBE_TIMEOUT_SECONDS, gt=0)


def get_settings() -> Settings:
    return Settings()
