"""
Process-wide numeric configuration.

The tolerance is fixed when the package is imported. Set the
``ARGAND_TOLERANCE`` environment variable before importing to change it.
"""
import logging
import math
import os
from typing import Mapping

logger = logging.getLogger(__name__)

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
DEFAULT_TOLERANCE = 1e-12         # permitted |a - b| for two floats to be "equal"
TOLERANCE_ENV_VAR = "ARGAND_TOLERANCE"


def tolerance_from_env(environ: Mapping[str, str]) -> float:
    """Read the tolerance from ``environ``, falling back to the default."""
    raw = environ.get(TOLERANCE_ENV_VAR)
    if raw is None or not raw.strip():
        return DEFAULT_TOLERANCE

    try:
        tolerance = float(raw)
    except ValueError:
        raise ValueError(f"{TOLERANCE_ENV_VAR} must be a number, got {raw!r}") from None

    if not math.isfinite(tolerance) or tolerance <= 0:
        raise ValueError(f"{TOLERANCE_ENV_VAR} must be positive and finite, got {raw!r}")

    logger.info("Using tolerance %g from %s", tolerance, TOLERANCE_ENV_VAR)
    return tolerance


TOLERANCE: float = tolerance_from_env(os.environ)
