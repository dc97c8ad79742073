import logging
import os
from typing import Optional, Sequence

import sentry_sdk
from sentry_sdk.integrations import Integration

from .. import __version__
from ..config import SENTRY_DSN, SENTRY_ENVIRONMENT

logger = logging.getLogger(__name__)


def _parse_sample_rate(env_var: str, default: float = 0.0) -> float:
    raw_value = os.getenv(env_var)
    if raw_value is None:
        return default

    try:
        value = float(raw_value)
    except ValueError:
        logger.warning(
            "%s is not a valid float (got %r); defaulting to %.2f",
            env_var,
            raw_value,
            default,
        )
        return default

    if not 0 <= value <= 1:
        logger.warning("%s must be within [0, 1]; defaulting to %.2f", env_var, default)
        return default

    return value


def init_sentry(integrations: Optional[Sequence[Integration]] = None) -> bool:
    """Initialise Sentry when ``SENTRY_DSN`` is set; return whether it was."""
    if not SENTRY_DSN:
        logger.info("SENTRY_DSN not provided; skipping Sentry initialization.")
        return False

    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=list(integrations or []),
        environment=SENTRY_ENVIRONMENT,
        release=f"tenpin@{__version__}",
        traces_sample_rate=_parse_sample_rate("SENTRY_TRACES_SAMPLE_RATE"),
        profiles_sample_rate=_parse_sample_rate("SENTRY_PROFILES_SAMPLE_RATE"),
    )
    logger.info(
        "Initialized Sentry%s",
        f" (environment={SENTRY_ENVIRONMENT})" if SENTRY_ENVIRONMENT else "",
    )
    return True
