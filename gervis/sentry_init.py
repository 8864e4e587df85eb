"""
Sentry initialization for the metrics service.
"""
import logging
from gervis.config import settings

logger = logging.getLogger(__name__)


def init_sentry() -> bool:
    """Initialize Sentry if DSN is provided. Returns True when enabled."""
    if not settings.SENTRY_DSN:
        logger.info("Sentry DSN not provided. Error tracking disabled.")
        return False
    
    import sentry_sdk
    from sentry_sdk.integrations.fastapi import FastApiIntegration
    from sentry_sdk.integrations.logging import LoggingIntegration
    
    logging_integration = LoggingIntegration(
        level=logging.INFO,        # Capture info and above as breadcrumbs
        event_level=logging.ERROR   # Send errors as events
    )
    
    try:
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            environment=settings.SENTRY_ENVIRONMENT,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            integrations=[
                FastApiIntegration(),
                logging_integration,
            ],
            release=settings.APP_VERSION,
            send_default_pii=False,  # Client portfolios are personal data
            max_breadcrumbs=50,
        )
    except Exception as e:
        logger.error(f"Failed to initialize Sentry: {e}")
        return False
    
    logger.info("Sentry initialized")
    return True
