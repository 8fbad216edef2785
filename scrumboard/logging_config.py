"""Process-wide logging setup."""
import logging
import logging.config

from scrumboard.config import Settings

DEV_FORMAT = "%(levelname)s %(name)s: %(message)s"
PROD_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Development runs log everything tersely; packaged runs log INFO with timestamps."""
    fmt = DEV_FORMAT if settings.is_development else PROD_FORMAT
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": fmt, "datefmt": "%Y-%m-%dT%H:%M:%S%z"},
            },
            "handlers": {
                "console": {"class": "logging.StreamHandler", "formatter": "default"},
            },
            "loggers": {
                "scrumboard": {"handlers": ["console"], "level": settings.log_level, "propagate": False},
            },
        }
    )
