import logging
from logging.config import dictConfig


def configure_logging(level: str = "INFO") -> None:
    """Console logging for the app plus a raw JSON-lines `audit` logger that does not propagate."""
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
                "raw": {"format": "%(message)s"},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "level": level,
                },
                "audit": {
                    "class": "logging.StreamHandler",
                    "formatter": "raw",
                    "level": logging.INFO,
                },
            },
            "loggers": {
                "": {"handlers": ["console"], "level": level},
                "uvicorn": {"handlers": ["console"], "level": level, "propagate": False},
                "audit": {"handlers": ["audit"], "level": logging.INFO, "propagate": False},
            },
        }
    )
