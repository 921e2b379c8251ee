"""Logging for the gateway.

Application records go to stderr through uvicorn's formatter so they line up
with the server's own output. Per-request result lines use a child logger,
`geo_gateway.requests`, so they can be silenced or routed on their own.
"""

import os
from logging import config, getLevelName, getLogger

LOGGER_NAME = "geo_gateway"
REQUEST_LOGGER_NAME = f"{LOGGER_NAME}.requests"
LOG_LEVEL = getLevelName(os.getenv("LOG_LEVEL", "INFO"))  # DEBUG, WARNING, ERROR
REQUEST_LOG_LEVEL = getLevelName(os.getenv("REQUEST_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")))

log_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "access": {
            "()": "uvicorn.logging.AccessFormatter",
            "fmt": '%(levelprefix)s %(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s',
            "datefmt": "%Y-%m-%d %H:%M:%S",
            "use_colors": True,
        },
        "gateway": {
            "()": "uvicorn.logging.DefaultFormatter",
            "fmt": "%(levelprefix)s %(asctime)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
            "use_colors": True,
        },
    },
    "handlers": {
        "access": {"class": "logging.StreamHandler", "formatter": "access", "stream": "ext://sys.stdout"},
        "gateway": {
            "formatter": "gateway",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        LOGGER_NAME: {"handlers": ["gateway"], "level": LOG_LEVEL, "propagate": True},
        # Handled by the parent's handler; only the level differs.
        REQUEST_LOGGER_NAME: {"level": REQUEST_LOG_LEVEL},
        "uvicorn": {"handlers": ["gateway"], "level": LOG_LEVEL, "propagate": True},
        "uvicorn.access": {"handlers": ["access"], "level": LOG_LEVEL, "propagate": False},
        "uvicorn.error": {"level": LOG_LEVEL, "propagate": False},
    },
}

config.dictConfig(log_config)

logger = getLogger(LOGGER_NAME)
request_logger = getLogger(REQUEST_LOGGER_NAME)
