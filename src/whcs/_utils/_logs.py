import logging
import sys
from typing import Mapping

from .constants import HEADER_AUTHORIZATION, LOGGER_NAME

_HANDLER_NAME = "whcs-console"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach a console handler to the package logger (once)."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        logger.addHandler(handler)

    return logger


def masked_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        name: "***" if name.lower() == HEADER_AUTHORIZATION.lower() else value
        for name, value in headers.items()
    }
