"""Logging setup for applications embedding modelgate."""

from __future__ import annotations

import logging

from modelgate.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Third-party loggers that are noisy at INFO
_NOISY_LOGGERS = ("httpcore", "httpx", "LiteLLM", "LiteLLM Router", "LiteLLM Proxy")


def setup_logging(debug: bool | None = None) -> None:
    """Configure root logging so modelgate.* loggers are visible.

    Args:
        debug: Force DEBUG level.  Defaults to ``settings.modelgate_debug``.
    """
    if debug is None:
        debug = settings.modelgate_debug

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
