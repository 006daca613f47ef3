"""Debug logging switched on by the DEBUG_VQ environment variable."""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

ENV_VAR = "DEBUG_VQ"
LOGGER_NAME = "vecquant"

_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})
_HANDLER = logging.StreamHandler()
_HANDLER.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))


def debug_enabled(value: Optional[str]) -> bool:
    """Return whether an environment value asks for debug logging."""
    if value is None:
        return False
    return value.strip().lower() not in _FALSE_VALUES


def configure_logging(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Enable debug logging for the package if DEBUG_VQ says so.

    Returns whether debug logging was enabled.
    """
    env = os.environ if environ is None else environ
    if not debug_enabled(env.get(ENV_VAR)):
        return False
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    if _HANDLER not in logger.handlers:
        logger.addHandler(_HANDLER)
    return True