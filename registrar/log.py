"""
Logging setup for the registrar command line.
"""

import logging
from typing import Union


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class _RegistrarHandler(logging.StreamHandler):
    """Marker type so repeated setup_logging calls do not stack handlers."""
    pass


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach a single stream handler to the ``registrar`` logger."""
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger("registrar")
    logger.setLevel(level)

    if not any(isinstance(h, _RegistrarHandler) for h in logger.handlers):
        handler = _RegistrarHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
