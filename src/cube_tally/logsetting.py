from __future__ import annotations

import logging
from datetime import datetime

from .settings import settings

_LOG_FORMAT = "[%(levelname)s: %(module)s > %(funcName)s] %(message)s"

logger = logging.getLogger("cube_tally")
logger.setLevel(settings.log_level.upper())
logger.propagate = False

if not logger.handlers:
    if settings.log_to_file:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        _log_file = settings.log_dir / f"{datetime.now().strftime('%Y-%m-%d-%H:%M:%S')}.log"
        file_handler = logging.FileHandler(_log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(stream_handler)
