from __future__ import annotations

import logging
from typing import get_args

from redditjson.core.config import LogLevel, get_settings

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'
LOG_LEVELS = get_args(LogLevel)


def configure_logging(level: str | None = None) -> None:
    resolved = (level or get_settings().log_level).upper()
    if resolved not in LOG_LEVELS:
        raise ValueError(f'unknown log level {level!r}, expected one of {", ".join(LOG_LEVELS)}')
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(resolved)
    # httpx logs every request at INFO; keep it quieter than our own client.
    logging.getLogger('httpx').setLevel(max(getattr(logging, resolved), logging.WARNING))
