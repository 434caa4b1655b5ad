from __future__ import annotations

import os
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[2]
BACKEND = ROOT / 'backend'
sys.path.insert(0, str(BACKEND))

# Keep a developer's .env or shell overrides out of the test run.
for _name in ('LOG_LEVEL', 'REDDIT_USERNAME'):
    os.environ.pop(_name, None)

from redditjson.core.config import get_settings

get_settings.cache_clear()
