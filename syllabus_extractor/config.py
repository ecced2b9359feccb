"""Extractor settings, environment loading and logging setup.

The numeric thresholds below are part of the extraction contract and are
deliberately not read from the environment. Only runtime concerns (log
level) are configurable.
"""

import logging
import os
from pathlib import Path

DEFAULT_SUBJECT_NAME = "Imported Syllabus"
UNTITLED_CHAPTER = "Untitled Chapter"

MAX_LINE_LENGTH = 500      # lines at or above this are merged body text
TITLE_LOOKAHEAD = 3        # lines scanned to recover a blank chapter title
MIN_CHAPTER_LENGTH = 3

LOG_LEVEL_ENV = "SYLLABUS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def load_env_file(env_path: Path) -> int:
    """Load KEY=VALUE lines from a .env file into os.environ.

    Variables already present in the environment win. Returns the number
    of keys read from the file (0 if the file does not exist).
    """
    if not env_path.exists():
        return 0
    loaded = 0
    with open(env_path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, value = line.split("=", 1)
                os.environ.setdefault(key.strip(), value.strip())
                loaded += 1
    return loaded


def get_log_level(default: str = "INFO") -> int:
    """Resolve SYLLABUS_LOG_LEVEL to a logging level, falling back to default."""
    name = os.environ.get(LOG_LEVEL_ENV, default).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.getLevelName(default.upper())


def configure_logging(level: int | None = None) -> None:
    """Install the root handler. Only entry points call this."""
    logging.basicConfig(
        level=get_log_level() if level is None else level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
