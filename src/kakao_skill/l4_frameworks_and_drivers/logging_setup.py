"""Logging setup for the ``kskill`` logger tree."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


def setup_file_logging(log_path: Path, level: str = 'INFO') -> None:
    """Append ``kskill.*`` records to *log_path*, creating parent directories."""
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter(_FORMAT))
    root = logging.getLogger('kskill')
    root.setLevel(level.upper())
    root.addHandler(handler)
    logging.getLogger('kskill.cli').info('File logging started → %s', log_path)


def setup_stderr_logging(level: str = 'DEBUG') -> None:
    """Mirror ``kskill.*`` records at *level* to stderr (``-v``)."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
    root = logging.getLogger('kskill')
    root.setLevel(level.upper())
    root.addHandler(handler)
