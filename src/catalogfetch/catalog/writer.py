"""Persist the serialized catalog."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_output(text: str, path: Path | str) -> bool:
    """Write text to path, creating parent directories as needed.

    Returns:
        True on success, False if the file could not be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        logger.error("Exception when saving the result to %s: %s", path, e)
        return False

    logger.info("Data successfully written to the file: %s", path)
    return True
