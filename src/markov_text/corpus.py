from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_corpus(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a whole corpus file into memory."""

    filepath = Path(path)
    try:
        text = filepath.read_text(encoding=encoding)
    except FileNotFoundError:
        logger.error(f"Corpus file not found: {filepath}")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"Encoding error in {filepath}: {e}")
        raise

    logger.debug(f"Read {len(text)} characters from {filepath}")
    return text
