"""
Utility functions for the profile2resume app.
"""

import hashlib
import logging
import sys

from config import LOG_LEVEL


def _sha(text: str) -> str:
    """Computes SHA256 hash of a string."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def setup_logging(level: str | None = None) -> None:
    """Configure root logging and quiet the chatty third-party loggers."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for noisy in ("pdfminer", "pdfplumber", "httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
