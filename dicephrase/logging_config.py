"""
Logging configuration
Generation events are logged but never include the generated words
"""

import logging
import sys
from typing import Set


class SecretFilter(logging.Filter):
    """Filter that redacts anything that looks like passphrase content"""

    SENSITIVE_KEYS: Set[str] = {
        "passphrase",
        "words",
        "word",
        "secret",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        msg = str(record.getMessage()).lower()
        for key in self.SENSITIVE_KEYS:
            if key in msg and "=" in msg:
                # Likely contains a sensitive value assignment
                record.msg = "[REDACTED - Sensitive data filtered]"
                record.args = None
                break
        return True


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure package logging on stderr; stdout is reserved for output"""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretFilter())

    root = logging.getLogger("dicephrase")
    root.setLevel(level.upper())

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)
    root.propagate = False
    return root


logger = logging.getLogger("dicephrase")


def log_list_loaded(source: str, length: int):
    """Log a word list that passed validation"""
    logger.info(f"Word list {source} loaded ({length} entries)")


def log_list_rejected(source: str, reason: str):
    """Log a word list that failed to load or validate"""
    logger.info(f"Word list {source} rejected: {reason}")


def log_passphrase_generated(count: int, with_special_char: bool):
    """Log a generation event (count only, never the content)"""
    extra = " with special character" if with_special_char else ""
    logger.info(f"Generated {count}-word passphrase{extra}")
