"""
Logging configuration
Mnemonic code events are logged but never include key material
"""

import logging
import sys
from typing import Set


class SecretFilter(logging.Filter):
    """Filter that redacts mnemonic material"""

    SENSITIVE_KEYS: Set[str] = {
        "mnemonic",
        "passphrase",
        "seed",
        "entropy",
        "words",
    }

    REDACTED = "[REDACTED - Sensitive data filtered]"

    def filter(self, record: logging.LogRecord) -> bool:
        msg = str(record.msg).lower()
        for key in self.SENSITIVE_KEYS:
            if key in msg and "=" in msg:
                # Likely contains a secret value assignment
                record.msg = self.REDACTED
                record.args = ()
                break
        return True


def setup_logging(level: str = "WARNING", stream=None) -> logging.Handler:
    """Configure the bip39kit logger"""
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretFilter())

    logger = logging.getLogger("bip39kit")
    logger.setLevel(level.upper())

    # Clear existing handlers to avoid duplicates
    logger.handlers = []
    logger.addHandler(handler)
    logger.propagate = False
    return handler
