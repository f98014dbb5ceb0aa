"""
bbs_pok configuration
Process-wide settings read from the environment once at import time.
"""

import logging
import os

# Defaults
DEFAULT_PAIRING_CURVE = os.getenv('BBS_POK_PAIRING_CURVE', 'BN254')
DEFAULT_LOG_LEVEL = os.getenv('BBS_POK_LOG_LEVEL', 'WARNING')


class Config:
    """Configuration holder."""

    def __init__(self):
        self.pairing_curve = DEFAULT_PAIRING_CURVE
        self.log_level = DEFAULT_LOG_LEVEL.upper()

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)


def configure_logging(level=None):
    """Apply the configured level to the ``bbs_pok`` logger tree."""
    logger = logging.getLogger('bbs_pok')
    logger.setLevel(level if level is not None else config.log_level_value)
    return logger


# Global configuration instance
config = Config()
