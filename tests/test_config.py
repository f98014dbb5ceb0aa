"""
Test Suite for Configuration and Logging Setup
===============================================
"""

import logging

from bbs_pok import get_params
from bbs_pok.config import Config, configure_logging, config


class TestConfig:

    def test_defaults(self):
        cfg = Config()
        assert cfg.pairing_curve
        assert cfg.log_level == cfg.log_level.upper()

    def test_log_level_value(self):
        cfg = Config()
        cfg.log_level = 'DEBUG'
        assert cfg.log_level_value == logging.DEBUG
        cfg.log_level = 'NOT_A_LEVEL'
        assert cfg.log_level_value == logging.WARNING

    def test_configure_logging_sets_level(self):
        logger = logging.getLogger('bbs_pok')
        previous = logger.level
        try:
            assert configure_logging(logging.DEBUG) is logger
            assert logger.level == logging.DEBUG
            configure_logging()
            assert logger.level == config.log_level_value
        finally:
            logger.setLevel(previous)

    def test_params_are_cached(self, params):
        assert get_params() is params
        assert params['group_name'] in ('BN254', 'MNT224', 'SS512')
