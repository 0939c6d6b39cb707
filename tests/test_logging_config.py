"""Tests for logging helpers."""

import pytest
from rokugan_sim.utils.logging_config import (
    LOG_LEVEL_ENV, configure_from_environment, get_game_logger, get_logger
)


class TestLoggingConfig:

    def test_game_logger_strips_package_prefix(self):
        assert get_game_logger('rokugan_sim.engine.game_pipeline').name == 'engine.game_pipeline'

    def test_game_logger_keeps_foreign_names(self):
        assert get_game_logger('tests.helpers').name == 'tests.helpers'

    def test_get_logger_uses_full_name(self):
        assert get_logger('rokugan_sim.engine').name == 'rokugan_sim.engine'

    def test_configure_from_environment_reads_level(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, 'DEBUG')

        assert configure_from_environment() == 'DEBUG'


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
