"""Unit tests for configuration checks."""
import pytest

from atsmsg.config import Config


class TestConfig:

    def test_defaults_are_valid(self):
        assert Config.validate() is True

    def test_speed_limits_must_be_ordered(self, monkeypatch):
        monkeypatch.setattr(Config, 'MIN_TAS_KNOTS', 1000)

        with pytest.raises(ValueError, match="MIN_TAS_KNOTS"):
            Config.validate()

    def test_request_delays_must_be_ordered(self, monkeypatch):
        monkeypatch.setattr(Config, 'MIN_REQUEST_DELAY', 5.0)
        monkeypatch.setattr(Config, 'MAX_REQUEST_DELAY', 1.0)

        with pytest.raises(ValueError):
            Config.validate()

    def test_flight_level_ceiling_positive(self, monkeypatch):
        monkeypatch.setattr(Config, 'MAX_FLIGHT_LEVEL', 0)

        with pytest.raises(ValueError):
            Config.validate()
