"""
Unit tests for configuration loading.
"""

from datetime import date
import pytest

from ratesens.config import (
    DEFAULT_KEY_RATE_TENORS,
    SensitivityConfig,
    get_config,
    load_config,
    reset_config,
)
from ratesens.indices import USD_LIBOR_3M
from ratesens.rate import generate_reset_periods
from ratesens.sensitivity import PointSensitivities, PointSensitivity


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Clear overrides and the cached configuration around each test."""
    for name in ("RATESENS_ZERO_THRESHOLD", "RATESENS_FIXING_OFFSET_DAYS", "RATESENS_REPORT_PRECISION"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


class TestSensitivityConfig:
    """Tests for SensitivityConfig and environment overrides."""

    def test_defaults(self):
        config = load_config()
        assert config.zero_threshold == 0.0
        assert config.fixing_offset_days == 2
        assert config.report_precision == 2
        assert config.key_rate_tenors == DEFAULT_KEY_RATE_TENORS

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("RATESENS_ZERO_THRESHOLD", "0.5")
        monkeypatch.setenv("RATESENS_FIXING_OFFSET_DAYS", "0")
        config = load_config()
        assert config.zero_threshold == 0.5
        assert config.fixing_offset_days == 0

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("RATESENS_REPORT_PRECISION", "two")
        with pytest.raises(ValueError):
            load_config()

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValueError):
            SensitivityConfig(zero_threshold=-1.0)

    def test_get_config_cached(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("RATESENS_ZERO_THRESHOLD", "3.0")
        assert get_config() is first
        reset_config()
        assert get_config().zero_threshold == 3.0

    def test_threshold_used_by_without_zeros(self, monkeypatch):
        monkeypatch.setenv("RATESENS_ZERO_THRESHOLD", "1.0")
        sens = PointSensitivities.of([
            PointSensitivity.ibor_rate(USD_LIBOR_3M, date(2015, 6, 1), 0.5),
            PointSensitivity.ibor_rate(USD_LIBOR_3M, date(2015, 9, 1), 2.0),
        ])
        assert [s.sensitivity for s in sens.without_zeros()] == [2.0]

    def test_fixing_offset_used_by_schedule(self, monkeypatch):
        monkeypatch.setenv("RATESENS_FIXING_OFFSET_DAYS", "0")
        periods = generate_reset_periods(date(2024, 1, 15), date(2024, 4, 15), "1M")
        assert periods[0].fixing_date == date(2024, 1, 15)
