"""
Unit tests for reset periods and reset schedule generation.
"""

from dataclasses import FrozenInstanceError
from datetime import date
import pytest

from ratesens.conventions import DayCount
from ratesens.errors import MissingFieldError, RatesensError, ScheduleOrderError
from ratesens.rate import ResetPeriod, generate_reset_periods


class TestResetPeriod:
    """Tests for ResetPeriod construction and validation."""

    def test_of(self):
        period = ResetPeriod.of(date(2015, 1, 5), date(2015, 2, 5), date(2015, 1, 2))
        assert period.start_date == date(2015, 1, 5)
        assert period.end_date == date(2015, 2, 5)
        assert period.fixing_date == date(2015, 1, 2)

    def test_fixing_before_start_allowed(self):
        """Only the end date bounds the fixing date."""
        period = ResetPeriod.of(date(2015, 1, 1), date(2015, 4, 1), date(2014, 12, 30))
        assert period.fixing_date < period.start_date

    def test_fixing_between_start_and_end_allowed(self):
        period = ResetPeriod.of(date(2015, 1, 1), date(2015, 4, 1), date(2015, 2, 1))
        assert period.start_date < period.fixing_date < period.end_date

    def test_start_equal_end_rejected(self):
        with pytest.raises(ScheduleOrderError):
            ResetPeriod.of(date(2015, 1, 1), date(2015, 1, 1), date(2014, 12, 30))

    def test_start_after_end_rejected(self):
        with pytest.raises(ScheduleOrderError):
            ResetPeriod.of(date(2015, 4, 1), date(2015, 1, 1), date(2014, 12, 30))

    def test_fixing_on_end_rejected(self):
        with pytest.raises(ScheduleOrderError):
            ResetPeriod.of(date(2015, 1, 1), date(2015, 4, 1), date(2015, 4, 1))

    def test_fixing_after_end_rejected(self):
        with pytest.raises(ScheduleOrderError):
            ResetPeriod.of(date(2015, 1, 1), date(2015, 4, 1), date(2015, 5, 1))

    @pytest.mark.parametrize("field_name", ["start_date", "end_date", "fixing_date"])
    def test_missing_date_rejected(self, field_name):
        dates = {
            "start_date": date(2015, 1, 1),
            "end_date": date(2015, 4, 1),
            "fixing_date": date(2014, 12, 30),
        }
        dates[field_name] = None
        with pytest.raises(MissingFieldError) as excinfo:
            ResetPeriod(**dates)
        assert excinfo.value.field_name == field_name

    def test_errors_are_value_errors(self):
        """Validation failures are distinguishable but still ValueErrors."""
        with pytest.raises(RatesensError):
            ResetPeriod.of(date(2015, 1, 1), date(2015, 1, 1), date(2014, 12, 30))
        assert issubclass(ScheduleOrderError, ValueError)

    def test_immutable(self):
        period = ResetPeriod.of(date(2015, 1, 1), date(2015, 4, 1), date(2014, 12, 30))
        with pytest.raises(FrozenInstanceError):
            period.end_date = date(2015, 7, 1)

    def test_value_equality(self):
        a = ResetPeriod.of(date(2015, 1, 1), date(2015, 4, 1), date(2014, 12, 30))
        b = ResetPeriod.of(date(2015, 1, 1), date(2015, 4, 1), date(2014, 12, 30))
        assert a == b
        assert hash(a) == hash(b)

    def test_year_fraction(self):
        period = ResetPeriod.of(date(2015, 1, 1), date(2015, 4, 1), date(2014, 12, 30))
        assert abs(period.year_fraction(DayCount.ACT_360) - 90 / 360) < 1e-12


class TestGenerateResetPeriods:
    """Tests for reset schedule generation."""

    def test_monthly_periods(self):
        periods = generate_reset_periods(date(2024, 1, 15), date(2024, 4, 15), "1M", fixing_offset_days=2)

        assert [p.start_date for p in periods] == [date(2024, 1, 15), date(2024, 2, 15), date(2024, 3, 15)]
        assert [p.end_date for p in periods] == [date(2024, 2, 15), date(2024, 3, 15), date(2024, 4, 15)]
        assert [p.fixing_date for p in periods] == [date(2024, 1, 11), date(2024, 2, 13), date(2024, 3, 13)]

    def test_periods_are_contiguous(self):
        periods = generate_reset_periods(date(2024, 1, 15), date(2025, 1, 15), "1M", fixing_offset_days=2)
        assert len(periods) == 12
        for previous, current in zip(periods[:-1], periods[1:]):
            assert previous.end_date == current.start_date

    def test_short_final_stub(self):
        periods = generate_reset_periods(date(2024, 1, 15), date(2024, 3, 1), "1M", fixing_offset_days=2)
        assert len(periods) == 2
        assert periods[-1].start_date == date(2024, 2, 15)
        assert periods[-1].end_date == date(2024, 3, 1)

    def test_weekend_start_adjusted(self):
        periods = generate_reset_periods(date(2024, 6, 1), date(2024, 9, 1), "3M", fixing_offset_days=0)
        assert periods[0].start_date == date(2024, 6, 3)
        # Sunday 1 Sep rolls forward to Monday 2 Sep
        assert periods[0].end_date == date(2024, 9, 2)
        assert periods[0].fixing_date == date(2024, 6, 3)

    def test_zero_offset_fixes_on_start(self):
        periods = generate_reset_periods(date(2024, 1, 15), date(2024, 4, 15), "1M", fixing_offset_days=0)
        assert all(p.fixing_date == p.start_date for p in periods)

    def test_start_not_before_end_rejected(self):
        with pytest.raises(ScheduleOrderError):
            generate_reset_periods(date(2024, 4, 15), date(2024, 1, 15), "1M")

    def test_invalid_tenor_rejected(self):
        with pytest.raises(ValueError):
            generate_reset_periods(date(2024, 1, 15), date(2024, 4, 15), "0M")
