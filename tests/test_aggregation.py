"""
Unit tests for sensitivity aggregation.
"""

from datetime import date
import pytest

from ratesens.indices import EUR, GBP, USD, USD_FED_FUND, USD_LIBOR_3M, USD_LIBOR_6M
from ratesens.sensitivity import (
    IndexCurrencySensitivityKey,
    PointSensitivities,
    PointSensitivity,
    SensitivityAggregator,
    SensitivityKind,
    aggregate,
)

JUNE = date(2015, 6, 1)


@pytest.fixture
def scenario():
    """Two USD duplicates and one EUR sensitivity on USD-LIBOR-3M."""
    return [
        PointSensitivity.ibor_rate(USD_LIBOR_3M, JUNE, 100.0, currency=USD),
        PointSensitivity.ibor_rate(USD_LIBOR_3M, JUNE, 50.0, currency=USD),
        PointSensitivity.ibor_rate(USD_LIBOR_3M, JUNE, 20.0, currency=EUR),
    ]


class TestAggregate:
    """Tests for aggregate()."""

    def test_concrete_scenario(self, scenario):
        result = aggregate(scenario)

        assert result == [
            PointSensitivity.ibor_rate(USD_LIBOR_3M, JUNE, 20.0, currency=EUR),
            PointSensitivity.ibor_rate(USD_LIBOR_3M, JUNE, 150.0, currency=USD),
        ]

    def test_empty(self):
        assert aggregate([]) == []

    def test_single_member_passes_through(self):
        item = PointSensitivity.ibor_rate(USD_LIBOR_3M, JUNE, 1.5)
        result = aggregate([item])
        assert len(result) == 1
        assert result[0] is item

    def test_input_untouched(self, scenario):
        before = list(scenario)
        aggregate(scenario)
        assert scenario == before

    def test_accepts_generator(self, scenario):
        assert aggregate(s for s in scenario) == aggregate(scenario)

    def test_different_kinds_not_merged(self):
        ibor = PointSensitivity(SensitivityKind.IBOR_RATE, "SHARED", USD, JUNE, 1.0)
        overnight = PointSensitivity(SensitivityKind.OVERNIGHT_RATE, "SHARED", USD, JUNE, 2.0)

        result = aggregate([overnight, ibor])

        assert len(result) == 2
        assert {s.kind for s in result} == {SensitivityKind.IBOR_RATE, SensitivityKind.OVERNIGHT_RATE}

    def test_sorted_by_risk_factor_currency_date(self):
        items = [
            PointSensitivity.ibor_rate(USD_LIBOR_6M, date(2015, 1, 1), 1.0),
            PointSensitivity.ibor_rate(USD_LIBOR_3M, date(2016, 1, 1), 1.0, currency=GBP),
            PointSensitivity.ibor_rate(USD_LIBOR_3M, date(2016, 1, 1), 1.0),
            PointSensitivity.ibor_rate(USD_LIBOR_3M, date(2015, 1, 1), 1.0),
            PointSensitivity.zero_rate(USD, date(2020, 1, 1), 1.0),
        ]

        result = aggregate(items)

        assert [(str(s.risk_factor), s.currency.code, s.date) for s in result] == [
            ("USD", "USD", date(2020, 1, 1)),
            ("USD-LIBOR-3M", "GBP", date(2016, 1, 1)),
            ("USD-LIBOR-3M", "USD", date(2015, 1, 1)),
            ("USD-LIBOR-3M", "USD", date(2016, 1, 1)),
            ("USD-LIBOR-6M", "USD", date(2015, 1, 1)),
        ]

    def test_output_ascending_under_compare(self, scenario):
        result = aggregate(scenario + [PointSensitivity.overnight_rate(USD_FED_FUND, JUNE, 3.0)])
        for a, b in zip(result[:-1], result[1:]):
            assert a.compare_excluding_value(b) <= 0

    def test_sum_left_to_right(self):
        items = [PointSensitivity.ibor_rate(USD_LIBOR_3M, JUNE, v) for v in (0.1, 0.2, 0.3)]
        assert aggregate(items)[0].sensitivity == (0.1 + 0.2) + 0.3

    def test_cancelling_values_kept(self):
        items = [
            PointSensitivity.ibor_rate(USD_LIBOR_3M, JUNE, 5.0),
            PointSensitivity.ibor_rate(USD_LIBOR_3M, JUNE, -5.0),
        ]
        result = aggregate(items)
        assert len(result) == 1
        assert result[0].sensitivity == 0.0

    def test_idempotent(self, scenario):
        once = aggregate(scenario)
        assert aggregate(once) == once

    def test_aggregator_instance(self, scenario):
        assert SensitivityAggregator().aggregate(scenario) == aggregate(scenario)


class TestPointSensitivities:
    """Tests for the PointSensitivities collection."""

    def test_empty(self):
        assert len(PointSensitivities.empty()) == 0
        assert PointSensitivities.empty().normalized() == PointSensitivities.empty()

    def test_combined_with(self, scenario):
        left = PointSensitivities.of(scenario[:1])
        combined = left.combined_with(scenario[1:])
        assert list(combined) == scenario

    def test_normalized(self, scenario):
        assert list(PointSensitivities.of(scenario).normalized()) == aggregate(scenario)

    def test_multiplied_by(self, scenario):
        doubled = PointSensitivities.of(scenario).multiplied_by(2.0)
        assert [s.sensitivity for s in doubled] == [200.0, 100.0, 40.0]

    def test_without_zeros(self, scenario):
        offset = PointSensitivity.ibor_rate(USD_LIBOR_3M, JUNE, -20.0, currency=EUR)
        sens = PointSensitivities.of(scenario).combined_with([offset])

        result = sens.without_zeros(threshold=0.0)

        assert list(result) == [PointSensitivity.ibor_rate(USD_LIBOR_3M, JUNE, 150.0, currency=USD)]

    def test_without_zeros_threshold(self, scenario):
        result = PointSensitivities.of(scenario).without_zeros(threshold=25.0)
        assert [s.currency for s in result] == [USD]

    def test_total(self, scenario):
        assert PointSensitivities.of(scenario).total() == 170.0

    def test_total_by_curve(self, scenario):
        extra = PointSensitivity.ibor_rate(USD_LIBOR_3M, date(2016, 6, 1), 5.0)
        totals = PointSensitivities.of(scenario + [extra]).total_by_curve()

        assert totals == {
            IndexCurrencySensitivityKey.of(USD_LIBOR_3M, USD): 155.0,
            IndexCurrencySensitivityKey.of(USD_LIBOR_3M, EUR): 20.0,
        }

    def test_to_frame(self, scenario):
        frame = PointSensitivities.of(scenario).normalized().to_frame()
        assert list(frame["currency"]) == ["EUR", "USD"]
        assert list(frame["sensitivity"]) == [20.0, 150.0]
