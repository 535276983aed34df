"""Tests for the balance summary and monthly series aggregators."""

import itertools
from datetime import date, datetime, timezone, timedelta
from decimal import Decimal
from types import SimpleNamespace

import pytest

from fintrack.domain.entities import BalanceSummary, Transaction
from fintrack.domain.errors import InvalidInputError
from fintrack.domain.summary import summarize
from fintrack.domain.timeseries import (
    MONTH_LABELS,
    available_years,
    monthly_series,
    select_default_year,
    series_totals,
)


def _txn(txn_id, amount, when, description="Item"):
    now = datetime(2024, 1, 1)
    return Transaction(
        id=txn_id,
        amount=amount,
        date=when,
        description=description,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def march_july_transactions():
    return [
        {"amount": -50, "date": date(2024, 3, 15)},
        {"amount": 200, "date": date(2024, 3, 20)},
        {"amount": -30, "date": date(2024, 7, 1)},
    ]


class TestSummarize:
    """Tests for summarize."""

    def test_empty(self):
        result = summarize([])
        assert result.income == 0
        assert result.expenses == 0
        assert result.balance == 0
        assert result.excluded == 0

    def test_income_and_expenses(self):
        result = summarize(
            [
                _txn(1, Decimal("1000.00"), datetime(2024, 1, 5)),
                _txn(2, Decimal("-250.50"), datetime(2024, 1, 6)),
                _txn(3, Decimal("-49.50"), datetime(2024, 2, 1)),
            ]
        )
        assert result.income == Decimal("1000.00")
        assert result.expenses == Decimal("300.00")
        assert result.balance == Decimal("700.00")

    def test_zero_amount_counts_as_income(self):
        result = summarize([{"amount": 0, "date": date(2024, 1, 1)}])
        assert result == BalanceSummary(income=Decimal("0"), expenses=Decimal("0"), balance=Decimal("0"))

    def test_non_numeric_amount_is_excluded(self):
        result = summarize(
            [
                {"amount": "abc", "date": date(2024, 1, 1)},
                {"amount": 100, "date": date(2024, 1, 2)},
            ]
        )
        assert result.income == 100
        assert result.expenses == 0
        assert result.balance == 100
        assert result.excluded == 1

    @pytest.mark.parametrize(
        "bad_amount",
        ["", "12abc", "NaN", float("nan"), float("inf"), None, True, [1]],
    )
    def test_invalid_amounts_never_reach_totals(self, bad_amount):
        result = summarize(
            [
                {"amount": bad_amount, "date": date(2024, 1, 1)},
                {"amount": -20, "date": date(2024, 1, 2)},
            ]
        )
        assert result.income == 0
        assert result.expenses == 20
        assert result.balance == -20
        assert result.excluded == 1

    def test_numeric_strings_are_parsed(self):
        result = summarize(
            [
                {"amount": "1,200.50", "date": "2024-01-01"},
                {"amount": "-$200.50", "date": "2024-01-02"},
            ]
        )
        assert result.income == Decimal("1200.50")
        assert result.expenses == Decimal("200.50")
        assert result.balance == Decimal("1000.00")

    def test_float_amounts_keep_decimal_values(self):
        result = summarize(
            [{"amount": 0.1, "date": None}, {"amount": 0.2, "date": None}]
        )
        assert result.income == Decimal("0.3")

    def test_balance_equals_income_minus_expenses(self):
        amounts = [Decimal("12.34"), Decimal("-5.67"), Decimal("0"), Decimal("-100"), 42, -0.5, "oops"]
        result = summarize({"amount": a, "date": None} for a in amounts)
        assert result.balance == result.income - result.expenses

    def test_order_does_not_matter(self):
        records = [
            {"amount": Decimal("10.10"), "date": date(2024, 1, 1)},
            {"amount": Decimal("-3.30"), "date": date(2024, 2, 1)},
            {"amount": "bad", "date": date(2024, 3, 1)},
            {"amount": Decimal("7.00"), "date": date(2024, 4, 1)},
        ]
        results = {summarize(list(p)) for p in itertools.permutations(records)}
        assert len(results) == 1

    def test_repeated_calls_are_identical(self):
        records = [_txn(1, Decimal("5"), datetime(2024, 1, 1)), _txn(2, Decimal("-2"), datetime(2024, 1, 2))]
        assert summarize(records) == summarize(records)

    def test_accepts_generators(self):
        result = summarize({"amount": n, "date": None} for n in (1, 2, -3))
        assert result.balance == 0
        assert result.income == 3

    def test_accepts_attribute_records(self):
        result = summarize([SimpleNamespace(amount=-8, date=date(2024, 1, 1))])
        assert result.expenses == 8

    @pytest.mark.parametrize("bad_input", [None, 42, "transactions", {"amount": 1}])
    def test_invalid_input_shape_raises(self, bad_input):
        with pytest.raises(InvalidInputError):
            summarize(bad_input)

    def test_non_transaction_element_raises(self):
        with pytest.raises(InvalidInputError, match="Record 1"):
            summarize([{"amount": 1, "date": None}, 5])

    def test_invalid_input_error_is_type_error(self):
        with pytest.raises(TypeError):
            summarize(3.14)

    @pytest.mark.parametrize(
        "record",
        [{}, {"description": "Rent"}, datetime(2024, 1, 1), date(2024, 1, 1), object()],
    )
    def test_records_without_fields_raise(self, record):
        with pytest.raises(InvalidInputError, match="Record 0"):
            summarize([record])

    def test_partial_records_are_accepted(self):
        result = summarize([{"amount": 4}, SimpleNamespace(date=date(2024, 1, 1))])
        assert result.income == 4
        assert result.excluded == 1


class TestAvailableYears:
    """Tests for available_years."""

    def test_empty(self):
        assert available_years([]) == []

    def test_descending_and_unique(self):
        records = [
            {"amount": 1, "date": date(2023, 5, 1)},
            {"amount": 1, "date": date(2024, 1, 1)},
            {"amount": 1, "date": date(2023, 9, 1)},
        ]
        assert available_years(records) == [2024, 2023]

    def test_unreadable_dates_are_excluded(self):
        records = [
            {"amount": 1, "date": None},
            {"amount": 1, "date": "not a date"},
            {"amount": 1},
            {"amount": 1, "date": "2022-06-30"},
        ]
        assert available_years(records) == [2022]

    def test_includes_years_of_invalid_amounts(self):
        assert available_years([{"amount": "abc", "date": date(2021, 1, 1)}]) == [2021]

    def test_dates_without_year_or_month_are_excluded(self):
        records = [
            {"amount": 5, "date": "March"},
            {"amount": 5, "date": "15"},
            {"amount": 5, "date": "2024"},
        ]
        assert available_years(records) == []

    def test_month_and_year_without_day_are_kept(self):
        assert available_years([{"amount": 5, "date": "March 2022"}]) == [2022]


class TestMonthlySeries:
    """Tests for monthly_series."""

    def test_empty_is_twelve_zero_months(self):
        series = monthly_series([], 2024)
        assert len(series) == 12
        assert [m.month_index for m in series] == list(range(12))
        assert [m.label for m in series] == list(MONTH_LABELS)
        assert all(m.income == 0 and m.expenses == 0 for m in series)

    def test_buckets_by_month(self, march_july_transactions):
        series = monthly_series(march_july_transactions, 2024)

        assert len(series) == 12
        assert series[2].label == "Mar"
        assert series[2].income == 200
        assert series[2].expenses == 50
        assert series[6].label == "Jul"
        assert series[6].income == 0
        assert series[6].expenses == 30
        for index in set(range(12)) - {2, 6}:
            assert series[index].income == 0
            assert series[index].expenses == 0

    def test_other_years_are_ignored(self, march_july_transactions):
        series = monthly_series(march_july_transactions, 2023)
        assert all(m.income == 0 and m.expenses == 0 for m in series)

    def test_invalid_amounts_and_dates_are_skipped(self):
        records = [
            {"amount": "abc", "date": date(2024, 1, 10)},
            {"amount": 10, "date": "garbage"},
            {"amount": 10, "date": None},
            {"amount": 25, "date": date(2024, 1, 11)},
        ]
        series = monthly_series(records, 2024)
        assert series[0].income == 25
        assert series_totals(series) == (Decimal("25"), Decimal("0"))

    def test_uses_calendar_month_as_stored(self):
        # 23:30 at UTC-5 stays on Jan 31 even though it is Feb 1 in UTC
        when = datetime(2024, 1, 31, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        series = monthly_series([{"amount": -5, "date": when}], 2024)
        assert series[0].expenses == 5
        assert series[1].expenses == 0

    def test_parses_iso_strings(self):
        series = monthly_series([{"amount": 12, "date": "2024-11-05T10:00:00"}], 2024)
        assert series[10].income == 12

    def test_dates_without_year_are_not_bucketed(self):
        this_year = date.today().year
        records = [{"amount": 9, "date": "March"}, {"amount": -4, "date": "Mar 15"}]
        series = monthly_series(records, this_year)
        assert series_totals(series) == (Decimal("0"), Decimal("0"))

    def test_repeated_calls_are_identical(self, march_july_transactions):
        assert monthly_series(march_july_transactions, 2024) == monthly_series(
            march_july_transactions, 2024
        )

    def test_invalid_input_shape_raises(self):
        with pytest.raises(InvalidInputError):
            monthly_series(None, 2024)


class TestSelectDefaultYear:
    """Tests for select_default_year."""

    def test_current_year_when_present(self):
        assert select_default_year([2025, 2024], today=date(2024, 6, 1)) == 2024

    def test_most_recent_when_current_missing(self):
        assert select_default_year([2023, 2021], today=date(2024, 6, 1)) == 2023

    def test_current_year_when_no_data(self):
        assert select_default_year([], today=date(2024, 6, 1)) == 2024
