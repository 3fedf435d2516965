"""Tests for the federal bracket walk."""

import pytest

from careerpay.sdk.taxes import (
    FILING_STATUSES,
    TaxBracket,
    calculate_federal_income_tax,
    federal_bracket_breakdown,
    load_tax_rules,
    marginal_rate,
)


@pytest.fixture
def single_2024():
    return load_tax_rules(2024).brackets_for("single")


class TestCalculateFederalIncomeTax:

    def test_zero_income(self, single_2024):
        assert calculate_federal_income_tax(0, single_2024) == 0

    def test_negative_income_is_zero_tax(self, single_2024):
        assert calculate_federal_income_tax(-500, single_2024) == 0

    def test_within_first_bracket(self, single_2024):
        assert calculate_federal_income_tax(10000, single_2024) == pytest.approx(1000)

    def test_boundary_stays_in_lower_bracket(self, single_2024):
        assert calculate_federal_income_tax(11600, single_2024) == pytest.approx(1160)
        assert calculate_federal_income_tax(11601, single_2024) == pytest.approx(1160.12)

    def test_hourly_18_at_40_hours(self, single_2024):
        # 11600 * 10% + 25840 * 12%
        assert calculate_federal_income_tax(37440, single_2024) == pytest.approx(4260.80)

    def test_100k_reaches_22_percent(self, single_2024):
        # 1160 + 4266 + 52850 * 22%
        assert calculate_federal_income_tax(100000, single_2024) == pytest.approx(17053)

    def test_top_bracket_is_unbounded(self, single_2024):
        below = calculate_federal_income_tax(1_000_000, single_2024)
        above = calculate_federal_income_tax(1_000_100, single_2024)
        assert above - below == pytest.approx(37)

    def test_monotonic_in_income(self, single_2024):
        incomes = [0, 5000, 11600, 30000, 47150, 80000, 100525, 200000, 500000, 700000]
        taxes = [calculate_federal_income_tax(i, single_2024) for i in incomes]
        assert taxes == sorted(taxes)

    def test_never_exceeds_top_rate(self, single_2024):
        for income in (1, 50000, 250000, 2_000_000):
            assert calculate_federal_income_tax(income, single_2024) <= income * 0.37

    def test_custom_brackets(self):
        brackets = [
            TaxBracket(min=0, max=1000, rate=0.1),
            TaxBracket(min=1000, rate=0.5),
        ]
        assert calculate_federal_income_tax(3000, brackets) == pytest.approx(100 + 1000)

    @pytest.mark.parametrize("year", [2024, 2026])
    @pytest.mark.parametrize("filing_status", FILING_STATUSES)
    def test_continuous_at_every_bracket_edge(self, year, filing_status):
        brackets = load_tax_rules(year).brackets_for(filing_status)
        eps = 0.01

        for lower, upper in zip(brackets, brackets[1:]):
            edge = lower.upper_bound
            below = calculate_federal_income_tax(edge - eps, brackets)
            at_edge = calculate_federal_income_tax(edge, brackets)
            above = calculate_federal_income_tax(edge + eps, brackets)

            assert at_edge - below == pytest.approx(eps * lower.rate, abs=1e-6)
            assert above - at_edge == pytest.approx(eps * upper.rate, abs=1e-6)


class TestBracketBreakdown:

    def test_lists_every_bracket(self, single_2024):
        details = federal_bracket_breakdown(37440, single_2024)
        assert len(details) == len(single_2024)

    def test_slices_for_37440(self, single_2024):
        details = federal_bracket_breakdown(37440, single_2024)

        assert details[0].income_in_bracket == pytest.approx(11600)
        assert details[1].income_in_bracket == pytest.approx(25840)
        assert all(d.income_in_bracket == 0 for d in details[2:])

    @pytest.mark.parametrize("income", [0, 11600, 37440, 100000, 250000, 900000])
    def test_cumulative_matches_walk(self, single_2024, income):
        details = federal_bracket_breakdown(income, single_2024)
        assert details[-1].cumulative_tax == pytest.approx(
            calculate_federal_income_tax(income, single_2024)
        )
        assert sum(d.income_in_bracket for d in details) == pytest.approx(income)

    def test_to_dict(self, single_2024):
        data = federal_bracket_breakdown(100, single_2024)[-1].to_dict()
        assert data["upper_bound"] is None
        assert data["rate"] == 0.37


class TestMarginalRate:

    @pytest.mark.parametrize("income,rate", [
        (0, 0.10),
        (11600, 0.10),
        (11601, 0.12),
        (37440, 0.12),
        (100000, 0.22),
        (1_000_000, 0.37),
    ])
    def test_rate_of_last_dollar(self, single_2024, income, rate):
        assert marginal_rate(income, single_2024) == rate
