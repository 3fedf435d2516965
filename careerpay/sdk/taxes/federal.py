"""Federal income tax: progressive bracket walk."""

from dataclasses import asdict, dataclass
from typing import Optional, Sequence

from .schemas import TaxBracket


@dataclass(frozen=True)
class BracketDetail:
    """How much income and tax fell into one bracket."""

    rate: float
    lower_bound: float
    upper_bound: Optional[float]  # None for the top bracket
    income_in_bracket: float
    tax_from_bracket: float
    cumulative_tax: float

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_federal_income_tax(taxable_income: float, brackets: Sequence[TaxBracket]) -> float:
    """Calculate federal income tax based on taxable income and tax brackets.

    Walks the brackets in ascending order, taxing only the slice of income
    inside each one. Income exactly at a boundary is taxed entirely by the
    lower bracket.
    """
    tax_owed = 0.0
    remaining = taxable_income

    for bracket in brackets:
        if remaining <= 0:
            break
        taxable_in_bracket = min(remaining, bracket.width)
        if taxable_in_bracket <= 0:
            break
        tax_owed += taxable_in_bracket * bracket.rate
        remaining -= taxable_in_bracket

    return tax_owed


def federal_bracket_breakdown(taxable_income: float, brackets: Sequence[TaxBracket]) -> list[BracketDetail]:
    """Per-bracket detail of the bracket walk.

    Every bracket is listed; brackets above the income show zero income.
    The final cumulative_tax equals calculate_federal_income_tax().
    """
    details = []
    remaining = max(0.0, taxable_income)
    cumulative_tax = 0.0

    for bracket in brackets:
        income_in_bracket = min(remaining, bracket.width) if remaining > 0 else 0.0
        tax_from_bracket = income_in_bracket * bracket.rate
        cumulative_tax += tax_from_bracket
        remaining -= income_in_bracket

        details.append(BracketDetail(
            rate=bracket.rate,
            lower_bound=bracket.lower_bound,
            upper_bound=bracket.upper_bound,
            income_in_bracket=income_in_bracket,
            tax_from_bracket=tax_from_bracket,
            cumulative_tax=cumulative_tax,
        ))

    return details


def marginal_rate(taxable_income: float, brackets: Sequence[TaxBracket]) -> float:
    """Rate applied to the last dollar of income (lowest rate at or below 0)."""
    for bracket in brackets:
        if bracket.upper_bound is None or taxable_income <= bracket.upper_bound:
            return bracket.rate
    return brackets[-1].rate
