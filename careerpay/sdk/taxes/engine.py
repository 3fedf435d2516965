"""Annual tax computation: federal, state, Social Security and Medicare.

Income tax (federal and state) is computed on taxable income, i.e. gross
minus pre-tax retirement deductions. Social Security and Medicare are
computed on gross wages: a 401(k) deferral lowers income tax but not FICA.
"""

from dataclasses import dataclass, field
from typing import Optional

from .federal import BracketDetail, calculate_federal_income_tax, federal_bracket_breakdown, marginal_rate
from .rules import get_state_info, load_tax_rules, normalize_filing_status
from .schemas import MedicareRules, SocialSecurityRules, StateTaxInfo, TaxRules


@dataclass(frozen=True)
class TaxBreakdown:
    """Annual tax components for one income."""

    federal_tax: float
    state_tax: float
    social_security_tax: float
    medicare_tax: float
    state: StateTaxInfo
    filing_status: str
    marginal_federal_rate: float
    federal_brackets: list[BracketDetail] = field(default_factory=list)

    @property
    def fica_tax(self) -> float:
        return self.social_security_tax + self.medicare_tax

    @property
    def total_tax(self) -> float:
        return self.federal_tax + self.state_tax + self.social_security_tax + self.medicare_tax


def calculate_state_tax(taxable_income: float, state: StateTaxInfo) -> float:
    """Flat state income tax on taxable income."""
    if state.has_no_income_tax:
        return 0.0
    return max(0.0, taxable_income) * state.rate


def calculate_social_security_tax(gross_wages: float, rules: SocialSecurityRules) -> float:
    """SS tax on wages up to the annual wage cap."""
    return min(max(0.0, gross_wages), rules.wage_cap) * rules.tax_rate


def calculate_medicare_tax(gross_wages: float, rules: MedicareRules) -> float:
    """Medicare tax on all wages (no cap, no additional surtax)."""
    return max(0.0, gross_wages) * rules.tax_rate


def calculate_taxes(
    annual_taxable_income: float,
    annual_gross: float,
    state_code: str,
    filing_status: str = "single",
    rules: Optional[TaxRules] = None,
) -> TaxBreakdown:
    """Compute the four annual tax components.

    Args:
        annual_taxable_income: Gross minus pre-tax deductions (income tax base)
        annual_gross: Gross wages before deductions (FICA base)
        state_code: Two-letter state code (case-insensitive)
        filing_status: Selects the federal bracket table
        rules: Tax rules (defaults to the configured tax year)

    Raises:
        UnknownStateError: If the state is not in the table
        InvalidInputError: Bad state code format or filing status
    """
    if rules is None:
        rules = load_tax_rules()

    state = get_state_info(state_code, rules)
    filing_status = normalize_filing_status(filing_status)
    brackets = rules.brackets_for(filing_status)

    return TaxBreakdown(
        federal_tax=calculate_federal_income_tax(annual_taxable_income, brackets),
        state_tax=calculate_state_tax(annual_taxable_income, state),
        social_security_tax=calculate_social_security_tax(annual_gross, rules.social_security),
        medicare_tax=calculate_medicare_tax(annual_gross, rules.medicare),
        state=state,
        filing_status=filing_status,
        marginal_federal_rate=marginal_rate(annual_taxable_income, brackets),
        federal_brackets=federal_bracket_breakdown(annual_taxable_income, brackets),
    )
