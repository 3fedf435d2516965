"""Take-home pay calculation.

Shared by the pay calculator (hourly + 401k), the take-home pay calculator
(per-period gross) and the paycheck tools:

1. Annualize the input amount (cadence.annualize), plus tips for hourly pay
2. Subtract pre-tax deductions (percent of gross + annual dollars) to get
   income-tax taxable income
3. Compute federal, state, SS and Medicare (taxes.calculate_taxes)
4. Net = gross - total tax - pre-tax - post-tax deductions, redistributed
   to the display cadence

With no dollar deductions and no tips this reduces to
net = gross - total tax - gross * pct / 100.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from .cadence import (
    Cadence,
    PeriodBreakdown,
    annualize,
    check_amount,
    check_hours_per_week,
    check_optional_hours,
    distribute,
    parse_cadence,
)
from .errors import InvalidInputError
from .taxes import BracketDetail, TaxRules, calculate_taxes, load_tax_rules
from .taxes.rules import normalize_filing_status, normalize_state_code


@dataclass(frozen=True)
class PayInput:
    """Calculator input. Validated and normalized on construction.

    Dollar deductions are annual amounts:

    - pretax_deductions: HSA, health insurance, FSA, 401(k) as dollars, ...
      Lowers income-tax wages only; FICA is still on gross.
    - posttax_deductions: Roth IRA, child support, student loans, ...
      Lowers net pay only.

    tips_per_hour is added to the hourly rate and taxed like wages. It only
    applies to hourly pay.

    Raises:
        InvalidInputError: For any out-of-range or malformed field
    """

    amount: float
    cadence: Union[Cadence, str]
    state_code: str
    hours_per_week: Optional[float] = None
    pretax_deduction_percent: float = 0.0
    filing_status: str = "single"
    display_cadence: Optional[Union[Cadence, str]] = None
    tax_year: Optional[int] = None
    pretax_deductions: float = 0.0
    posttax_deductions: float = 0.0
    tips_per_hour: float = 0.0

    def __post_init__(self):
        cadence = parse_cadence(self.cadence)
        display_cadence = parse_cadence(self.display_cadence) if self.display_cadence is not None else cadence

        check_amount(self.amount)
        if cadence is Cadence.HOURLY:
            check_hours_per_week(self.hours_per_week)
        else:
            check_optional_hours(self.hours_per_week)

        pct = check_amount(self.pretax_deduction_percent, "pretax_deduction_percent")
        if pct > 100:
            raise InvalidInputError(f"pretax_deduction_percent must be between 0 and 100, got {pct}")

        check_amount(self.pretax_deductions, "pretax_deductions")
        check_amount(self.posttax_deductions, "posttax_deductions")
        tips = check_amount(self.tips_per_hour, "tips_per_hour")
        if tips > 0 and cadence is not Cadence.HOURLY:
            raise InvalidInputError("tips_per_hour only applies to hourly pay")

        # frozen dataclass: normalize in place via object.__setattr__
        object.__setattr__(self, "cadence", cadence)
        object.__setattr__(self, "display_cadence", display_cadence)
        object.__setattr__(self, "state_code", normalize_state_code(self.state_code))
        object.__setattr__(self, "filing_status", normalize_filing_status(self.filing_status))


@dataclass(frozen=True)
class PayResult:
    """Annual and per-period pay after taxes.

    Invariants:
        total_tax == federal_tax + state_tax + social_security_tax + medicare_tax
        annual_net == annual_gross - total_tax - pretax_deduction - posttax_deduction
    """

    annual_gross: float
    annual_tips: float
    pretax_deduction: float
    posttax_deduction: float
    annual_taxable: float
    federal_tax: float
    state_tax: float
    social_security_tax: float
    medicare_tax: float
    total_tax: float
    annual_net: float
    effective_tax_rate_percent: float
    take_home_percent: float
    marginal_federal_rate: float
    display_cadence: Cadence
    period_gross: float
    period_net: float
    period_tax: float
    state_code: str
    state_name: str
    filing_status: str
    tax_year: int
    gross_by_period: PeriodBreakdown
    net_by_period: PeriodBreakdown
    federal_brackets: list[BracketDetail] = field(default_factory=list)

    @property
    def fica_tax(self) -> float:
        return self.social_security_tax + self.medicare_tax

    def to_dict(self) -> dict:
        """JSON-ready dict (cadence as its string value)."""
        return {
            "tax_year": self.tax_year,
            "state": {"code": self.state_code, "name": self.state_name},
            "filing_status": self.filing_status,
            "annual": {
                "gross": self.annual_gross,
                "tips": self.annual_tips,
                "pretax_deduction": self.pretax_deduction,
                "taxable": self.annual_taxable,
                "federal_tax": self.federal_tax,
                "state_tax": self.state_tax,
                "social_security_tax": self.social_security_tax,
                "medicare_tax": self.medicare_tax,
                "total_tax": self.total_tax,
                "posttax_deduction": self.posttax_deduction,
                "net": self.annual_net,
            },
            "period": {
                "cadence": self.display_cadence.value,
                "gross": self.period_gross,
                "tax": self.period_tax,
                "net": self.period_net,
            },
            "rates": {
                "effective_tax_rate_percent": self.effective_tax_rate_percent,
                "take_home_percent": self.take_home_percent,
                "marginal_federal_rate": self.marginal_federal_rate,
            },
            "gross_by_period": self.gross_by_period.to_dict(),
            "net_by_period": self.net_by_period.to_dict(),
            "federal_brackets": [b.to_dict() for b in self.federal_brackets],
        }


def effective_tax_rate(total_tax: float, annual_gross: float) -> float:
    """Total tax as a percentage of gross (0 when gross is 0)."""
    if annual_gross <= 0:
        return 0.0
    return total_tax / annual_gross * 100


def calculate_pay(pay_input: PayInput, rules: Optional[TaxRules] = None) -> PayResult:
    """Compute take-home pay for a validated PayInput.

    Args:
        pay_input: Calculator input
        rules: Tax rules to use (default: pay_input.tax_year or the configured year)

    Raises:
        UnknownStateError: If the state is not in the year's table
        TaxRulesNotFoundError: If the tax year has no rules
    """
    if rules is None:
        rules = load_tax_rules(pay_input.tax_year)

    hours = pay_input.hours_per_week
    annual_tips = 0.0
    if pay_input.cadence is Cadence.HOURLY and pay_input.tips_per_hour:
        annual_tips = annualize(pay_input.tips_per_hour, Cadence.HOURLY, hours)
    annual_gross = annualize(pay_input.amount, pay_input.cadence, hours) + annual_tips

    pretax_deduction = annual_gross * pay_input.pretax_deduction_percent / 100 + pay_input.pretax_deductions
    # Dollar deductions can exceed gross; taxable income never goes below 0
    annual_taxable = max(0.0, annual_gross - pretax_deduction)
    posttax_deduction = float(pay_input.posttax_deductions)

    taxes = calculate_taxes(
        annual_taxable,
        annual_gross,
        pay_input.state_code,
        filing_status=pay_input.filing_status,
        rules=rules,
    )
    total_tax = taxes.total_tax
    annual_net = annual_gross - total_tax - pretax_deduction - posttax_deduction

    display = pay_input.display_cadence
    take_home = annual_net / annual_gross * 100 if annual_gross > 0 else 0.0

    return PayResult(
        annual_gross=annual_gross,
        annual_tips=annual_tips,
        pretax_deduction=pretax_deduction,
        posttax_deduction=posttax_deduction,
        annual_taxable=annual_taxable,
        federal_tax=taxes.federal_tax,
        state_tax=taxes.state_tax,
        social_security_tax=taxes.social_security_tax,
        medicare_tax=taxes.medicare_tax,
        total_tax=total_tax,
        annual_net=annual_net,
        effective_tax_rate_percent=effective_tax_rate(total_tax, annual_gross),
        take_home_percent=take_home,
        marginal_federal_rate=taxes.marginal_federal_rate,
        display_cadence=display,
        period_gross=distribute(annual_gross, display, hours),
        period_net=distribute(annual_net, display, hours),
        period_tax=distribute(total_tax, display, hours),
        state_code=taxes.state.code,
        state_name=taxes.state.name,
        filing_status=taxes.filing_status,
        tax_year=rules.year,
        gross_by_period=PeriodBreakdown.from_annual(annual_gross, hours),
        net_by_period=PeriodBreakdown.from_annual(annual_net, hours),
        federal_brackets=taxes.federal_brackets,
    )


def calculate_take_home(
    amount: float,
    cadence: Union[Cadence, str],
    state_code: str,
    hours_per_week: Optional[float] = None,
    pretax_deduction_percent: float = 0.0,
    filing_status: str = "single",
    display_cadence: Optional[Union[Cadence, str]] = None,
    tax_year: Optional[int] = None,
    pretax_deductions: float = 0.0,
    posttax_deductions: float = 0.0,
    tips_per_hour: float = 0.0,
) -> PayResult:
    """Keyword wrapper around PayInput + calculate_pay."""
    pay_input = PayInput(
        amount=amount,
        cadence=cadence,
        state_code=state_code,
        hours_per_week=hours_per_week,
        pretax_deduction_percent=pretax_deduction_percent,
        filing_status=filing_status,
        display_cadence=display_cadence,
        tax_year=tax_year,
        pretax_deductions=pretax_deductions,
        posttax_deductions=posttax_deductions,
        tips_per_hour=tips_per_hour,
    )
    return calculate_pay(pay_input)


def quick_estimate(hourly_rate: float, hours_per_week: float = 40, state_code: str = "TX") -> dict:
    """Annual, monthly and weekly gross/net for an hourly wage (single filer)."""
    result = calculate_take_home(hourly_rate, Cadence.HOURLY, state_code, hours_per_week=hours_per_week)
    gross = result.gross_by_period
    net = result.net_by_period
    return {
        "annual": {"gross": gross.annual, "net": net.annual},
        "monthly": {"gross": gross.monthly, "net": net.monthly},
        "weekly": {"gross": gross.weekly, "net": net.weekly},
        "effective_tax_rate": result.effective_tax_rate_percent,
    }
