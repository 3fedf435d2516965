"""taxes - Tax tables and annual tax calculations.

Scope:
- Federal progressive brackets by filing status
- Flat state income tax rates
- Social Security (wage-capped) and Medicare (uncapped)

Constraints:
- Pure calculation - no I/O beyond reading tax_rules/*.yaml
- Year-specific rules loaded from careerpay/tax_rules/{year}.yaml

Modules:
- schemas: Pydantic models validating the YAML tables
- rules: Loading rules by year, state and filing status lookups
- federal: Bracket walk, bracket breakdown, marginal rate
- engine: Combines federal, state, SS and Medicare into a TaxBreakdown

Usage:
    from careerpay.sdk.taxes import calculate_taxes, load_tax_rules

    rules = load_tax_rules(2024)
    taxes = calculate_taxes(37440, 37440, "TX", rules=rules)
"""

from .schemas import (
    FILING_STATUSES,
    FilingStatusRules,
    MedicareRules,
    SocialSecurityRules,
    StateTaxInfo,
    TaxBracket,
    TaxRules,
)

from .rules import (
    get_available_years,
    get_state_info,
    list_states,
    load_tax_rules,
    normalize_filing_status,
    normalize_state_code,
)

from .federal import (
    BracketDetail,
    calculate_federal_income_tax,
    federal_bracket_breakdown,
    marginal_rate,
)

from .engine import (
    TaxBreakdown,
    calculate_medicare_tax,
    calculate_social_security_tax,
    calculate_state_tax,
    calculate_taxes,
)

__all__ = [
    # Schemas
    "FILING_STATUSES",
    "FilingStatusRules",
    "MedicareRules",
    "SocialSecurityRules",
    "StateTaxInfo",
    "TaxBracket",
    "TaxRules",
    # Rules
    "get_available_years",
    "get_state_info",
    "list_states",
    "load_tax_rules",
    "normalize_filing_status",
    "normalize_state_code",
    # Federal
    "BracketDetail",
    "calculate_federal_income_tax",
    "federal_bracket_breakdown",
    "marginal_rate",
    # Engine
    "TaxBreakdown",
    "calculate_medicare_tax",
    "calculate_social_security_tax",
    "calculate_state_tax",
    "calculate_taxes",
]
