"""Career Pay SDK - Pay, tax and salary conversion calculations."""

from .errors import (
    PayCalcError,
    InvalidInputError,
    UnknownStateError,
    TaxRulesNotFoundError,
    ConfigError,
    SettingsValidationError,
)

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    validate_setting,
    get_default_tax_year,
    get_default_state,
    get_default_hours_per_week,
    get_default_filing_status,
    KNOWN_SETTINGS,
)

from .cadence import (
    Cadence,
    PeriodBreakdown,
    PERIODS_PER_YEAR,
    WEEKS_PER_YEAR,
    parse_cadence,
    annualize,
    distribute,
    convert_salary,
)

from .taxes import (
    TaxBracket,
    TaxRules,
    StateTaxInfo,
    TaxBreakdown,
    BracketDetail,
    load_tax_rules,
    get_available_years,
    get_state_info,
    list_states,
    calculate_federal_income_tax,
    calculate_taxes,
)

from .paycheck import (
    PayInput,
    PayResult,
    calculate_pay,
    calculate_take_home,
    effective_tax_rate,
    quick_estimate,
)

__all__ = [
    # Errors
    "PayCalcError",
    "InvalidInputError",
    "UnknownStateError",
    "TaxRulesNotFoundError",
    "ConfigError",
    "SettingsValidationError",
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "validate_setting",
    "get_default_tax_year",
    "get_default_state",
    "get_default_hours_per_week",
    "get_default_filing_status",
    "KNOWN_SETTINGS",
    # Cadence
    "Cadence",
    "PeriodBreakdown",
    "PERIODS_PER_YEAR",
    "WEEKS_PER_YEAR",
    "parse_cadence",
    "annualize",
    "distribute",
    "convert_salary",
    # Taxes
    "TaxBracket",
    "TaxRules",
    "StateTaxInfo",
    "TaxBreakdown",
    "BracketDetail",
    "load_tax_rules",
    "get_available_years",
    "get_state_info",
    "list_states",
    "calculate_federal_income_tax",
    "calculate_taxes",
    # Paycheck
    "PayInput",
    "PayResult",
    "calculate_pay",
    "calculate_take_home",
    "effective_tax_rate",
    "quick_estimate",
]
