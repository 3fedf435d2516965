"""Tax rules loading and lookups.

Rules are versioned by tax year in tax_rules/YYYY.yaml and validated
against the schemas in schemas.py. Loaded rules are immutable and cached
per year, so every calculation reads the same constant tables.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import yaml

from ..config import get_default_tax_year
from ..errors import InvalidInputError, TaxRulesNotFoundError
from .schemas import FILING_STATUSES, StateTaxInfo, TaxRules

logger = logging.getLogger(__name__)

# Long-form names used by web forms map onto the short YAML keys
FILING_STATUS_ALIASES = {
    "married": "mfj",
    "married_jointly": "mfj",
    "married_filing_jointly": "mfj",
    "married_separately": "mfs",
    "married_filing_separately": "mfs",
    "head_of_household": "hoh",
}


def _get_tax_rules_dir() -> Path:
    """Get the tax_rules directory path."""
    package_root = Path(__file__).parent.parent.parent  # taxes -> sdk -> careerpay
    return package_root / "tax_rules"


def get_available_years() -> list[int]:
    """Get sorted list of available tax rule years (descending)."""
    rules_dir = _get_tax_rules_dir()
    years = [int(p.stem) for p in rules_dir.glob("*.yaml") if p.stem.isdigit()]
    return sorted(years, reverse=True)


@lru_cache(maxsize=None)
def _load_year(year: int) -> TaxRules:
    config_file = _get_tax_rules_dir() / f"{year}.yaml"
    if not config_file.exists():
        available = ", ".join(str(y) for y in get_available_years())
        raise TaxRulesNotFoundError(
            f"Tax rules file not found for year {year}: {config_file} (available: {available})"
        )

    with open(config_file, "r") as f:
        data = yaml.safe_load(f)

    rules = TaxRules.model_validate(data)
    if rules.year != year:
        raise TaxRulesNotFoundError(f"{config_file} declares year {rules.year}, not {year}")

    logger.debug("Loaded tax rules for %s (%d states)", year, len(rules.states))
    return rules


def load_tax_rules(year: Optional[Union[int, str]] = None) -> TaxRules:
    """Load tax rules for a specific year.

    Args:
        year: Tax year (int or "2024"); None uses the configured default

    Returns:
        Validated TaxRules

    Raises:
        TaxRulesNotFoundError: If no tax_rules/<year>.yaml exists
        InvalidInputError: If year is not a number
    """
    if year is None:
        year = get_default_tax_year()
    try:
        year = int(year)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Invalid tax year '{year}'")
    return _load_year(year)


def normalize_state_code(code: str) -> str:
    """Uppercase and strip a two-letter state code.

    Raises:
        InvalidInputError: If the code is not two letters
    """
    if not isinstance(code, str):
        raise InvalidInputError(f"State code must be a string, got {type(code).__name__}")
    normalized = code.strip().upper()
    if len(normalized) != 2 or not normalized.isalpha():
        raise InvalidInputError(f"Invalid state code '{code}'. Use a two-letter code like 'TX'.")
    return normalized


def normalize_filing_status(value: str) -> str:
    """Map a filing status (short or long form) to its YAML key.

    Raises:
        InvalidInputError: If the value is not a known filing status
    """
    if not isinstance(value, str):
        raise InvalidInputError(f"Filing status must be a string, got {type(value).__name__}")
    key = value.strip().lower().replace("-", "_").replace(" ", "_")
    key = FILING_STATUS_ALIASES.get(key, key)
    if key not in FILING_STATUSES:
        raise InvalidInputError(
            f"Unknown filing status '{value}'. Valid: {', '.join(FILING_STATUSES)}"
        )
    return key


def get_state_info(code: str, rules: Optional[TaxRules] = None) -> StateTaxInfo:
    """Look up state tax info by code (case-insensitive).

    Unknown codes are an error rather than a silent 0% rate.

    Raises:
        InvalidInputError: If the code is malformed
        UnknownStateError: If the code is not in the table
    """
    if rules is None:
        rules = load_tax_rules()
    return rules.state(normalize_state_code(code))


def list_states(rules: Optional[TaxRules] = None, no_tax_only: bool = False) -> list[StateTaxInfo]:
    """All states in the table, sorted by name."""
    if rules is None:
        rules = load_tax_rules()
    states = sorted(rules.states.values(), key=lambda s: s.name)
    if no_tax_only:
        states = [s for s in states if s.has_no_income_tax]
    return states
