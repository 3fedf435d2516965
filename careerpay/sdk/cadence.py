"""Pay cadence conversion.

Converts an amount expressed at any pay cadence (hourly, weekly, biweekly,
semimonthly, monthly, annual) to an annual figure and back. Every calculator
uses these constants, so $18/hr at 40 hrs/week is $37,440/year everywhere.
"""

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional, Union

from .errors import InvalidInputError


class Cadence(str, Enum):
    HOURLY = "hourly"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    SEMIMONTHLY = "semimonthly"
    MONTHLY = "monthly"
    ANNUAL = "annual"


# Pay periods by frequency
PERIODS_PER_YEAR = {
    Cadence.WEEKLY: 52,
    Cadence.BIWEEKLY: 26,
    Cadence.SEMIMONTHLY: 24,
    Cadence.MONTHLY: 12,
    Cadence.ANNUAL: 1,
}

WEEKS_PER_YEAR = 52
WORKING_DAYS_PER_YEAR = 260  # 5-day weeks
DEFAULT_HOURS_PER_WEEK = 40
MAX_HOURS_PER_WEEK = 80

CADENCE_ALIASES = {
    "bi-weekly": Cadence.BIWEEKLY,
    "semi-monthly": Cadence.SEMIMONTHLY,
    "yearly": Cadence.ANNUAL,
}


def parse_cadence(value: Union[Cadence, str]) -> Cadence:
    """Parse a cadence name (case-insensitive).

    Raises:
        InvalidInputError: If the cadence is not recognized
    """
    if isinstance(value, Cadence):
        return value
    if not isinstance(value, str):
        raise InvalidInputError(f"Cadence must be a string, got {type(value).__name__}")

    key = value.strip().lower().replace("_", "-")
    if key in CADENCE_ALIASES:
        return CADENCE_ALIASES[key]
    try:
        return Cadence(key)
    except ValueError:
        valid = ", ".join(c.value for c in Cadence)
        raise InvalidInputError(f"Unknown cadence '{value}'. Valid: {valid}") from None


def check_amount(amount: float, name: str = "amount") -> float:
    """Reject negative, non-numeric and non-finite amounts."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidInputError(f"{name} must be a number, got {type(amount).__name__}")
    if not math.isfinite(amount):
        raise InvalidInputError(f"{name} must be finite, got {amount}")
    if amount < 0:
        raise InvalidInputError(f"{name} cannot be negative, got {amount}")
    return float(amount)


def check_hours_per_week(hours_per_week: Optional[float]) -> float:
    """Hours used for hourly pay: default 40, must be in (0, 80].

    Raises:
        InvalidInputError: If hours are zero, negative, non-finite or above 80
    """
    if hours_per_week is None:
        return float(DEFAULT_HOURS_PER_WEEK)
    if isinstance(hours_per_week, bool) or not isinstance(hours_per_week, (int, float)):
        raise InvalidInputError(f"hours_per_week must be a number, got {type(hours_per_week).__name__}")
    if not math.isfinite(hours_per_week) or hours_per_week <= 0:
        raise InvalidInputError(f"hours_per_week must be greater than 0, got {hours_per_week}")
    if hours_per_week > MAX_HOURS_PER_WEEK:
        raise InvalidInputError(
            f"hours_per_week cannot exceed {MAX_HOURS_PER_WEEK}, got {hours_per_week}"
        )
    return float(hours_per_week)


def check_optional_hours(hours_per_week: Optional[float]) -> Optional[float]:
    """Hours given with non-hourly pay: None or 0 to 80.

    Zero is accepted here and yields an hourly figure of 0.

    Raises:
        InvalidInputError: If hours are negative, non-finite or above 80
    """
    if hours_per_week is None:
        return None
    hours = check_amount(hours_per_week, "hours_per_week")
    if hours > MAX_HOURS_PER_WEEK:
        raise InvalidInputError(
            f"hours_per_week cannot exceed {MAX_HOURS_PER_WEEK}, got {hours_per_week}"
        )
    return hours


def annualize(amount: float, cadence: Union[Cadence, str], hours_per_week: Optional[float] = None) -> float:
    """Convert an amount at the given cadence to an annual figure.

    hourly: amount * hours_per_week * 52; other cadences multiply by their
    periods per year (52/26/24/12/1). hours_per_week is only read for hourly.

    Raises:
        InvalidInputError: Negative/non-finite amount, bad hours for hourly,
            or unknown cadence
    """
    cadence = parse_cadence(cadence)
    amount = check_amount(amount)

    if cadence is Cadence.HOURLY:
        hours = check_hours_per_week(hours_per_week)
        return amount * hours * WEEKS_PER_YEAR

    return amount * PERIODS_PER_YEAR[cadence]


def distribute(annual: float, cadence: Union[Cadence, str], hours_per_week: Optional[float] = None) -> float:
    """Convert an annual figure to the given cadence (inverse of annualize).

    The hourly figure is 0 when hours_per_week is 0, since no hours
    means no hourly rate rather than an error.
    """
    cadence = parse_cadence(cadence)

    if cadence is Cadence.HOURLY:
        hours = DEFAULT_HOURS_PER_WEEK if hours_per_week is None else hours_per_week
        if hours <= 0:
            return 0.0
        return annual / (hours * WEEKS_PER_YEAR)

    return annual / PERIODS_PER_YEAR[cadence]


@dataclass(frozen=True)
class PeriodBreakdown:
    """One annual figure expressed at every cadence."""

    hourly: float
    daily: float
    weekly: float
    biweekly: float
    semimonthly: float
    monthly: float
    annual: float

    @classmethod
    def from_annual(cls, annual: float, hours_per_week: Optional[float] = None) -> "PeriodBreakdown":
        return cls(
            hourly=distribute(annual, Cadence.HOURLY, hours_per_week),
            daily=annual / WORKING_DAYS_PER_YEAR,
            weekly=distribute(annual, Cadence.WEEKLY),
            biweekly=distribute(annual, Cadence.BIWEEKLY),
            semimonthly=distribute(annual, Cadence.SEMIMONTHLY),
            monthly=distribute(annual, Cadence.MONTHLY),
            annual=annual,
        )

    def for_cadence(self, cadence: Union[Cadence, str]) -> float:
        return getattr(self, parse_cadence(cadence).value)

    def to_dict(self) -> dict:
        return asdict(self)


def convert_salary(
    amount: float,
    cadence: Union[Cadence, str],
    hours_per_week: Optional[float] = DEFAULT_HOURS_PER_WEEK,
) -> PeriodBreakdown:
    """Salary converter: express a gross amount at every cadence (no tax).

    Args:
        amount: Gross pay at ``cadence``
        cadence: Cadence of the input amount
        hours_per_week: Hours used for the hourly input/output. Required to be
            in (0, 80] when the input is hourly; otherwise 0 to 80, where 0
            yields an hourly figure of 0.

    Returns:
        PeriodBreakdown of the gross amount
    """
    cadence = parse_cadence(cadence)
    if cadence is Cadence.HOURLY:
        annual = annualize(amount, cadence, hours_per_week)
    else:
        annual = annualize(amount, cadence)
        check_optional_hours(hours_per_week)
    return PeriodBreakdown.from_annual(annual, hours_per_week)
