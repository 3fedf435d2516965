"""Pydantic schemas for tax rules validation.

These schemas validate the tax_rules/*.yaml files and provide typed access
to tax parameters like the federal brackets, SS wage cap and state rates.
"""

import math
from types import MappingProxyType
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from ..errors import InvalidInputError, UnknownStateError


FilingStatus = Literal["single", "mfj", "mfs", "hoh"]

FILING_STATUSES = ("single", "mfj", "mfs", "hoh")


class TaxBracket(BaseModel):
    """Single marginal tax bracket.

    ``upper_bound`` of None means the bracket is unbounded (top bracket).
    """
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    lower_bound: float = Field(..., alias="min", ge=0, description="Income where the bracket starts")
    upper_bound: Optional[float] = Field(default=None, alias="max", description="Income where the bracket ends")
    rate: float = Field(..., ge=0, le=1, description="Marginal rate as decimal")

    @model_validator(mode="after")
    def check_bounds(self) -> "TaxBracket":
        if self.upper_bound is not None and self.upper_bound <= self.lower_bound:
            raise ValueError(
                f"Bracket max ({self.upper_bound}) must be greater than min ({self.lower_bound})"
            )
        return self

    @property
    def width(self) -> float:
        """Amount of income the bracket holds (inf for the top bracket)."""
        if self.upper_bound is None:
            return math.inf
        return self.upper_bound - self.lower_bound


class FilingStatusRules(BaseModel):
    """Tax rules for a filing status (single, MFJ, ...)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    tax_brackets: tuple[TaxBracket, ...]

    @field_validator("tax_brackets")
    @classmethod
    def check_contiguous(cls, brackets: tuple[TaxBracket, ...]) -> tuple[TaxBracket, ...]:
        """Brackets must start at 0, be contiguous, and end unbounded."""
        if not brackets:
            raise ValueError("tax_brackets must contain at least one bracket")

        if brackets[0].lower_bound != 0:
            raise ValueError("First bracket must start at 0")

        for prev, current in zip(brackets, brackets[1:]):
            if prev.upper_bound is None:
                raise ValueError("Only the last bracket may omit max")
            if current.lower_bound != prev.upper_bound:
                raise ValueError(
                    f"Brackets must be contiguous: bracket starting at {current.lower_bound} "
                    f"follows one ending at {prev.upper_bound}"
                )

        if brackets[-1].upper_bound is not None:
            raise ValueError("Last bracket must be unbounded (omit max)")

        return brackets


class SocialSecurityRules(BaseModel):
    """Social Security tax rules."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    wage_cap: float = Field(..., gt=0, description="SS wage base (max taxable)")
    tax_rate: float = Field(..., ge=0, le=1, description="SS tax rate (employee portion)")


class MedicareRules(BaseModel):
    """Medicare tax rules (flat, uncapped)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    tax_rate: float = Field(..., ge=0, le=1, description="Medicare tax rate (employee portion)")


class StateTaxInfo(BaseModel):
    """Flat state income tax rate."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    code: str = Field(..., pattern=r"^[A-Z]{2}$")
    name: str
    rate: float = Field(default=0, ge=0, le=1, description="Flat rate applied to taxable income")
    has_no_income_tax: bool = Field(default=False, alias="no_income_tax")

    @model_validator(mode="after")
    def check_no_tax_rate(self) -> "StateTaxInfo":
        if self.has_no_income_tax and self.rate != 0:
            raise ValueError(f"{self.code}: no_income_tax states must have rate 0")
        return self


class TaxRules(BaseModel):
    """Complete tax rules for a year.

    Loaded rules are shared through a per-year cache, so the federal and
    state tables are exposed as read-only mappings and brackets as tuples.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)  # Allow unknown fields for forward compat

    year: int
    federal: Mapping[FilingStatus, FilingStatusRules]
    social_security: SocialSecurityRules
    medicare: MedicareRules
    states: Mapping[str, StateTaxInfo]

    @model_validator(mode="before")
    @classmethod
    def fill_state_codes(cls, data):
        """State entries are keyed by code in YAML; copy the key into each entry."""
        if isinstance(data, dict) and isinstance(data.get("states"), dict):
            states = {}
            for code, info in data["states"].items():
                if isinstance(info, dict):
                    info = {"code": code, **info}
                states[code] = info
            data = {**data, "states": states}
        return data

    @model_validator(mode="after")
    def check_single_present(self) -> "TaxRules":
        if "single" not in self.federal:
            raise ValueError("federal rules must define the 'single' filing status")
        for code, info in self.states.items():
            if info.code != code:
                raise ValueError(f"State key '{code}' does not match code '{info.code}'")
        return self

    @model_validator(mode="after")
    def freeze_tables(self) -> "TaxRules":
        # frozen=True only blocks reassignment; wrap the containers too
        object.__setattr__(self, "federal", MappingProxyType(dict(self.federal)))
        object.__setattr__(self, "states", MappingProxyType(dict(self.states)))
        return self

    @field_serializer("federal", "states")
    def serialize_table(self, table: Mapping) -> dict:
        return dict(table)

    def brackets_for(self, filing_status: str = "single") -> tuple[TaxBracket, ...]:
        """Federal brackets for a filing status.

        Raises:
            InvalidInputError: If no table exists for the filing status
        """
        rules = self.federal.get(filing_status)
        if rules is None:
            raise InvalidInputError(
                f"No federal brackets for filing status '{filing_status}' in tax year {self.year}"
            )
        return rules.tax_brackets

    def state(self, code: str) -> StateTaxInfo:
        """Look up a state by (already normalized) code.

        Raises:
            UnknownStateError: If the code is not in this year's table
        """
        info = self.states.get(code)
        if info is None:
            raise UnknownStateError(code, self.year)
        return info
