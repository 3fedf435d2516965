"""Exceptions raised by the Career Pay SDK.

Every error derives from PayCalcError so callers (CLI, MCP server) can
catch SDK failures in one place. Input errors also derive from the
matching builtin so plain ``except ValueError`` keeps working.
"""


class PayCalcError(Exception):
    """Base class for all Career Pay errors."""
    pass


class InvalidInputError(PayCalcError, ValueError):
    """Raised when a calculator input is out of range or malformed."""
    pass


class UnknownStateError(PayCalcError, LookupError):
    """Raised when a state code is not in the tax table for the year."""

    def __init__(self, state_code: str, year: int = None):
        self.state_code = state_code
        self.year = year
        if year is not None:
            message = f"Unknown state code '{state_code}' for tax year {year}"
        else:
            message = f"Unknown state code '{state_code}'"
        super().__init__(message)


class TaxRulesNotFoundError(PayCalcError, FileNotFoundError):
    """Raised when no tax rules file exists for the requested year."""
    pass


class ConfigError(PayCalcError):
    """Raised when settings.json cannot be read."""
    pass


class SettingsValidationError(PayCalcError, ValueError):
    """Raised when a setting value is rejected."""
    pass
