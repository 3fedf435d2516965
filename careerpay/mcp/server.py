"""Career Pay MCP Server - FastMCP implementation for calculator tools."""

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from careerpay.sdk import (
    InvalidInputError,
    PayCalcError,
    calculate_take_home,
    convert_salary as sdk_convert_salary,
    get_available_years,
    get_state_info,
    load_tax_rules,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("career-pay")


# --- Tools ---

@mcp.tool()
async def calculate_take_home_pay(
    amount: float = Field(description="Gross pay amount at the given cadence"),
    cadence: str = Field(default="hourly", description="hourly, weekly, biweekly, semimonthly, monthly or annual"),
    state: str = Field(default="TX", description="Two-letter state code (e.g., 'CA')"),
    hours_per_week: float | None = Field(default=None, description="Hours per week for hourly pay (default 40)"),
    pretax_deduction_percent: float = Field(default=0, description="Pre-tax 401(k) deduction as % of gross (0-100)"),
    filing_status: str = Field(default="single", description="single, mfj, mfs or hoh"),
    display_cadence: str | None = Field(default=None, description="Cadence for the per-period result (default: same as cadence)"),
    pretax_deductions: float = Field(default=0, description="Other annual pre-tax deductions in dollars (HSA, health insurance, 401(k) dollars)"),
    posttax_deductions: float = Field(default=0, description="Annual post-tax deductions in dollars (reduce net pay only)"),
    tips_per_hour: float = Field(default=0, description="Tips per hour, added to hourly pay"),
    tax_year: int | None = Field(default=None, description="Tax year (default: configured year)"),
) -> dict[str, Any]:
    """Calculate take-home pay after federal, state, Social Security and Medicare taxes."""
    try:
        result = calculate_take_home(
            amount,
            cadence,
            state,
            hours_per_week=hours_per_week,
            pretax_deduction_percent=pretax_deduction_percent,
            filing_status=filing_status,
            display_cadence=display_cadence,
            tax_year=tax_year,
            pretax_deductions=pretax_deductions,
            posttax_deductions=posttax_deductions,
            tips_per_hour=tips_per_hour,
        )
        return result.to_dict()

    except PayCalcError as e:
        return {"error": str(e)}
    except Exception as e:
        logger.error(f"Error calculating take-home pay: {e}")
        return {"error": str(e)}


@mcp.tool()
async def convert_salary(
    amount: float = Field(description="Gross pay amount at the given cadence"),
    cadence: str = Field(default="hourly", description="hourly, weekly, biweekly, semimonthly, monthly or annual"),
    hours_per_week: float = Field(default=40, description="Hours worked per week"),
) -> dict[str, Any]:
    """Convert a gross pay amount to hourly, daily, weekly, biweekly, semimonthly, monthly and annual figures."""
    try:
        return sdk_convert_salary(amount, cadence, hours_per_week).to_dict()
    except InvalidInputError as e:
        return {"error": str(e)}
    except Exception as e:
        logger.error(f"Error converting salary: {e}")
        return {"error": str(e)}


@mcp.tool()
async def get_state_tax_info(
    state: str = Field(description="Two-letter state code (e.g., 'CA')"),
    tax_year: int | None = Field(default=None, description="Tax year (default: configured year)"),
) -> dict[str, Any]:
    """Get the flat income tax rate used for a state."""
    try:
        rules = load_tax_rules(tax_year)
        info = get_state_info(state, rules)
        return {"tax_year": rules.year, **info.model_dump()}
    except PayCalcError as e:
        return {"error": str(e)}
    except Exception as e:
        logger.error(f"Error looking up state {state}: {e}")
        return {"error": str(e)}


@mcp.tool()
async def list_tax_years() -> dict[str, Any]:
    """List tax years with available rules."""
    return {"years": get_available_years()}


# --- Resources (optional, for browsing) ---

@mcp.resource("careerpay://tax-rules/{year}")
async def tax_rules_resource(year: str) -> str:
    """Full tax rules for a year as JSON."""
    try:
        return load_tax_rules(year).model_dump_json(indent=2)
    except PayCalcError as e:
        return json.dumps({"error": str(e)})


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
