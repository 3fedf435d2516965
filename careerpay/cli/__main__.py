"""Career Pay CLI - Command-line interface for pay and tax calculators."""

import json

import click
from rich.console import Console

from careerpay import __version__
from careerpay.sdk import (
    Cadence,
    PayCalcError,
    calculate_take_home,
    convert_salary,
    get_available_years,
    get_default_filing_status,
    get_default_hours_per_week,
    get_default_state,
    list_states,
    load_tax_rules,
)
from careerpay.sdk.taxes import normalize_filing_status

from .renderers.pay_renderer import (
    render_brackets,
    render_conversion,
    render_pay_result,
    render_states,
)
from .settings_commands import settings as settings_group


CADENCE_CHOICE = click.Choice([c.value for c in Cadence], case_sensitive=False)
CONSOLE_WIDTH = 120
FORMAT_OPTION = click.option(
    "--format", "output_format", type=click.Choice(["table", "json"]), default="table",
    help="Output format (default: table)",
)


@click.group()
@click.version_option(version=__version__, prog_name="career-pay")
def cli():
    """Career Pay - Pay, take-home and salary conversion calculators.

    Defaults for state, hours per week, filing status and tax year are
    read from settings.json:

    \b
    1. CAREER_PAY_CONFIG_PATH environment variable
    2. ~/.config/career-pay/settings.json (XDG default)

    Run 'career-pay settings show' to see the effective defaults.
    """
    pass


cli.add_command(settings_group)


@cli.command("pay")
@click.argument("amount", type=float)
@click.option("--cadence", "-c", type=CADENCE_CHOICE, default="hourly", show_default=True,
              help="Cadence of AMOUNT")
@click.option("--hours", "hours_per_week", type=float, default=None,
              help="Hours per week (default from settings, else 40)")
@click.option("--state", "-s", "state_code", default=None, help="Two-letter state code (default from settings, else TX)")
@click.option("--pretax-pct", type=float, default=0.0, show_default=True,
              help="Pre-tax 401(k) deduction as % of gross (e.g., 5 for 5%)")
@click.option("--pretax-amount", type=float, default=0.0,
              help="Other pre-tax deductions, annual $ (HSA, health insurance, 401(k) dollars)")
@click.option("--posttax-amount", type=float, default=0.0,
              help="Post-tax deductions, annual $ (Roth IRA, child support, ...)")
@click.option("--tips-per-hour", type=float, default=0.0, help="Tips per hour (hourly pay only)")
@click.option("--filing-status", "-f", default=None,
              help="single, mfj, mfs or hoh (default from settings, else single)")
@click.option("--per", "display_cadence", type=CADENCE_CHOICE, default=None,
              help="Cadence to show take-home pay in (default: same as --cadence)")
@click.option("--year", "tax_year", type=int, default=None, help="Tax year (default from settings)")
@FORMAT_OPTION
def pay(amount, cadence, hours_per_week, state_code, pretax_pct, pretax_amount, posttax_amount,
        tips_per_hour, filing_status, display_cadence, tax_year, output_format):
    """Calculate take-home pay after federal, state and FICA taxes.

    \b
    Examples:
      career-pay pay 18 --hours 40 --state TX
      career-pay pay 2000 -c biweekly -s CA --pretax-pct 5 --pretax-amount 2400
      career-pay pay 12 --tips-per-hour 8 -s NV
      career-pay pay 100000 -c annual -s NY -f mfj --per monthly --format json
    """
    try:
        if hours_per_week is None:
            hours_per_week = get_default_hours_per_week()
        result = calculate_take_home(
            amount,
            cadence,
            state_code or get_default_state(),
            hours_per_week=hours_per_week,
            pretax_deduction_percent=pretax_pct,
            filing_status=filing_status or get_default_filing_status(),
            display_cadence=display_cadence,
            tax_year=tax_year,
            pretax_deductions=pretax_amount,
            posttax_deductions=posttax_amount,
            tips_per_hour=tips_per_hour,
        )
    except PayCalcError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    render_pay_result(Console(width=CONSOLE_WIDTH), result)


@cli.command("convert")
@click.argument("amount", type=float)
@click.option("--cadence", "-c", type=CADENCE_CHOICE, default="hourly", show_default=True,
              help="Cadence of AMOUNT")
@click.option("--hours", "hours_per_week", type=float, default=None,
              help="Hours per week (default from settings, else 40)")
@FORMAT_OPTION
def convert(amount, cadence, hours_per_week, output_format):
    """Convert a gross amount between hourly, weekly, monthly and annual.

    \b
    Examples:
      career-pay convert 18
      career-pay convert 52000 -c annual --hours 37.5
    """
    try:
        if hours_per_week is None:
            hours_per_week = get_default_hours_per_week()
        breakdown = convert_salary(amount, cadence, hours_per_week)
    except PayCalcError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(breakdown.to_dict(), indent=2))
        return

    render_conversion(Console(width=CONSOLE_WIDTH), breakdown, hours_per_week)


@cli.command("brackets")
@click.option("--year", "tax_year", type=int, default=None, help="Tax year (default from settings)")
@click.option("--filing-status", "-f", default=None, help="single, mfj, mfs or hoh")
@FORMAT_OPTION
def brackets(tax_year, filing_status, output_format):
    """Show the federal bracket table for a tax year."""
    try:
        rules = load_tax_rules(tax_year)
        status = normalize_filing_status(filing_status or get_default_filing_status())
        bracket_list = rules.brackets_for(status)
    except PayCalcError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        output = {
            "tax_year": rules.year,
            "filing_status": status,
            "brackets": [b.model_dump() for b in bracket_list],
            "social_security": rules.social_security.model_dump(),
            "medicare": rules.medicare.model_dump(),
        }
        click.echo(json.dumps(output, indent=2))
        return

    render_brackets(Console(width=CONSOLE_WIDTH), rules, status)


@cli.command("states")
@click.option("--year", "tax_year", type=int, default=None, help="Tax year (default from settings)")
@click.option("--no-tax-only", is_flag=True, help="Only list states with no income tax")
@FORMAT_OPTION
def states(tax_year, no_tax_only, output_format):
    """List state income tax rates."""
    try:
        rules = load_tax_rules(tax_year)
    except PayCalcError as e:
        raise click.ClickException(str(e))

    state_list = list_states(rules, no_tax_only=no_tax_only)

    if output_format == "json":
        click.echo(json.dumps([s.model_dump() for s in state_list], indent=2))
        return

    render_states(Console(width=CONSOLE_WIDTH), state_list, rules.year)


@cli.command("years")
def years():
    """List tax years with available rules."""
    for year in get_available_years():
        click.echo(year)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
