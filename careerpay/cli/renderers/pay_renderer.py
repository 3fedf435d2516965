"""Rich renderers for calculator results.

Currency/percent formatting lives here: the SDK returns raw floats and
the presentation layer decides on whole dollars vs cents.
"""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from careerpay.sdk import PayResult, PeriodBreakdown, StateTaxInfo, TaxRules


PERIOD_ROWS = [
    ("hourly", "Hourly"),
    ("daily", "Daily"),
    ("weekly", "Weekly"),
    ("biweekly", "Bi-weekly"),
    ("semimonthly", "Semi-monthly"),
    ("monthly", "Monthly"),
    ("annual", "Annual"),
]


def format_currency(value: float, decimals: int = 0) -> str:
    """Format as USD: 1234.5 -> "$1,235" (decimals=0) or "$1,234.50" (decimals=2)."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.{decimals}f}"


def format_percent(value: float, decimals: int = 1) -> str:
    """Format a percentage value: 19.03 -> "19.0%"."""
    return f"{value:.{decimals}f}%"


def format_rate(rate: float, decimals: int = 2) -> str:
    """Format a decimal rate: 0.0725 -> "7.25%"."""
    return f"{rate * 100:.{decimals}f}%".replace(".00%", "%")


def render_pay_result(console: Console, result: PayResult) -> None:
    """Render take-home pay: summary, tax breakdown and per-period table."""
    period = result.display_cadence.value

    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_column("key", style="dim")
    summary.add_column("value")
    summary.add_row("Tax year", str(result.tax_year))
    summary.add_row("State", f"{result.state_name} ({result.state_code})")
    summary.add_row("Filing status", result.filing_status)
    summary.add_row(f"Gross ({period})", format_currency(result.period_gross, 2))
    summary.add_row(f"Take-home ({period})", f"[bold green]{format_currency(result.period_net, 2)}[/bold green]")
    summary.add_row("Effective tax rate", format_percent(result.effective_tax_rate_percent))
    summary.add_row("Marginal federal rate", format_rate(result.marginal_federal_rate))
    console.print(Panel(summary, title="Take-Home Pay", border_style="green"))

    taxes = Table(title="Annual Breakdown", box=box.SIMPLE_HEAVY)
    taxes.add_column("Item")
    taxes.add_column("Annual", justify="right")
    taxes.add_column(period.capitalize(), justify="right")

    rows = [("Gross pay", result.annual_gross)]
    if result.annual_tips:
        rows.append(("  incl. tips", result.annual_tips))
    rows += [
        ("Pre-tax deductions", -result.pretax_deduction),
        ("Federal income tax", -result.federal_tax),
        ("State income tax", -result.state_tax),
        ("Social Security", -result.social_security_tax),
        ("Medicare", -result.medicare_tax),
    ]
    if result.posttax_deduction:
        rows.append(("Post-tax deductions", -result.posttax_deduction))
    for label, annual in rows:
        per_period = annual / result.annual_gross * result.period_gross if result.annual_gross else 0
        taxes.add_row(label, format_currency(annual), format_currency(per_period, 2))

    taxes.add_section()
    taxes.add_row("Total tax", format_currency(result.total_tax), format_currency(result.period_tax, 2))
    taxes.add_row(
        "Take-home pay",
        format_currency(result.annual_net),
        format_currency(result.period_net, 2),
        style="bold",
    )
    console.print(taxes)

    console.print(_period_table("Pay by Period", [
        ("Gross", result.gross_by_period),
        ("Take-home", result.net_by_period),
    ]))


def render_conversion(console: Console, breakdown: PeriodBreakdown, hours_per_week: float) -> None:
    """Render a salary conversion across all cadences."""
    table = _period_table("Salary Conversion", [("Gross", breakdown)])
    table.caption = f"Based on {hours_per_week:g} hours/week, 52 weeks, 260 working days"
    console.print(table)


def render_brackets(console: Console, rules: TaxRules, filing_status: str) -> None:
    """Render the federal bracket table for a filing status."""
    table = Table(title=f"Federal Brackets {rules.year} ({filing_status})", box=box.SIMPLE_HEAVY)
    table.add_column("Rate", justify="right", style="cyan")
    table.add_column("From", justify="right")
    table.add_column("To", justify="right")

    for bracket in rules.brackets_for(filing_status):
        upper = "and up" if bracket.upper_bound is None else format_currency(bracket.upper_bound)
        table.add_row(format_rate(bracket.rate), format_currency(bracket.lower_bound), upper)

    ss = rules.social_security
    table.caption = (
        f"Social Security {format_rate(ss.tax_rate)} up to {format_currency(ss.wage_cap)}; "
        f"Medicare {format_rate(rules.medicare.tax_rate)} uncapped"
    )
    console.print(table)


def render_states(console: Console, states: list[StateTaxInfo], year: int) -> None:
    """Render the state rate table."""
    table = Table(title=f"State Income Tax Rates {year}", box=box.SIMPLE_HEAVY)
    table.add_column("Code", style="cyan")
    table.add_column("State")
    table.add_column("Rate", justify="right")

    for state in states:
        rate = "[green]none[/green]" if state.has_no_income_tax else format_rate(state.rate)
        table.add_row(state.code, state.name, rate)

    console.print(table)


def _period_table(title: str, columns: list[tuple[str, PeriodBreakdown]]) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("Period")
    for label, _ in columns:
        table.add_column(label, justify="right")

    for key, label in PERIOD_ROWS:
        table.add_row(label, *[format_currency(getattr(b, key), 2) for _, b in columns])

    return table
