"""Settings CLI commands for Career Pay.

Manages settings.json - calculator defaults (tax year, state, hours, filing status).
"""

import click

from careerpay.sdk import (
    KNOWN_SETTINGS,
    PayCalcError,
    get_default_filing_status,
    get_default_hours_per_week,
    get_default_state,
    get_default_tax_year,
    get_settings_path,
    load_settings,
    set_setting,
    unset_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - tax_year: tax year used when --year is not given
    - state: default two-letter state code
    - hours_per_week: default hours for hourly pay
    - filing_status: single, mfj, mfs or hoh
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and the effective defaults."""
    settings_path = get_settings_path()
    try:
        current = load_settings()
        effective = {
            "tax_year": get_default_tax_year(),
            "state": get_default_state(),
            "hours_per_week": get_default_hours_per_week(),
            "filing_status": get_default_filing_status(),
        }
    except PayCalcError as e:
        raise click.ClickException(str(e))

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    click.echo("Effective defaults:")
    for key, value in effective.items():
        source = "" if key in current else " (default)"
        click.echo(f"  {key}: {value}{source}")


@settings.command("set")
@click.argument("key", type=click.Choice(KNOWN_SETTINGS))
@click.argument("value")
def settings_set(key, value):
    """Set a setting.

    Examples:
        career-pay settings set state CA
        career-pay settings set tax_year 2026
    """
    try:
        path = set_setting(key, value)
    except PayCalcError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key}: {load_settings()[key]}")
    click.echo(f"Saved to: {path}")


@settings.command("unset")
@click.argument("key", type=click.Choice(KNOWN_SETTINGS))
def settings_unset(key):
    """Clear a setting, reverting to the built-in default."""
    try:
        removed = unset_setting(key)
    except PayCalcError as e:
        raise click.ClickException(str(e))

    if removed:
        click.echo(f"Cleared {key}.")
    else:
        click.echo(f"{key} was not set.")
