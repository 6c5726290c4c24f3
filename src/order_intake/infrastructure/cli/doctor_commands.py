"""Configuration diagnostics."""

from __future__ import annotations

import click


@click.command("doctor")
@click.pass_obj
def doctor(settings) -> None:
    """Show the configured backends and any missing settings."""
    click.echo(f"  {'Order store':<14} {settings.store_backend}")
    if settings.store_backend == "json":
        click.echo(f"  {'Data file':<14} {settings.data_dir / 'orders.json'}")
    click.echo(f"  {'Notifier':<14} {settings.notifier_backend}")
    click.echo(f"  {'Admin':<14} {settings.admin_phone_number or '-'}")

    missing = settings.missing_settings()
    if missing:
        click.echo()
        for name in missing:
            click.echo(f"Missing: {name}")
        raise click.ClickException("Configuration incomplete")

    click.echo()
    click.echo("Configuration OK")
