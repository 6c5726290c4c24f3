"""CLI commands for the admin alert channel."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from order_intake.domain.exceptions import DomainException
from order_intake.infrastructure.bootstrap import alert_config, notifier


@click.command("test")
@click.option("--message", default=None, help="Custom text instead of the default test alert.")
@click.pass_obj
def notify_test(settings, message: str | None) -> None:
    """Send a test alert to the configured admin recipient."""
    if message is None:
        sent_at = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
        message = f"Test alert from order intake ({sent_at})"

    try:
        config = alert_config(settings)
        message_id = notifier(settings).send(config.recipient, message)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Alert sent to {config.recipient} (id={message_id})")
