"""CLI commands for stored orders."""

from __future__ import annotations

import click

from order_intake.application.dto import OrderDTO
from order_intake.domain.exceptions import DomainException
from order_intake.infrastructure.bootstrap import show_order_handler


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Customer':<10} {dto.customer_name}")
    click.echo(f"  {'Phone':<10} {dto.phone_number}")
    click.echo(f"  {'Address':<10} {dto.address}")
    click.echo(f"  {'Items':<10} {dto.items}")
    click.echo(f"  {'Quantity':<10} {dto.quantity}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings, order_id: int) -> None:
    """Show details of a stored order."""
    try:
        dto = show_order_handler(settings).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
