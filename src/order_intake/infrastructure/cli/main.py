import click

from order_intake.infrastructure.cli.doctor_commands import doctor
from order_intake.infrastructure.cli.notify_commands import notify_test
from order_intake.infrastructure.cli.order_commands import order_show
from order_intake.infrastructure.config import Settings
from order_intake.infrastructure.logging_config import setup_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Order Intake — operator tools"""
    settings = Settings()
    setup_logging(settings.log_level, json_format=settings.log_json)
    ctx.obj = settings


@cli.group()
def orders() -> None:
    """Inspect stored orders."""


@cli.group()
def notify() -> None:
    """Check the admin alert channel."""


# Register subcommands
orders.add_command(order_show)
notify.add_command(notify_test)
cli.add_command(doctor)
