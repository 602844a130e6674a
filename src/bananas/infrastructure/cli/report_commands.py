"""CLI commands for inventory reports."""

from __future__ import annotations

import click

from bananas.application.inventory_report import InventoryReportHandler
from bananas.domain.exceptions import DomainException


@click.command("report")
@click.option(
    "--freshness", "freshness_levels", multiple=True, type=float,
    help="Freshness of a banana to stock (repeatable).",
)
@click.option("--user", "users", multiple=True, help="User to hand a banana to (repeatable).")
@click.option("--decay", default=0.0, show_default=True, type=float, help="Freshness lost before the report.")
@click.option("--take", is_flag=True, help="Remove distributed bananas from stock.")
def report(
    freshness_levels: tuple[float, ...],
    users: tuple[str, ...],
    decay: float,
    take: bool,
) -> None:
    """Stock bananas, clear spoiled ones and distribute the rest."""
    handler = InventoryReportHandler(remove_on_distribute=take)

    try:
        dto = handler.handle(freshness_levels, users=users, decay=decay)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto.items:
        click.echo(f"{'ID':>4} {'Freshness':>10}")
        click.echo("-" * 15)
        for item in dto.items:
            click.echo(f"{item.id:>4} {item.freshness:>10g}")
    else:
        click.echo("No bananas in stock.")

    if dto.spoiled:
        ids = ", ".join(str(item.id) for item in dto.spoiled)
        click.echo(f"Spoiled and removed: {ids}")

    for line in dto.distribution:
        click.echo(f"{line.user} <- banana {line.item_id} (freshness {line.freshness:g})")

    click.echo(f"Total: {dto.total}  Average freshness: {dto.average_freshness:.2f}")
