import logging

import click

from bananas.infrastructure.cli.report_commands import report

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log every inventory action.")
def cli(verbose: bool) -> None:
    """Bananas — perishable inventory manager"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)


# Register subcommands
cli.add_command(report)
