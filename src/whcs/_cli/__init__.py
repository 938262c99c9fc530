import click

from .._version import __version__
from .cli_call import call
from .cli_operations import operations


@click.group()
@click.version_option(__version__, prog_name="whcs")
def cli() -> None:
    """Command line client for the clinical data annotation and medical
    literature insights services."""
    pass


cli.add_command(operations)
cli.add_command(call)
