import click

from .._services._acd_operations import ACD_OPERATIONS
from .._services._iml_operations import IML_OPERATIONS

_TABLES = {"acd": ACD_OPERATIONS, "iml": IML_OPERATIONS}


@click.command()
@click.argument("service", type=click.Choice(sorted(_TABLES), case_sensitive=False))
def operations(service: str) -> None:
    r"""List the operations of a service.

    \b
    Examples:
        whcs operations acd
        whcs operations iml
    """
    table = _TABLES[service.lower()]
    width = max(len(op.name) for op in table)
    for op in table:
        click.echo(f"{op.name:<{width}}  {op.method:<6} {op.path}  {op.summary}")
        required = ", ".join(op.required_names)
        if required:
            click.echo(f"{'':<{width}}  required: {required}")
