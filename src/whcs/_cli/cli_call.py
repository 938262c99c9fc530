import asyncio
import json
from typing import Any, Dict, Optional, TextIO, Tuple

import click

from .._utils._operation import ParameterRole
from ..models.errors import ApiError, WhcsError
from ..models.response import DetailedResponse
from ._common import SERVICES, echo_result, parse_params, read_files


def _apply_body(client: Any, operation: str, body: Any, params: Dict[str, Any]) -> None:
    spec = client.operations.get(operation)
    if spec is None:
        raise click.UsageError(f"Unknown operation '{operation}'")

    opaque = spec.by_role(ParameterRole.BODY)
    if opaque:
        params.setdefault(opaque[0].name, body)
        return

    if not spec.by_role(ParameterRole.BODY_FIELD):
        raise click.UsageError(f"Operation '{operation}' takes no request body")
    if not isinstance(body, dict):
        raise click.UsageError("--body-json must contain a JSON object")
    for name, value in body.items():
        params.setdefault(name, value)


async def _call(
    service: str,
    operation: str,
    params: Dict[str, Any],
    body: Any,
    version: str,
    url: Optional[str],
    debug: bool,
) -> DetailedResponse:
    async with SERVICES[service](version, service_url=url, debug=debug) as client:
        if body is not None:
            _apply_body(client, operation, body, params)
        return await client.invoke(operation, **params)


@click.command()
@click.argument("service", type=click.Choice(sorted(SERVICES), case_sensitive=False))
@click.argument("operation")
@click.option(
    "--param",
    "-p",
    "params",
    multiple=True,
    metavar="NAME=VALUE",
    help="Operation parameter; values are parsed as JSON when possible",
)
@click.option(
    "--file",
    "-f",
    "files",
    multiple=True,
    metavar="NAME=PATH",
    help="Upload a file as a form-data parameter",
)
@click.option(
    "--body-json",
    type=click.File("r"),
    help="JSON file with the request body",
)
@click.option(
    "--version",
    "version",
    required=True,
    envvar="WHCS_API_VERSION",
    help="API version date (YYYY-MM-DD)",
)
@click.option("--url", default=None, help="Service URL override")
@click.option("--debug", is_flag=True, help="Log requests to stderr")
def call(
    service: str,
    operation: str,
    params: Tuple[str, ...],
    files: Tuple[str, ...],
    body_json: Optional[TextIO],
    version: str,
    url: Optional[str],
    debug: bool,
) -> None:
    r"""Call an operation of a service and print the result.

    Credentials are read from the environment or the credentials file, for
    example ANNOTATOR_FOR_CLINICAL_DATA_ACD_BEARER_TOKEN.

    \b
    Examples:
        whcs call acd get_profiles --version 2023-01-01
        whcs call acd get_profile -p id=wh_acd.ibm_clinical_insights_v1.0_profile --version 2023-01-01
        whcs call iml typeahead -p corpus=medline -p query=heart -p 'ontologies=["concepts"]' --version 2023-01-01
        whcs call iml search -p corpus=medline --body-json query.json --version 2023-01-01
        whcs call acd cartridges_post_multipart -f archive_file=cartridge.zip --version 2023-01-01
    """
    arguments = parse_params(params)
    arguments.update(read_files(files))
    body = json.load(body_json) if body_json is not None else None

    try:
        response = asyncio.run(
            _call(service.lower(), operation, arguments, body, version, url, debug)
        )
    except ApiError as e:
        raise click.ClickException(str(e)) from e
    except (WhcsError, TypeError, ValueError) as e:
        raise click.UsageError(str(e)) from e

    echo_result(response.result)
