"""Helpers shared by the CLI commands."""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple, Type, Union

import click

from .._services import AnnotatorForClinicalDataAcdV1, InsightsForMedicalLiteratureV1

ServiceClient = Union[AnnotatorForClinicalDataAcdV1, InsightsForMedicalLiteratureV1]

SERVICES: Dict[str, Type[ServiceClient]] = {
    "acd": AnnotatorForClinicalDataAcdV1,
    "iml": InsightsForMedicalLiteratureV1,
}


def parse_value(raw: str) -> Any:
    """Parse a parameter value as JSON, falling back to the plain string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def split_assignment(option: str, assignment: str) -> Tuple[str, str]:
    name, sep, value = assignment.partition("=")
    if not sep or not name:
        raise click.BadParameter(
            f"expected NAME=VALUE, got '{assignment}'", param_hint=option
        )
    return name.strip(), value


def parse_params(assignments: Iterable[str]) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    for assignment in assignments:
        name, value = split_assignment("--param", assignment)
        params[name] = parse_value(value)
    return params


def read_files(assignments: Iterable[str]) -> Dict[str, bytes]:
    files: Dict[str, bytes] = {}
    for assignment in assignments:
        name, value = split_assignment("--file", assignment)
        path = Path(value).expanduser()
        if not path.is_file():
            raise click.BadParameter(f"no such file: {value}", param_hint="--file")
        files[name] = path.read_bytes()
    return files


def echo_result(result: Any) -> None:
    if result is None:
        return
    if isinstance(result, str):
        click.echo(result)
    else:
        click.echo(json.dumps(result, indent=2))
