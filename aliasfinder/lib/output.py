import json as json_lib

import typer

from aliasfinder.models import MatchResult


def out_json(data) -> str:
    return json_lib.dumps(data, indent=2)


def echo_matches(result: MatchResult, json_output: bool = False) -> None:
    """Print one listing line per match, or a JSON array."""
    if json_output:
        typer.echo(out_json([alias.to_dict() for alias in result]))
        return
    for line in result.lines:
        typer.echo(line)
