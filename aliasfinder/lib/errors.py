"""CLI error handling: wrap commands to report errors instead of tracebacks."""

from functools import wraps

import typer
from click.exceptions import Exit

from aliasfinder.errors import SnapshotError, UsageError


def report_usage_error(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    typer.echo("Use --help for usage information.", err=True)


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting.

    Every failure path ends in exit status 1 with a message on stderr.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit, typer.Exit):
            raise
        except UsageError as e:
            report_usage_error(str(e))
            raise typer.Exit(1) from e
        except SnapshotError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e
        except (ValueError, KeyError, TypeError) as e:
            typer.echo(f"Invalid input: {e}", err=True)
            raise typer.Exit(1) from e
        except OSError as e:
            typer.echo(f"File error: {e}", err=True)
            raise typer.Exit(1) from e
        except Exception as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper
