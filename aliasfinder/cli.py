import logging

import typer
from typer.core import TyperCommand

from aliasfinder import config, hooks
from aliasfinder.core import backends, search, suggest
from aliasfinder.errors import AliasFinderError, UsageError
from aliasfinder.lib import output, readme
from aliasfinder.lib.errors import error_feedback
from aliasfinder.models import MatchRequest
from aliasfinder.snapshot import load_snapshot

logger = logging.getLogger(__name__)

LOG_FORMAT = "[alias-finder] %(name)s: %(message)s"

app = typer.Typer(add_completion=False)


def is_clustered_option(token: str) -> bool:
    """`-la` style tokens, which click would split into known short flags."""
    return token.startswith("-") and not token.startswith("--") and len(token) > 2


class FindCommand(TyperCommand):
    """Keep clustered short options away from the parser.

    They are recorded in ctx.meta and reported as unknown options by the command.
    """

    def parse_args(self, ctx, args):
        kept, clustered = [], []
        for i, token in enumerate(args):
            if token == "--":
                kept.extend(args[i:])
                break
            if is_clustered_option(token):
                clustered.append(token)
            else:
                kept.append(token)
        ctx.meta["clustered_options"] = clustered
        return super().parse_args(ctx, kept)


def configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)


def reject_unknown_options(words: list[str]) -> None:
    """Anything dash-prefixed that typer did not consume is an unknown option."""
    for word in words:
        if word.startswith("-"):
            raise UsageError(f"Unknown option: {word}")


def run_automatic(
    command_text: str,
    source: str | None,
    cheaper: bool | None,
    engine: str | None,
    debug: bool | None,
    json_output: bool,
) -> None:
    """Print the best alias for a command about to run. Never fails the caller."""
    try:
        settings = config.load_settings()
        configure_logging(settings.resolve("debug", debug))
        request = MatchRequest.from_flags(
            command_text, cheaper=settings.resolve("cheaper", cheaper), automatic=True
        )
        snapshot = load_snapshot(source)
        backend = backends.select_backend(engine or settings.engine)
    except (AliasFinderError, ValueError) as e:
        logger.debug("automatic suggestion skipped: %s", e)
        return

    tip = suggest.suggest(
        snapshot,
        request.command_text,
        cheaper=request.cheaper,
        max_rounds=settings.max_rounds,
        backend=backend,
    )
    if tip is None:
        return
    if json_output:
        typer.echo(output.out_json({"best": tip.best.to_dict(), "others": tip.others}))
        return
    typer.echo(suggest.format_suggestion(tip))


@app.command(
    cls=FindCommand,
    context_settings={"ignore_unknown_options": True},
    add_help_option=False,
)
@error_feedback
def find(
    ctx: typer.Context,
    words: list[str] = typer.Argument(None, help="Command to look up aliases for."),
    exact: bool | None = typer.Option(None, "--exact/--no-exact", "-e", help="Exact matches only."),
    longer: bool | None = typer.Option(
        None, "--longer/--no-longer", "-l", help="Aliases whose expansion contains the command."
    ),
    cheaper: bool | None = typer.Option(
        None, "--cheaper/--no-cheaper", "-c", help="Aliases shorter than the command."
    ),
    automatic: bool = typer.Option(False, "--automatic", "-a", help="Suggest one best alias."),
    source: str = typer.Option(None, "--from", help="Alias listing file, '-' for stdin."),
    engine: str = typer.Option(None, "--engine", help="auto, python or rg."),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    debug: bool | None = typer.Option(None, "--debug/--no-debug", help="Log search steps."),
    print_hook: str = typer.Option(None, "--print-hook", help="Print shell integration."),
    help: bool = typer.Option(False, "--help", "-h", help="Show help"),
):
    """Find shell aliases for commands."""
    if help:
        typer.echo(readme.root())
        raise typer.Exit()

    if print_hook:
        typer.echo(hooks.script(print_hook))
        raise typer.Exit()

    clustered = ctx.meta.get("clustered_options", [])
    if not words and not clustered:
        typer.echo(readme.root())
        raise typer.Exit()

    command_text = " ".join(words or [])

    if automatic:
        if clustered:
            logger.debug("ignoring unknown options: %s", " ".join(clustered))
        run_automatic(command_text, source, cheaper, engine, debug, json_output)
        return

    reject_unknown_options([*clustered, *(words or [])])
    settings = config.load_settings()
    configure_logging(settings.resolve("debug", debug))
    request = MatchRequest.from_flags(
        command_text,
        exact=settings.resolve("exact", exact),
        longer=settings.resolve("longer", longer),
        cheaper=settings.resolve("cheaper", cheaper),
    )
    backend = backends.select_backend(engine or settings.engine)
    snapshot = load_snapshot(source)
    logger.debug("%d alias(es) loaded; request %s", len(snapshot), request)

    result = search.find_aliases(snapshot, request, backend)
    if not result:
        raise typer.Exit(1)
    output.echo_matches(result, json_output)


def main() -> None:
    """Entry point for alias-finder command."""
    try:
        app()
    except SystemExit:
        raise
    except BaseException as e:
        raise SystemExit(1) from e
