"""Alias snapshots: parse the shell's alias listing into AliasDefinitions."""

import logging
import os
import re
import subprocess
import sys
from collections.abc import Iterable
from pathlib import Path

from aliasfinder.errors import SnapshotError
from aliasfinder.models import AliasDefinition

logger = logging.getLogger(__name__)

LISTING_LINE = re.compile(r"^\s*(?:alias\s+)?(?P<name>[^=\s]+)=(?P<value>.*)$", re.DOTALL)
SHELL_TIMEOUT = 5


def unquote(value: str) -> str:
    """Strip one surrounding single quote on each side and undo bash's '\\'' escape."""
    if len(value) >= 2 and value[0] == "'" and value[-1] == "'":
        return value[1:-1].replace("'\\''", "'")
    return value


def _is_open(entry: str) -> bool:
    match = LISTING_LINE.match(entry.split("\n", 1)[0])
    return bool(match) and match.group("value").startswith("'") and entry.count("'") % 2 == 1


def _entries(lines: Iterable[str]) -> Iterable[str]:
    """Join continuation lines of multi-line expansions (open single quote)."""
    pending = None
    for raw in lines:
        line = raw.rstrip("\r\n")
        pending = line if pending is None else f"{pending}\n{line}"
        if not _is_open(pending):
            yield pending
            pending = None
    if pending is not None:
        yield pending


def parse_alias_lines(lines: Iterable[str]) -> list[AliasDefinition]:
    """Parse `alias` output from bash or zsh. The last definition of a name wins."""
    aliases: dict[str, AliasDefinition] = {}
    for entry in _entries(lines):
        if not entry.strip():
            continue
        match = LISTING_LINE.match(entry)
        if not match:
            logger.debug("Skipping unparseable alias line: %r", entry)
            continue
        name = match.group("name")
        aliases[name] = AliasDefinition(name=name, expansion=unquote(match.group("value")))
    return list(aliases.values())


def from_shell(shell: str | None = None) -> list[AliasDefinition]:
    """Ask an interactive shell for its alias table."""
    shell = shell or os.environ.get("SHELL") or "bash"
    try:
        result = subprocess.run(
            [shell, "-i", "-c", "alias"],
            capture_output=True,
            text=True,
            timeout=SHELL_TIMEOUT,
            stdin=subprocess.DEVNULL,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning("Could not list aliases from %s: %s", shell, e)
        return []

    if result.returncode != 0:
        logger.warning("%s exited %d while listing aliases", shell, result.returncode)
        return []
    return parse_alias_lines(result.stdout.splitlines())


def from_file(path: Path) -> list[AliasDefinition]:
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise SnapshotError(f"Cannot read alias listing {path}: {e}") from e
    return parse_alias_lines(content.splitlines())


def load_snapshot(source: str | None = None) -> list[AliasDefinition]:
    """Load aliases from a file, '-' for stdin, piped stdin, or the user's shell."""
    if source == "-":
        return parse_alias_lines(sys.stdin.read().splitlines())
    if source:
        return from_file(Path(source).expanduser())
    if not sys.stdin.isatty():
        return parse_alias_lines(sys.stdin.read().splitlines())
    return from_shell()
