"""Match predicates per mode, and the equivalent line patterns for regex engines.

Listing lines look like `name='expansion'`. The structured predicates work on
AliasDefinition directly; the line patterns express the same rules as extended
regexes so an external engine can run them over rendered lines.
"""

from collections.abc import Callable
from dataclasses import dataclass

from aliasfinder.lib import text
from aliasfinder.models import AliasDefinition, Mode

Predicate = Callable[[AliasDefinition], bool]

NAME_PART = "[^=]+"


def exact(command: str) -> Predicate:
    return lambda alias: alias.expansion == command


def prefix(command: str) -> Predicate:
    return lambda alias: alias.expansion.startswith(command)


def contains(command: str) -> Predicate:
    return lambda alias: command in alias.expansion


PREDICATES: dict[Mode, Callable[[str], Predicate]] = {
    Mode.EXACT: exact,
    Mode.DEFAULT: prefix,
    Mode.LONGER: contains,
}


def predicate_for(mode: Mode, command: str) -> Predicate:
    return PREDICATES[mode](command)


def name_limit(command: str) -> int:
    """Longest alias name that still counts as cheaper than `command`."""
    return len(command) - 1


def cheaper_filter(command: str) -> Predicate | None:
    """Pre-filter keeping aliases whose name is strictly shorter than `command`.

    Returns None when no alias can qualify (command of length <= 1).
    """
    limit = name_limit(command)
    if limit < 1:
        return None
    return lambda alias: 1 <= len(alias.name) <= limit


def line_pattern(mode: Mode, escaped: str) -> str:
    """Extended regex over `name='expansion'` for already-escaped command text."""
    if mode is Mode.EXACT:
        return f"^{NAME_PART}='?{escaped}'?$"
    if mode is Mode.LONGER:
        return f"^{NAME_PART}=.*{escaped}"
    return f"^{NAME_PART}='?{escaped}"


def line_filter(limit: int) -> str:
    """Extended regex keeping lines whose alias name has 1..limit characters."""
    return f"^'?[^=]{{1,{limit}}}'?="


@dataclass(frozen=True)
class Probe:
    """One query against the alias snapshot: a mode and the current command text."""

    mode: Mode
    command: str
    cheaper: bool = False

    def predicate(self) -> Predicate:
        return predicate_for(self.mode, self.command)

    def name_filter(self) -> Predicate | None:
        if not self.cheaper:
            return None
        return cheaper_filter(self.command)

    def pattern(self) -> str:
        return line_pattern(self.mode, text.escape_regex(self.command))

    def filter_pattern(self) -> str | None:
        if not self.cheaper:
            return None
        return line_filter(name_limit(self.command))

    @property
    def exhausted(self) -> bool:
        """True when the cheaper guard rules out every alias."""
        return self.cheaper and cheaper_filter(self.command) is None
