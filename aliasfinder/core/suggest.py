"""Automatic suggestions: the single best alias for a command about to run."""

import logging
from collections.abc import Iterable, Iterator, Sequence

from aliasfinder.core.backends import PythonBackend, SearchBackend
from aliasfinder.core.patterns import Probe
from aliasfinder.core.search import trim_candidates
from aliasfinder.lib import text
from aliasfinder.models import AliasDefinition, Mode, Suggestion

logger = logging.getLogger(__name__)

MAX_ROUNDS = 8
ROUND_MODES = (Mode.EXACT, Mode.DEFAULT)


def rounds(command: str, max_rounds: int = MAX_ROUNDS) -> Iterator[str]:
    """The full command, then up to `max_rounds` trimmed versions of it."""
    return trim_candidates(command, limit=max_rounds + 1)


def collect(
    snapshot: Sequence[AliasDefinition],
    command: str,
    backend: SearchBackend,
    max_rounds: int = MAX_ROUNDS,
) -> list[AliasDefinition]:
    """Probe exact then prefix per round; stop at the first round that finds anything."""
    for level, candidate in enumerate(rounds(command, max_rounds)):
        found = []
        for mode in ROUND_MODES:
            found.extend(backend.search(snapshot, Probe(mode=mode, command=candidate)))
        if found:
            logger.debug("round %d %r: %d candidate(s)", level, candidate, len(found))
            return found
    return []


def is_relevant(alias: AliasDefinition, original: str) -> bool:
    """The alias must expand to a literal prefix of what was actually typed."""
    return original.startswith(alias.expansion)


def rank(
    found: Iterable[AliasDefinition], original: str, cheaper: bool = False
) -> list[AliasDefinition]:
    """Drop irrelevant and duplicate candidates, shortest alias name first."""
    kept = [alias for alias in found if is_relevant(alias, original)]
    if cheaper:
        kept = [alias for alias in kept if len(alias.name) < len(original)]
    unique = list(dict.fromkeys(kept))
    return sorted(unique, key=lambda alias: len(alias.name))


def suggest(
    snapshot: Sequence[AliasDefinition],
    command_text: str,
    cheaper: bool = False,
    max_rounds: int = MAX_ROUNDS,
    backend: SearchBackend | None = None,
) -> Suggestion | None:
    original = text.normalize(command_text)
    if not original:
        return None

    found = collect(snapshot, original, backend or PythonBackend(), max_rounds)
    candidates = rank(found, original, cheaper=cheaper)
    if not candidates:
        return None

    return Suggestion(command_text=original, best=candidates[0], candidates=tuple(candidates))


def format_suggestion(suggestion: Suggestion) -> str:
    line = f"Alias tip: {suggestion.best.line}"
    if suggestion.others == 1:
        return f"{line} (1 more match)"
    if suggestion.others:
        return f"{line} ({suggestion.others} more matches)"
    return line
