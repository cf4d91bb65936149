"""Progressive search: probe the snapshot with shorter and shorter command text."""

import logging
from collections.abc import Iterator, Sequence

from aliasfinder.core.backends import PythonBackend, SearchBackend
from aliasfinder.core.patterns import Probe
from aliasfinder.lib import text
from aliasfinder.models import AliasDefinition, MatchRequest, MatchResult, Mode

logger = logging.getLogger(__name__)


def trim_candidates(command: str, limit: int | None = None) -> Iterator[str]:
    """Yield `command`, then `command` minus its last word, down to one word.

    Yields at most word-count elements, or `limit` when given.
    """
    remaining = text.normalize(command)
    yielded = 0
    while remaining and (limit is None or yielded < limit):
        yield remaining
        yielded += 1
        remaining = text.drop_last_word(remaining)


def should_stop(request: MatchRequest) -> bool:
    """Exact and longer searches probe the full command once and never trim."""
    return request.mode in (Mode.EXACT, Mode.LONGER)


def find_aliases(
    snapshot: Sequence[AliasDefinition],
    request: MatchRequest,
    backend: SearchBackend | None = None,
) -> MatchResult:
    """Collect aliases matching the request, trimming trailing words as needed.

    Matches from every trim level are accumulated in discovery order; an alias
    found at several levels appears several times.
    """
    backend = backend or PythonBackend()
    matches: list[AliasDefinition] = []

    for level, candidate in enumerate(trim_candidates(request.command_text)):
        probe = Probe(mode=request.mode, command=candidate, cheaper=request.cheaper)
        if probe.exhausted:
            logger.debug("No alias can be shorter than %r; stopping", candidate)
            break

        found = backend.search(snapshot, probe)
        logger.debug(
            "trim level %d %r: %d match(es) via %s", level, candidate, len(found), backend.name
        )
        matches.extend(found)

        if should_stop(request):
            break

    return MatchResult(request=request, matches=tuple(matches))
