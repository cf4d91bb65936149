"""Shared data models and types."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from aliasfinder.errors import UsageError
from aliasfinder.lib import text

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    """How an alias expansion must relate to the typed command."""

    DEFAULT = "default"
    EXACT = "exact"
    LONGER = "longer"


@dataclass(frozen=True)
class AliasDefinition:
    """A single alias binding from the shell's alias table."""

    name: str
    expansion: str

    @property
    def line(self) -> str:
        """Render as a listing line, quoting the way bash's `alias` builtin does."""
        quoted = self.expansion.replace("'", "'\\''")
        return f"{self.name}='{quoted}'"

    def to_dict(self) -> dict:
        return {"name": self.name, "expansion": self.expansion}


@dataclass(frozen=True)
class MatchRequest:
    """A parsed search request."""

    command_text: str
    mode: Mode = Mode.DEFAULT
    cheaper: bool = False
    automatic: bool = False

    @classmethod
    def from_flags(
        cls,
        command_text: str,
        exact: bool = False,
        longer: bool = False,
        cheaper: bool = False,
        automatic: bool = False,
    ) -> "MatchRequest":
        """Build a request from CLI-style flags.

        Exact wins over Longer when both are set. Raises UsageError when the
        command text is empty after whitespace normalization.
        """
        normalized = text.normalize(command_text)
        if not normalized:
            raise UsageError("No command specified")

        if exact and longer:
            logger.debug("Both exact and longer requested; using exact")

        if exact:
            mode = Mode.EXACT
        elif longer:
            mode = Mode.LONGER
        else:
            mode = Mode.DEFAULT

        return cls(command_text=normalized, mode=mode, cheaper=cheaper, automatic=automatic)


@dataclass(frozen=True)
class MatchResult:
    """Aliases found for a request, in discovery order."""

    request: MatchRequest
    matches: tuple[AliasDefinition, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.matches)

    def __len__(self) -> int:
        return len(self.matches)

    def __iter__(self):
        return iter(self.matches)

    @property
    def lines(self) -> list[str]:
        return [alias.line for alias in self.matches]


@dataclass(frozen=True)
class Suggestion:
    """Best alias for an about-to-run command, plus how many others qualified."""

    command_text: str
    best: AliasDefinition
    candidates: tuple[AliasDefinition, ...] = field(default_factory=tuple)

    @property
    def others(self) -> int:
        return max(len(self.candidates) - 1, 0)
