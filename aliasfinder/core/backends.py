"""Interchangeable engines that run a probe against an alias snapshot."""

import logging
import shutil
import subprocess
from collections.abc import Sequence
from typing import Protocol

from aliasfinder.core.patterns import Probe
from aliasfinder.models import AliasDefinition

logger = logging.getLogger(__name__)

ENGINES = ("auto", "python", "rg")

RG_TIMEOUT = 5


class SearchBackend(Protocol):
    name: str

    def search(self, snapshot: Sequence[AliasDefinition], probe: Probe) -> list[AliasDefinition]:
        ...


class PythonBackend:
    """In-process matching over structured (name, expansion) pairs."""

    name = "python"

    def search(self, snapshot: Sequence[AliasDefinition], probe: Probe) -> list[AliasDefinition]:
        candidates = list(snapshot)
        name_filter = probe.name_filter()
        if probe.cheaper:
            if name_filter is None:
                return []
            candidates = [alias for alias in candidates if name_filter(alias)]
        predicate = probe.predicate()
        return [alias for alias in candidates if predicate(alias)]


def _is_plain(alias: AliasDefinition) -> bool:
    return "'" not in alias.expansion and "\n" not in alias.expansion


class RipgrepBackend:
    """Runs the escaped line patterns through `rg` over rendered listing lines.

    Quoted or multi-line expansions do not survive the listing format intact,
    so those aliases (and commands containing quotes or backslashes) are
    matched in-process instead.
    """

    name = "rg"

    def __init__(self, executable: str):
        self.executable = executable
        self._fallback = PythonBackend()

    def search(self, snapshot: Sequence[AliasDefinition], probe: Probe) -> list[AliasDefinition]:
        if probe.exhausted:
            return []
        if "'" in probe.command or "\\" in probe.command:
            return self._fallback.search(snapshot, probe)

        plain = [alias for alias in snapshot if _is_plain(alias)]
        quoted = [alias for alias in snapshot if not _is_plain(alias)]

        try:
            found = set(self._grep(plain, probe))
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("rg failed (%s); matching in-process", e)
            return self._fallback.search(snapshot, probe)

        found.update(self._fallback.search(quoted, probe))
        return [alias for alias in snapshot if alias in found]

    def _grep(self, aliases: list[AliasDefinition], probe: Probe) -> list[AliasDefinition]:
        filter_pattern = probe.filter_pattern()
        if filter_pattern:
            aliases = [aliases[i] for i in self._run(filter_pattern, aliases)]
        return [aliases[i] for i in self._run(probe.pattern(), aliases)]

    def _run(self, pattern: str, aliases: list[AliasDefinition]) -> list[int]:
        """Return indexes of the aliases whose listing line matches `pattern`."""
        if not aliases:
            return []
        listing = "".join(f"{alias.line}\n" for alias in aliases)
        result = subprocess.run(
            [self.executable, "--no-config", "--color", "never", "--line-number", "-e", pattern],
            input=listing,
            capture_output=True,
            text=True,
            timeout=RG_TIMEOUT,
        )
        if result.returncode == 1:
            return []
        if result.returncode != 0:
            raise subprocess.SubprocessError(result.stderr.strip() or f"exit {result.returncode}")

        indexes = []
        for line in result.stdout.splitlines():
            number, _, _ = line.partition(":")
            indexes.append(int(number) - 1)
        return indexes


def select_backend(engine: str = "auto") -> SearchBackend:
    """Pick a search engine, preferring ripgrep when it is installed."""
    if engine not in ENGINES:
        raise ValueError(f"Unknown engine {engine!r}; expected one of {', '.join(ENGINES)}")

    if engine == "python":
        return PythonBackend()

    rg = shutil.which("rg")
    if rg:
        return RipgrepBackend(rg)

    if engine == "rg":
        logger.debug("rg not found on PATH; using python engine")
    return PythonBackend()
