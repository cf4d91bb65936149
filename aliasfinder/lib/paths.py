import os
from pathlib import Path


def dot_alias_finder() -> Path:
    """Returns the user config directory, ~/.alias-finder (or $ALIAS_FINDER_HOME)."""
    override = os.environ.get("ALIAS_FINDER_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".alias-finder"


def package_root() -> Path:
    """Returns aliasfinder package root directory."""
    return Path(__file__).resolve().parent.parent
