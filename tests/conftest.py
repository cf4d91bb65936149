import pytest

from aliasfinder import config
from aliasfinder.models import AliasDefinition


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Empty config home and no ALIAS_FINDER_* overrides for every test."""
    monkeypatch.setenv("ALIAS_FINDER_HOME", str(tmp_path / ".alias-finder"))
    for flag in config.FLAGS:
        monkeypatch.delenv(f"ALIAS_FINDER_{flag.upper()}", raising=False)
    monkeypatch.delenv("ALIAS_FINDER_AUTOMATIC", raising=False)
    config.clear_cache()
    yield tmp_path / ".alias-finder"
    config.clear_cache()


@pytest.fixture
def git_aliases():
    return [
        AliasDefinition("gs", "git status"),
        AliasDefinition("ga", "git add"),
        AliasDefinition("gc", "git commit"),
        AliasDefinition("glo", "git log --oneline"),
        AliasDefinition("ll", "ls -la"),
    ]


@pytest.fixture
def listing_file(tmp_path):
    """An `alias` listing as bash prints it."""
    path = tmp_path / "aliases.txt"
    path.write_text(
        "alias ga='git add'\n"
        "alias gc='git commit'\n"
        "alias glo='git log --oneline'\n"
        "alias gs='git status'\n"
        "alias ll='ls -la'\n"
    )
    return path
