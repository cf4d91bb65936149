import re

import pytest

from aliasfinder.lib import text


def test_normalize_collapses_newlines_and_spaces():
    assert text.normalize("a\n\n b   c") == "a b c"


def test_normalize_trims_edges():
    assert text.normalize("  \tgit   status \n") == "git status"


def test_normalize_empty():
    assert text.normalize("") == ""
    assert text.normalize(" \n\t ") == ""


@pytest.mark.parametrize(
    "value",
    ["a\n\n b   c", "  git\tcommit  -m  'x' ", "", "single", "\n\n", "x \r\n y"],
)
def test_normalize_is_idempotent(value):
    once = text.normalize(value)
    assert text.normalize(once) == once


def test_escape_regex_escapes_dots():
    assert text.escape_regex("test.txt") == "test\\.txt"


def test_escape_regex_escapes_pipes():
    assert text.escape_regex("test|pipe") == "test\\|pipe"


def test_escape_regex_escapes_backslash_once():
    assert text.escape_regex("a\\b") == "a\\\\b"


def test_escape_regex_leaves_plain_text():
    assert text.escape_regex("git commit -m msg") == "git commit -m msg"


@pytest.mark.parametrize(
    "literal",
    [
        "git log --format=%h (short)",
        "a.b|c",
        "[x]*+?^$",
        "echo {a,b} \\n",
    ],
)
def test_escaped_text_matches_itself_literally(literal):
    target = f"prefix {literal} suffix"
    assert re.search(text.escape_regex(literal), target)


def test_escaped_text_rejects_lookalikes():
    assert re.search(text.escape_regex("a.c"), "abc") is None
    assert re.search(text.escape_regex("a|b"), "a") is None
    assert re.search(text.escape_regex("ab*"), "a") is None
    assert re.search(text.escape_regex("(x)"), "x") is None


def test_drop_last_word():
    assert text.drop_last_word("git status extra") == "git status"
    assert text.drop_last_word("git") == ""
    assert text.drop_last_word("") == ""
