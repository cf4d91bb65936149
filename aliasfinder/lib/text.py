import re

_WHITESPACE = re.compile(r"\s+")
_REGEX_SPECIALS = re.compile(r"[.\\|$(){}?+*^\[\]]")


def normalize(value: str) -> str:
    """Collapse whitespace runs (newlines included) to single spaces and trim."""
    return _WHITESPACE.sub(" ", value).strip()


def escape_regex(value: str) -> str:
    """Backslash-escape extended-regex metacharacters: . \\ | $ ( ) { } ? + * ^ [ ]

    Single pass, so an existing backslash is escaped exactly once.
    """
    return _REGEX_SPECIALS.sub(lambda m: "\\" + m.group(0), value)


def drop_last_word(value: str) -> str:
    """Remove the last space-delimited word and any spaces before it."""
    head, _, _ = value.rstrip(" ").rpartition(" ")
    return head.rstrip(" ")
