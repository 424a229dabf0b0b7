from __future__ import annotations

import re
from typing import List, Tuple

COMMENT_PREFIXES = ("#", ";")

# ECMAScript \s: narrower than str.isspace(), which also covers \x1c-\x1f and \x85
_WHITESPACE_RE = re.compile(
    "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)


def is_empty_or_comment(trimmed: str) -> bool:
    return not trimmed or trimmed.startswith(COMMENT_PREFIXES)


def is_section(trimmed: str) -> bool:
    return trimmed.startswith("[") and trimmed.endswith("]")


def is_indented(line: str) -> bool:
    return _WHITESPACE_RE.match(line) is not None


def is_key_value(line: str) -> bool:
    return "=" in line


def section_name(trimmed: str) -> str:
    return trimmed[1:-1].strip()


def strip_inline_comment(value: str) -> str:
    """
    Cut a value at the earliest `#` or `;`.

    There is no escaping, so `server=localhost;database=test` becomes
    `server=localhost`.
    """
    indices = [i for i in (value.find(c) for c in COMMENT_PREFIXES) if i != -1]
    if not indices:
        return value
    return value[: min(indices)].strip()


def split_key_value(line: str) -> Tuple[str, str]:
    """
    Split at the first `=`. The key is trimmed; the value is trimmed and
    comment-stripped.
    """
    key, raw = line.split("=", 1)
    return key.strip(), strip_inline_comment(raw.strip())


def split_values(value: str) -> List[str]:
    """
    Tokenize a value on runs of whitespace.

    Applies even when tokens contain `=`: `timeout=30 retry=3` yields
    two tokens.
    """
    return [token for token in _WHITESPACE_RE.split(value) if token]
