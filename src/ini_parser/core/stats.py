from __future__ import annotations

from typing import Any, Mapping, Optional

from ini_parser.core.models import ParseStats


def _section_keys(entry: Any) -> Optional[Mapping[str, Any]]:
    """
    Return the key mapping if `entry` is a section, else None.

    meta form:       {"type": "section", "content": {...}}
    simplified form: {"key": [...], ...}
    A meta tag is always a string, so a simplified section holding a key
    literally named "type" (a list) is not mistaken for one.
    """
    if not isinstance(entry, Mapping):
        return None
    kind = entry.get("type")
    if isinstance(kind, str):
        content = entry.get("content")
        if kind == "section" and isinstance(content, Mapping):
            return content
        return None
    return entry


def count_stats(parsed: Any) -> ParseStats:
    """
    Count sections and keys in a parse result, meta or simplified.

    Each section adds 1 section and 1 key per key inside it; each global
    key adds 1 key.
    """
    stats = ParseStats()
    if not isinstance(parsed, Mapping):
        return stats

    for entry in parsed.values():
        if entry is None:
            continue

        keys = _section_keys(entry)
        if keys is not None:
            stats.sections += 1
            stats.keys += len(keys)
            continue

        stats.keys += 1

    return stats
