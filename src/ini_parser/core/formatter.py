from __future__ import annotations

from typing import Any, Dict, List, Mapping

from ini_parser.core.models import (
    ConfigurationEntry,
    ParseOptions,
    ResultTree,
    SectionEntry,
)


def to_meta(tree: ResultTree) -> Dict[str, Any]:
    """Tagged form: every entry keeps its `type` and `content`."""
    return {name: entry.model_dump(by_alias=True) for name, entry in tree.items()}


def to_simplified(tree: ResultTree) -> Dict[str, Any]:
    """
    Tag-free form:
      section -> {key: [values]}
      global key -> [values]
    """
    out: Dict[str, Any] = {}
    for name, entry in tree.items():
        if isinstance(entry, SectionEntry):
            out[name] = {k: list(v.values) for k, v in entry.keys.items()}
        elif isinstance(entry, ConfigurationEntry):
            out[name] = list(entry.values)
    return out


def simplify(meta_tree: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Strip tags from an already-serialized meta tree.

    simplify(parse(text, meta=True)) == parse(text)

    Entries with an unknown `type` are skipped.
    """
    out: Dict[str, Any] = {}
    for name, entry in meta_tree.items():
        if not isinstance(entry, Mapping):
            continue
        kind = entry.get("type")
        content = entry.get("content")
        if kind == "section" and isinstance(content, Mapping):
            out[name] = {k: _content_list(v) for k, v in content.items()}
        elif kind == "configuration":
            out[name] = _content_list(entry)
    return out


def _content_list(entry: Any) -> List[str]:
    if isinstance(entry, Mapping):
        return list(entry.get("content") or [])
    return []


def format_output(tree: ResultTree, options: ParseOptions) -> Dict[str, Any]:
    if options.meta:
        return to_meta(tree)
    return to_simplified(tree)
