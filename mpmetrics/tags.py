"""
Tag String Parsing

Tags are written as comma-separated ``key=value`` pairs:

    "app=shop, region=eu-west, query=a=b"

Grammar:
    tags    := segment (',' segment)*
    segment := WS* key '=' value WS*

- Whitespace around each comma-delimited segment is stripped.
- The key is everything before the first '=', the value is the rest, so
  values may contain '=' but keys may not. Empty values are kept.
- Segments without '=' (and empty segments) are dropped silently.
- Later duplicate keys overwrite earlier ones.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple


def parse_tag(kv_string: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Parse a single ``key=value`` entry.

    Returns:
        (key, value) tuple, or None when the entry is None, empty or has no '='
    """
    if not kv_string or "=" not in kv_string:
        return None
    key, _, value = kv_string.partition("=")
    return key, value


def parse_tags(tags_string: Optional[str]) -> Dict[str, str]:
    """
    Parse a comma-separated tag string into a dict.

    Example:
        >>> parse_tags("k1=v1, k2=v2,bad,k1=v3")
        {'k1': 'v3', 'k2': 'v2'}
    """
    tags: Dict[str, str] = {}
    if not tags_string:
        return tags
    for segment in tags_string.split(","):
        parsed = parse_tag(segment.strip())
        if parsed is not None:
            key, value = parsed
            tags[key] = value
    return tags


class FrozenTags(dict):
    """
    Read-only tag dict.

    Compares equal to a plain dict with the same items and survives copy,
    deepcopy and pickle. Every mutating method raises TypeError.
    """

    def _readonly(self, *args, **kwargs):
        raise TypeError("tags are read-only")

    __setitem__ = _readonly
    __delitem__ = _readonly
    __ior__ = _readonly
    clear = _readonly
    pop = _readonly
    popitem = _readonly
    setdefault = _readonly
    update = _readonly

    def __reduce__(self):
        return (type(self), (dict(self),))

    def __copy__(self) -> "FrozenTags":
        return self

    def __deepcopy__(self, memo) -> "FrozenTags":
        return self

    def __repr__(self) -> str:
        return f"FrozenTags({dict.__repr__(self)})"


def format_tags(tags: Mapping[str, str]) -> str:
    """Render tags as ``key="value"`` pairs joined by commas, sorted by key."""
    return ",".join(f'{key}="{tags[key]}"' for key in sorted(tags))


__all__ = [
    "parse_tag",
    "parse_tags",
    "format_tags",
    "FrozenTags",
]
