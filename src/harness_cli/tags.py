from __future__ import annotations

from collections.abc import Iterable

from .errors import InvalidArgumentError


def parse_tags(values: Iterable[str] | None) -> dict[str, str]:
    """Split ``key:value`` strings into a tag mapping.

    Blank entries are skipped and only the first ``:`` separates key from value,
    so ``url:https://example.com`` keeps its full value.
    """

    tags: dict[str, str] = {}
    for raw in values or ():
        if not raw:
            continue
        key, sep, value = raw.partition(":")
        if not sep or not key:
            raise InvalidArgumentError(f"Tag '{raw}' should be of format 'key:value'.")
        tags[key] = value
    return tags


__all__ = ["parse_tags"]
