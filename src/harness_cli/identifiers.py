"""Derive API-safe identifiers from human readable resource names."""

from __future__ import annotations

from .errors import InvalidArgumentError
from .scope import Scope

MAX_IDENTIFIER_LENGTH = 64


def derive_identifier(name: str) -> str:
    """Return the identifier the API expects for a resource called ``name``.

    The name is truncated to 64 characters, leading digits and ``$`` signs are
    dropped, spaces and dashes become underscores and each code point is
    lowercased on its own (simple case mapping), so the length never grows.
    Collisions are not detected locally; the API reports them as
    ``DUPLICATE_FIELD``.

    Args:
        name: Display name supplied by the user.

    Returns:
        The derived identifier. Names made only of digits and ``$`` derive to
        an empty string, which the API rejects.

    Raises:
        InvalidArgumentError: If ``name`` is empty.
    """

    if not name:
        raise InvalidArgumentError("A name is required to derive an identifier.")

    identifier = name[:MAX_IDENTIFIER_LENGTH]
    start = 0
    while start < len(identifier) and (identifier[start].isdecimal() or identifier[start] == "$"):
        start += 1
    identifier = identifier[start:]
    identifier = identifier.replace(" ", "_").replace("-", "_")
    # Full lowercasing expands some code points ("İ"); keep the first one.
    return "".join(char.lower()[0] for char in identifier)


def scoped_reference(scope: Scope | str, name: str) -> str:
    """Qualify a secret reference with the scope it is resolved from."""

    value = Scope.coerce(scope)
    if value is Scope.ACCOUNT:
        return f"account.{name}"
    if value is Scope.ORG:
        return f"org.{name}"
    return name


__all__ = ["MAX_IDENTIFIER_LENGTH", "derive_identifier", "scoped_reference"]
