from __future__ import annotations

import pytest

from harness_cli.errors import InvalidArgumentError
from harness_cli.identifiers import MAX_IDENTIFIER_LENGTH, derive_identifier, scoped_reference
from harness_cli.scope import Scope


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("My Project", "my_project"),
        ("build-cache", "build_cache"),
        ("Mixed Case-Name here", "mixed_case_name_here"),
        ("123abc", "abc"),
        ("$$secret", "secret"),
        ("1$2$ value", "_value"),
        ("already_ok", "already_ok"),
        ("keep.dots", "keep.dots"),
        ("a1 2b", "a1_2b"),
    ],
)
def test_derive_identifier(name, expected):
    assert derive_identifier(name) == expected


def test_derive_identifier_truncates_to_limit():
    name = "A" * 100

    identifier = derive_identifier(name)

    assert identifier == "a" * MAX_IDENTIFIER_LENGTH


def test_derive_identifier_truncates_before_stripping_digits():
    name = "1234" + "x" * 70

    identifier = derive_identifier(name)

    assert identifier == "x" * (MAX_IDENTIFIER_LENGTH - 4)


def test_derive_identifier_only_strips_leading_digits():
    assert derive_identifier("v2 release 10") == "v2_release_10"


def test_derive_identifier_is_idempotent():
    once = derive_identifier("42 My-Fancy Secret")

    assert derive_identifier(once) == once


def test_derive_identifier_of_digits_only_is_empty():
    assert derive_identifier("2024") == ""


def test_derive_identifier_requires_name():
    with pytest.raises(InvalidArgumentError):
        derive_identifier("")


@pytest.mark.parametrize(
    ("scope", "expected"),
    [
        (Scope.ACCOUNT, "account.token"),
        (Scope.ORG, "org.token"),
        (Scope.PROJECT, "token"),
        ("org", "org.token"),
        ("unknown", "token"),
    ],
)
def test_scoped_reference(scope, expected):
    assert scoped_reference(scope, "token") == expected


def test_derive_identifier_uses_simple_case_mapping():
    assert derive_identifier("İstanbul Office") == "istanbul_office"
    assert derive_identifier("ΟΔΟΣ") == "οδοσ"


def test_derive_identifier_expanding_characters_stay_within_limit():
    identifier = derive_identifier("İ" * 100)

    assert identifier == "i" * MAX_IDENTIFIER_LENGTH
