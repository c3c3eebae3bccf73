"""Tests for mention and acknowledgement extraction."""

import pytest

from pingbot.application.use_cases.pings import (
    extract_acknowledgements,
    extract_mentions,
    is_team_reference,
    split_team_reference,
)


def test_mentions_are_deduplicated_in_scan_order() -> None:
    text = "cc @bob and @Alice, also @bob again and @rust-lang/core"

    assert list(extract_mentions(text)) == ["bob", "Alice", "rust-lang/core"]


def test_mentions_accept_hyphen_underscore_and_digits() -> None:
    assert list(extract_mentions("@user_1-x! @42")) == ["user_1-x", "42"]


def test_text_without_mentions_yields_nothing() -> None:
    assert list(extract_mentions("no pings here @")) == []


def test_acknowledgements_keep_order_and_duplicates() -> None:
    text = (
        "acknowledge https://example.com/1\n"
        "acknowledge http://example.com/2 and acknowledge https://example.com/1"
    )

    assert extract_acknowledgements(text) == [
        "https://example.com/1",
        "http://example.com/2",
        "https://example.com/1",
    ]


def test_acknowledgement_requires_http_url() -> None:
    assert extract_acknowledgements("acknowledge ftp://example.com/1") == []
    assert extract_acknowledgements("I acknowledge that") == []


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("rust-lang/core", ("rust-lang", "core")),
        ("org/team/extra", ("org", "team")),
        ("org/", ("org", "")),
    ],
)
def test_split_team_reference(token: str, expected: tuple[str, str]) -> None:
    assert is_team_reference(token)
    assert split_team_reference(token) == expected


def test_plain_handle_is_not_team_reference() -> None:
    assert not is_team_reference("alice")
