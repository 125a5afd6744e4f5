"""Unit tests for contact-field normalization helpers."""

import pytest

from quiver.utils.text_processing import (
    count_tokens,
    normalize_phone,
    normalize_website,
    truncate_display,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "phone, digits",
    [
        ("(555) 123-4567", "5551234567"),
        ("+1 555.123.4567", "15551234567"),
        ("555 1234", "5551234"),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_phone(phone, digits):
    assert normalize_phone(phone) == digits


@pytest.mark.unit
@pytest.mark.parametrize(
    "website, domain",
    [
        ("https://example.com/", "example.com"),
        ("http://example.com", "example.com"),
        ("HTTPS://Example.com/", "Example.com"),
        ("example.com", "example.com"),
        ("https://janedoe.dev/blog/", "janedoe.dev/blog"),
        ("", ""),
    ],
)
def test_normalize_website(website, domain):
    assert normalize_website(website) == domain


@pytest.mark.unit
def test_normalize_website_strips_single_trailing_slash():
    assert normalize_website("https://example.com//") == "example.com/"


@pytest.mark.unit
def test_normalize_website_only_strips_leading_scheme():
    assert normalize_website("example.com/?next=https://other.com") == (
        "example.com/?next=https://other.com"
    )


@pytest.mark.unit
def test_count_tokens_ignores_leading_and_repeated_whitespace():
    assert count_tokens("  one\ttwo\n\nthree  ") == 3
    assert count_tokens("") == 0


@pytest.mark.unit
def test_truncate_display():
    assert truncate_display("short", 10) == "short"
    assert truncate_display("this is a very long string", 10) == "this is..."
