"""
Text processing utilities for contact-field normalization and display.
"""

import re

NON_DIGIT = re.compile(r"\D")
URL_SCHEME = re.compile(r"^https?://", re.IGNORECASE)


def normalize_phone(phone: str) -> str:
    """
    Strip every non-digit character from a phone number.

    Example:
        >>> normalize_phone("(555) 123-4567")
        '5551234567'
        >>> normalize_phone("+1 555.123.4567")
        '15551234567'
    """
    return NON_DIGIT.sub("", phone or "")


def normalize_website(website: str) -> str:
    """
    Reduce a website URL to its bare domain/path form.

    Removes a leading http:// or https:// (case-insensitive) and a single
    trailing slash. Anything else (www., paths, query strings) is kept.

    Example:
        >>> normalize_website("https://example.com/")
        'example.com'
        >>> normalize_website("HTTP://janedoe.dev/blog//")
        'janedoe.dev/blog/'
    """
    return URL_SCHEME.sub("", website or "").removesuffix("/")


def count_tokens(text: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(text.split())


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
