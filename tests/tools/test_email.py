"""Tests for email tools."""

import pytest

from givebrevo.tools.email import is_valid_email, normalize_email


@pytest.mark.parametrize(
    ("email", "expected"),
    [
        ("user@example.com", "user@example.com"),
        ("  user@example.com\n", "user@example.com"),
        ("not-an-email", "not-an-email"),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_email(email, expected):
    """Test emails are trimmed but never rejected."""
    assert normalize_email(email) == expected


@pytest.mark.parametrize(
    "email",
    [
        "user@example.com",
        "test.user@sub.domain.co.uk",
        "name+tag@gmail.com",
        "user@localhost",
    ],
)
def test_is_valid_email_valid(email):
    """Test valid email addresses."""
    assert is_valid_email(email) is True


@pytest.mark.parametrize(
    "invalid_email",
    [
        None,
        "",
        "invalid-email",
        "user@",
        "@domain.com",
        "user@domain@com",
        "user domain.com",
        "user@example.com;drop table users",
    ],
)
def test_is_valid_email_invalid(invalid_email):
    """Test handling of invalid email addresses."""
    assert is_valid_email(invalid_email) is False


def test_is_valid_email_length_limits():
    """Test handling of extremely long email addresses."""
    assert is_valid_email("a" * 65 + "@example.com") is False
