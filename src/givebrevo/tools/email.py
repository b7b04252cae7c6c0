"""Email related tools."""

from email.errors import HeaderParseError
from email.headerregistry import Address


def normalize_email(email) -> str:
    """Return the email as a trimmed string, without validating it."""
    if not email:
        return ""
    return str(email).strip()


def is_valid_email(email: str | None) -> bool:
    """Check that an email is a single address with a local part and a domain."""
    try:
        address = Address(addr_spec=email)
        if len(address.username) > 64 or len(address.domain) > 255:  # noqa: PLR2004
            # Simple length validation using the RFC 5321 limits
            return False
        return bool(address.username and address.domain)
    except (ValueError, AttributeError, IndexError, TypeError, HeaderParseError):
        return False
