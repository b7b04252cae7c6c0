"""Text sanitization tools."""

import re

from django.utils.html import strip_tags

_WHITESPACE = re.compile(r"\s+")


def sanitize_text_field(value) -> str:
    """
    Clean a free text value received from a third party.

    Tags are removed, any run of whitespace (line breaks included) becomes a
    single space and the result is trimmed. `None` gives an empty string.
    """
    if value is None:
        return ""
    return _WHITESPACE.sub(" ", strip_tags(str(value))).strip()
