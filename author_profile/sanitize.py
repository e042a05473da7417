"""
Text normalization shared by every text attribute of an author.

``sanitize_text`` is the one place the normalization policy lives. It is a
defense-in-depth filter against obviously malformed input, not a full HTML
escaping pass: quote characters pass through untouched.
"""

import re

# C0 and C1 control characters, including DEL
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")

# A tag opens with "<" followed by anything but whitespace and runs to the
# next ">" or, when unterminated, to the end of the text. A "<" followed by
# whitespace is plain text ("a < b").
_TAG_RE = re.compile(r"<(?!\s)[^>]*(?:>|$)")


def _sanitize_once(value: str) -> str:
    value = value.strip()
    value = _CONTROL_CHARS_RE.sub("", value)
    value = _TAG_RE.sub("", value)
    return value.strip()


def sanitize_text(value: str) -> str:
    """
    Trim a text value and strip content unsafe for storage or rendering.

    Surrounding whitespace, control characters and markup tags are
    removed. The passes repeat until the text stops changing, so applying
    the function to its own output returns the same string.

    Args:
        value: Raw text supplied by a caller.

    Returns:
        The normalized text, possibly empty.

    Raises:
        TypeError: If value is not a string.

    Example:
        >>> sanitize_text("  <b>Testuser</b>\\n")
        'Testuser'
    """
    if not isinstance(value, str):
        raise TypeError(
            f"expected str, got {type(value).__name__}"
        )

    while True:
        cleaned = _sanitize_once(value)
        if cleaned == value:
            return cleaned
        value = cleaned
