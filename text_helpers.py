import re

# Only these characters count as surrounding whitespace in the purchase log.
TRIM_CHARS = " \t\r\n"

LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def trim(text: str) -> str:
    """Remove spaces, tabs, CR and LF from both ends of a line."""
    return text.strip(TRIM_CHARS)


def fold(text: str) -> str:
    """Lowercase a string so item names can be compared case-insensitively."""
    return text.lower()


def parse_leading_int(text: str):
    """
    Reads an integer from the start of a line of user input.

    Leading whitespace and a sign are allowed, anything after the digits is
    ignored ("2abc" reads as 2). Returns None when the line does not start
    with a number.
    """
    match = LEADING_INT_RE.match(text or "")
    if not match:
        return None
    return int(match.group(1))
