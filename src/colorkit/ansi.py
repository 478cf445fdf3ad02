"""ANSI escape code utilities."""

import re

# SGR color codes, e.g. "\x1b[1;36mText\x1b[0m"
CODE_REGEX = re.compile(
    r"""
    \x1b              # ESC character (0x1b)
    \[                # CSI - Control Sequence Introducer
    [\d;?]+           # Parameters: codes separated by semicolons
    m                 # SGR final byte
    """,
    re.VERBOSE | re.ASCII,
)


def strip_codes(text: str) -> str:
    r"""Remove SGR color codes from text.

    Only complete sequences are removed, anything malformed is kept as-is:
        "\x1b[36;1mText\x1b[0m" -> "Text"
        "\x1b[mText" -> "\x1b[mText"

    Removal repeats until no sequence is left, including sequences formed
    by joining the text around a removed one.
    """
    count = 1
    while count:
        text, count = CODE_REGEX.subn("", text)
    return text
