"""
Parsers for the textual output of Windows commands.

Every parser looks at a single string and returns the first match, or None
when nothing matches. Only a malformed call (non-string input) raises.
"""

import re
from typing import Optional


DRIVE_LETTER_PATTERN = re.compile(r"[A-Z]:")
STATUS_PATTERN = re.compile(r"^\w+")
UNC_PATTERN = re.compile(r"\\\\\S+")
NUMBER_PATTERN = re.compile(r"\d+")


def _first_match(pattern: re.Pattern, text: str) -> Optional[str]:
    if not isinstance(text, str):
        raise TypeError(f"Expected a line of command output, got {type(text).__name__}")
    match = pattern.search(text)
    return match.group(0) if match else None


def parse_drive_letter(text: str) -> Optional[str]:
    """
    Find a drive letter like `Z:`.

    >>> parse_drive_letter("a String with the letter Y: in it")
    'Y:'
    """
    return _first_match(DRIVE_LETTER_PATTERN, text)


def parse_status(text: str) -> Optional[str]:
    """Leading status word of a `net use` line (OK, Unavailable, ...)."""
    return _first_match(STATUS_PATTERN, text)


def parse_unc(text: str) -> Optional[str]:
    """UNC path like `\\\\server\\share$\\user` up to the next whitespace."""
    return _first_match(UNC_PATTERN, text)


def parse_number(text: str) -> Optional[str]:
    return _first_match(NUMBER_PATTERN, text)
