"""
Utilities package for windrive.

This package contains pure functions for building Windows paths and
parsing the textual output of `net`, `wmic` and friends without side effects.
"""

from .paths import (
    to_windows_path,
    to_native_path,
    to_unc,
    to_unc_path,
)

from .parsers import (
    parse_drive_letter,
    parse_status,
    parse_unc,
    parse_number,
)

__all__ = [
    # Paths
    "to_windows_path",
    "to_native_path",
    "to_unc",
    "to_unc_path",
    # Command output parsers
    "parse_drive_letter",
    "parse_status",
    "parse_unc",
    "parse_number",
]
