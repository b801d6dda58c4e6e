"""
windrive - Windows drive and network share utilities.

Mount and unmount SMB shares, list mounted drives, query drive space and
sum up directory sizes by wrapping `net`, `wmic` and PowerShell.
"""

from .api import (
    stat_directory,
    mount,
    unmount,
    mounted_drives,
    is_mounted,
    stat_by_drive_letter,
    stat_drives,
)
from .core.exceptions import CommandError, CommandOutputError, WalkError
from .models import (
    DirectoryStatResult,
    DriveSpace,
    FileRecord,
    LogicalDisk,
    MountedDrive,
    NetworkCredentials,
)
from .utils.paths import to_unc_path, to_windows_path

__all__ = [
    # Operations
    "stat_directory",
    "mount",
    "unmount",
    "mounted_drives",
    "is_mounted",
    "stat_by_drive_letter",
    "stat_drives",
    # Path helpers
    "to_windows_path",
    "to_unc_path",
    # Models
    "DirectoryStatResult",
    "DriveSpace",
    "FileRecord",
    "LogicalDisk",
    "MountedDrive",
    "NetworkCredentials",
    # Errors
    "WalkError",
    "CommandError",
    "CommandOutputError",
]
