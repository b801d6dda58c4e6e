"""
Module level entry points.

Thin async wrappers around the services in `windrive.dependencies`, so
callers can simply do `await windrive.stat_directory("c:/temp/log")`.
"""

from typing import Awaitable, List, Optional

from .dependencies import (
    get_directory_stat_accumulator,
    get_drive_stats_service,
    get_network_drive_service,
)
from .models import DirectoryStatResult, DriveSpace, LogicalDisk, MountedDrive, NetworkCredentials


def stat_directory(path: str) -> Awaitable[DirectoryStatResult]:
    """
    Size, file count and per-file metadata of a directory, via a recursive walk.

    >>> await stat_directory("c:/temp/log")
    DirectoryStatResult(total_size=32636, file_count=4, files={...})
    """
    return get_directory_stat_accumulator().stat_directory(path)


async def mount(
    server: str, share: str, credentials: Optional[NetworkCredentials] = None
) -> str:
    return await get_network_drive_service().mount(server, share, credentials)


async def unmount(letter: str) -> str:
    return await get_network_drive_service().unmount(letter)


async def mounted_drives() -> List[MountedDrive]:
    return await get_network_drive_service().mounted_drives()


async def is_mounted(share: str) -> Optional[str]:
    return await get_network_drive_service().is_mounted(share)


async def stat_by_drive_letter(letter: str) -> DriveSpace:
    """
    >>> await stat_by_drive_letter("Z:")
    DriveSpace(free_space=10700152832, size=53579083776)
    """
    return await get_drive_stats_service().stat_by_drive_letter(letter)


async def stat_drives(computer: str) -> List[LogicalDisk]:
    return await get_drive_stats_service().stat_drives(computer)
