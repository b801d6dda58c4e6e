"""Drive Stats Service - free space and size of local and remote drives."""

import asyncio
from typing import List

from .command_runner import CommandRunner, powershell_pipe
from ..config import Settings
from ..core.exceptions import CommandOutputError
from ..logging_config import get_app_logger
from ..models import DriveSpace, LogicalDisk
from ..utils.parsers import parse_number


WMIC_SPACE_PROPERTIES = ("freeSpace", "size")

# Win32_LogicalDisk.DriveType for local disks
LOCAL_DISK_DRIVE_TYPE = 3


class DriveStatsService:
    """Queries drive space through wmic and PowerShell. SRP: drive statistics ONLY."""

    def __init__(self, settings: Settings, command_runner: CommandRunner):
        self._logger = get_app_logger()
        self._settings = settings
        self._runner = command_runner

    async def stat_by_drive_letter(self, letter: str) -> DriveSpace:
        """
        Get free space and size of the drive mounted on `letter`.

        Works for network drives too, without needing firewall access to the
        remote machine (see stat_drives).
        """
        if not letter:
            raise ValueError("No letter specified")

        free_space, size = await asyncio.gather(
            *(self._query_wmic_number(letter, prop) for prop in WMIC_SPACE_PROPERTIES)
        )

        self._logger.debug(f"Drive {letter}: {free_space} bytes free of {size}")
        return DriveSpace(free_space=free_space, size=size)

    async def stat_drives(self, computer: str) -> List[LogicalDisk]:
        """Get all local disks of `computer` as reported by WMI."""
        if not computer:
            raise ValueError("No computer specified")

        command = powershell_pipe(
            f"get-wmiobject Win32_LogicalDisk -computerName {computer}",
            f"where -property DriveType -eq {LOCAL_DISK_DRIVE_TYPE}",
        )
        data = await self._runner.run_powershell_json(command)

        if data is None:
            return []
        # ConvertTo-Json emits a bare object when there is a single disk
        if isinstance(data, dict):
            data = [data]

        disks = [LogicalDisk.model_validate(item) for item in data]
        self._logger.debug(f"Found {len(disks)} local disks on {computer}")
        return disks

    async def _query_wmic_number(self, letter: str, prop: str) -> int:
        result = await self._runner.run(
            self._settings.wmic_executable,
            ["logicaldisk", "where", f'DeviceID="{letter}"', "get", prop],
        )

        number = parse_number(result.stdout)
        if number is None:
            self._logger.error(f"wmic returned no {prop} for drive {letter}")
            raise CommandOutputError(result.command, result.stdout, f"No {prop} value found")

        return int(number)
