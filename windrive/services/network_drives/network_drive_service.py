"""Windows Network Drive Service - net use based mounting and lookup."""

from typing import List, Optional

from ..command_runner import CommandRunner
from ...config import Settings
from ...core.exceptions import CommandOutputError
from ...logging_config import get_app_logger
from ...models import MountedDrive, NetworkCredentials
from ...utils.parsers import parse_drive_letter, parse_status, parse_unc
from ...utils.paths import to_unc, to_unc_path, to_windows_path


class NetworkDriveService:
    """Mounts, unmounts and lists network drives. SRP: `net use` operations ONLY."""

    def __init__(self, settings: Settings, command_runner: CommandRunner):
        self._logger = get_app_logger()
        self._settings = settings
        self._runner = command_runner

    async def mount(
        self, server: str, share: str, credentials: Optional[NetworkCredentials] = None
    ) -> str:
        """
        Mount `\\\\server\\share` to the next available drive letter.

        Args:
            server: Server name like `server`
            share: Unix style share path like `some/path/to/folder`
            credentials: Optional user/password to log into the share

        Returns:
            The drive letter the share was mounted on, e.g. `Y:`
        """
        if not server or not share:
            raise ValueError("No `server` or `share` specified")

        unc_path = to_unc_path(server, share)
        args = ["use", "*", unc_path]

        if credentials is not None:
            args.append(f"/user:{credentials.user}")
            args.append(credentials.password.get_secret_value())

        self._logger.info(f"Mounting {unc_path}")
        result = await self._runner.run(self._settings.net_executable, args)

        letter = parse_drive_letter(result.stdout)
        if letter is None:
            self._logger.error(f"No drive letter in net use output for {unc_path}")
            raise CommandOutputError(result.command, result.stdout, "No drive letter found")

        self._logger.info(f"Successfully mounted {unc_path} as {letter}")
        return letter

    async def unmount(self, letter: str) -> str:
        """Unmount the network drive on `letter` (e.g. `Z:`) and return the letter."""
        if not letter:
            raise ValueError("No letter specified")

        await self._runner.run(self._settings.net_executable, ["use", letter, "/delete"])
        self._logger.info(f"Unmounted network drive {letter}")
        return letter

    async def mounted_drives(self) -> List[MountedDrive]:
        """List mounted drive letters and the UNC paths behind them."""
        result = await self._runner.run(self._settings.net_executable, ["use"])
        drives = self.parse_net_use(result.stdout, self._settings.net_use_header_lines)
        self._logger.debug(f"Found {len(drives)} mounted network drives")
        return drives

    async def is_mounted(self, share: str) -> Optional[str]:
        """
        Check whether `share` (like `server/share$`) is mounted.

        Returns:
            The drive letter it's mounted on, or None
        """
        if not share:
            raise ValueError("No `share` specified")

        unc_path = to_windows_path(to_unc(share)).casefold()
        for drive in await self.mounted_drives():
            if drive.unc.casefold() == unc_path:
                return drive.letter
        return None

    @staticmethod
    def parse_net_use(output: str, header_lines: int = 6) -> List[MountedDrive]:
        """
        Parse the table printed by `net use`.

        Lines without a status (continuation lines) or without a drive letter
        (`Microsoft Windows Network` entries, footer) are skipped.
        """
        drives = []
        for line in output.splitlines()[header_lines:]:
            status = parse_status(line)
            if status is None:
                continue

            letter = parse_drive_letter(line)
            if letter is None:
                continue

            unc = parse_unc(line)
            if unc is None:
                continue

            drives.append(MountedDrive(letter=letter, unc=unc, status=status))
        return drives
