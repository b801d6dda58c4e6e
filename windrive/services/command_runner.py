"""
Command Runner - spawns OS commands and buffers their output.

Every Windows operation in windrive boils down to running `net`, `wmic` or
`powershell` and reading what they print. This service owns that part:
spawning, buffering stdout/stderr, decoding and turning failures into
CommandError.
"""

import asyncio
import json
from typing import Any, List, Optional, Sequence

from ..config import Settings
from ..core.exceptions import CommandError, CommandOutputError, mask_command
from ..logging_config import get_app_logger
from ..models import CommandResult


def powershell_pipe(*commands: str) -> str:
    """Join PowerShell pipeline stages: `a | b | c`."""
    return " | ".join(commands)


def powershell_to_json(command: str) -> str:
    return powershell_pipe(command, "ConvertTo-Json")


class CommandRunner:
    """Runs OS commands asynchronously. SRP: process spawning and output buffering ONLY."""

    def __init__(self, settings: Settings):
        self._logger = get_app_logger()
        self._settings = settings
        self._encoding = settings.command_encoding
        self._timeout = settings.command_timeout_seconds

    async def run(self, program: str, args: Sequence[str] = ()) -> CommandResult:
        """
        Run `program` with `args` and wait for it to finish.

        Raises:
            CommandError: if the program can't be started, times out or exits non-zero
        """
        command = [program, *args]
        self._logger.debug(f"Running command: {self._describe(command)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            self._logger.error(f"Could not start {program}: {e}")
            raise CommandError(command, None, str(e)) from e

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self._timeout
            )
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            self._logger.error(f"Command timed out after {self._timeout}s: {program}")
            raise CommandError(
                command, process.returncode, f"Timed out after {self._timeout}s"
            ) from e

        result = CommandResult(
            command=command,
            returncode=process.returncode,
            stdout=self._decode(stdout),
            stderr=self._decode(stderr),
        )

        if result.returncode != 0:
            self._logger.error(
                f"Command failed with exit code {result.returncode}: "
                f"{self._describe(command)} - {result.stderr.strip()}"
            )
            raise CommandError(command, result.returncode, result.stderr)

        return result

    async def run_powershell_json(self, command: str) -> Any:
        """Run a PowerShell command piped through ConvertTo-Json and decode the result."""
        result = await self.run(
            self._settings.powershell_executable,
            ["-NoProfile", "-NonInteractive", "-Command", powershell_to_json(command)],
        )

        if not result.stdout.strip():
            return None

        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as e:
            self._logger.error(f"PowerShell returned invalid JSON: {e}")
            raise CommandOutputError(result.command, result.stdout, f"Invalid JSON: {e}") from e

    def _decode(self, data: Optional[bytes]) -> str:
        if not data:
            return ""
        return data.decode(self._encoding, errors="replace")

    @staticmethod
    def _describe(command: List[str]) -> str:
        return " ".join(mask_command(command))
