"""
Tests for CommandRunner - subprocess spawning is mocked throughout.
"""

import asyncio
from unittest.mock import AsyncMock, Mock, patch

import pytest

from windrive.config import Settings
from windrive.core.exceptions import CommandError, CommandOutputError
from windrive.models import CommandResult
from windrive.services.command_runner import (
    CommandRunner,
    powershell_pipe,
    powershell_to_json,
)


def make_process(stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0):
    process = Mock()
    process.communicate = AsyncMock(return_value=(stdout, stderr))
    process.returncode = returncode
    return process


class TestPowershellHelpers:
    def test_pipe_joins_stages(self):
        assert powershell_pipe("a", "b", "c") == "a | b | c"

    def test_to_json(self):
        assert powershell_to_json("get-thing") == "get-thing | ConvertTo-Json"


class TestCommandRunner:
    @pytest.fixture
    def settings(self):
        return Settings(command_encoding="utf-8", command_timeout_seconds=None)

    @pytest.fixture
    def runner(self, settings):
        return CommandRunner(settings)

    @pytest.mark.asyncio
    async def test_successful_command(self, runner):
        process = make_process(stdout=b"New connections will be remembered.\r\n")

        with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock) as mock_exec:
            mock_exec.return_value = process

            result = await runner.run("net", ["use"])

        mock_exec.assert_called_once_with(
            "net", "use",
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        assert result == CommandResult(
            command=["net", "use"],
            returncode=0,
            stdout="New connections will be remembered.\r\n",
            stderr="",
        )

    @pytest.mark.asyncio
    async def test_non_zero_exit_raises(self, runner):
        process = make_process(stderr=b"System error 53 has occurred.", returncode=2)

        with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock) as mock_exec:
            mock_exec.return_value = process

            with pytest.raises(CommandError) as exc_info:
                await runner.run("net", ["use", "*", "\\\\nope\\share"])

        assert exc_info.value.returncode == 2
        assert "System error 53" in exc_info.value.stderr
        assert exc_info.value.command == ["net", "use", "*", "\\\\nope\\share"]

    @pytest.mark.asyncio
    async def test_missing_program_raises_command_error(self, runner):
        with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock) as mock_exec:
            mock_exec.side_effect = FileNotFoundError(2, "No such file or directory")

            with pytest.raises(CommandError) as exc_info:
                await runner.run("wmic", ["logicaldisk"])

        assert exc_info.value.returncode is None
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    @pytest.mark.asyncio
    async def test_undecodable_output_is_replaced(self, runner):
        process = make_process(stdout=b"caf\xe9")

        with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock) as mock_exec:
            mock_exec.return_value = process

            result = await runner.run("net", ["use"])

        assert result.stdout == "caf\ufffd"

    @pytest.mark.asyncio
    async def test_timeout_kills_process(self):
        runner = CommandRunner(Settings(command_timeout_seconds=0.01))

        async def never_finishes():
            await asyncio.sleep(5)

        process = Mock()
        process.communicate = AsyncMock(side_effect=never_finishes)
        process.wait = AsyncMock(return_value=-9)
        process.returncode = None

        with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock) as mock_exec:
            mock_exec.return_value = process

            with pytest.raises(CommandError) as exc_info:
                await runner.run("wmic", ["logicaldisk"])

        process.kill.assert_called_once()
        assert "Timed out" in exc_info.value.stderr

    @pytest.mark.asyncio
    async def test_password_is_masked_in_errors(self, runner):
        process = make_process(stderr=b"Logon failure", returncode=2)

        with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock) as mock_exec:
            mock_exec.return_value = process

            with pytest.raises(CommandError) as exc_info:
                await runner.run("net", ["use", "*", "\\\\srv\\c$", "/user:admin", "hunter2"])

        assert "hunter2" not in str(exc_info.value)
        assert exc_info.value.command[-1] == "****"


class TestRunPowershellJson:
    @pytest.fixture
    def runner(self):
        return CommandRunner(Settings(powershell_executable="powershell"))

    @pytest.mark.asyncio
    async def test_decodes_json(self, runner):
        stdout = '[{"DeviceID": "C:", "FreeSpace": 100, "Size": 200}]'
        result = CommandResult(command=["powershell"], returncode=0, stdout=stdout)

        with patch.object(runner, "run", new_callable=AsyncMock) as mock_run:
            mock_run.return_value = result

            data = await runner.run_powershell_json("get-wmiobject Win32_LogicalDisk")

        mock_run.assert_called_once_with(
            "powershell",
            ["-NoProfile", "-NonInteractive", "-Command",
             "get-wmiobject Win32_LogicalDisk | ConvertTo-Json"],
        )
        assert data == [{"DeviceID": "C:", "FreeSpace": 100, "Size": 200}]

    @pytest.mark.asyncio
    async def test_empty_output_is_none(self, runner):
        result = CommandResult(command=["powershell"], returncode=0, stdout="  \r\n")

        with patch.object(runner, "run", new_callable=AsyncMock, return_value=result):
            assert await runner.run_powershell_json("get-nothing") is None

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self, runner):
        result = CommandResult(command=["powershell"], returncode=0, stdout="not json")

        with patch.object(runner, "run", new_callable=AsyncMock, return_value=result):
            with pytest.raises(CommandOutputError):
                await runner.run_powershell_json("get-thing")
