# windrive/core/exceptions.py
from typing import List, Optional, Sequence


def mask_command(command: Sequence[str]) -> List[str]:
    """Copy of `command` with the password after a `/user:` switch replaced."""
    masked = list(command)
    for i, part in enumerate(masked[:-1]):
        if part.lower().startswith("/user:"):
            masked[i + 1] = "****"
    return masked


class WalkError(Exception):
    """Raised when a directory walk fails (missing path, permission denied, I/O fault)."""
    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Walk failed for {path}: {cause}")


class CommandError(Exception):
    """Raised when an OS command exits with a non-zero code or cannot be spawned."""
    def __init__(self, command: Sequence[str], returncode: Optional[int], stderr: str = ""):
        self.command = mask_command(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"Command '{' '.join(self.command)}' failed "
            f"(exit code {returncode}): {stderr.strip() or 'no error output'}"
        )


class CommandOutputError(Exception):
    """Raised when a command succeeded but its output could not be understood."""
    def __init__(self, command: Sequence[str], output: str, reason: str):
        self.command = mask_command(command)
        self.output = output
        self.reason = reason
        super().__init__(f"Unexpected output from '{' '.join(self.command)}': {reason}")
