"""
Directory Stat Accumulator - sums up size, file count and per-file metadata
of a directory tree.

The accumulator folds over the FileRecords produced by a BaseWalker. Each
call builds its own totals, so concurrent calls never share state.
"""

from typing import Awaitable, Dict

from .base_walker import BaseWalker
from ...core.exceptions import WalkError
from ...logging_config import get_app_logger
from ...models import DirectoryStatResult, FileRecord
from ...utils.paths import to_native_path


class DirectoryStatAccumulator:
    """Aggregates a directory walk into a DirectoryStatResult. SRP: aggregation ONLY."""

    def __init__(self, walker: BaseWalker):
        self._logger = get_app_logger()
        self._walker = walker

    def stat_directory(self, path: str) -> Awaitable[DirectoryStatResult]:
        """
        Get size, file count and file metadata for everything below `path`.

        Args:
            path: Absolute path, forward slashes allowed (e.g. `c:/temp/log`)

        Returns:
            Awaitable resolving to a DirectoryStatResult

        Raises:
            ValueError: immediately, if `path` is empty
            WalkError: when awaited, if the walk fails. No partial result is returned.
        """
        if not isinstance(path, str) or not path:
            raise ValueError("No `path` specified")

        return self._accumulate(to_native_path(path))

    async def _accumulate(self, path: str) -> DirectoryStatResult:
        total_size = 0
        file_count = 0
        files: Dict[str, FileRecord] = {}

        try:
            async for record in self._walker.walk(path):
                previous = files.get(record.path)
                if previous is not None:
                    # Same path reported twice: keep the latest snapshot only
                    total_size -= previous.size
                    file_count -= 1

                files[record.path] = record
                file_count += 1
                total_size += record.size

        except WalkError as e:
            self._logger.error(f"Directory stat failed for {path}: {e.cause}")
            raise

        self._logger.debug(f"Directory stat for {path}: {file_count} files, {total_size} bytes")
        return DirectoryStatResult(
            total_size=total_size, file_count=file_count, files=files
        )
