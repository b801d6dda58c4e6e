"""Filesystem walker backed by aiofiles.os."""

import os
import stat
from datetime import datetime
from typing import AsyncIterator, List

import aiofiles.os

from .base_walker import BaseWalker
from ...core.exceptions import WalkError
from ...logging_config import get_app_logger
from ...models import FileRecord


class AiofilesWalker(BaseWalker):
    """
    Walks a real directory tree.

    Listing and stat calls all run in the executor through aiofiles.os.
    Symlinks and directory reparse points (junctions, mount points) are
    neither followed nor reported.
    """

    def __init__(self):
        self._logger = get_app_logger()

    async def walk(self, path: str) -> AsyncIterator[FileRecord]:
        pending: List[str] = [path]

        while pending:
            directory = pending.pop()
            names = await self._list_directory(directory)

            for name in names:
                entry_path = os.path.join(directory, name)
                try:
                    stat_result = await aiofiles.os.stat(entry_path, follow_symlinks=False)
                    if stat.S_ISDIR(stat_result.st_mode):
                        if self._is_reparse_point(stat_result):
                            self._logger.debug(f"Skipping directory reparse point: {entry_path}")
                        else:
                            pending.append(entry_path)
                        continue
                    if not stat.S_ISREG(stat_result.st_mode):
                        continue
                    record = self._to_record(entry_path, stat_result)
                except (OSError, ValueError, OverflowError) as e:
                    raise WalkError(entry_path, e) from e

                yield record

    async def _list_directory(self, directory: str) -> List[str]:
        try:
            names = await aiofiles.os.listdir(directory)
        except OSError as e:
            raise WalkError(directory, e) from e

        self._logger.debug(f"Walking {directory}: {len(names)} entries")
        return names

    @staticmethod
    def _is_reparse_point(stat_result: os.stat_result) -> bool:
        # st_file_attributes only exists on Windows
        attributes = getattr(stat_result, "st_file_attributes", 0)
        return bool(attributes & stat.FILE_ATTRIBUTE_REPARSE_POINT)

    @staticmethod
    def _to_record(path: str, stat_result: os.stat_result) -> FileRecord:
        birth_time = getattr(stat_result, "st_birthtime", stat_result.st_ctime)
        return FileRecord(
            name=path,
            path=path,
            size=stat_result.st_size,
            created_time=datetime.fromtimestamp(birth_time),
            modified_time=datetime.fromtimestamp(stat_result.st_mtime),
            accessed_time=datetime.fromtimestamp(stat_result.st_atime),
            mode=stat_result.st_mode,
            inode=stat_result.st_ino,
            device=stat_result.st_dev,
            nlink=stat_result.st_nlink,
            uid=stat_result.st_uid,
            gid=stat_result.st_gid,
            blocks=getattr(stat_result, "st_blocks", None),
            block_size=getattr(stat_result, "st_blksize", None),
            file_attributes=getattr(stat_result, "st_file_attributes", None),
        )
