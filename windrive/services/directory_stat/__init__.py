"""
Directory Stat Module

Components:
- BaseWalker: Abstract traversal capability (walk a tree, yield FileRecords)
- AiofilesWalker: Real filesystem walker using aiofiles.os
- DirectoryStatAccumulator: Folds a walk into size/count/file totals

The accumulator only depends on BaseWalker, so it can be tested against a
fake walker without touching the filesystem.
"""

from .base_walker import BaseWalker
from .aiofiles_walker import AiofilesWalker
from .accumulator import DirectoryStatAccumulator

__all__ = [
    "BaseWalker",
    "AiofilesWalker",
    "DirectoryStatAccumulator",
]
