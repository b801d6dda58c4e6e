"""Abstract Base Walker - traversal capability used by DirectoryStatAccumulator."""

from abc import ABC, abstractmethod
from typing import AsyncIterator

from ...models import FileRecord


class BaseWalker(ABC):
    """Abstract base class for recursive directory traversal."""

    @abstractmethod
    def walk(self, path: str) -> AsyncIterator[FileRecord]:
        """
        Yield a FileRecord for every regular file below `path`.

        The sequence is finite and can only be consumed once. Traversal
        failures are raised as WalkError and end the sequence.
        """
        pass
