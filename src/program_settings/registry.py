"""In-memory record of settings files touched by a store."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List


class ReadWriteLock:
    """Lock allowing many concurrent readers or one exclusive writer.

    Waiting writers block new readers so a steady stream of readers
    cannot starve a writer.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class PathRegistry:
    """Ordered list of settings file paths, safe for use across threads.

    Saves append unconditionally, loads append only new paths, and
    deletes remove every matching entry. Readers see consistent
    snapshots; the lock is never held across filesystem I/O.
    """

    def __init__(self) -> None:
        self._paths: List[Path] = []
        self._lock = ReadWriteLock()

    def append(self, path: Path) -> None:
        with self._lock.write():
            self._paths.append(path)

    def append_unique(self, path: Path) -> bool:
        """Append ``path`` unless already present.

        Returns:
            True if the path was added
        """
        with self._lock.write():
            if path in self._paths:
                return False
            self._paths.append(path)
            return True

    def remove(self, path: Path) -> int:
        """Remove every entry equal to ``path``.

        Returns:
            Number of entries removed
        """
        with self._lock.write():
            before = len(self._paths)
            self._paths = [p for p in self._paths if p != path]
            return before - len(self._paths)

    def remove_children_of(self, directory: Path) -> int:
        """Remove every entry whose parent directory is ``directory``.

        Returns:
            Number of entries removed
        """
        with self._lock.write():
            before = len(self._paths)
            self._paths = [p for p in self._paths if p.parent != directory]
            return before - len(self._paths)

    def snapshot(self) -> List[Path]:
        with self._lock.read():
            return list(self._paths)

    def count(self, path: Path) -> int:
        with self._lock.read():
            return self._paths.count(path)

    def __contains__(self, path: object) -> bool:
        with self._lock.read():
            return path in self._paths

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.snapshot())
