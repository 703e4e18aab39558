"""Dependency records read from the include trace printed by ``gcc -H``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

MAX_LINE_LEN = 512
MAX_DIRS = 64
MAX_FILES = 256


class DependencyError(Exception):
    """The dependency data exceed one of the supported limits."""


@dataclass(frozen=True)
class FileEntry:
    """One file of the trace: its base name, directory index and include level."""

    name: str
    dir: int
    level: int


def _dirname(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    head, sep, _ = stripped.rpartition("/")
    if not sep:
        return "."
    return head.rstrip("/") or "/"


def _basename(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rpartition("/")[2]


@dataclass
class DependencyData:
    """All directories and files of a trace; the order of ``files`` encodes the includes."""

    dirs: list[str] = field(default_factory=list)
    files: list[FileEntry] = field(default_factory=list)

    def _dir_index(self, path: str) -> int:
        name = _dirname(path)
        try:
            return self.dirs.index(name)
        except ValueError:
            pass
        if len(self.dirs) >= MAX_DIRS:
            raise DependencyError("too many directories")
        self.dirs.append(name)
        return len(self.dirs) - 1

    def add_file(self, path: str, level: int) -> FileEntry:
        """Record the file at ``path`` with the given include level."""
        name = _basename(path)
        if len(self.files) >= MAX_FILES:
            raise DependencyError("too many files")
        entry = FileEntry(name=name, dir=self._dir_index(path), level=level)
        self.files.append(entry)
        return entry


def _chunks(line: str) -> Iterator[str]:
    size = MAX_LINE_LEN - 1
    for start in range(0, len(line), size):
        yield line[start : start + size]


def _process_line(data: DependencyData, line: str) -> None:
    rest = line.lstrip(".")
    level = len(line) - len(rest)
    data.add_file(rest.lstrip(" \t"), level)


def read_all(root: str, lines: Iterable[str]) -> DependencyData:
    """Collect the dependencies of ``root`` from trace lines (with their line endings)."""
    data = DependencyData()
    data.add_file(root, 0)
    for line in lines:
        for chunk in _chunks(line):
            if chunk.endswith("\n") and chunk.startswith("."):
                _process_line(data, chunk[:-1])
    return data