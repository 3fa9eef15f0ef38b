"""Ordered description of the files and directories making up a scaffold."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Iterator

__all__ = ["FileManifest", "ManifestBuilder", "ManifestEntry"]


def _normalize(path: str) -> str:
    pure = PurePosixPath(path)
    if pure.is_absolute() or ".." in pure.parts or str(pure) in {"", "."}:
        raise ValueError(f"manifest paths must be relative to the addon root: {path!r}")
    return str(pure)


@dataclass(frozen=True, slots=True)
class ManifestEntry:
    """A file to write, relative to the addon root."""

    path: str
    content: str


@dataclass(frozen=True, slots=True)
class FileManifest:
    """Directories to create and files to write for one addon.

    The addon root itself is implicit. Every file outside the root has its
    parent listed in :attr:`directories`, parents precede their children and
    no two files share a path.
    """

    directories: tuple[str, ...] = ()
    files: tuple[ManifestEntry, ...] = ()

    def __post_init__(self) -> None:
        known = set(self.directories)
        seen: set[str] = set()
        for entry in self.files:
            if entry.path in seen:
                raise ValueError(f"duplicate manifest path: {entry.path}")
            seen.add(entry.path)
            parent = str(PurePosixPath(entry.path).parent)
            if parent != "." and parent not in known:
                raise ValueError(f"directory for {entry.path} is not part of the manifest")

    def __iter__(self) -> Iterator[ManifestEntry]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(entry.path for entry in self.files)

    def get(self, path: str) -> str:
        """Return the content stored for ``path``."""

        for entry in self.files:
            if entry.path == path:
                return entry.content
        raise KeyError(path)


@dataclass(slots=True)
class ManifestBuilder:
    """Accumulate directories and files while keeping manifest invariants."""

    _directories: list[str] = field(default_factory=list)
    _files: dict[str, str] = field(default_factory=dict)

    def add_directory(self, path: str) -> None:
        """Register ``path`` and all of its parents, parents first."""

        pure = PurePosixPath(_normalize(path))
        for candidate in reversed(pure.parents[:-1]):
            self._register(str(candidate))
        self._register(str(pure))

    def add_file(self, path: str, content: str) -> None:
        path = _normalize(path)
        if path in self._files:
            raise ValueError(f"duplicate manifest path: {path}")
        parent = str(PurePosixPath(path).parent)
        if parent != ".":
            self.add_directory(parent)
        self._files[path] = content

    def build(self) -> FileManifest:
        return FileManifest(
            directories=tuple(self._directories),
            files=tuple(ManifestEntry(path, content) for path, content in self._files.items()),
        )

    def _register(self, directory: str) -> None:
        if directory not in self._directories:
            self._directories.append(directory)
