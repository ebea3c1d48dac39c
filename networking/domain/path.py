"""Endpoint paths split into directory and file kinds.

A FilePath has no append operations, so nothing can be appended after a file.
Only relative paths may be appended onto another path.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


def _render(components: tuple[str, ...], is_absolute: bool) -> str:
    joined = "/".join(components)
    return f"/{joined}" if is_absolute else joined


def _require_relative(path: "DirectoryPath | FilePath") -> None:
    if path.is_absolute:
        raise ValueError(f"cannot append absolute path {path.rendered!r}")


@dataclass(frozen=True)
class FilePath:
    components: tuple[str, ...]
    is_absolute: bool = False

    @classmethod
    def of(cls, *components: str, is_absolute: bool = False) -> "FilePath":
        return cls(tuple(components), is_absolute)

    @property
    def rendered(self) -> str:
        return _render(self.components, self.is_absolute)

    def __str__(self) -> str:
        return self.rendered


@dataclass(frozen=True)
class DirectoryPath:
    components: tuple[str, ...] = ()
    is_absolute: bool = False

    @classmethod
    def of(cls, *components: str, is_absolute: bool = False) -> "DirectoryPath":
        return cls(tuple(components), is_absolute)

    @classmethod
    def from_components(cls, components: Iterable[str], is_absolute: bool = False) -> "DirectoryPath":
        return cls(tuple(components), is_absolute)

    @property
    def rendered(self) -> str:
        return _render(self.components, self.is_absolute)

    def __str__(self) -> str:
        return self.rendered

    def appending(self, directory: str) -> "DirectoryPath":
        return DirectoryPath(self.components + (directory,), self.is_absolute)

    def appending_file(self, file: str) -> FilePath:
        return FilePath(self.components + (file,), self.is_absolute)

    def appending_path(self, directory: "DirectoryPath") -> "DirectoryPath":
        _require_relative(directory)
        return DirectoryPath(self.components + directory.components, self.is_absolute)

    def appending_file_path(self, path: FilePath) -> FilePath:
        _require_relative(path)
        return FilePath(self.components + path.components, self.is_absolute)


Endpoint = str | DirectoryPath | FilePath
