from __future__ import annotations

from pathlib import Path
from typing import Iterable


class SourceRootNotFoundError(FileNotFoundError):
    def __init__(self, source_root: Path) -> None:
        super().__init__(f"The given path does not exist: {source_root}")
        self.source_root = source_root


class NoMergeableFilesError(ValueError):
    def __init__(self, source_root: Path | None = None) -> None:
        if source_root is None:
            message = "There is no mergeable file"
        else:
            message = f"There is no mergeable file in: {source_root}"
        super().__init__(message)
        self.source_root = source_root


def ensure_source_root(source_root: Path) -> Path:
    if not source_root.exists():
        raise SourceRootNotFoundError(source_root)
    return source_root


def has_mergeable_extension(path: Path, extensions: Iterable[str]) -> bool:
    name = path.name.lower()
    return any(name.endswith(ext) for ext in extensions)


def gather_pdfs(source_root: Path, extensions: Iterable[str] = (".pdf",)) -> list[Path]:
    ensure_source_root(source_root)
    allowed = tuple(ext.lower() for ext in extensions)
    candidates = [
        child
        for child in source_root.iterdir()
        if child.is_file() and has_mergeable_extension(child, allowed)
    ]
    return sorted(candidates, key=str)
