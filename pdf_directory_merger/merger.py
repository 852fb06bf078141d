from __future__ import annotations

import io
import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Sequence

from pypdf import PdfWriter

from .io_utils import NoMergeableFilesError


BUFFER_TEMPFILE = "tempfile"
BUFFER_MEMORY = "memory"
BUFFER_POLICIES = (BUFFER_TEMPFILE, BUFFER_MEMORY)


def _validate_buffer(buffer: str) -> str:
    normalized = (buffer or BUFFER_TEMPFILE).strip().lower()
    if normalized not in BUFFER_POLICIES:
        raise ValueError(f"Unknown merge buffer policy: {buffer!r} (expected one of {', '.join(BUFFER_POLICIES)})")
    return normalized


def _write_via_tempfile(writer: PdfWriter, destination: Path) -> None:
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{destination.stem}.",
        suffix=".part",
        dir=str(destination.parent),
    )
    try:
        with os.fdopen(fd, "wb") as handle:
            writer.write(handle)
        os.replace(tmp_name, destination)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def _write_via_memory(writer: PdfWriter, destination: Path) -> None:
    buffer = io.BytesIO()
    writer.write(buffer)
    destination.write_bytes(buffer.getvalue())


def merge_step(source: Path, destination: Path, *, include_destination: bool, buffer: str = BUFFER_TEMPFILE) -> None:
    policy = _validate_buffer(buffer)
    writer = PdfWriter()
    try:
        if include_destination:
            writer.append(str(destination))
        writer.append(str(source))
        if policy == BUFFER_MEMORY:
            _write_via_memory(writer, destination)
        else:
            _write_via_tempfile(writer, destination)
    finally:
        writer.close()


def _snapshot_destination(paths: Sequence[Path], destination: Path, scratch_dir: str) -> list[Path]:
    # An input sharing the destination's path is read from a copy, the original is overwritten by step 1.
    target = destination.resolve()
    sources: list[Path] = []
    for path in paths:
        if path.resolve() == target:
            snapshot = Path(scratch_dir) / path.name
            shutil.copyfile(path, snapshot)
            sources.append(snapshot)
        else:
            sources.append(path)
    return sources


def merge_pdfs(
    paths: Sequence[Path],
    destination: Path,
    buffer: str = BUFFER_TEMPFILE,
    progress: Callable[[str], None] = print,
) -> list[Path]:
    if not paths:
        raise NoMergeableFilesError()
    policy = _validate_buffer(buffer)

    merged: list[Path] = []
    with tempfile.TemporaryDirectory(prefix="pdf-merger-") as scratch_dir:
        sources = _snapshot_destination(paths, destination, scratch_dir)
        for path, source in zip(paths, sources):
            progress(f"[PROCESSING] merged file {path.name}")
            merge_step(source, destination, include_destination=bool(merged), buffer=policy)
            merged.append(path)
    return merged
