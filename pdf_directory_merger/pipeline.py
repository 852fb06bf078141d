from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Sequence

from .arguments import parse_arguments
from .config import file_extensions, load_config
from .io_utils import gather_pdfs
from .merger import BUFFER_TEMPFILE, merge_pdfs


STATUS_MERGED = "merged"
STATUS_SOURCE_ROOT_NOT_FOUND = "source_root_not_found"
STATUS_NO_MERGEABLE_FILES = "no_mergeable_files"


def _summary(status: str, source_root: Path, destination: Path, files: list[Path]) -> dict[str, Any]:
    return {
        "generated_at": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "status": status,
        "source_root": str(source_root),
        "destination": str(destination),
        "file_count": len(files),
        "files": [path.name for path in files],
    }


def run_merge(
    args: Sequence[str],
    config_path: Path | None = None,
    config: dict[str, Any] | None = None,
    now: datetime | None = None,
    progress: Callable[[str], None] = print,
) -> tuple[int, dict[str, Any]]:
    if config is None:
        config = load_config(config_path)
    arguments = parse_arguments(args, config=config, now=now)
    source_root = arguments.source_root
    destination = arguments.destination

    if not source_root.exists():
        return 0, _summary(STATUS_SOURCE_ROOT_NOT_FOUND, source_root, destination, [])

    paths = gather_pdfs(source_root, file_extensions(config))
    if not paths:
        return 0, _summary(STATUS_NO_MERGEABLE_FILES, source_root, destination, [])

    merge_settings = config.get("merge") or {}
    merged = merge_pdfs(
        paths,
        destination,
        buffer=str(merge_settings.get("buffer") or BUFFER_TEMPFILE),
        progress=progress,
    )
    return 0, _summary(STATUS_MERGED, source_root, destination, merged)
