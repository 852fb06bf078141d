from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence

from .config import DEFAULT_CONFIG


ARGUMENT_RESULT_NAME = "--resultname="
ARGUMENT_SOURCE_ROOT = "--sourceroot="


@dataclass(frozen=True)
class MergeArguments:
    source_root: Path
    result_file_name: str

    @property
    def destination(self) -> Path:
        return self.source_root / self.result_file_name


def resolve_argument_value(args: Sequence[str], key: str, default_value: str) -> str:
    prefix = key.lower()
    for value in args:
        if value.lower().startswith(prefix):
            return value[len(prefix):]
    return default_value


def format_timestamp(now: datetime | None = None, timestamp_format: str | None = None) -> str:
    moment = now or datetime.now()
    return moment.strftime(timestamp_format or DEFAULT_CONFIG["timestamp_format"])


def determine_result_file_name(
    args: Sequence[str],
    now: datetime | None = None,
    timestamp_format: str | None = None,
    result_name_format: str | None = None,
) -> str:
    name = resolve_argument_value(args, ARGUMENT_RESULT_NAME, format_timestamp(now, timestamp_format))
    return (result_name_format or DEFAULT_CONFIG["result_name_format"]).format(name=name)


def determine_source_root(args: Sequence[str]) -> str:
    return resolve_argument_value(args, ARGUMENT_SOURCE_ROOT, os.getcwd())


def parse_arguments(
    args: Sequence[str],
    config: dict[str, Any] | None = None,
    now: datetime | None = None,
) -> MergeArguments:
    config = config or DEFAULT_CONFIG
    result_file_name = determine_result_file_name(
        args,
        now=now,
        timestamp_format=config.get("timestamp_format"),
        result_name_format=config.get("result_name_format"),
    )
    return MergeArguments(
        source_root=Path(determine_source_root(args)),
        result_file_name=result_file_name,
    )
