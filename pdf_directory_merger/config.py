from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml


CONFIG_ENV_VAR = "PDF_MERGER_CONFIG"
DEFAULT_CONFIG_PATH = Path("config.yaml")

DEFAULT_CONFIG: dict[str, Any] = {
    "file_extensions": [".pdf"],
    "result_name_format": "{name}.pdf",
    "timestamp_format": "%Y-%m-%d_%H.%M.%S",
    "merge": {
        # "tempfile" spools every merge step to disk, "memory" keeps it in RAM.
        "buffer": "tempfile",
    },
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def default_config_path() -> Path:
    configured = os.getenv(CONFIG_ENV_VAR)
    if configured:
        return Path(configured)
    return DEFAULT_CONFIG_PATH


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    if config_path is None:
        config_path = default_config_path()
    data: dict[str, Any] = {}
    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as handle:
            parsed = yaml.safe_load(handle) or {}
            if isinstance(parsed, dict):
                data = parsed
    return _deep_merge(DEFAULT_CONFIG, data)


def file_extensions(config: dict[str, Any]) -> tuple[str, ...]:
    raw = config.get("file_extensions") or DEFAULT_CONFIG["file_extensions"]
    if isinstance(raw, str):
        raw = [raw]
    return tuple(str(ext).lower() for ext in raw)
