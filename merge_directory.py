from __future__ import annotations

import sys
from typing import Sequence

from pdf_directory_merger import run_merge
from pdf_directory_merger.config import default_config_path
from pdf_directory_merger.pipeline import (
    STATUS_NO_MERGEABLE_FILES,
    STATUS_SOURCE_ROOT_NOT_FOUND,
)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        exit_code, payload = run_merge(args, config_path=default_config_path())
    except PermissionError as exc:
        print(
            f"Failed: {exc}. If the result file is open in another program, close it and run again.",
            file=sys.stderr,
        )
        return 1
    except Exception as exc:
        print(f"Failed: {exc}", file=sys.stderr)
        return 1

    status = payload["status"]
    if status == STATUS_SOURCE_ROOT_NOT_FOUND:
        print(f"The given path does not exist: {payload['source_root']}", file=sys.stderr)
        return exit_code
    if status == STATUS_NO_MERGEABLE_FILES:
        print(f"There is no mergeable file in: {payload['source_root']}", file=sys.stderr)
        return exit_code

    print(f"Wrote PDF: {payload['destination']}")
    print(f"Merged files: {payload['file_count']}")
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
