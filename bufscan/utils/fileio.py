"""Basic file IO helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator

import yaml

SOURCE_ENCODING = "utf-8"


class SourceOpenError(OSError):
    """Raised when the file under scan cannot be opened."""

    def __init__(self, path: Path, reason: str = "") -> None:
        super().__init__(f"Could not open file {path}")
        self.path = path
        self.reason = reason


def _open_source(path: Path):
    # Split on "\n" only and leave CR characters in place.
    try:
        return path.open("r", encoding=SOURCE_ENCODING, errors="replace", newline="\n")
    except OSError as exc:
        raise SourceOpenError(path, exc.strerror or str(exc)) from exc


def iter_source_lines(path: Path) -> Iterator[str]:
    """Yield each physical line of ``path`` without its trailing newline.

    The file is opened before the first line is produced, so an unopenable
    path raises :class:`SourceOpenError` on the first ``next()``.
    """

    with _open_source(path) as handle:
        for line in handle:
            yield line[:-1] if line.endswith("\n") else line


def read_source_text(path: Path) -> str:
    """Return the whole file as a single string."""

    with _open_source(path) as handle:
        return handle.read()


def write_report_file(path: Path, payload: Any, report_format: str) -> None:
    """Serialize ``payload`` as JSON or YAML into ``path``."""

    if report_format == "yaml":
        text = yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
    else:
        text = json.dumps(payload, indent=2)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
