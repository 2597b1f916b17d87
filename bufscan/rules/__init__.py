"""Rule protocol and the context shared by every scanning pass."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from bufscan.result import ScanResult


class Rule(Protocol):
    """Protocol implemented by all scanning passes."""

    name: str

    def scan(self, context: "ScanContext", result: ScanResult) -> None:
        """Analyze the source named by ``context`` and append findings to ``result``."""


@dataclass(frozen=True)
class ScanContext:
    """Bundle inputs shared across rules."""

    source_path: Path
