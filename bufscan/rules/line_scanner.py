"""Line-oriented scan for unsafe calls, fixed buffers and variable indexing."""

from __future__ import annotations

import re

from bufscan.patterns import (
    ARRAY_ACCESS_DESCRIPTION,
    ARRAY_ACCESS_PATTERN,
    ARRAY_ACCESS_SUBJECT,
    BARE_IDENTIFIER,
    CONTEXT_AFTER,
    CONTEXT_BEFORE,
    HIGH_SEVERITY_SUBJECTS,
    VULNERABLE_PATTERNS,
)
from bufscan.result import Finding, ScanResult
from bufscan.severity import Severity
from bufscan.utils import get_logger, iter_source_lines

from . import ScanContext

logger = get_logger(__name__.rsplit(".", 1)[-1])


class LineScannerRule:
    """Apply the per-line pattern catalog to every physical line.

    An unopenable source raises :class:`~bufscan.utils.SourceOpenError`;
    this is the pass that decides whether the scan goes ahead at all.
    """

    name = "line_scanner"

    def scan(self, context: ScanContext, result: ScanResult) -> None:
        before = len(result.findings)
        for line_number, line in enumerate(iter_source_lines(context.source_path), start=1):
            self.scan_line(line, line_number, result)
        logger.debug("%s: %d finding(s)", self.name, len(result.findings) - before)

    def scan_line(self, line: str, line_number: int, result: ScanResult) -> None:
        for entry in VULNERABLE_PATTERNS:
            for match in entry.pattern.finditer(line):
                subject = self._subject(match)
                result.add_finding(
                    Finding(
                        subject=subject,
                        line_number=line_number,
                        description=f"{entry.description} in context: {self._context(line, match)}",
                        severity=self._classify(subject),
                        rule=self.name,
                    )
                )

        for match in ARRAY_ACCESS_PATTERN.finditer(line):
            index = match.group(1)
            if not BARE_IDENTIFIER.fullmatch(index):
                continue
            result.add_finding(
                Finding(
                    subject=ARRAY_ACCESS_SUBJECT,
                    line_number=line_number,
                    description=ARRAY_ACCESS_DESCRIPTION.format(index=index),
                    severity=Severity.MEDIUM,
                    rule=self.name,
                )
            )

    @staticmethod
    def _subject(match: re.Match[str]) -> str:
        if match.re.groups and match.group(1) is not None:
            return match.group(1)
        return match.group(0)

    @staticmethod
    def _context(line: str, match: re.Match[str]) -> str:
        start = max(0, match.start() - CONTEXT_BEFORE)
        return line[start:start + len(match.group(0)) + CONTEXT_AFTER]

    @staticmethod
    def _classify(subject: str) -> Severity:
        if subject in HIGH_SEVERITY_SUBJECTS:
            return Severity.HIGH
        return Severity.MEDIUM
