"""Whole-file scan for pointer-parameter functions that assign inside their body."""

from __future__ import annotations

from typing import Optional

from bufscan.patterns import (
    ASSIGNMENT_PATTERN,
    FUNCTION_PATTERN,
    POINTER_PARAMETER_PATTERN,
    UNCHECKED_WRITE_DESCRIPTION,
    line_number_at,
)
from bufscan.result import Finding, ScanResult
from bufscan.severity import Severity
from bufscan.utils import SourceOpenError, get_logger, read_source_text

from . import ScanContext

logger = get_logger(__name__.rsplit(".", 1)[-1])


class FunctionSignatureRule:
    """Flag functions taking ``char*``/``int*``/``float*``/``double*`` that write."""

    name = "function_signature"

    def scan(self, context: ScanContext, result: ScanResult) -> None:
        try:
            content = read_source_text(context.source_path)
        except SourceOpenError as exc:
            logger.warning("%s skipped: %s", self.name, exc)
            return

        count = 0
        for match in FUNCTION_PATTERN.finditer(content):
            function_name = match.group(2)
            parameters = match.group(3)
            if not POINTER_PARAMETER_PATTERN.search(parameters):
                continue
            body = self._body(content, match.end() - 1)
            if body is None or not ASSIGNMENT_PATTERN.search(body):
                continue
            result.add_finding(
                Finding(
                    subject=function_name,
                    line_number=line_number_at(content, match.start()),
                    description=UNCHECKED_WRITE_DESCRIPTION,
                    severity=Severity.MEDIUM,
                    rule=self.name,
                )
            )
            count += 1
        logger.debug("%s: %d finding(s)", self.name, count)

    @staticmethod
    def _body(content: str, brace: int) -> Optional[str]:
        # First closing brace wins; nesting is not tracked.
        end = content.find("}", brace)
        if end < 0:
            return None
        return content[brace:end]
