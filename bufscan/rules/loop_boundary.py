"""Whole-file scan for ``for`` loops that index arrays without a clear bound."""

from __future__ import annotations

from bufscan.patterns import (
    BOUND_CHECK_PATTERN,
    LOOP_BODY_ARRAY_PATTERN,
    LOOP_BOUNDARY_DESCRIPTION,
    LOOP_BOUNDARY_SUBJECT,
    LOOP_PATTERN,
    line_number_at,
)
from bufscan.result import Finding, ScanResult
from bufscan.severity import Severity
from bufscan.utils import SourceOpenError, get_logger, read_source_text

from . import ScanContext

logger = get_logger(__name__.rsplit(".", 1)[-1])


class LoopBoundaryRule:
    """Flag loops whose condition lacks a ``i < n.size()``-style bound.

    Only ``<`` comparisons against a ``.size()``, ``.length`` or ``- 1``
    operand count as bounded; ``<=`` and plain ``i < n`` do not. The loop
    body ends at the first ``}`` after the header, nested blocks included.
    """

    name = "loop_boundary"

    def scan(self, context: ScanContext, result: ScanResult) -> None:
        try:
            content = read_source_text(context.source_path)
        except SourceOpenError as exc:
            logger.warning("%s skipped: %s", self.name, exc)
            return

        count = 0
        for match in LOOP_PATTERN.finditer(content):
            condition = match.group(2)
            body = match.group(4)
            if not LOOP_BODY_ARRAY_PATTERN.search(body):
                continue
            if BOUND_CHECK_PATTERN.search(condition):
                continue
            result.add_finding(
                Finding(
                    subject=LOOP_BOUNDARY_SUBJECT,
                    line_number=line_number_at(content, match.start()),
                    description=LOOP_BOUNDARY_DESCRIPTION,
                    severity=Severity.MEDIUM,
                    rule=self.name,
                )
            )
            count += 1
        logger.debug("%s: %d finding(s)", self.name, count)
