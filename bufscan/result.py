"""Core result data structures and console report for the scanner."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Sequence, Tuple

from .severity import Severity

SEVERITY_ORDER: Sequence[Severity] = tuple(Severity)

NO_FINDINGS_MESSAGE = "No potential buffer overflow vulnerabilities detected."
SEPARATOR = "-" * 69
DISCLAIMER = (
    "Note: This is a static analysis and may produce false positives.",
    "Each finding should be manually verified.",
)


@dataclass(frozen=True)
class Finding:
    """A single potential vulnerability reported by one pass."""

    subject: str
    line_number: int
    description: str
    severity: Severity
    rule: str

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["severity"] = self.severity.value
        return data

    def format_line(self) -> str:
        return f"Line {self.line_number}: [{self.severity.value}] {self.subject} - {self.description}"


@dataclass
class Summary:
    """Aggregate finding counts by severity."""

    high: int = 0
    medium: int = 0
    low: int = 0

    def increment(self, severity: Severity) -> None:
        attr = severity.name.lower()
        setattr(self, attr, getattr(self, attr) + 1)

    def to_dict(self) -> Dict[str, int]:
        data = asdict(self)
        data["total"] = self.total
        return data

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.value, getattr(self, severity.name.lower())) for severity in SEVERITY_ORDER]

    @property
    def total(self) -> int:
        return sum(getattr(self, severity.name.lower()) for severity in SEVERITY_ORDER)


@dataclass
class ScanResult:
    """Ordered, append-only collection of findings from every pass."""

    source: str = ""
    summary: Summary = field(default_factory=Summary)
    findings: List[Finding] = field(default_factory=list)

    def add_finding(self, finding: Finding) -> None:
        self.summary.increment(finding.severity)
        self.findings.append(finding)

    def to_dict(self) -> Dict[str, object]:
        return {
            "source": self.source,
            "summary": self.summary.to_dict(),
            "findings": [finding.to_dict() for finding in self.findings],
        }


def format_report(result: ScanResult, source_name: str | None = None) -> str:
    """Render the human-readable report printed on stdout.

    Rendering never touches ``result``; calling it twice yields the same text.
    """

    if not result.findings:
        return NO_FINDINGS_MESSAGE

    name = source_name if source_name is not None else result.source
    lines: List[str] = []
    lines.append(f"Detected {len(result.findings)} potential buffer overflow vulnerabilities in {name}:")
    lines.append(SEPARATOR)
    for finding in result.findings:
        lines.append(finding.format_line())
    lines.append(SEPARATOR)
    lines.extend(DISCLAIMER)
    return "\n".join(lines)
