"""Pattern catalog shared by the scanning passes.

Every pattern is a plain text match over raw source: comments and string
literals are not recognized, so a pattern inside either is still reported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class PatternEntry:
    """Associate a compiled matcher with the description it reports."""

    pattern: re.Pattern[str]
    description: str


# Checked per line, in this order.
VULNERABLE_PATTERNS: Tuple[PatternEntry, ...] = (
    PatternEntry(re.compile(r"\b(strcpy|strcat|sprintf|gets|scanf)\s*\("), "Unsafe C string function"),
    PatternEntry(re.compile(r"\bchar\s+[a-zA-Z0-9_]+\s*\[[0-9]+\]"), "Fixed-size buffer declaration"),
    PatternEntry(re.compile(r"\bmemcpy\s*\([^,]+,[^,]+,[^)]+\)"), "Potential unsafe memcpy"),
    PatternEntry(re.compile(r"\bnew\s+char\s*\[[^\]]+\]"), "Dynamic array allocation"),
    PatternEntry(re.compile(r"\bstd::copy\s*\("), "std::copy without bounds checking"),
    PatternEntry(
        re.compile(r"for\s*\([^;]*;[^;]*;[^\)]*\)\s*\{[^\}]*\[[^\]]*\]"),
        "Loop with array access",
    ),
)

ARRAY_ACCESS_PATTERN = re.compile(r"\[([^\]]+)\]")
BARE_IDENTIFIER = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")

HIGH_SEVERITY_SUBJECTS: FrozenSet[str] = frozenset({"strcpy", "gets"})

CONTEXT_BEFORE = 20
CONTEXT_AFTER = 40

# Whole-file loop analysis. The body stops at the first closing brace.
LOOP_PATTERN = re.compile(r"for\s*\(([^;]*);([^;]*);([^\)]*)\)\s*\{([^\}]*)\}")
LOOP_BODY_ARRAY_PATTERN = re.compile(r"\[[^\]]+\]")
BOUND_CHECK_PATTERN = re.compile(
    r"\s*[a-zA-Z0-9_]+\s*<\s*[a-zA-Z0-9_]+(\.[a-zA-Z0-9_]+)?(\.size\(\)|\.length|\s*-\s*1)"
)

# Whole-file function analysis.
FUNCTION_PATTERN = re.compile(
    r"\b(void|int|char|bool|std::string|auto)\s+([a-zA-Z0-9_]+)\s*\(([^\)]*)\)\s*\{"
)
POINTER_PARAMETER_PATTERN = re.compile(r"(char|int|float|double)\s*\*\s*[a-zA-Z0-9_]+")
ASSIGNMENT_PATTERN = re.compile(r"=\s*[^;]*;")

LOOP_BOUNDARY_SUBJECT = "Loop boundary"
LOOP_BOUNDARY_DESCRIPTION = "Loop may have improper boundary checking for array access"
ARRAY_ACCESS_SUBJECT = "Array access"
ARRAY_ACCESS_DESCRIPTION = "Unchecked array access with variable: {index}"
UNCHECKED_WRITE_DESCRIPTION = "Function with pointer/array parameters may have unchecked writes"


def line_number_at(content: str, offset: int) -> int:
    """Return the 1-based line holding ``offset`` in ``content``."""

    return content.count("\n", 0, offset) + 1
