"""Severity definitions for scanner findings."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the supported severity levels, highest first."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
