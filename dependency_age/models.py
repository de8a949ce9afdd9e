"""
Core data models for dependency release dates.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DependencyDeclaration:
    """Dependency as declared in the project manifest."""

    name: str
    declared_range: str


@dataclass(frozen=True)
class InstalledPackage:
    """A package and the exact version materialized in node_modules."""

    name: str
    version: str


@dataclass(frozen=True)
class ReleaseRecord:
    """Installed package version with its publish date."""

    name: str
    version: str
    released_at: datetime
    days_ago: int
