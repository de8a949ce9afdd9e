"""
Exceptions raised while checking dependency release dates.
"""

from __future__ import annotations

from typing import Optional


class DependencyAgeError(Exception):
    """Base class for all dependency-age errors."""


class ManifestReadError(DependencyAgeError):
    """The project manifest is missing or malformed."""

    def __init__(self, path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read manifest {path}: {reason}")


class VersionResolutionError(DependencyAgeError):
    """The installed version of a dependency could not be determined."""

    def __init__(self, package: str, reason: str) -> None:
        self.package = package
        self.reason = reason
        super().__init__(f"{package}: {reason}")


class FetchError(DependencyAgeError):
    """Registry metadata for a package could not be fetched or parsed."""

    def __init__(self, package: str, version: Optional[str], reason: str) -> None:
        self.package = package
        self.version = version
        self.reason = reason
        target = f"{package}@{version}" if version else package
        super().__init__(f"{target}: {reason}")
