"""
Release date checker for a project's npm dependencies.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, TextIO

from .exceptions import FetchError, VersionResolutionError
from .interfaces import RegistryClient
from .manifest import (
    collect_dependencies,
    iter_declarations,
    load_manifest,
    resolve_installed_package,
)
from .models import DependencyDeclaration, ReleaseRecord
from .registry import NpmRegistryClient
from .reporting import progress_bar, sort_records
from .time_utils import days_since


logger = logging.getLogger(__name__)


class ReleaseDateChecker:
    """Resolve installed versions and look up when each was released."""

    def __init__(
        self,
        project_dir: Path = Path("."),
        manifest: Optional[Dict] = None,
        client: Optional[RegistryClient] = None,
        show_progress: bool = True,
        progress_file: Optional[TextIO] = None,
    ):
        """Initialize release date checker.

        Args:
            project_dir: Directory containing package.json and node_modules
            manifest: Already loaded manifest; read from project_dir when omitted
            client: Registry client used for date lookups
            show_progress: Render a progress bar while fetching
            progress_file: Stream for the progress bar (default: stdout)
        """
        self.project_dir = Path(project_dir)
        self.manifest = manifest
        self.client = client if client is not None else NpmRegistryClient()
        self.show_progress = show_progress
        self.progress_file = progress_file if progress_file is not None else sys.stdout

    def load(self) -> Dict:
        """Load the project manifest once; raises ManifestReadError."""
        if self.manifest is None:
            self.manifest = load_manifest(self.project_dir)
        return self.manifest

    def dependencies(self) -> Dict[str, str]:
        return collect_dependencies(self.load())

    def declarations(self) -> List[DependencyDeclaration]:
        return list(iter_declarations(self.load()))

    def check_dependency(self, package_name: str) -> Optional[ReleaseRecord]:
        """Build the release record for one dependency, or None if it cannot be resolved."""
        try:
            version = resolve_installed_package(self.project_dir, package_name).version
        except VersionResolutionError as e:
            logger.error("Failed to get installed version for %s: %s", package_name, e.reason)
            return None

        try:
            released_at = self.client.get_release_date(package_name, version)
        except FetchError as e:
            logger.debug("Registry lookup error", exc_info=True)
            logger.error(
                "Failed to get release date for %s@%s: %s", package_name, version, e.reason
            )
            return None

        if released_at is None:
            logger.error("Failed to get release date for %s@%s", package_name, version)
            return None

        return ReleaseRecord(
            name=package_name,
            version=version,
            released_at=released_at,
            days_ago=days_since(released_at),
        )

    def run(self) -> List[ReleaseRecord]:
        """Check every declared dependency in order and return records newest first."""
        declarations = self.declarations()
        records: List[ReleaseRecord] = []

        with progress_bar(
            len(declarations),
            file=self.progress_file,
            disable=not self.show_progress,
        ) as pbar:
            for declaration in declarations:
                record = self.check_dependency(declaration.name)
                if record is not None:
                    records.append(record)
                pbar.update(1)

        return sort_records(records)
