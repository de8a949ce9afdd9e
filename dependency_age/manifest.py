"""
Project manifest and installed package loading.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterator

from .exceptions import ManifestReadError, VersionResolutionError
from .models import DependencyDeclaration, InstalledPackage


logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"
DEPENDENCY_GROUPS = ("dependencies", "devDependencies")


def load_manifest(project_dir: Path) -> Dict:
    """Load ``package.json`` from the project directory.

    Raises:
        ManifestReadError: if the file is missing, unreadable or not a JSON object.
    """
    manifest_path = Path(project_dir) / MANIFEST_NAME
    try:
        with open(manifest_path, 'r', encoding='utf-8') as f:
            manifest = json.load(f)
    except OSError as e:
        raise ManifestReadError(manifest_path, e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise ManifestReadError(manifest_path, f"invalid JSON ({e})") from e

    if not isinstance(manifest, dict):
        raise ManifestReadError(manifest_path, "expected a JSON object")
    return manifest


def collect_dependencies(manifest: Dict) -> Dict[str, str]:
    """Merge dependencies and devDependencies; later groups win on duplicates."""
    merged: Dict[str, str] = {}
    for group in DEPENDENCY_GROUPS:
        declared = manifest.get(group)
        if not isinstance(declared, dict):
            continue
        merged.update(declared)
    return merged


def iter_declarations(manifest: Dict) -> Iterator[DependencyDeclaration]:
    for name, declared_range in collect_dependencies(manifest).items():
        yield DependencyDeclaration(name=name, declared_range=str(declared_range))


def get_installed_version(project_dir: Path, package_name: str) -> str:
    """Return the version recorded in ``node_modules/<package>/package.json``."""
    package_path = Path(project_dir) / "node_modules" / package_name / MANIFEST_NAME
    try:
        with open(package_path, 'r', encoding='utf-8') as f:
            package_data = json.load(f)
    except OSError as e:
        logger.debug("Cannot open %s: %s", package_path, e)
        raise VersionResolutionError(package_name, f"cannot read {package_path}") from e
    except json.JSONDecodeError as e:
        logger.debug("Invalid JSON in %s: %s", package_path, e)
        raise VersionResolutionError(package_name, f"invalid JSON in {package_path}") from e

    version = package_data.get('version') if isinstance(package_data, dict) else None
    if not isinstance(version, str) or not version:
        raise VersionResolutionError(package_name, f"no version field in {package_path}")
    return version


def resolve_installed_package(project_dir: Path, package_name: str) -> InstalledPackage:
    return InstalledPackage(
        name=package_name,
        version=get_installed_version(project_dir, package_name),
    )
