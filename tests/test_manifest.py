"""Tests for manifest and installed version loading."""

import json
from pathlib import Path

import pytest

from dependency_age.exceptions import ManifestReadError, VersionResolutionError
from dependency_age.manifest import (
    collect_dependencies,
    get_installed_version,
    iter_declarations,
    load_manifest,
    resolve_installed_package,
)
from dependency_age.models import DependencyDeclaration, InstalledPackage


def test_load_manifest_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ManifestReadError) as excinfo:
        load_manifest(tmp_path)
    assert excinfo.value.path == tmp_path / "package.json"


def test_load_manifest_invalid_json(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ManifestReadError, match="invalid JSON"):
        load_manifest(tmp_path)


def test_load_manifest_rejects_non_object(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("[]", encoding="utf-8")
    with pytest.raises(ManifestReadError):
        load_manifest(tmp_path)


def test_collect_dependencies_merges_groups_last_write_wins() -> None:
    manifest = {
        "dependencies": {"left-pad": "^1.0.0", "shared": "^1.0.0"},
        "devDependencies": {"jest": "^29.0.0", "shared": "^2.0.0"},
    }

    deps = collect_dependencies(manifest)

    assert list(deps) == ["left-pad", "shared", "jest"]
    assert deps["shared"] == "^2.0.0"


def test_collect_dependencies_handles_missing_groups() -> None:
    assert collect_dependencies({}) == {}
    assert collect_dependencies({"dependencies": None, "devDependencies": []}) == {}


def test_iter_declarations() -> None:
    declarations = list(iter_declarations({"dependencies": {"left-pad": "^1.0.0"}}))
    assert declarations == [DependencyDeclaration(name="left-pad", declared_range="^1.0.0")]


def test_get_installed_version(make_project) -> None:
    project = make_project({}, installed={"left-pad": "1.3.0", "@scope/tool": "0.2.1"})

    assert get_installed_version(project, "left-pad") == "1.3.0"
    assert get_installed_version(project, "@scope/tool") == "0.2.1"
    assert resolve_installed_package(project, "left-pad") == InstalledPackage("left-pad", "1.3.0")


def test_get_installed_version_missing_package(tmp_path: Path) -> None:
    with pytest.raises(VersionResolutionError) as excinfo:
        get_installed_version(tmp_path, "foo")
    assert excinfo.value.package == "foo"


def test_get_installed_version_invalid_json(tmp_path: Path) -> None:
    package_dir = tmp_path / "node_modules" / "foo"
    package_dir.mkdir(parents=True)
    (package_dir / "package.json").write_text("{", encoding="utf-8")

    with pytest.raises(VersionResolutionError, match="invalid JSON"):
        get_installed_version(tmp_path, "foo")


def test_get_installed_version_without_version_field(tmp_path: Path) -> None:
    package_dir = tmp_path / "node_modules" / "foo"
    package_dir.mkdir(parents=True)
    (package_dir / "package.json").write_text(json.dumps({"name": "foo"}), encoding="utf-8")

    with pytest.raises(VersionResolutionError, match="no version field"):
        get_installed_version(tmp_path, "foo")
