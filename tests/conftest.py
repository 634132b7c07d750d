"""Shared fixtures for README convention tests."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

import pytest
import yaml

from readme_conventions.core.diagnostics import RecordingDiagnostics
from readme_conventions.plugins.pubspec import RepositoryPackage


def _pubspec(name: str, platforms: Optional[dict[str, Any]] = None, plugin: bool = True) -> dict[str, Any]:
    data: dict[str, Any] = {"name": name, "version": "1.0.0"}
    if plugin:
        data["flutter"] = {"plugin": {"platforms": platforms} if platforms is not None else {}}
    return data


@pytest.fixture()
def diagnostics() -> RecordingDiagnostics:
    return RecordingDiagnostics()


@pytest.fixture()
def packages_dir(tmp_path: Path) -> Path:
    path = tmp_path / "packages"
    path.mkdir()
    return path


@pytest.fixture()
def make_package(packages_dir: Path) -> Callable[..., RepositoryPackage]:
    """Return a factory that writes a package (pubspec.yaml + README.md) to disk."""

    def _make(
        relative: str,
        readme: Optional[list[str]] = None,
        platforms: Optional[dict[str, Any]] = None,
        plugin: bool = True,
    ) -> RepositoryPackage:
        directory = packages_dir / relative
        directory.mkdir(parents=True)
        pubspec = _pubspec(directory.name, platforms, plugin)
        (directory / "pubspec.yaml").write_text(yaml.safe_dump(pubspec), encoding="utf-8")
        if readme is not None:
            (directory / "README.md").write_text("\n".join(readme) + "\n", encoding="utf-8")
        return RepositoryPackage(directory)

    return _make
