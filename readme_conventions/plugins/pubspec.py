"""Flutter package manifest support.

Reads ``pubspec.yaml`` and derives the plugin metadata the README checks
need, plus the federated-layout flags implied by the repository's
directory conventions.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from readme_conventions.errors import ManifestError, ReadmeCheckError

logger = logging.getLogger(__name__)

PUBSPEC_FILE = "pubspec.yaml"
README_FILE = "README.md"


@dataclass
class PackageMetadata:
    """
    包元数据

    Attributes:
        name: 包名
        is_plugin: pubspec 中是否声明了 flutter.plugin
        platforms: flutter.plugin.platforms 映射，未声明时为 None
        is_federated: 是否属于联邦插件
        is_app_facing: 是否为联邦插件中面向应用的包
    """
    name: Optional[str] = None
    is_plugin: bool = False
    platforms: Optional[Mapping[str, Any]] = None
    is_federated: bool = False
    is_app_facing: bool = False


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ManifestError(f"Unable to read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ManifestError(f"{path} is not a YAML mapping")
    return data


def parse_pubspec(path: Path) -> PackageMetadata:
    """
    解析 pubspec.yaml

    Args:
        path: pubspec.yaml 路径

    Returns:
        PackageMetadata 对象（联邦标志由 RepositoryPackage 补充）
    """
    data = _load_yaml(path)

    flutter = data.get("flutter") or {}
    if not isinstance(flutter, dict):
        raise ManifestError(f"'flutter' section in {path} is not a mapping")

    plugin = flutter.get("plugin")
    platforms = None
    if plugin is not None:
        if not isinstance(plugin, dict):
            raise ManifestError(f"'flutter.plugin' section in {path} is not a mapping")
        platforms = plugin.get("platforms")
        if platforms is not None and not isinstance(platforms, dict):
            raise ManifestError(f"'flutter.plugin.platforms' in {path} is not a mapping")

    return PackageMetadata(
        name=data.get("name"),
        is_plugin=plugin is not None,
        platforms=platforms,
    )


class RepositoryPackage:
    """A package directory in the repository."""

    def __init__(self, directory: Path):
        self.directory = directory

    def __repr__(self) -> str:
        return f"RepositoryPackage({str(self.directory)!r})"

    @property
    def name(self) -> str:
        return self.directory.name

    @property
    def readme_file(self) -> Path:
        return self.directory / README_FILE

    @property
    def pubspec_file(self) -> Path:
        return self.directory / PUBSPEC_FILE

    @property
    def is_federated(self) -> bool:
        """True for packages laid out as packages/<plugin>/<plugin>_<platform>."""
        parent = self.directory.parent.name
        return parent != "packages" and self.directory.name.startswith(parent)

    @property
    def is_app_facing(self) -> bool:
        """True for the app-facing package of a federated plugin."""
        return self.is_federated and self.directory.name == self.directory.parent.name

    def metadata(self) -> PackageMetadata:
        metadata = parse_pubspec(self.pubspec_file)
        metadata.is_federated = self.is_federated
        metadata.is_app_facing = self.is_app_facing
        logger.debug(
            "%s: plugin=%s federated=%s app_facing=%s",
            self.name, metadata.is_plugin, metadata.is_federated, metadata.is_app_facing,
        )
        return metadata

    def read_readme_lines(self) -> list[str]:
        try:
            return self.readme_file.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadmeCheckError(f"Unable to read {self.readme_file}: {e}") from e
