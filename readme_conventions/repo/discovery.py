"""Package discovery and the per-package check loop.

Packages live either directly under the packages directory or, for
federated plugins, one level deeper::

    packages/
      simple_plugin/pubspec.yaml
      camera/
        camera/pubspec.yaml
        camera_android/pubspec.yaml
        camera_platform_interface/pubspec.yaml
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Sequence

import pathspec

from readme_conventions.config import CheckConfig
from readme_conventions.core.diagnostics import Diagnostics, NullDiagnostics
from readme_conventions.core.validator import PackageResult, check_package
from readme_conventions.errors import ReadmeCheckError
from readme_conventions.plugins.pubspec import PUBSPEC_FILE, RepositoryPackage

logger = logging.getLogger(__name__)


def _is_package_dir(path: Path) -> bool:
    return path.is_dir() and (path / PUBSPEC_FILE).is_file()


def _child_dirs(path: Path) -> list[Path]:
    return sorted(p for p in path.iterdir() if p.is_dir() and not p.name.startswith("."))


class PackageFilter:
    """Selects packages by name and gitignore-style exclude patterns."""

    def __init__(self, packages_dir: Path, packages: Sequence[str] = (), exclude: Sequence[str] = ()):
        self.packages_dir = packages_dir
        self.packages = set(packages)
        self._exclude_spec = pathspec.PathSpec.from_lines("gitwildmatch", exclude) if exclude else None

    def _relative(self, package: RepositoryPackage) -> str:
        return package.directory.relative_to(self.packages_dir).as_posix()

    def is_selected(self, package: RepositoryPackage) -> bool:
        relative = self._relative(package)
        if self.packages and package.name not in self.packages and relative not in self.packages:
            return False
        if self._exclude_spec is not None:
            if self._exclude_spec.match_file(relative) or self._exclude_spec.match_file(package.name):
                logger.debug("excluding %s", relative)
                return False
        return True


def iter_package_dirs(packages_dir: Path) -> Iterator[Path]:
    for child in _child_dirs(packages_dir):
        if _is_package_dir(child):
            yield child
            continue
        # 联邦插件目录
        for sub in _child_dirs(child):
            if _is_package_dir(sub):
                yield sub


def discover_packages(
    packages_dir: Path,
    packages: Sequence[str] = (),
    exclude: Sequence[str] = (),
) -> list[RepositoryPackage]:
    """
    查找 packages_dir 下的所有包

    Args:
        packages_dir: 包根目录
        packages: 只保留这些包（包名或相对路径）
        exclude: 排除模式

    Returns:
        按路径排序的 RepositoryPackage 列表
    """
    package_filter = PackageFilter(packages_dir, packages, exclude)
    found = [
        package
        for package in (RepositoryPackage(d) for d in iter_package_dirs(packages_dir))
        if package_filter.is_selected(package)
    ]
    logger.debug("discovered %d packages under %s", len(found), packages_dir)
    return found


def run_packages(
    packages: Iterable[RepositoryPackage],
    config: Optional[CheckConfig] = None,
    diagnostics: Optional[Diagnostics] = None,
    on_package: Optional[Callable[[RepositoryPackage], None]] = None,
) -> list[tuple[RepositoryPackage, PackageResult]]:
    """
    依次检查每个包

    某个包的工具级错误只影响该包的结果，后续的包照常检查。

    Args:
        packages: 待检查的包
        config: 检查配置
        diagnostics: 诊断输出通道
        on_package: 每个包开始检查前的回调

    Returns:
        (包, 结果) 列表
    """
    diagnostics = diagnostics or NullDiagnostics()
    results: list[tuple[RepositoryPackage, PackageResult]] = []

    for package in packages:
        if on_package is not None:
            on_package(package)
        try:
            result = check_package(package, config, diagnostics)
        except ReadmeCheckError as e:
            logger.debug("%s: %s", package.name, e)
            diagnostics.error(str(e))
            result = PackageResult.error(str(e))
        results.append((package, result))

    return results
