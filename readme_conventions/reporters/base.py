"""
报告器基类 - 定义报告器接口
"""

from typing import Protocol, Sequence

from readme_conventions.core.validator import PackageResult
from readme_conventions.plugins.pubspec import RepositoryPackage

PackageResults = Sequence[tuple[RepositoryPackage, PackageResult]]


class Reporter(Protocol):
    """报告器协议"""

    def report(self, results: PackageResults, target: str) -> None:
        """生成报告"""
        ...
