"""
Repository Layer - 仓库层

负责发现包并逐个执行检查。
"""

from readme_conventions.repo.discovery import (
    discover_packages,
    iter_package_dirs,
    run_packages,
    PackageFilter,
)

__all__ = [
    "discover_packages",
    "iter_package_dirs",
    "run_packages",
    "PackageFilter",
]
