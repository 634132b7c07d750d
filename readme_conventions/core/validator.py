"""
README 校验编排模块

对单个包执行检查：
1. README 是否存在
2. 代码块校验（总是执行）
3. 平台支持表校验（仅对非联邦插件或联邦插件中面向应用的包执行）

两项检查互不影响，错误摘要按检查顺序汇总。
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from readme_conventions.config import CheckConfig
from readme_conventions.core.code_blocks import validate_code_blocks
from readme_conventions.core.diagnostics import Diagnostics, NullDiagnostics
from readme_conventions.core.platforms import validate_supported_platforms
from readme_conventions.errors import UnrecognizedPlatformError
from readme_conventions.plugins.pubspec import PackageMetadata, RepositoryPackage

logger = logging.getLogger(__name__)

MISSING_README_SUMMARY = "Missing README.md"


class RunState(Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    ERRORED = "errored"


@dataclass
class PackageResult:
    """
    单个包的检查结果

    Attributes:
        state: 结果状态
        details: 错误摘要列表，按检查顺序
    """
    state: RunState
    details: list[str] = field(default_factory=list)

    @classmethod
    def success(cls) -> "PackageResult":
        return cls(RunState.SUCCEEDED)

    @classmethod
    def fail(cls, errors: Sequence[str]) -> "PackageResult":
        return cls(RunState.FAILED, list(errors))

    @classmethod
    def error(cls, message: str) -> "PackageResult":
        return cls(RunState.ERRORED, [message])

    @property
    def passed(self) -> bool:
        return self.state == RunState.SUCCEEDED


def should_check_platforms(metadata: PackageMetadata) -> bool:
    return metadata.is_plugin and (not metadata.is_federated or metadata.is_app_facing)


def check_readme(
    readme_lines: Sequence[str],
    metadata: PackageMetadata,
    config: Optional[CheckConfig] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> PackageResult:
    """
    校验 README 内容

    Args:
        readme_lines: README 行列表
        metadata: 包元数据
        config: 检查配置
        diagnostics: 诊断输出通道

    Returns:
        PackageResult 对象
    """
    config = config or CheckConfig()
    diagnostics = diagnostics or NullDiagnostics()
    errors: list[str] = []

    block_error = validate_code_blocks(
        readme_lines,
        require_excerpts=config.require_excerpts,
        diagnostics=diagnostics,
    )
    if block_error is not None:
        errors.append(block_error)

    if should_check_platforms(metadata):
        try:
            platform_error = validate_supported_platforms(
                readme_lines, metadata.platforms, diagnostics=diagnostics
            )
        except UnrecognizedPlatformError as e:
            # 工具限制，不是包的问题；保留前面检查的结果
            logger.debug("%s: %s", metadata.name, e)
            diagnostics.error(str(e))
            return PackageResult(RunState.ERRORED, errors + [str(e)])
        if platform_error is not None:
            errors.append(platform_error)
    else:
        logger.debug("skipping platform table check for %s", metadata.name)

    return PackageResult.fail(errors) if errors else PackageResult.success()


def check_package(
    package: RepositoryPackage,
    config: Optional[CheckConfig] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> PackageResult:
    """Check a package on disk. Manifest and read failures propagate as ReadmeCheckError."""
    if not package.readme_file.exists():
        return PackageResult.fail([MISSING_README_SUMMARY])

    metadata = package.metadata()
    return check_readme(package.read_readme_lines(), metadata, config, diagnostics)
