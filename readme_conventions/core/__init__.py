"""
Core Layer - 核心层

包含代码块校验器、平台支持表校验器和检查编排。
"""

from readme_conventions.core.code_blocks import (
    find_code_block_findings,
    validate_code_blocks,
    CodeBlockFindings,
)
from readme_conventions.core.diagnostics import (
    Diagnostics,
    ConsoleDiagnostics,
    RecordingDiagnostics,
    NullDiagnostics,
)
from readme_conventions.core.platforms import (
    STANDARD_PLATFORM_NAMES,
    find_support_table,
    validate_supported_platforms,
    SupportTable,
)
from readme_conventions.core.validator import (
    check_package,
    check_readme,
    PackageResult,
    RunState,
)

__all__ = [
    # code_blocks
    "find_code_block_findings",
    "validate_code_blocks",
    "CodeBlockFindings",
    # diagnostics
    "Diagnostics",
    "ConsoleDiagnostics",
    "RecordingDiagnostics",
    "NullDiagnostics",
    # platforms
    "STANDARD_PLATFORM_NAMES",
    "find_support_table",
    "validate_supported_platforms",
    "SupportTable",
    # validator
    "check_package",
    "check_readme",
    "PackageResult",
    "RunState",
]
