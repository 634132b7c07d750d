"""
平台支持表校验模块 - 对比 README 中的平台表格与 pubspec 声明

期望的表格格式：

    |                | Android | iOS      | Web                    |
    |----------------|---------|----------|------------------------|
    | **Support**    | SDK 21+ | iOS 10+* | [See `camera_web `][1] |

以 "| **Support**" 开头的行为数据行，向上两行为平台表头。
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Sequence

from readme_conventions.core.diagnostics import INDENTATION, Diagnostics, NullDiagnostics
from readme_conventions.errors import SupportTableError, UnrecognizedPlatformError

logger = logging.getLogger(__name__)

# 插件可支持平台的标准大小写
STANDARD_PLATFORM_NAMES: Mapping[str, str] = MappingProxyType({
    "android": "Android",
    "ios": "iOS",
    "linux": "Linux",
    "macos": "macOS",
    "web": "Web",
    "windows": "Windows",
})

SUPPORT_ROW_PREFIX = "| **Support**"

NO_TABLE_SUMMARY = "No OS support table found"
BAD_HEADER_SUMMARY = "OS support table does not have the expected header format"
TABLE_MISMATCH_SUMMARY = "Incorrect OS support table"
FORMATTING_SUMMARY = "Incorrect OS support formatting"


@dataclass(frozen=True)
class SupportTable:
    """
    README 中的平台支持表

    Attributes:
        header_index: 表头行下标（从 0 开始）
        support_index: "| **Support**" 数据行下标（从 0 开始）
        documented_platforms: 表头中的平台名，保持原有顺序和大小写
    """
    header_index: int
    support_index: int
    documented_platforms: tuple[str, ...]


def find_support_table(readme_lines: Sequence[str]) -> SupportTable:
    """Locate the support table, raising SupportTableError when it is malformed."""
    support_index = next(
        (i for i, line in enumerate(readme_lines) if line.startswith(SUPPORT_ROW_PREFIX)),
        -1,
    )
    if support_index == -1:
        raise SupportTableError(NO_TABLE_SUMMARY)

    header_index = support_index - 2
    if header_index < 0 or not readme_lines[header_index].startswith("|"):
        raise SupportTableError(BAD_HEADER_SUMMARY)

    documented = tuple(
        entry for entry in (cell.strip() for cell in readme_lines[header_index].split("|"))
        if entry
    )
    return SupportTable(header_index, support_index, documented)


def sorted_list_string(entries: Iterable[str]) -> str:
    """按不区分大小写排序后，以逗号拼接"""
    return ", ".join(sorted(entries, key=str.lower))


def validate_supported_platforms(
    readme_lines: Sequence[str],
    platforms: Optional[Mapping[str, Any]],
    diagnostics: Optional[Diagnostics] = None,
) -> Optional[str]:
    """
    校验平台支持表

    Args:
        readme_lines: README 行列表
        platforms: pubspec 中 flutter.plugin.platforms 映射，未声明时为 None
        diagnostics: 诊断输出通道

    Returns:
        错误摘要，通过时为 None

    Raises:
        UnrecognizedPlatformError: 表头中的平台没有标准大小写记录
    """
    diagnostics = diagnostics or NullDiagnostics()

    try:
        table = find_support_table(readme_lines)
    except SupportTableError as e:
        return str(e)

    if platforms is None:
        diagnostics.warning("Plugin does not support any platforms")
        return None

    supported = {str(key) for key in platforms}
    documented = table.documented_platforms
    documented_lowercase = {name.lower() for name in documented}
    logger.debug("supported platforms %s, documented %s", supported, documented)

    # 重复的表头也算不一致
    if (len(supported) != len(documented)
            or len(supported & documented_lowercase) != len(supported)):
        diagnostics.error(
            f"{INDENTATION}OS support table does not match supported platforms:\n"
            f"{INDENTATION * 2}Actual:     {sorted_list_string(supported)}\n"
            f"{INDENTATION * 2}Documented: {sorted_list_string(documented_lowercase)}\n"
        )
        return TABLE_MISMATCH_SUMMARY

    standard_names = set(STANDARD_PLATFORM_NAMES.values())
    incorrect = [name for name in dict.fromkeys(documented) if name not in standard_names]
    if incorrect:
        expected = []
        for name in incorrect:
            standard = STANDARD_PLATFORM_NAMES.get(name.lower())
            if standard is None:
                raise UnrecognizedPlatformError(name)
            expected.append(standard)
        diagnostics.error(
            f"{INDENTATION}Incorrect OS capitalization: {sorted_list_string(incorrect)}\n"
            f"{INDENTATION * 2}Please use standard capitalizations: "
            f"{sorted_list_string(expected)}\n"
        )
        return FORMATTING_SUMMARY

    return None
