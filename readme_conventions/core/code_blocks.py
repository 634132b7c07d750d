"""
代码块校验模块 - 检查 README 中的围栏代码块

只匹配 ``` 分隔行，不做完整的 Markdown 解析：
1. 每个代码块的起始行必须带语言标识
2. 开启 require_excerpts 时，dart 代码块上一行必须是 <?code-excerpt ...> 指令

结束分隔行不做检查；未闭合的代码块会被容忍。
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Sequence

from readme_conventions.core.diagnostics import INDENTATION, Diagnostics, NullDiagnostics

CODE_BLOCK_DELIMITER_PATTERN = re.compile(r'^\s*```\s*([^ ]*)\s*')

EXCERPT_TAG_START = "<?code-excerpt "

MISSING_LANGUAGE_SUMMARY = "Missing language identifier for code block"
MISSING_EXCERPT_SUMMARY = "Missing code-excerpt management for code block"


@dataclass
class CodeBlockFindings:
    """
    代码块检查结果

    Attributes:
        missing_language_lines: 缺少语言标识的起始行（从 1 开始）
        missing_excerpt_lines: 未被 code-excerpt 管理的 dart 代码块起始行（从 1 开始）
    """
    missing_language_lines: list[int] = field(default_factory=list)
    missing_excerpt_lines: list[int] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.missing_language_lines or self.missing_excerpt_lines)


def find_code_block_findings(
    readme_lines: Sequence[str],
    require_excerpts: bool = False,
) -> CodeBlockFindings:
    """
    扫描所有围栏分隔行，记录不符合约定的代码块起始行

    分隔行严格交替解释为开始/结束，不识别嵌套。

    Args:
        readme_lines: README 行列表
        require_excerpts: 是否要求 dart 代码块由 code-excerpt 管理

    Returns:
        CodeBlockFindings 对象
    """
    findings = CodeBlockFindings()
    in_block = False

    for i, line in enumerate(readme_lines):
        match = CODE_BLOCK_DELIMITER_PATTERN.match(line)
        if match is None:
            continue
        if in_block:
            in_block = False
            continue
        in_block = True

        line_number = i + 1

        info_string = match.group(1) or ""
        if not info_string:
            findings.missing_language_lines.append(line_number)
            continue

        if require_excerpts and info_string == "dart":
            if i == 0 or not readme_lines[i - 1].strip().startswith(EXCERPT_TAG_START):
                findings.missing_excerpt_lines.append(line_number)

    return findings


def validate_code_blocks(
    readme_lines: Sequence[str],
    require_excerpts: bool = False,
    diagnostics: Optional[Diagnostics] = None,
) -> Optional[str]:
    """
    校验代码块并输出诊断信息

    两类问题的诊断都会完整输出；返回的摘要以语言标识缺失优先。

    Args:
        readme_lines: README 行列表
        require_excerpts: 是否要求 dart 代码块由 code-excerpt 管理
        diagnostics: 诊断输出通道

    Returns:
        错误摘要，没有问题时为 None
    """
    diagnostics = diagnostics or NullDiagnostics()
    findings = find_code_block_findings(readme_lines, require_excerpts)

    if findings.missing_language_lines:
        for line_number in findings.missing_language_lines:
            diagnostics.error(
                f"{INDENTATION}Code block at line {line_number} is missing "
                "a language identifier."
            )
        diagnostics.error(
            f"\n{INDENTATION}For each block listed above, add a language tag to "
            "the opening block. For instance, for Dart code, use:\n"
            f"{INDENTATION * 2}```dart\n"
        )

    if findings.missing_excerpt_lines:
        for line_number in findings.missing_excerpt_lines:
            diagnostics.error(
                f"{INDENTATION}Dart code block at line {line_number} is not "
                "managed by code-excerpt."
            )
        diagnostics.error(
            f"\n{INDENTATION}For each block listed above, add <?code-excerpt ...> "
            "tag on the previous line, and ensure that a build.excerpt.yaml is "
            "configured for the source example.\n"
        )

    if findings.missing_language_lines:
        return MISSING_LANGUAGE_SUMMARY
    if findings.missing_excerpt_lines:
        return MISSING_EXCERPT_SUMMARY
    return None
