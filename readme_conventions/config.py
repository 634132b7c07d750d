"""
配置模块 - 检查运行参数

由 CLI 选项构造，没有配置文件。
"""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class CheckConfig:
    """
    检查配置

    Attributes:
        require_excerpts: 要求 dart 代码块由 code-excerpt 管理
        packages: 只检查这些包名（为空时检查全部）
        exclude: 排除的包（gitignore 风格模式）
        output_format: 输出格式 (rich, json)
        verbose: 输出调试日志
    """
    require_excerpts: bool = False
    packages: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    output_format: Literal["rich", "json"] = "rich"
    verbose: bool = False
