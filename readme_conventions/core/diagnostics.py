"""
诊断输出模块 - 校验器的旁路输出通道

校验器返回简短的错误摘要，详细信息（行号、修复建议）通过 Diagnostics 输出到终端。
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from rich.console import Console

logger = logging.getLogger(__name__)

# 诊断块的缩进单位
INDENTATION = "  "


class Diagnostics(Protocol):
    """诊断输出协议"""

    def error(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...


class ConsoleDiagnostics:
    """Prints diagnostics through a Rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def error(self, message: str) -> None:
        logger.debug("error: %s", message)
        # README 内容里常有 [..]，关闭 markup 原样输出
        self.console.print(message, style="red", markup=False, highlight=False)

    def warning(self, message: str) -> None:
        logger.debug("warning: %s", message)
        self.console.print(message, style="yellow", markup=False, highlight=False)


@dataclass
class RecordingDiagnostics:
    """Collects diagnostics in memory instead of printing them."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)


class NullDiagnostics:
    """Drops every message."""

    def error(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass
