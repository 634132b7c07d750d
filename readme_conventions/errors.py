"""
异常模块 - 工具级错误

README 中的约定问题不会抛出异常，而是作为错误摘要收集；
这里的异常只用于工具自身无法处理的情况（清单损坏、未知平台等）。
"""


class ReadmeCheckError(Exception):
    """Base class for tool-level failures."""


class ManifestError(ReadmeCheckError):
    """pubspec.yaml could not be read or has an unexpected shape."""


class SupportTableError(ReadmeCheckError):
    """The supported platforms table is missing or malformed."""


class UnrecognizedPlatformError(ReadmeCheckError):
    """A documented platform has no standard capitalization entry."""

    def __init__(self, name: str):
        super().__init__(f"Unrecognized platform in OS support table: {name}")
        self.name = name
