"""
Reporters Layer - 报告层

包含 Rich 终端报告器和 JSON 报告器。
"""

from readme_conventions.reporters.base import Reporter
from readme_conventions.reporters.rich_reporter import RichReporter
from readme_conventions.reporters.json_reporter import JsonReporter

__all__ = [
    "Reporter",
    "RichReporter",
    "JsonReporter",
]
