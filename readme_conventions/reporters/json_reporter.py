"""
JSON 报告器 - 输出 JSON 格式报告
"""

import json
import sys
from typing import TextIO

from readme_conventions.core.validator import RunState
from readme_conventions.reporters.base import PackageResults


class JsonReporter:
    """JSON 报告器"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report(self, results: PackageResults, target: str) -> None:
        """生成 JSON 格式报告"""
        failed = sum(1 for _, r in results if r.state == RunState.FAILED)
        errored = sum(1 for _, r in results if r.state == RunState.ERRORED)
        report_data = {
            "target": target,
            "packages": [
                {
                    "name": package.name,
                    "path": str(package.directory),
                    "state": result.state.value,
                    "details": result.details,
                }
                for package, result in results
            ],
            "summary": {
                "total": len(results),
                "failed": failed,
                "errored": errored,
                "passed": failed == 0 and errored == 0,
            },
        }

        json_str = json.dumps(report_data, indent=2, ensure_ascii=False)
        print(json_str, file=self.output)
