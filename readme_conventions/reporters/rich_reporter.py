"""
Rich 终端报告器 - 使用 Rich 库输出彩色终端格式
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from readme_conventions.core.validator import RunState
from readme_conventions.reporters.base import PackageResults

STATE_STYLES = {
    RunState.SUCCEEDED: ("✓", "green"),
    RunState.FAILED: ("✗", "red"),
    RunState.ERRORED: ("!", "magenta"),
}


class RichReporter:
    """Rich 终端报告器"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report(self, results: PackageResults, target: str) -> None:
        """生成 Rich 格式报告"""
        self.console.print()
        self.console.print("─" * 80, style="dim")
        self._print_package_lines(results)

        problems = [(p, r) for p, r in results if not r.passed]
        if problems:
            self._print_problems(problems)
        self._print_conclusion(results, problems, target)

    def _print_package_lines(self, results: PackageResults) -> None:
        """逐个包打印状态"""
        for package, result in results:
            icon, style = STATE_STYLES[result.state]
            self.console.print(f"  [{style}]{icon}[/{style}] {escape(package.name)}")

    def _print_problems(self, problems: PackageResults) -> None:
        """打印失败包及原因"""
        self.console.print()
        self.console.print("[bold red]The following packages had errors:[/bold red]")
        self.console.print()

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Package", style="cyan")
        table.add_column("State", width=10)
        table.add_column("Details")

        for package, result in problems:
            _, style = STATE_STYLES[result.state]
            table.add_row(
                escape(package.name),
                f"[{style}]{result.state.value}[/{style}]",
                escape("\n".join(result.details)),
            )

        self.console.print(table)

    def _print_conclusion(self, results: PackageResults, problems: PackageResults, target: str) -> None:
        """打印总结"""
        self.console.print()
        if not problems:
            self.console.print(Panel(
                f"[bold green]No issues found![/bold green]\n"
                f"[dim]{len(results)} packages checked in {escape(target)}[/dim]",
                border_style="green",
            ))
        else:
            self.console.print(Panel(
                f"[bold red]{len(problems)} of {len(results)} packages failed[/bold red]\n"
                f"[dim]Target: {escape(target)}[/dim]",
                border_style="red",
            ))
        self.console.print()
