"""
CLI 入口模块 - 使用 Typer 构建命令行界面

README 约定检查流程：
1. 发现包
2. 逐个检查 README（代码块、平台支持表）
3. 生成报告
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from readme_conventions.config import CheckConfig
from readme_conventions.core import ConsoleDiagnostics, RunState
from readme_conventions.plugins import RepositoryPackage
from readme_conventions.repo import discover_packages, run_packages
from readme_conventions.reporters import JsonReporter, RichReporter

# 创建 Typer 应用实例
app = typer.Typer(
    name="readme-check",
    help="Checks that READMEs follow repository conventions.",
    add_completion=False,
)

# Rich Console 用于输出
console = Console()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def check(
    packages_dir: str = typer.Argument(
        "packages",
        help="Directory containing the packages to check",
    ),
    require_excerpts: bool = typer.Option(
        False,
        "--require-excerpts",
        help="Require that Dart code blocks be managed by code-excerpt.",
    ),
    packages: Optional[List[str]] = typer.Option(
        None,
        "--packages",
        "-p",
        help="Only check these packages (name or path relative to PACKAGES_DIR)",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-e",
        help="Skip packages matching these gitignore-style patterns",
    ),
    format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
) -> None:
    """
    Check the README of every package under PACKAGES_DIR.

    Examples:
        readme-check check
        readme-check check ./packages --require-excerpts
        readme-check check --packages camera --format json
    """
    if format not in ("rich", "json"):
        console.print(f"[red]Error:[/red] Unknown format: {format}")
        raise typer.Exit(1)

    config = CheckConfig(
        require_excerpts=require_excerpts,
        packages=tuple(packages or ()),
        exclude=tuple(exclude or ()),
        output_format=format,
        verbose=verbose,
    )
    configure_logging(config.verbose)

    # JSON 模式下提示和诊断信息输出到 stderr，保证 stdout 是合法 JSON
    message_console = Console(stderr=True) if config.output_format == "json" else console

    root = Path(packages_dir).resolve()
    if not root.is_dir():
        message_console.print(f"[red]Error:[/red] Not a directory: {packages_dir}")
        raise typer.Exit(1)

    found = discover_packages(root, config.packages, config.exclude)
    if not found:
        message_console.print("[yellow]Warning:[/yellow] No packages found")
        raise typer.Exit(0)

    diagnostics = ConsoleDiagnostics(message_console)

    def on_package(package: RepositoryPackage) -> None:
        if config.output_format == "rich":
            console.print(f"[bold cyan]Running for {package.directory.relative_to(root)}...[/bold cyan]")

    results = run_packages(found, config, diagnostics, on_package=on_package)

    if config.output_format == "json":
        reporter = JsonReporter()
    else:
        reporter = RichReporter(console)

    reporter.report(results, packages_dir)

    if any(result.state != RunState.SUCCEEDED for _, result in results):
        raise typer.Exit(1)
    raise typer.Exit(0)


@app.command()
def version() -> None:
    """Show the version of README-Conventions."""
    from readme_conventions import __version__
    console.print(f"[bold]README-Conventions[/bold] v{__version__}")


if __name__ == "__main__":
    app()
