"""
Command-line front end for devgate.

Commands:
    devgate start     Run the HTTP gateway
    devgate analyze   Type-check a path with pyright and print a summary
    devgate init      Write pyrightconfig.json and a .env template
"""

import asyncio
import json
import webbrowser
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from typing_extensions import Annotated

from devgate import __version__
from devgate.core.config import get_settings
from devgate.core.dependencies import get_analyzer
from devgate.core.exceptions import GatewayError
from devgate.models.schemas import Severity


app = typer.Typer(
    name="devgate",
    help="devgate - local gateway for pyright, GitHub and filesystem access",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

INSTALL_HINT = "Please install Pyright manually: npm install -g pyright"

PYRIGHT_CONFIG = {
    "include": ["."],
    "exclude": ["**/node_modules", "**/__pycache__"],
    "reportMissingImports": True,
    "reportMissingTypeStubs": False,
    "pythonVersion": "3.9",
    "typeCheckingMode": "basic",
}

ENV_TEMPLATE = "PORT=3333\n# Add your GitHub token here\n# GITHUB_TOKEN=your_token_here\n"

MAX_LISTED_ERRORS = 5


def version_callback(value: bool) -> None:
    if value:
        console.print(f"devgate {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    """devgate - local gateway for pyright, GitHub and filesystem access."""


@app.command()
def start(
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Port to run the server on")] = None,
    host: Annotated[Optional[str], typer.Option("--host", help="Interface to bind")] = None,
    open_browser: Annotated[bool, typer.Option("--open", "-o", help="Open the server in the browser")] = False,
) -> None:
    """Start the devgate server."""
    import uvicorn

    settings = get_settings()
    port = port or settings.port
    host = host or settings.host

    availability = asyncio.run(get_analyzer().check_availability())
    if not availability.installed:
        err_console.print("[yellow]Pyright not found; /api/python endpoints will report it missing.[/yellow]")
        err_console.print(f"[yellow]{INSTALL_HINT}[/yellow]")

    console.print(f"[blue]Starting devgate on port {port}...[/blue]")
    console.print(f"[blue]  Local: http://localhost:{port}/[/blue]")

    if open_browser:
        webbrowser.open(f"http://localhost:{port}")

    uvicorn.run(
        "devgate.main:app",
        host=host,
        port=port,
        log_level="debug" if settings.debug else "info",
    )


@app.command()
def analyze(
    path: Annotated[str, typer.Argument(help="Python file or directory to analyze")],
) -> None:
    """Analyze a Python file or directory."""
    analyzer = get_analyzer()

    if not asyncio.run(analyzer.check_availability()).installed:
        err_console.print(f"[red]Pyright not found. {INSTALL_HINT}[/red]")
        raise typer.Exit(code=1)

    if not Path(path).exists():
        err_console.print(f"[red]File or directory not found: {path}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[blue]Analyzing {path}...[/blue]")
    try:
        report = asyncio.run(analyzer.analyze(path))
    except GatewayError as e:
        err_console.print(f"[red]{e.message}[/red]", highlight=False)
        raise typer.Exit(code=1)

    if report.parse_error is not None:
        err_console.print(f"[red]Error parsing Pyright output: {report.parse_error}[/red]")
        console.print(report.raw or "", markup=False, highlight=False)
        return

    errors = [d for d in report.diagnostics if d.severity == Severity.ERROR]
    warnings = [d for d in report.diagnostics if d.severity == Severity.WARNING]
    infos = [d for d in report.diagnostics if d.severity == Severity.INFORMATION]

    console.print("\n[green]Analysis complete![/green]")
    console.print(f"[red]Errors: {len(errors)}[/red]")
    console.print(f"[yellow]Warnings: {len(warnings)}[/yellow]")
    console.print(f"[blue]Information: {len(infos)}[/blue]")

    if errors:
        console.print("\n[red]Errors:[/red]")
        for i, d in enumerate(errors[:MAX_LISTED_ERRORS], start=1):
            console.print(
                f"{i}. {d.file}:{d.line}:{d.column} - {d.message}",
                style="red", markup=False, highlight=False,
            )
        if len(errors) > MAX_LISTED_ERRORS:
            console.print(f"[red]... and {len(errors) - MAX_LISTED_ERRORS} more errors[/red]")


@app.command()
def init() -> None:
    """Initialize a project: pyrightconfig.json and a .env template."""
    Path("pyrightconfig.json").write_text(json.dumps(PYRIGHT_CONFIG, indent=2))
    console.print("[green]Created pyrightconfig.json[/green]")

    env_path = Path(".env")
    if not env_path.exists():
        env_path.write_text(ENV_TEMPLATE)
        console.print("[green]Created .env file[/green]")

    console.print("\n[green]Initialization complete![/green]")
    console.print("[blue]Run `devgate start` to start the server[/blue]")


if __name__ == "__main__":
    app()
