#!/usr/bin/env python3
"""
Safari Extension Builder CLI - convert a web-extension bundle into a Safari Xcode project
"""

import os
import sys

import typer
from rich.console import Console

from . import __version__
from .commands.build import build_command
from .commands.clean import clean_command
from .commands.describe import describe_command
from .commands.fix_bundle_id import fix_bundle_id_command
from .helpers.logger import ROOT_LOGGER_NAME, setup_logger

console = Console()


def configure_logging(output_format: str = "TEXT", log_level: str = None):
    """Configure logging based on output format and log level."""
    # CLI option > environment > default
    if log_level is None:
        log_level = os.environ.get("SAFARI_LOG_LEVEL", "INFO")

    # For JSON output, send logs to stderr to keep stdout clean
    json_output = output_format.upper() == "JSON"

    setup_logger(ROOT_LOGGER_NAME, log_level.upper(), json_output)


def show_help_suggestion():
    """Show helpful suggestions for common mistakes."""
    console.print("\n[yellow]💡 Common usage patterns:[/yellow]")
    console.print("   [cyan]safari-ext build[/cyan]")
    console.print("   [cyan]SAFARI_PLATFORM=ios safari-ext build[/cyan]")
    console.print("   [cyan]safari-ext describe --output JSON[/cyan]")

    console.print("\n[yellow]🔧 Environment variables:[/yellow]")
    console.print("   [green]SAFARI_APP_NAME[/green]            - App display name")
    console.print("   [green]SAFARI_BUNDLE_ID[/green]           - Bundle identifier")
    console.print("   [green]SAFARI_SOURCE_DIR[/green]          - Extension bundle directory")
    console.print("   [green]SAFARI_PROJECT_LOCATION[/green]    - Xcode project output directory")
    console.print("   [green]SAFARI_PLATFORM[/green]            - 'ios' or macOS (default)")
    console.print("   [green]SAFARI_SKIP_XCODEBUILD[/green]     - '1' to skip xcodebuild")
    console.print("   [green]SAFARI_SKIP_CLEANUP[/green]        - '1' to skip legacy cleanup")
    console.print("   [green]SAFARI_CLEAN_LEGACY_NAMES[/green]  - Extra legacy app names (comma-separated)")

    console.print("\n[yellow]📖 For detailed help:[/yellow]")
    console.print("   [cyan]safari-ext --help[/cyan]")
    console.print("   [cyan]safari-ext <command> --help[/cyan]")


app = typer.Typer(
    help="Safari Extension Builder - Convert a web extension into a Safari Xcode project",
    no_args_is_help=True,
    add_completion=False,
    epilog="💡 Use 'safari-ext <command> --help' for command-specific help",
)


# Global log level option
LOG_LEVEL = None


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        case_sensitive=False,
    ),
):
    """Safari Extension Builder - Convert a web extension into a Safari Xcode project."""
    global LOG_LEVEL
    LOG_LEVEL = log_level


@app.command(
    "build",
    help="Clean legacy artifacts, bundle, convert, fix bundle IDs and build. Example: safari-ext build --skip-build",
    rich_help_panel="Pipeline Commands",
)
def build(
    platform: str = typer.Option(
        None,
        "--platform",
        "-p",
        help="Target platform: macos or ios (overrides SAFARI_PLATFORM)",
    ),
    skip_build: bool = typer.Option(
        None,
        "--skip-build/--no-skip-build",
        help="Skip xcodebuild (overrides SAFARI_SKIP_XCODEBUILD)",
    ),
    skip_cleanup: bool = typer.Option(
        None,
        "--skip-cleanup/--no-skip-cleanup",
        help="Skip legacy artifact cleanup (overrides SAFARI_SKIP_CLEANUP)",
    ),
):
    """Run the full Safari conversion pipeline."""
    configure_logging("TEXT", LOG_LEVEL)
    build_command(platform, skip_build, skip_cleanup)


@app.command(
    "clean",
    help="Remove projects and DerivedData folders left by legacy app names. Example: safari-ext clean",
    rich_help_panel="Pipeline Commands",
)
def clean():
    """Remove legacy projects and DerivedData folders."""
    configure_logging("TEXT", LOG_LEVEL)
    clean_command()


@app.command(
    "fix-bundle-id",
    help="Force PRODUCT_BUNDLE_IDENTIFIER values in the generated project. Example: safari-ext fix-bundle-id",
    rich_help_panel="Pipeline Commands",
)
def fix_bundle_id(
    pbxproj: str = typer.Option(
        None,
        "--pbxproj",
        help="Path to project.pbxproj (defaults to the configured project)",
    ),
    bundle_id: str = typer.Option(
        None,
        "--bundle-id",
        "-b",
        help="Canonical bundle identifier (overrides SAFARI_BUNDLE_ID)",
    ),
):
    """Rewrite bundle identifiers in an existing Xcode project."""
    configure_logging("TEXT", LOG_LEVEL)
    fix_bundle_id_command(pbxproj, bundle_id)


@app.command(
    "describe",
    help="Show the resolved pipeline configuration. Example: safari-ext describe --output JSON",
    rich_help_panel="Pipeline Commands",
)
def describe(
    output: str = typer.Option(
        "TEXT", "--output", "-o", help="Output format: TEXT (default) or JSON"
    ),
):
    """Show the resolved pipeline configuration."""
    configure_logging(output, LOG_LEVEL)
    describe_command(output)


def cli_error_handler():
    """Handle CLI errors and provide helpful suggestions."""
    is_json_output = "--output" in sys.argv and "JSON" in sys.argv
    try:
        app()
    except SystemExit as e:
        # typer runs in standalone mode and exits through sys.exit
        if e.code not in (0, None) and not is_json_output:
            console.print(f"[dim]Safari Extension Builder v{__version__}[/dim]")
            show_help_suggestion()
        raise
    except Exception as e:
        if not is_json_output:
            console.print(f"[dim]Safari Extension Builder v{__version__}[/dim]")
            console.print(f"\n[red]❌ Error: {e}[/red]")
            show_help_suggestion()
        raise typer.Exit(1)


if __name__ == "__main__":
    cli_error_handler()
