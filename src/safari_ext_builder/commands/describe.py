"""Describe command implementation."""

import json

import typer
from rich.console import Console

from ._config import load_pipeline_config

console = Console()


def describe_command(output: str = "TEXT"):
    """Show the configuration the pipeline would run with."""
    config = load_pipeline_config()

    if output.upper() == "JSON":
        typer.echo(json.dumps(config.to_dict(), indent=2))
        return

    console.print(f"[yellow]App name:[/yellow] {config.app_name}")
    console.print(f"[yellow]Bundle ID:[/yellow] {config.bundle_id}")
    console.print(f"[yellow]Source:[/yellow] {config.source_dir}")
    console.print(f"[yellow]Project location:[/yellow] {config.project_location}")
    console.print(f"[yellow]Platform:[/yellow] {config.platform.value}")
    console.print(f"[yellow]Xcode project:[/yellow] {config.xcodeproj_path}")
    console.print(
        f"[yellow]Skip xcodebuild:[/yellow] {config.skip_build}   "
        f"[yellow]Skip cleanup:[/yellow] {config.skip_cleanup}"
    )

    if config.legacy_names:
        console.print("[yellow]Legacy names to clean:[/yellow]")
        for name in config.legacy_names:
            console.print(f"  - {name}")
    else:
        console.print("[yellow]Legacy names to clean:[/yellow] (none)")
