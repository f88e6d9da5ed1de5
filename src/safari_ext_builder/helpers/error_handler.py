"""Error handling utilities for the Safari Extension Builder CLI."""

import typer


def handle_error(message: str, exit_code: int = 1) -> None:
    """Handle errors consistently across the CLI."""
    typer.echo(f"❌ Error: {message}", err=True)
    raise typer.Exit(exit_code)


def handle_warning(message: str) -> None:
    """Handle warnings consistently across the CLI."""
    typer.echo(f"⚠️ Warning: {message}")


def handle_success(message: str) -> None:
    """Handle success messages consistently across the CLI."""
    typer.echo(f"✅ {message}")


def handle_info(message: str) -> None:
    """Handle info messages consistently across the CLI."""
    typer.echo(f"ℹ️ {message}")
