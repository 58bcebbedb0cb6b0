"""Developer CLI (typer + rich)."""
