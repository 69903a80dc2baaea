"""CLI entry point: registers all subcommands."""

import typer

app = typer.Typer(
    name="source-metrics",
    help="source-metrics - line-based source code statistics",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .analyze import analyze as _analyze, version as _version  # noqa: F401, E402


def main() -> None:
    app()
