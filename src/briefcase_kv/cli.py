from __future__ import annotations

import logging

import click
import typer
from typer.core import TyperCommand

from briefcase_kv.commands import dispatch
from briefcase_kv.config import load_config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
RAW_TOKENS_KEY = "briefcase.raw_tokens"

app = typer.Typer(help="Briefcase CLI", add_completion=False)


class RawTokensCommand(TyperCommand):
    """Keep the argument vector exactly as given, ``--`` included."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_TOKENS_KEY] = list(args)
        return super().parse_args(ctx, args)


@app.command(
    cls=RawTokensCommand,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)
def run(
    ctx: typer.Context,
    tokens: list[str] | None = typer.Argument(
        None,
        help="Command name, then an optional entry name and value.",
    ),
) -> None:
    """Store and fetch named values under a scratch directory."""
    try:
        config = load_config()
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    raw_tokens = ctx.meta.get(RAW_TOKENS_KEY, tokens or [])
    result = dispatch(raw_tokens, prompt=_confirm, config=config)
    if result.output:
        typer.echo(result.output, nl=False)
    if result.message:
        typer.echo(result.message, err=not result.ok)
    if not result.ok:
        raise typer.Exit(code=1)


def _confirm(text: str) -> str:
    try:
        return typer.prompt(text, default="", show_default=False)
    except typer.Abort:
        return ""


def main() -> None:
    """CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
