"""CLI commands for emojipick."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from emojipick.aggregator.locales import discover_locales, host_locale_tokens
from emojipick.errors import BaselineMissing, InjectionError
from emojipick.models.annotation import EmojiRecord
from emojipick.models.config import EmojiPickConfig
from emojipick.picker import EmojiPicker
from emojipick.search.category import classify

console = Console()


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def get_picker(config_path: str | None, index_path: str | None) -> EmojiPicker:
    config = EmojiPickConfig.load(Path(config_path) if config_path else None)
    return EmojiPicker(config, index_path=index_path)


def _records_table(title: str, records: list[EmojiRecord]) -> Table:
    table = Table(title=title)
    table.add_column("Emoji")
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="blue")
    table.add_column("Code points", style="dim")

    for record in records:
        table.add_row(
            record.glyph,
            record.name,
            classify(record.glyph).label,
            record.codepoints,
        )
    return table


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="YAML config file")
@click.option("--index", "-i", "index_path", default=None, help="Emoji index artifact")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, index_path: str | None, verbose: bool) -> None:
    """emojipick - Emoji picker and CLDR annotation index builder."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["picker"] = get_picker(config_path, index_path)


@main.command()
@click.option("--locale", "-l", "locales", multiple=True, help="Extra locale to fetch (can repeat)")
@click.option("--detect/--no-detect", default=None, help="Detect locales configured on this host")
@click.option("--output", "-o", default=None, help="Output path for the index artifact")
@click.pass_context
def build(
    ctx: click.Context,
    locales: tuple[str, ...],
    detect: bool | None,
    output: str | None,
) -> None:
    """Build the emoji index from the baseline and CLDR translations."""
    picker: EmojiPicker = ctx.obj["picker"]
    if detect is not None:
        picker.config.aggregator.detect_host_locales = detect

    async def run():
        return await picker.build_index(
            list(locales),
            output_path=Path(output) if output else None,
        )

    try:
        with console.status("Fetching annotations..."):
            result = asyncio.run(run())
    except BaselineMissing as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    table = Table(title="Locales")
    table.add_column("Locale", style="cyan")
    table.add_column("Status")
    table.add_column("Annotations", justify="right", style="green")

    for locale_result in result.results:
        if locale_result.reading is not None:
            table.add_row(locale_result.locale, "[green]loaded[/green]", str(len(locale_result.reading)))
        else:
            reason = locale_result.failure.value if locale_result.failure else "failed"
            table.add_row(locale_result.locale, f"[yellow]skipped ({reason})[/yellow]", "-")

    console.print(table)
    console.print(
        f"[green]Wrote {len(result.records)} emoji to {result.output_path}[/green]"
    )


@main.command()
@click.pass_context
def locales(ctx: click.Context) -> None:
    """Show the locales a build would attempt."""
    picker: EmojiPicker = ctx.obj["picker"]
    config = picker.config.aggregator
    tokens = list(config.extra_locales)
    if config.detect_host_locales:
        tokens.extend(host_locale_tokens())
    for locale in discover_locales(tokens, baseline=config.baseline_locale):
        console.print(locale)


@main.command("list")
@click.option("--limit", "-n", default=50, help="Max entries")
@click.pass_context
def list_emojis(ctx: click.Context, limit: int) -> None:
    """List emoji in presentation order."""
    picker: EmojiPicker = ctx.obj["picker"]
    records = picker.get_all()
    console.print(_records_table("Emoji", records[:limit]))
    console.print(f"[dim]{len(records)} emoji in index[/dim]")


@main.command()
@click.argument("query")
@click.option("--limit", "-n", default=20, help="Max results")
@click.pass_context
def search(ctx: click.Context, query: str, limit: int) -> None:
    """Search emoji by keyword in any loaded language."""
    picker: EmojiPicker = ctx.obj["picker"]
    results = picker.search(query, limit)
    if not results:
        console.print(f"[yellow]No results for '{query}'[/yellow]")
        return
    console.print(_records_table(f"Search: {query}", results))
    console.print(f"[dim]Found {len(results)} results[/dim]")


@main.command("type")
@click.argument("glyph")
@click.option("--window", "-w", default=None, help="Target window ID (default: active window)")
@click.pass_context
def type_emoji(ctx: click.Context, glyph: str, window: str | None) -> None:
    """Paste an emoji into a window."""
    picker: EmojiPicker = ctx.obj["picker"]
    try:
        target = picker.type_emoji(glyph, window)
    except InjectionError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
    console.print(f"[green]Typed {glyph} into window {target}[/green]")


@main.command()
@click.option("--host", default="127.0.0.1", help="Host to bind")
@click.option("--port", "-p", default=8000, help="Port to bind")
@click.option("--prefix", default="/emoji", help="API prefix")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, prefix: str) -> None:
    """Start the lookup API server."""
    import uvicorn
    from fastapi import FastAPI

    from emojipick.api import create_router

    picker: EmojiPicker = ctx.obj["picker"]

    app = FastAPI(title="emojipick API")
    app.include_router(create_router(picker, prefix=prefix))

    console.print(f"[green]Starting server at http://{host}:{port}{prefix}[/green]")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
