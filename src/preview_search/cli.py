"""CLI for preview-search (find, browse, modes)."""

import json
import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from preview_search.config import DEFAULT_MATCHER, MATCHER_MENU, TERMINAL_VIEWPORT_HEIGHT
from preview_search.core.highlight.sync import counter_text
from preview_search.core.search.navigation import search
from preview_search.core.tree.markdown import parse_markdown
from preview_search.core.tree.walker import node_at
from preview_search.logging_config import configure_logging
from preview_search.models.state import Direction
from preview_search.models.tree import DocNode, MatcherMode
from preview_search.overlay import SearchOverlay
from preview_search.terminal import TerminalPresentation

app = typer.Typer(help="Search and step through matches in a rendered markdown document.")

_SNIPPET_CONTEXT = 20


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Also write a debug log to this file"),
    ] = None,
) -> None:
    configure_logging(verbose=verbose, log_file=log_file)


def _load_document(path: Path) -> DocNode:
    """Read and render a markdown file, exiting if it is missing."""
    if not path.is_file():
        logger.error("Markdown file not found: {}", path)
        raise typer.Exit(1)
    return parse_markdown(path.read_text(encoding="utf-8"))


def _parse_mode(name: str) -> MatcherMode:
    try:
        return MatcherMode.parse(name)
    except ValueError:
        choices = ", ".join(m.value for m in MATCHER_MENU)
        logger.error("Unknown matcher mode {!r} (choose from {})", name, choices)
        raise typer.Exit(1) from None


def _snippet(text: str, offset: int, length: int) -> str:
    start = max(0, offset - _SNIPPET_CONTEXT)
    end = min(len(text), offset + length + _SNIPPET_CONTEXT)
    before = text[start:offset]
    hit = text[offset : offset + length]
    after = text[offset + length : end]
    return f"{before}**{hit}**{after}".replace("\n", " ")


@app.command()
def find(
    file: Path = typer.Argument(..., help="Markdown file to search"),
    query: str = typer.Argument(..., help="Search query"),
    mode: str = typer.Option(DEFAULT_MATCHER.value, "--mode", "-m", help="Matcher mode"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List every match of a query, in document order."""
    matcher = _parse_mode(mode)
    tree = _load_document(file)
    index, state = search(tree, query, matcher)

    if output_json:
        data = {
            "query": query,
            "mode": matcher.value,
            "counter": counter_text(state),
            "matches": [
                {
                    "node": m.node_index,
                    "path": list(m.path),
                    "offset": m.offset,
                    "length": m.length,
                    "tag": node_at(tree, m.path).tag,
                }
                for m in index
            ],
            "total": index.total(),
        }
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(f"Found {index.total()} matches ({matcher.label}):\n")
    for i, m in enumerate(index):
        node = node_at(tree, m.path)
        typer.echo(f"  {i + 1:>4}. [{node.tag}] {_snippet(node.text or '', m.offset, m.length)}")


@app.command()
def browse(
    file: Path = typer.Argument(..., help="Markdown file to preview"),
    mode: str = typer.Option(DEFAULT_MATCHER.value, "--mode", "-m", help="Initial matcher mode"),
    height: int = typer.Option(
        TERMINAL_VIEWPORT_HEIGHT, "--height", "-H", min=1, help="Visible rows"
    ),
) -> None:
    """Interactive search overlay reading commands from stdin.

    Plain text sets the query; ``:n`` / ``:p`` step forward and backward,
    ``:mode NAME`` switches matcher and ``:q`` closes the overlay.
    """
    tree = _load_document(file)
    presentation = TerminalPresentation(tree, height=height)
    overlay = SearchOverlay(presentation, tree, mode=_parse_mode(mode))

    for raw in sys.stdin:
        line = raw.rstrip("\n")
        if line == ":q":
            overlay.close()
            break
        if line == ":n":
            overlay.navigate(Direction.NEXT)
        elif line == ":p":
            overlay.navigate(Direction.PREVIOUS)
        elif line.startswith(":mode "):
            name = line.removeprefix(":mode ").strip()
            try:
                overlay.matcher_mode_changed(MatcherMode.parse(name))
            except ValueError as exc:
                logger.warning("{}", exc)
                continue
        else:
            overlay.query_changed(line)
        typer.echo(presentation.render())
        typer.echo()


@app.command()
def modes() -> None:
    """List the available matcher modes."""
    for m in MATCHER_MENU:
        marker = "*" if m is DEFAULT_MATCHER else " "
        typer.echo(f" {marker} {m.value:<20} {m.label}")
