"""CLI entrypoints for mapweaver."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from mapweaver.colors import PALETTES
from mapweaver.config import load_settings
from mapweaver.errors import MapWeaverError
from mapweaver.layout import LayoutMode
from mapweaver.logging import configure_logging, get_logger, log_exception
from mapweaver.pipeline import render as render_diagram
from mapweaver.structure import load_structure

app = typer.Typer(add_completion=False, help="mapweaver mind map layout CLI")
logger = get_logger(__name__)


@app.command()
def render(
    structure: Path = typer.Argument(..., help="Map structure JSON ({\"root\": {...}} or a bare node)."),
    mode: str | None = typer.Option(
        None,
        "--mode",
        "-m",
        help="Layout mode (see `mapweaver modes`). Defaults to MAPWEAVER_DEFAULT_MODE.",
    ),
    palette: int | None = typer.Option(None, "--palette", "-p", help="Palette index (see `mapweaver palettes`)."),
    title: str | None = typer.Option(None, "--title", help="Root title used if the structure is unusable."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write diagram JSON here instead of stdout."),
) -> None:
    """Lay out a map structure and emit positioned nodes and edges as JSON."""

    settings = load_settings()
    configure_logging(settings.log_level)

    selected = mode or settings.default_mode
    try:
        layout_mode = LayoutMode(selected)
    except ValueError:
        raise typer.BadParameter(f"Unknown mode {selected!r}. Try `mapweaver modes`.") from None

    root = load_structure(structure, fallback_title=title or settings.default_title)
    try:
        diagram = render_diagram(
            root,
            layout_mode,
            settings.palette_index if palette is None else palette,
            settings=settings,
        )
    except MapWeaverError as exc:
        log_exception(logger, "Render failed", structure=str(structure))
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    payload = json.dumps(diagram.model_dump(mode="json"), ensure_ascii=False, indent=2)
    if output is None:
        typer.echo(payload)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload, encoding="utf-8")
    logger.info("Wrote %d nodes to %s", len(diagram.nodes), output)
    typer.echo(str(output))


@app.command()
def modes() -> None:
    """List the available layout modes."""

    for m in LayoutMode:
        typer.echo(m.value)


@app.command()
def palettes() -> None:
    """List the built-in palettes by index."""

    for i, colors in enumerate(PALETTES):
        typer.echo(f"{i}: {' '.join(colors)}")


if __name__ == "__main__":
    app()
