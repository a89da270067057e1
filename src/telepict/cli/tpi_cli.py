# -*- coding: utf-8 -*-
"""CLI commands for inspecting saved games."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from telepict.core.errors import GameError
from telepict.core.persistence import load_game
from telepict.models.entry import Drawing, Phrase
from telepict.utils.file_utils import ensure_dir, write_bytes_file, write_text_file
from telepict.utils.image_utils import extension_for_bytes, guess_image_type

app = typer.Typer(help="Inspect and export telephone pictionary save files")
logger = logging.getLogger(__name__)


def _preview(text: str, width: int = 60) -> str:
    flat = " / ".join(text.splitlines())
    return flat if len(flat) <= width else flat[: width - 3] + "..."


@app.command()
def inspect(
    game_file: Path = typer.Argument(..., help="Path to a .tpi file"),
    verbose: bool = typer.Option(False, help="Verbose output"),
) -> None:
    """List the entries of a saved game."""
    if verbose:
        logging.basicConfig(level=logging.INFO)
    try:
        entries = load_game(game_file)
    except GameError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{game_file}: {len(entries)} entries")
    for index, entry in enumerate(entries):
        if isinstance(entry, Phrase):
            typer.echo(f"  [{index}] phrase  {_preview(entry.text)!r}")
        else:
            kind = guess_image_type(entry.data) or "unknown"
            typer.echo(f"  [{index}] drawing {kind}, {len(entry.data)} bytes")


@app.command()
def extract(
    game_file: Path = typer.Argument(..., help="Path to a .tpi file"),
    output_dir: Path = typer.Argument(..., help="Directory for extracted entries"),
) -> None:
    """Write every entry of a saved game to its own file."""
    try:
        entries = load_game(game_file)
    except GameError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        target = ensure_dir(output_dir)
        for index, entry in enumerate(entries):
            if isinstance(entry, Drawing):
                path = write_bytes_file(target / f"entry_{index}{extension_for_bytes(entry.data)}", entry.data)
            else:
                path = write_text_file(target / f"entry_{index}.txt", entry.text)
            logger.info("Extracted entry %d to %s", index, path)
    except OSError as e:
        typer.echo(f"Error: could not write to {output_dir}: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Extracted {len(entries)} entries to {target}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
