"""CLI interface for replay_gain."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
import json
import logging

import typer

from .interfaces.cli_handlers import analyze_paths, analyze_raw_input, resolve_config

app = typer.Typer(help="ReplayGain loudness analysis for stereo float audio")


class Endianness(str, Enum):
    NATIVE = "native"
    LITTLE = "little"
    BIG = "big"


@app.callback()
def _configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@app.command("raw")
def raw_command(
    rate: int = typer.Option(..., "--rate", "-r", help="Sample rate of the input in Hz."),
    input_path: Path | None = typer.Option(
        None,
        "--input",
        "-i",
        help="File of raw interleaved stereo float32 samples; stdin when omitted or '-'.",
    ),
    endianness: Endianness | None = typer.Option(
        None,
        "--endianness",
        case_sensitive=False,
        help="Byte order of the raw samples (default from config, else native).",
    ),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="JSON or YAML scan config."),
) -> None:
    """Analyse raw float samples and print track gain and peak."""

    try:
        config = resolve_config(config_path, endianness.value if endianness is not None else None)
        result = analyze_raw_input(rate, input_path, config)
    except (OSError, ValueError) as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=2) from error

    typer.echo(f"track_gain = {result.gain:.2f} dB")
    typer.echo(f"track_peak = {result.peak:.6f}")


@app.command("files")
def files_command(
    paths: list[Path] = typer.Argument(..., help="Stereo audio files to analyse."),
    album: bool = typer.Option(False, "--album", help="Also compute the album gain over all files."),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON."),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="JSON or YAML scan config."),
) -> None:
    """Analyse decoded audio files and print per-track (and album) gain and peak."""

    try:
        config = resolve_config(config_path)
    except (OSError, ValueError) as error:
        typer.echo(f"Error: invalid config: {error}", err=True)
        raise typer.Exit(code=2) from error

    try:
        rows, album_summary = analyze_paths(paths, config, album=album)
    except Exception as error:  # noqa: BLE001
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1) from error

    if as_json:
        typer.echo(json.dumps({"tracks": rows, "album": album_summary}, indent=2))
    else:
        for row in rows:
            if row["status"] == "succeeded":
                typer.echo(f"[OK] {row['path']}: track_gain = {row['gain_db']:.2f} dB, track_peak = {row['peak']:.6f}")
            else:
                typer.echo(f"[FAILED] {row['path']}: error={row['error']} correlation_id={row['correlation_id']}")
        if album_summary is not None:
            typer.echo(
                f"album_gain = {album_summary['gain_db']:.2f} dB, album_peak = {album_summary['peak']:.6f}"
            )

    if any(row["status"] != "succeeded" for row in rows):
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
