from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from kullback.config import settings
from kullback.core.analysis import analyze_text
from kullback.core.errors import KullbackError
from kullback.core.results import AnalysisResult
from kullback.core.spikes import top_candidates
from kullback.core.transcribe import Encoding

app = typer.Typer(help="Kullback CLI: estimate the key length of a periodic cipher via the index of coincidence.")

_BAR_WIDTH = 40


@app.callback()
def _init():
    # Configure logging exactly once per CLI run
    logger.enable("kullback")
    logger.remove()
    logger.add(sys.stderr, format="<level>{level: <8}</level> | {message}", level=settings.LOG_LEVEL)


@app.command()
def encodings():
    """List the supported input encodings."""
    for enc in Encoding:
        typer.echo(enc.value)


def _read_input(text: Optional[str], file: Optional[Path]) -> str:
    if file is not None:
        if text is not None:
            raise typer.BadParameter("Give either TEXT or --file, not both.")
        try:
            return file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise typer.BadParameter(f"Cannot read {file}: {e}")
    if text is None:
        raise typer.BadParameter("Missing input: pass TEXT or --file.")
    return text


def _echo_series(result: AnalysisResult, top: int) -> None:
    series = result.series
    hi = max(p.score for p in series)
    lo = min(p.score for p in series)
    spread = (hi - lo) or 1.0
    spikes = set(result.spikes)

    typer.echo(f"{result.length} bytes, periods 2..{result.max_period}\n")
    for p in series:
        bar = "#" * max(1, round(_BAR_WIDTH * (p.score - lo) / spread))
        mark = "  *" if p.period in spikes else ""
        typer.echo(f"  p={p.period:3d}  ioc={p.score:.5f}  {bar}{mark}")

    typer.echo("\nTop IoC candidates:")
    for p in top_candidates(series, top):
        typer.echo(f"  p={p.period:3d}  ioc={p.score:.5f}")

    if result.spikes:
        typer.echo(f"\nSpikes at: {', '.join(str(s) for s in result.spikes)}")
    else:
        typer.echo("\nNo spikes found.")


@app.command()
def analyze(
    text: Optional[str] = typer.Argument(None, help="Input data (omit when using --file)."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read input data from a file."),
    encoding: str = typer.Option(settings.DEFAULT_ENCODING, "--encoding", "-e", help="UTF8, HEX or BASE64."),
    max_period: Optional[int] = typer.Option(
        None, "--max-period", "-m", help="Largest period to test (default: half the decoded length)."
    ),
    top: int = typer.Option(settings.TOP_CANDIDATES, "--top", "-t", help="How many top candidates to list."),
    as_json: bool = typer.Option(False, "--json", help="Print the score series as JSON."),
):
    """Run the Kullback test and show the IoC for every candidate period."""
    data = _read_input(text, file)
    try:
        result = analyze_text(
            data,
            encoding,
            max_period,
            min_length=settings.MIN_INPUT_LENGTH,
            spike_threshold=settings.SPIKE_THRESHOLD,
        )
    except KullbackError as e:
        raise typer.BadParameter(str(e))

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    _echo_series(result, top)


def main():
    app()


if __name__ == "__main__":
    main()
