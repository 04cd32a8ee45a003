"""
CAESAR TOOLKIT - CLI entry point.
"""

import sys
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text
from loguru import logger

from core.config import settings
from cryptanalysis.auto_decode import auto_decode
from cryptanalysis.errors import InvalidArgumentError
from cryptanalysis.frequency import CATEGORY_SCORERS, analyze_all_languages
from cryptanalysis.languages import supported_languages
from cryptanalysis.transforms import brute_force, decode, encode_text, rot13

logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
    level=settings.LOG_LEVEL,
)
logger.add(settings.LOG_FILE, rotation="10 MB", retention="7 days", level="DEBUG")

app = typer.Typer(help="Caesar cipher toolkit: encode, decode, brute force and auto-detect shifts")
console = Console()


def _fail(message: str) -> None:
    console.print(Text.assemble(("Error:", "bold red"), " ", message))
    raise typer.Exit(1)


@app.command()
def encode(
    text: str = typer.Argument(..., help="Plain text"),
    shift: int = typer.Option(..., "--shift", "-s", help="Shift between 1 and 25"),
):
    """Encode text with a Caesar shift."""
    try:
        result = encode_text(text, shift)
    except InvalidArgumentError as e:
        _fail(str(e))
    console.print(Text(result["encoded"]))
    stats = result["stats"]
    console.print(
        f"[dim]shift {shift} | {stats['letterCount']} letters, "
        f"{stats['wordCount']} words, {stats['preservedChars']} preserved[/dim]"
    )


@app.command("decode")
def decode_cmd(
    text: str = typer.Argument(..., help="Ciphertext"),
    shift: int = typer.Option(..., "--shift", "-s", help="Shift used to encode"),
):
    """Decode text encoded with a known shift."""
    if not text.strip():
        _fail("Text is required")
    console.print(Text(decode(text, shift)))


@app.command("rot13")
def rot13_cmd(text: str = typer.Argument(..., help="Text to rotate by 13")):
    """Apply ROT13 (its own inverse)."""
    if not text.strip():
        _fail("Text is required")
    console.print(Text(rot13(text)["encoded"]))


@app.command()
def brute(text: str = typer.Argument(..., help="Ciphertext")):
    """Show the decoding for all 26 shifts."""
    if not text.strip():
        _fail("Text is required")
    table = Table(title="Brute force")
    table.add_column("Shift", justify="right", style="cyan")
    table.add_column("Text")
    for row in brute_force(text):
        table.add_row(str(row["shift"]), Text(row["text"]))
    console.print(table)


@app.command()
def auto(
    text: str = typer.Argument(..., help="Ciphertext"),
    language: str = typer.Option(settings.DEFAULT_LANGUAGE, "--language", "-l", help="english, french, spanish or german"),
    top: int = typer.Option(5, "--top", "-n", min=1, help="Ranked shifts to show"),
):
    """Detect the shift by frequency analysis and decode."""
    if not text.strip():
        _fail("Text is required")
    try:
        outcome = auto_decode(text, language)
    except InvalidArgumentError as e:
        _fail(str(e))
    if not outcome["success"]:
        _fail(outcome["message"])
    console.print(f"[bold cyan]{outcome['language']}[/bold cyan] shift [bold]{outcome['shift']}[/bold] "
                  f"(confidence {outcome['confidence']})")
    console.print(Text(outcome["decoded"]))
    table = Table(title="Ranked shifts")
    table.add_column("Shift", justify="right", style="cyan")
    table.add_column("Score", justify="right")
    for row in outcome["allShifts"][:top]:
        table.add_row(str(row["shift"]), f"{row['score']:.4f}")
    console.print(table)


@app.command()
def analyze(text: str = typer.Argument(..., help="Ciphertext")):
    """Per-language narrowing and best category shifts."""
    if not text.strip():
        _fail("Text is required")
    table = Table(title="Language analysis")
    table.add_column("Language", style="cyan")
    table.add_column("Narrowing")
    table.add_column("Possible", justify="right")
    for category in CATEGORY_SCORERS:
        table.add_column(category, justify="right")
    for analysis in analyze_all_languages(text).values():
        best = [
            str(results[0].shift) if results else "-"
            for results in analysis["categories"].values()
        ]
        table.add_row(analysis["language"], analysis["method"], str(analysis["possibleShiftsCount"]), *best)
    console.print(table)


@app.command()
def languages():
    """List built-in language profiles."""
    for language_id in supported_languages():
        console.print(f"  [green]{language_id}[/green]")


@app.command()
def serve(
    host: str = typer.Option(settings.API_HOST, "--host"),
    port: int = typer.Option(settings.API_PORT, "--port"),
):
    """Run the HTTP API with uvicorn."""
    import uvicorn
    console.print(f"[bold cyan]{settings.APP_NAME}[/bold cyan] on {host}:{port}")
    uvicorn.run("api.main:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    app()
