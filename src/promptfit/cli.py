"""CLI interface for promptfit.

Requires the 'cli' extra: pip install promptfit[cli]
"""

from __future__ import annotations

import sys
from pathlib import Path

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
except ImportError:
    print(
        "CLI dependencies not installed. Install with: pip install promptfit[cli]",
        file=sys.stderr,
    )
    sys.exit(1)

from promptfit import __version__
from promptfit.exceptions import PromptFitError
from promptfit.models.context import ModelContext, TokenizerConfig, TokenizerKind
from promptfit.protocols.tokenizer import Tokenizer
from promptfit.text.chunking import split_chunk_spans
from promptfit.text.trimming import trim_tokens
from promptfit.tokens.resolver import count_tokens, tokenizer_for

app = typer.Typer(
    name="promptfit",
    help="Token-aware chunking and trimming of prompts.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

_PREVIEW_CHARS = 48

ProviderOption = typer.Option("openai", "--provider", "-p", help="Model provider name")
ModelOption = typer.Option(None, "--model", "-m", help="Model name override")
TokenizerOption = typer.Option(
    None, "--tokenizer", "-k", help="Tokenizer kind: auto|tiktoken|character"
)


def _read_source(path: Path) -> str:
    if str(path) == "-":
        return sys.stdin.read()
    if not path.is_file():
        err_console.print(f"[red]Error: {path} does not exist[/red]")
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8")


def _tokenizer(provider: str, model: str | None, kind: str | None) -> Tokenizer:
    tokenizer_config = None
    if kind is not None:
        try:
            tokenizer_config = TokenizerConfig(kind=TokenizerKind(kind))
        except ValueError:
            err_console.print(f"[red]Error: unknown tokenizer kind {kind!r}[/red]")
            raise typer.Exit(code=1) from None
    context = ModelContext(provider=provider, model=model, tokenizer=tokenizer_config)
    return tokenizer_for(context)


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
) -> None:
    if version:
        console.print(f"promptfit {__version__}")
        raise typer.Exit()


@app.command()
def info() -> None:
    """Show information about the promptfit installation."""
    table = Table(title="promptfit info")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", __version__)
    table.add_row("Python", sys.version.split()[0])

    for dep_name in ["pydantic", "tiktoken", "transformers"]:
        try:
            mod = __import__(dep_name)
            ver = getattr(mod, "__version__", "installed")
            table.add_row(dep_name, str(ver))
        except ImportError:
            table.add_row(dep_name, "[red]not installed[/red]")

    console.print(table)


@app.command()
def count(
    path: Path = typer.Argument(..., help="File to count, or '-' for stdin"),  # noqa: B008
    provider: str = ProviderOption,
    model: str | None = ModelOption,
    tokenizer: str | None = TokenizerOption,
) -> None:
    """Count the tokens of a file."""
    text = _read_source(path)
    resolved = _tokenizer(provider, model, tokenizer)
    console.print(f"{count_tokens(text, resolved)} tokens ({resolved!r})")


@app.command()
def trim(
    path: Path = typer.Argument(..., help="File to trim, or '-' for stdin"),  # noqa: B008
    max_tokens: int = typer.Option(..., "--max-tokens", "-t", help="Token budget"),
    provider: str = ProviderOption,
    model: str | None = ModelOption,
    tokenizer: str | None = TokenizerOption,
) -> None:
    """Print the last MAX_TOKENS tokens of a file."""
    text = _read_source(path)
    try:
        result = trim_tokens(text, max_tokens, tokenizer=_tokenizer(provider, model, tokenizer))
    except PromptFitError as exc:
        err_console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=1) from None
    console.print(result, markup=False, highlight=False, soft_wrap=True)


@app.command()
def split(
    path: Path = typer.Argument(..., help="File to split, or '-' for stdin"),  # noqa: B008
    chunk_size: int = typer.Option(512, "--chunk-size", "-c", help="Chunk size in tokens"),
    bleed: int = typer.Option(50, "--bleed", "-b", help="Tokens shared by adjacent chunks"),
    provider: str = ProviderOption,
    model: str | None = ModelOption,
    tokenizer: str | None = TokenizerOption,
) -> None:
    """Split a file into overlapping token chunks and list them."""
    text = _read_source(path)
    try:
        chunks = split_chunk_spans(
            text, chunk_size, bleed, tokenizer=_tokenizer(provider, model, tokenizer)
        )
    except PromptFitError as exc:
        err_console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=1) from None

    table = Table(title=f"{len(chunks)} chunks")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Tokens", style="green")
    table.add_column("Preview")
    for chunk in chunks:
        preview = chunk.text[:_PREVIEW_CHARS].replace("\n", " ")
        table.add_row(str(chunk.index), f"{chunk.start}-{chunk.end}", escape(preview))
    console.print(table)


if __name__ == "__main__":
    app()
