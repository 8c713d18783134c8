from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from openai import OpenAIError
from rich.console import Console
from rich.markup import escape

from .client import create_client, generate_images
from .config import ConfigError, get_api_key, load_settings
from .models import DEFAULT_COMPRESSION, Background, Moderation, OutputFormat, Quality
from .options import GenOptions
from .prompt import PromptError, resolve_prompt
from .request import RunPlan, build_request, plan_run
from .resolve.size import resolve_size
from .save import EmptyResponseError, OpenError, open_files, save_images
from .validate import validate_options

app = typer.Typer(add_completion=False)
console = Console(stderr=True)


def _fail(message: str, code: int = 1) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    raise typer.Exit(code=code)


def _print_output(as_json: bool, info: RunPlan) -> None:
    if as_json:
        typer.echo(info.to_json())
        return
    for p in info.paths:
        typer.echo(p)


@app.command()
def genimg(
    words: Optional[List[str]] = typer.Argument(None, metavar="[PROMPT]...", show_default=False),
    prompt: Optional[str] = typer.Option(
        None, "--prompt", "-p", help="Image prompt. If omitted, the positional words or stdin are used."
    ),
    size: Optional[str] = typer.Option(
        None, "--size", "-s", help="Explicit API size like auto, 1024x1024, 1536x1024, or 1024x1536"
    ),
    width: Optional[int] = typer.Option(None, "--width", help="Width in pixels. Use with --height."),
    height: Optional[int] = typer.Option(None, "--height", help="Height in pixels. Use with --width."),
    square: bool = typer.Option(False, "--square", help="Use a square preset"),
    landscape: bool = typer.Option(False, "--landscape", help="Use a landscape preset"),
    portrait: bool = typer.Option(False, "--portrait", help="Use a portrait preset"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="OpenAI image model [default: gpt-image-1.5]"),
    fmt: Optional[OutputFormat] = typer.Option(None, "--format", "-f", help="Output file format [default: png]"),
    quality: Optional[Quality] = typer.Option(None, "--quality", "-q", help="Generation quality [default: auto]"),
    background: Background = typer.Option(
        Background.auto, "--background", help="Background mode for GPT image models"
    ),
    moderation: Moderation = typer.Option(
        Moderation.auto, "--moderation", help="Moderation level for GPT image models"
    ),
    compression: int = typer.Option(
        DEFAULT_COMPRESSION, "--compression", help="Compression percent for jpeg/webp output"
    ),
    count: int = typer.Option(1, "--count", "-n", help="Number of images to generate"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Exact output file path. Only valid when --count=1."),
    directory: Optional[Path] = typer.Option(
        None, "--dir", "-d", help="Output directory used when --out is not set [default: .]"
    ),
    name: Optional[str] = typer.Option(None, "--name", help="Output file name without extension"),
    user: Optional[str] = typer.Option(None, "--user", help="Optional end-user identifier sent to OpenAI"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Resolve prompt, size, and paths without calling OpenAI"),
    as_json: bool = typer.Option(False, "--json", help="Print structured JSON instead of plain paths"),
    open_after: bool = typer.Option(False, "--open", help="Open generated file(s) after save on macOS"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """Generate images with the OpenAI Images API and save them to disk."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings()
    except ConfigError as e:
        _fail(str(e))

    opts = GenOptions(
        model=model or settings.model,
        size=size,
        width=width,
        height=height,
        square=square,
        landscape=landscape,
        portrait=portrait,
        format=fmt.value if fmt else settings.format,
        quality=quality.value if quality else settings.quality,
        background=background.value,
        moderation=moderation.value,
        compression=compression,
        count=count,
        out=str(out) if out else None,
        directory=str(directory) if directory else settings.dir,
        name=name,
        user=user,
        open=open_after,
    )

    res = validate_options(opts)
    if not res.ok:
        for e in res.errors:
            console.print(f"[bold red]Error:[/bold red] {escape(e)}")
        raise typer.Exit(code=2)

    try:
        text = resolve_prompt(prompt, words, sys.stdin)
    except PromptError as e:
        _fail(str(e))

    resolved_size = resolve_size(opts.size_request(), opts.model)
    planned = plan_run(opts, text, resolved_size)

    if dry_run:
        _print_output(as_json, planned)
        raise typer.Exit(code=0)

    try:
        key = get_api_key(settings)
        client = create_client(key)
        response = generate_images(client, build_request(opts, text, resolved_size))
        done = save_images(response, opts, text, resolved_size)
        if opts.open:
            open_files(done.paths)
    except (ConfigError, EmptyResponseError, OpenError, OpenAIError, OSError) as e:
        _fail(str(e))

    _print_output(as_json, done)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
