"""
Scytale CLI
============

Click-based command-line interface for the Scytale classical cipher
toolkit.

Usage::

    python -m scytale ciphers
    python -m scytale encode caesar "Hello, World!" --key 3
    python -m scytale decode two_square "OEGX" -k EXAMPLE -s KEYWORD
    python -m scytale encode adfgvx "ATTACK AT 1200" -k PH0QG64 -s 3142
    python -m scytale frequency "It was the best of times..."
    python -m scytale crack-shift "Olssv, Dvysk!"
    python -m scytale kasiski "LXFOPVEFRNHR..."
    python -m scytale -o json detect-language "Il etait une fois..."

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence

import click
from pydantic import BaseModel

from shared.config import ScytaleConfig
from shared.console import ScytaleConsole

from scytale import __version__
from scytale.ciphers import CIPHER_REGISTRY
from scytale.core.engine import ScytaleEngine
from scytale.core.errors import CipherError
from scytale.output.console import ScytaleConsoleOutput
from scytale.output.report import ReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="scytale")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to Scytale configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and print bare results.",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Log cipher internals at DEBUG level.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
    debug: bool,
) -> None:
    """Scytale -- Classical Cipher Toolkit.

    Encode and decode with classical ciphers, analyse letter
    frequencies, and brute-force shift ciphers.
    """
    ctx.ensure_object(dict)

    scytale_config = ScytaleConfig.load(config) if config else ScytaleConfig()
    if debug:
        scytale_config.global_settings.debug = True
    ctx.obj["config"] = scytale_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = ScytaleConsole()
    ctx.obj["console"] = console
    ctx.obj["engine"] = ScytaleEngine(scytale_config)
    ctx.obj["display"] = ScytaleConsoleOutput(console)
    ctx.obj["reporter"] = ReportGenerator()

    if not quiet and output == "console":
        console.banner(version=scytale_config.global_settings.version)


def _handle_output(
    ctx: click.Context, kind: str, payload: BaseModel | Sequence[BaseModel]
) -> None:
    """Emit *payload* as JSON to stdout or to ``--output-file``."""
    output_file = ctx.obj["output_file"]
    reporter: ReportGenerator = ctx.obj["reporter"]
    console: ScytaleConsole = ctx.obj["console"]

    if output_file:
        path = reporter.generate_json(kind, payload, Path(output_file))
        if not ctx.obj["quiet"]:
            console.success(f"JSON report saved to: {path}")
    else:
        click.echo(reporter.to_json(kind, payload))


def _read_text(text: str) -> str:
    """``-`` reads the text from standard input."""
    if text == "-":
        return click.get_text_stream("stdin").read()
    return text


# ===================================================================== #
#  Cipher commands
# ===================================================================== #

_CIPHER_CHOICE = click.Choice(sorted(CIPHER_REGISTRY), case_sensitive=False)


def _cipher_options(func: Any) -> Any:
    options = [
        click.option("--key", "-k", default=None, help="Primary key (shift, keyword or permutation)."),
        click.option(
            "--secondary-key", "-s", default=None,
            help="Second keyword (Two-Square B, Four-Square bottom-left, ADFGX/ADFGVX transposition, Quagmire 4 cipher alphabet).",
        ),
        click.option("--indicator", "-i", default=None, help="Quagmire indicator letter."),
        click.option("--repeat-key", "-r", default=None, help="Quagmire repeating key."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _run_cipher(
    ctx: click.Context, operation: str, name: str, message: str, **keys: Any
) -> None:
    engine: ScytaleEngine = ctx.obj["engine"]
    runner = engine.encode if operation == "encode" else engine.decode
    try:
        result = runner(name, _read_text(message), **keys)
    except CipherError as exc:
        raise click.ClickException(f"{exc} [{exc.field}]") from exc

    if ctx.obj["output_format"] == "json":
        _handle_output(ctx, operation, result)
    elif ctx.obj["quiet"]:
        click.echo(result.output_text)
    else:
        ctx.obj["display"].display_cipher_result(result)


@cli.command()
@click.argument("name", type=_CIPHER_CHOICE)
@click.argument("message")
@_cipher_options
@click.pass_context
def encode(ctx: click.Context, name: str, message: str, **keys: Any) -> None:
    """Encode MESSAGE with cipher NAME (``-`` reads standard input)."""
    _run_cipher(ctx, "encode", name, message, **keys)


@cli.command()
@click.argument("name", type=_CIPHER_CHOICE)
@click.argument("message")
@_cipher_options
@click.pass_context
def decode(ctx: click.Context, name: str, message: str, **keys: Any) -> None:
    """Decode MESSAGE with cipher NAME (``-`` reads standard input)."""
    _run_cipher(ctx, "decode", name, message, **keys)


@cli.command()
@click.pass_context
def ciphers(ctx: click.Context) -> None:
    """List the available ciphers."""
    infos = ScytaleEngine.list_ciphers()
    if ctx.obj["output_format"] == "json":
        _handle_output(ctx, "ciphers", infos)
    elif ctx.obj["quiet"]:
        for info in infos:
            click.echo(info.method)
    else:
        ctx.obj["display"].display_cipher_list(infos)


# ===================================================================== #
#  Analysis commands
# ===================================================================== #

_LANGUAGE_OPTION = click.option(
    "--language", "-l",
    default=None,
    help="Reference language (default from configuration).",
)


@cli.command()
@click.argument("text")
@_LANGUAGE_OPTION
@click.pass_context
def frequency(ctx: click.Context, text: str, language: Optional[str]) -> None:
    """Letter/bigram frequency analysis of TEXT against a reference language."""
    engine: ScytaleEngine = ctx.obj["engine"]
    try:
        report = engine.analyze(_read_text(text), language)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--language") from exc

    if ctx.obj["output_format"] == "json":
        _handle_output(ctx, "frequency", report)
    else:
        ctx.obj["display"].display_frequency(report)


@cli.command("crack-shift")
@click.argument("ciphertext")
@_LANGUAGE_OPTION
@click.option("--top", "-n", type=click.IntRange(1, 26), default=None, help="Candidates to show.")
@click.pass_context
def crack_shift(
    ctx: click.Context, ciphertext: str, language: Optional[str], top: Optional[int]
) -> None:
    """Brute-force all 26 Caesar shifts of CIPHERTEXT, best first."""
    engine: ScytaleEngine = ctx.obj["engine"]
    limit = top or engine.config.analysis.top_candidates
    try:
        candidates = engine.crack_shift(_read_text(ciphertext), language)
    except CipherError as exc:
        raise click.ClickException(f"{exc} [{exc.field}]") from exc
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--language") from exc

    if ctx.obj["output_format"] == "json":
        _handle_output(ctx, "crack_shift", candidates[:limit])
    elif ctx.obj["quiet"]:
        best = candidates[0]
        click.echo(f"{best.shift}\t{best.plaintext}")
    else:
        ctx.obj["display"].display_candidates(candidates, limit=limit)


@cli.command("detect-language")
@click.argument("text")
@click.pass_context
def detect_language(ctx: click.Context, text: str) -> None:
    """Rank the reference languages by how well TEXT fits them."""
    engine: ScytaleEngine = ctx.obj["engine"]
    scores = engine.detect_language(_read_text(text))

    if ctx.obj["output_format"] == "json":
        _handle_output(ctx, "detect_language", scores)
    elif ctx.obj["quiet"]:
        click.echo(scores[0].language if scores else "")
    else:
        ctx.obj["display"].display_languages(scores)


@cli.command()
@click.argument("ciphertext")
@click.pass_context
def kasiski(ctx: click.Context, ciphertext: str) -> None:
    """Estimate the key period of CIPHERTEXT from repeated trigrams."""
    engine: ScytaleEngine = ctx.obj["engine"]
    report = engine.kasiski(_read_text(ciphertext))

    if ctx.obj["output_format"] == "json":
        _handle_output(ctx, "kasiski", report)
    elif ctx.obj["quiet"]:
        click.echo(report.best_key_length or "")
    else:
        ctx.obj["display"].display_kasiski(report)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Scytale CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
