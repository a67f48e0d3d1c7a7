"""
Breaker CLI
============

Click-based command-line interface for the Breaker cryptanalysis
toolkit. Text is read from a file, from standard input (``-``, the
default) or from ``--text``.

Usage::

    python -m breaker caesar encrypt --key 3 --text "hello"
    python -m breaker caesar crack secret.txt
    python -m breaker vigenere decrypt --key lemon secret.txt
    python -m breaker vigenere crack secret.txt --min-length 3 --max-length 8
    python -m breaker vigenere period secret.txt
    python -m breaker vigenere brute-force secret.txt --key-length 3
    python -m breaker vigenere find-key secret.txt --plaintext "attack" --key-length 5
    python -m breaker substitution encrypt --key qwertyuiopasdfghjklzxcvbnm plain.txt
    python -m breaker --language french languages

Exit status is 1 for invalid input (bad key, unknown language, ...)
and 2 when an analysis found nothing to report.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any, Callable, Iterator, Optional, TextIO

import click
from pydantic import BaseModel

from shared.config import CryptexConfig
from shared.console import CryptexConsole

from breaker import __version__
from breaker.core.engine import BreakerEngine
from breaker.core.language import LANGUAGES, get_language
from breaker.output.console import BreakerConsoleOutput
from breaker.output.report import BreakerReportGenerator


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _read_text(source: TextIO, text: Optional[str]) -> str:
    """Inline ``--text`` wins over the SOURCE file."""
    if text is not None:
        return text
    return source.read()


def _parse_offset(key: str) -> int | str:
    """Caesar keys are either an integer offset or a key letter."""
    try:
        return int(key)
    except ValueError:
        return key.lower()


def _handles_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Report invalid input through the console and exit with status 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx = click.get_current_context()
        try:
            return func(*args, **kwargs)
        except ValueError as exc:
            console: CryptexConsole = ctx.obj["console"]
            engine: BreakerEngine = ctx.obj["engine"]
            engine.logger.error("%s failed: %s", ctx.info_name, exc)
            console.error(str(exc))
            ctx.exit(1)

    return wrapper


def _banner(ctx: click.Context) -> None:
    if not ctx.obj["quiet"] and ctx.obj["output_format"] == "console":
        ctx.obj["console"].banner(version=__version__)


def _handle_output(ctx: click.Context, result: BaseModel) -> None:
    """Write *result* as JSON to the output file or standard output."""
    reporter: BreakerReportGenerator = ctx.obj["reporter"]
    console: CryptexConsole = ctx.obj["console"]
    output_file = ctx.obj["output_file"]

    if output_file:
        path = reporter.generate_json(result, Path(output_file))
        if not ctx.obj["quiet"]:
            console.success(f"JSON report saved to: {path}")
    else:
        click.echo(reporter.to_json(result))


def _no_result(ctx: click.Context, message: str) -> None:
    ctx.obj["console"].warning(message)
    ctx.exit(2)


_source_argument = click.argument(
    "source", type=click.File("r", encoding="utf-8"), default="-"
)
_text_option = click.option(
    "--text", "-t", default=None, help="Use this text instead of reading SOURCE."
)


def _repetition_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option(
        "--max-length", type=click.IntRange(min=1), default=None,
        help="Longest repeated substring to examine (default from config).",
    )(func)
    func = click.option(
        "--min-length", type=click.IntRange(min=1), default=None,
        help="Shortest repeated substring to examine (default from config).",
    )(func)
    return func


def _lengths(ctx: click.Context, min_length: Optional[int], max_length: Optional[int]) -> range:
    settings = ctx.obj["config"].breaker
    low = min_length if min_length is not None else settings.repetition_min
    high = max_length if max_length is not None else settings.repetition_max
    if low > high:
        raise click.BadParameter(f"--min-length {low} is greater than --max-length {high}")
    return range(low, high + 1)


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="breaker")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a Cryptex configuration file (TOML).",
)
@click.option(
    "--language", "-l",
    default=None,
    help="Frequency table to score against (default from config: english).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format for analysis commands.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the JSON report to this file.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner and informational logging.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    language: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """Cryptex Breaker -- Classical Cipher Cryptanalysis.

    Encrypt, decrypt and break Caesar and Vigenere ciphers using
    letter-frequency statistics.
    """
    ctx.ensure_object(dict)

    cryptex_config = CryptexConfig.load(config)
    if quiet:
        cryptex_config.global_settings.log_level = "WARNING"
    if language:
        cryptex_config.breaker.language = language

    console = CryptexConsole()
    ctx.obj["config"] = cryptex_config
    ctx.obj["output_format"] = output or cryptex_config.breaker.output_format
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = console
    ctx.obj["display"] = BreakerConsoleOutput(console)
    ctx.obj["reporter"] = BreakerReportGenerator()

    try:
        ctx.obj["engine"] = BreakerEngine(cryptex_config)
    except ValueError as exc:
        console.error(str(exc))
        ctx.exit(1)


@cli.command()
@click.pass_context
def languages(ctx: click.Context) -> None:
    """List the available frequency tables."""
    custom = ctx.obj["config"].languages
    rows = []
    for name in sorted(set(LANGUAGES) | set(custom)):
        model = get_language(name, custom)
        common = sorted(model.frequencies.items(), key=lambda kv: -kv[1])[:6]
        rows.append((
            name,
            "config" if name in custom else "built-in",
            model.size,
            " ".join(f"{c}={f:.3f}" for c, f in common),
        ))
    ctx.obj["console"].table(
        "Languages", ["Name", "Source", "Letters", "Most Frequent"], rows
    )


# ===================================================================== #
#  Caesar
# ===================================================================== #

@cli.group()
def caesar() -> None:
    """Caesar (single shift) cipher."""


@caesar.command("encrypt")
@_source_argument
@_text_option
@click.option("--key", "-k", required=True, help="Offset (integer) or key letter.")
@click.pass_context
@_handles_errors
def caesar_encrypt(ctx: click.Context, source: TextIO, text: Optional[str], key: str) -> None:
    """Shift SOURCE forwards by KEY."""
    engine: BreakerEngine = ctx.obj["engine"]
    click.echo(engine.caesar_encrypt(_read_text(source, text), _parse_offset(key)), nl=text is not None)


@caesar.command("decrypt")
@_source_argument
@_text_option
@click.option("--key", "-k", required=True, help="Offset (integer) or key letter.")
@click.pass_context
@_handles_errors
def caesar_decrypt(ctx: click.Context, source: TextIO, text: Optional[str], key: str) -> None:
    """Shift SOURCE backwards by KEY."""
    engine: BreakerEngine = ctx.obj["engine"]
    click.echo(engine.caesar_decrypt(_read_text(source, text), _parse_offset(key)), nl=text is not None)


@caesar.command("crack")
@_source_argument
@_text_option
@click.option("--top", type=click.IntRange(min=1), default=5, show_default=True,
              help="Number of ranked shifts to display.")
@click.pass_context
@_handles_errors
def caesar_crack(ctx: click.Context, source: TextIO, text: Optional[str], top: int) -> None:
    """Find the shift whose decryption best matches the language."""
    engine: BreakerEngine = ctx.obj["engine"]
    display: BreakerConsoleOutput = ctx.obj["display"]

    result = engine.crack_caesar(_read_text(source, text))

    if ctx.obj["output_format"] == "console":
        _banner(ctx)
        display.display_caesar(result, top=top)
    else:
        _handle_output(ctx, result)


# ===================================================================== #
#  Vigenere
# ===================================================================== #

@cli.group()
def vigenere() -> None:
    """Vigenere (repeating key) cipher."""


@vigenere.command("encrypt")
@_source_argument
@_text_option
@click.option("--key", "-k", required=True, help="Key of alphabet letters.")
@click.pass_context
@_handles_errors
def vigenere_encrypt(ctx: click.Context, source: TextIO, text: Optional[str], key: str) -> None:
    """Encrypt SOURCE with KEY."""
    engine: BreakerEngine = ctx.obj["engine"]
    click.echo(engine.vigenere_encrypt(_read_text(source, text), key.lower()), nl=text is not None)


@vigenere.command("decrypt")
@_source_argument
@_text_option
@click.option("--key", "-k", required=True, help="Key of alphabet letters.")
@click.pass_context
@_handles_errors
def vigenere_decrypt(ctx: click.Context, source: TextIO, text: Optional[str], key: str) -> None:
    """Decrypt SOURCE with KEY."""
    engine: BreakerEngine = ctx.obj["engine"]
    click.echo(engine.vigenere_decrypt(_read_text(source, text), key.lower()), nl=text is not None)


@vigenere.command("period")
@_source_argument
@_text_option
@_repetition_options
@click.pass_context
@_handles_errors
def vigenere_period(
    ctx: click.Context,
    source: TextIO,
    text: Optional[str],
    min_length: Optional[int],
    max_length: Optional[int],
) -> None:
    """Guess the key length from gaps between repeated substrings."""
    engine: BreakerEngine = ctx.obj["engine"]
    display: BreakerConsoleOutput = ctx.obj["display"]

    report = engine.guess_period(_read_text(source, text), _lengths(ctx, min_length, max_length))

    if ctx.obj["output_format"] == "console":
        _banner(ctx)
        display.display_period(report)
    else:
        _handle_output(ctx, report)
    if not report.key_lengths:
        _no_result(ctx, "No repeated substrings found; key length unknown")


@vigenere.command("crack")
@_source_argument
@_text_option
@_repetition_options
@click.pass_context
@_handles_errors
def vigenere_crack(
    ctx: click.Context,
    source: TextIO,
    text: Optional[str],
    min_length: Optional[int],
    max_length: Optional[int],
) -> None:
    """Guess the key length, then break each key position separately."""
    engine: BreakerEngine = ctx.obj["engine"]
    display: BreakerConsoleOutput = ctx.obj["display"]

    result = engine.crack_vigenere(_read_text(source, text), _lengths(ctx, min_length, max_length))
    if result is None:
        _no_result(ctx, "No repeated substrings found; try shorter repeat lengths or longer text")
        return

    if ctx.obj["output_format"] == "console":
        _banner(ctx)
        display.display_vigenere(result)
    else:
        _handle_output(ctx, result)


def _read_keys(fh: TextIO) -> Iterator[str]:
    for line in fh:
        key = line.strip()
        if key:
            yield key.lower()


@vigenere.command("brute-force")
@_source_argument
@_text_option
@click.option("--key-length", "-n", type=click.IntRange(min=1), default=None,
              help="Try every key of this length.")
@click.option("--keys", "keys_file", type=click.File("r", encoding="utf-8"), default=None,
              help="File of candidate keys, one per line.")
@click.option("--top", type=click.IntRange(min=1), default=None,
              help="Number of best candidates to keep (default from config).")
@click.pass_context
@_handles_errors
def vigenere_brute_force(
    ctx: click.Context,
    source: TextIO,
    text: Optional[str],
    key_length: Optional[int],
    keys_file: Optional[TextIO],
    top: Optional[int],
) -> None:
    """Score every candidate key and show the best ones."""
    engine: BreakerEngine = ctx.obj["engine"]
    display: BreakerConsoleOutput = ctx.obj["display"]
    if (key_length is None) == (keys_file is None):
        raise click.UsageError("Give exactly one of --key-length or --keys")

    ciphertext = _read_text(source, text)
    keys = _read_keys(keys_file) if keys_file is not None else None
    with ctx.obj["console"].status("Scoring candidate keys..."):
        report = engine.brute_force(ciphertext, key_length=key_length, keys=keys, top=top)

    if ctx.obj["output_format"] == "console":
        _banner(ctx)
        display.display_brute_force(report)
    else:
        _handle_output(ctx, report)


@vigenere.command("find-key")
@_source_argument
@_text_option
@click.option("--plaintext", "-p", required=True, help="Known plaintext at the start of SOURCE.")
@click.option("--key-length", "-n", type=click.IntRange(min=1), required=True,
              help="Length of the key.")
@click.pass_context
@_handles_errors
def vigenere_find_key(
    ctx: click.Context,
    source: TextIO,
    text: Optional[str],
    plaintext: str,
    key_length: int,
) -> None:
    """Recover the key from a known plaintext."""
    engine: BreakerEngine = ctx.obj["engine"]
    click.echo(engine.find_key(_read_text(source, text), plaintext, key_length))


# ===================================================================== #
#  Substitution
# ===================================================================== #

@cli.group()
def substitution() -> None:
    """Simple substitution cipher with a known key."""


@substitution.command("encrypt")
@_source_argument
@_text_option
@click.option("--key", "-k", required=True, help="Permutation of the alphabet.")
@click.pass_context
@_handles_errors
def substitution_encrypt(ctx: click.Context, source: TextIO, text: Optional[str], key: str) -> None:
    """Encrypt SOURCE, mapping the alphabet onto KEY."""
    engine: BreakerEngine = ctx.obj["engine"]
    click.echo(engine.substitution_encrypt(_read_text(source, text), key), nl=text is not None)


@substitution.command("decrypt")
@_source_argument
@_text_option
@click.option("--key", "-k", required=True, help="Permutation of the alphabet.")
@click.pass_context
@_handles_errors
def substitution_decrypt(ctx: click.Context, source: TextIO, text: Optional[str], key: str) -> None:
    """Decrypt SOURCE, mapping KEY back onto the alphabet."""
    engine: BreakerEngine = ctx.obj["engine"]
    click.echo(engine.substitution_decrypt(_read_text(source, text), key), nl=text is not None)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Breaker CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
