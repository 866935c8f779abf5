"""Command line interface for chug."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

import click
from rich.console import Console
from rich.markup import escape

from .cipher import map as map_key
from .cipher import morph
from .config import Settings
from .exceptions import ChugError
from .key import KEY_HEADER_SIZE, parse_key
from .textio import decode_text, encode_text, from_hex, to_hex
from .utils import configure_logging

LOGGER = logging.getLogger(__name__)

console = Console(soft_wrap=True)

SAMPLE_CIPHERTEXT = "I really want some grilled cheese!"
SAMPLE_PLAINTEXT = "I secretly want steak"

_LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def _read_bytes(path: str | None) -> bytes:
    if not path or path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _write_bytes(path: str | None, data: bytes) -> None:
    if not path or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.flush()
        return
    Path(path).write_bytes(data)


def _read_key(path: str, *, as_hex: bool) -> bytes:
    raw = _read_bytes(path)
    if as_hex:
        return from_hex(raw.decode("ascii", errors="replace"))
    return raw


def _fail(ctx: click.Context, exc: ChugError) -> None:
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    ctx.exit(1)


def _describe(label: str, data: bytes, encoding: str, *, with_text: bool = True) -> str:
    line = f"{label}:\t{to_hex(data)}"
    if with_text:
        line += f' ("{decode_text(data, encoding, errors="replace")}")'
    return escape(line)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Set the log level for the CLI session.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Map secrets onto cover data and morph them back."""
    try:
        settings = Settings.from_env().with_overrides(log_level=log_level)
    except ChugError as exc:
        _fail(ctx, exc)
        return
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.command("map")
@click.option("-i", "--plaintext", "plaintext_path", required=True, help="Secret input file ('-' for stdin)")
@click.option("-c", "--ciphertext", "ciphertext_path", required=True, help="Cover data file")
@click.option("-o", "--output", "output_path", default="-", show_default=True, help="Key output file")
@click.option("-s", "--start-index", type=int, default=0, show_default=True, help="Offset into the ciphertext")
@click.option("--hex", "as_hex", is_flag=True, help="Write the key as lowercase hex text")
@click.pass_context
def map_command(
    ctx: click.Context,
    plaintext_path: str,
    ciphertext_path: str,
    output_path: str,
    start_index: int,
    as_hex: bool,
) -> None:
    """Derive a key that reveals PLAINTEXT from CIPHERTEXT."""
    plaintext = _read_bytes(plaintext_path)
    ciphertext = _read_bytes(ciphertext_path)
    LOGGER.debug(
        "mapping %d plaintext bytes onto %d ciphertext bytes at offset %d",
        len(plaintext),
        len(ciphertext),
        start_index,
    )
    try:
        key = map_key(plaintext, ciphertext, start_index)
    except ChugError as exc:
        _fail(ctx, exc)
        return

    if as_hex:
        _write_bytes(output_path, (to_hex(key) + "\n").encode("ascii"))
    else:
        _write_bytes(output_path, key)
    LOGGER.debug("wrote %d byte key", len(key))


@cli.command("morph")
@click.option("-c", "--ciphertext", "ciphertext_path", required=True, help="Cover data file")
@click.option("-k", "--key", "key_path", required=True, help="Key file ('-' for stdin)")
@click.option("-o", "--output", "output_path", default="-", show_default=True, help="Recovered secret output")
@click.option("--hex", "as_hex", is_flag=True, help="Read the key as hex text")
@click.pass_context
def morph_command(
    ctx: click.Context,
    ciphertext_path: str,
    key_path: str,
    output_path: str,
    as_hex: bool,
) -> None:
    """Recover the secret hidden in CIPHERTEXT by KEY."""
    ciphertext = _read_bytes(ciphertext_path)
    try:
        key = _read_key(key_path, as_hex=as_hex)
        secret = morph(ciphertext, key)
    except ChugError as exc:
        _fail(ctx, exc)
        return

    LOGGER.debug("recovered %d bytes", len(secret))
    _write_bytes(output_path, secret)


@cli.command("inspect")
@click.option("-k", "--key", "key_path", required=True, help="Key file ('-' for stdin)")
@click.option("--hex", "as_hex", is_flag=True, help="Read the key as hex text")
@click.pass_context
def inspect_command(ctx: click.Context, key_path: str, as_hex: bool) -> None:
    """Show the start index and payload size stored in a key."""
    try:
        parsed = parse_key(_read_key(key_path, as_hex=as_hex))
    except ChugError as exc:
        _fail(ctx, exc)
        return

    console.print(f"start index:\t{parsed.start_index}")
    console.print(f"payload bytes:\t{parsed.payload_length}")
    console.print(f"key bytes:\t{KEY_HEADER_SIZE + parsed.payload_length}")


@cli.command("example")
@click.option("--plaintext", default=SAMPLE_PLAINTEXT, show_default=True, help="Secret text to map")
@click.option("--ciphertext", default=SAMPLE_CIPHERTEXT, show_default=True, help="Cover text")
@click.option("-s", "--start-index", type=int, default=0, show_default=True, help="Offset into the cover")
@click.pass_context
def example_command(ctx: click.Context, plaintext: str, ciphertext: str, start_index: int) -> None:
    """Map a sample secret onto a sample cover and morph it back."""
    settings: Settings = ctx.obj
    encoding = settings.text_encoding
    cover = encode_text(ciphertext, encoding)
    secret = encode_text(plaintext, encoding)

    try:
        key = map_key(secret, cover, start_index)
        recovered = morph(cover, key)
    except ChugError as exc:
        _fail(ctx, exc)
        return

    console.print(escape("[mapping]"))
    console.print(_describe("ciphertext\t", cover, encoding) + "\n")
    console.print(_describe("plaintext\t", secret, encoding) + "\n")
    console.print(_describe("key\t\t", key, encoding, with_text=False) + "\n")

    console.print(escape("[morphing]"))
    console.print(_describe("secret\t\t", recovered, encoding))

    if recovered != secret:  # pragma: no cover - guarded by the round-trip law
        console.print("[red]Recovered secret differs from the input.[/red]")
        ctx.exit(1)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        result = cli.main(args=args, prog_name="chug", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        console.print("[red]Aborted.[/red]")
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
