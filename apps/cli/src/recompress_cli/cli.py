"""CLI for one-off image recompression."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from recompress import ConversionError, convert, resolve_format

logger = logging.getLogger(__name__)


def default_output_path(source: Path, extension: str) -> Path:
    """Source path with the target extension, never the source itself."""
    output = source.with_suffix(extension)
    if output == source:
        output = source.with_name(f"{source.stem}.recompressed{extension}")
    return output


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path),
              help="Output file (default: SOURCE with the target extension)")
@click.option("-f", "--format", "fmt",
              type=click.Choice(["jpeg", "jpg", "png", "webp"], case_sensitive=False),
              help="Output format (default: webp)")
@click.option("-q", "--quality", type=float, help="Quality 0.0-1.0, clamped (default: 0.8)")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def cli(source: Path, output: Path | None, fmt: str | None,
        quality: float | None, verbose: bool) -> None:
    """Recompress SOURCE to a single JPEG, PNG or WebP image."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    target = resolve_format(fmt)
    if output is None:
        output = default_output_path(source, target.extension)

    data = source.read_bytes()
    try:
        result = convert(data, fmt, quality)
    except ConversionError as e:
        raise click.ClickException(f"{source}: {e}") from e

    try:
        output.write_bytes(result)
    except OSError as e:
        raise click.ClickException(f"Cannot write {output}: {e}") from e
    logger.info("Wrote %s (%d -> %d bytes)", output, len(data), len(result))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
