"""hyle-verifier CLI.

Commands:
    verify        - verify a proof and print its decoded Hyle output
    decode        - decode public-input tokens without verifying
    cairo-output  - decode a Cairo contract's printed program output
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..config import load_config
from .decode_cmd import cairo_output_command, decode_command
from .verify import verify_command


def _configure_logging(verbose: int, default_level: str) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = getattr(logging, str(default_level).upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")


@click.group()
@click.version_option(__version__, prog_name="hyle-verifier")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.hyle/verifier.json)",
)
@click.option("-v", "--verbose", count=True, help="-v for info, -vv for debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[Path], verbose: int) -> None:
    """Verify Hyle contract proofs and decode their public outputs."""
    config = load_config(config_path)
    _configure_logging(verbose, config.get("log_level", "WARNING"))
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


main.add_command(verify_command)
main.add_command(decode_command)
main.add_command(cairo_output_command)


__all__ = ["main"]
