"""hyle-verifier decode / cairo-output - decode without verifying.

These commands never call a verifier. They exist to inspect public inputs
and program outputs while developing contracts.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from ..codec.cairo import decode_cairo_output
from ..codec.public_inputs import decode_public_inputs_with_rest
from ..errors import HyleVerifierError, ProofFileError
from ..proof import load_proof
from .exit_codes import EXIT_VERIFIED, error_to_exit_code, exit_code_description
from .render import echo_error, echo_record


def _read_tokens(source: str, from_proof: bool) -> list[str]:
    if from_proof:
        return list(load_proof(Path(source)).public_inputs)
    try:
        text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise ProofFileError(f"cannot read token file {source}: {exc}") from exc
    stripped = text.strip()
    if stripped.startswith("["):
        # a JSON array of tokens
        try:
            return [str(t) for t in json.loads(stripped)]
        except json.JSONDecodeError as exc:
            raise ProofFileError(f"token file {source} is not a JSON array: {exc}") from exc
    return text.split()


@click.command("decode")
@click.argument("source", default="-")
@click.option("--from-proof", is_flag=True, help="SOURCE is a proof JSON; decode its publicInputs")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "table"], case_sensitive=False),
    default="json",
)
def decode_command(source: str, from_proof: bool, fmt: str) -> None:
    """Decode public-input tokens from SOURCE (file or '-' for stdin)."""
    try:
        tokens = _read_tokens(source, from_proof)
        output, rest = decode_public_inputs_with_rest(tokens)
    except HyleVerifierError as exc:
        exit_code = error_to_exit_code(exc)
        echo_error(exc, exit_code_description(exit_code))
        sys.exit(exit_code)

    echo_record(output.to_dict(), fmt=fmt.lower())
    if rest:
        click.echo(f"{rest} trailing program output tokens ignored", err=True)
    sys.exit(EXIT_VERIFIED)


@click.command("cairo-output")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "table"], case_sensitive=False),
    default="json",
)
def cairo_output_command(path: Path, fmt: str) -> None:
    """Decode the printed output of a Hyle Cairo contract."""
    try:
        result = decode_cairo_output(path.read_text(encoding="utf-8"))
    except HyleVerifierError as exc:
        exit_code = error_to_exit_code(exc)
        echo_error(exc, exit_code_description(exit_code))
        sys.exit(exit_code)
    echo_record(result.to_dict(), fmt=fmt.lower(), title="Cairo program output")
    sys.exit(EXIT_VERIFIED)
