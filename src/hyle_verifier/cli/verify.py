"""hyle-verifier verify - verify a Noir proof and print its Hyle output.

Usage:
    hyle-verifier verify --vkey-path vk.b64 --proof-path proof.json [--format json|table]

Exit codes are listed in ``exit_codes``.
"""
from __future__ import annotations

import logging
import shlex
import sys
from pathlib import Path
from typing import Optional

import click

from ..config import load_config
from ..errors import HyleVerifierError
from ..proof import load_proof, load_verification_key
from ..verifier import CommandVerifier, verify_and_decode
from .exit_codes import EXIT_VERIFIED, error_to_exit_code, exit_code_description
from .render import echo_error, echo_record

LOGGER = logging.getLogger(__name__)


def run_verify(
    vkey_path: Path,
    proof_path: Path,
    *,
    config: dict,
    fmt: str,
) -> int:
    """Verify and print; return the process exit code."""
    verifier_cfg = config["verifier"]
    try:
        verifier = CommandVerifier(verifier_cfg["command"], timeout=verifier_cfg["timeout_seconds"])
        proof = load_proof(proof_path)
        vkey = load_verification_key(vkey_path)
        output = verify_and_decode(proof, vkey, verifier)
    except HyleVerifierError as exc:
        exit_code = error_to_exit_code(exc)
        LOGGER.info("verification of %s failed: %s", proof_path, exc)
        echo_error(exc, exit_code_description(exit_code))
        return exit_code

    echo_record(output.to_dict(), fmt=fmt, indent=config["output"].get("indent"))
    return EXIT_VERIFIED


@click.command("verify")
@click.option(
    "--vkey-path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Base64-encoded verification key",
)
@click.option(
    "--proof-path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Proof JSON with 'proof' and 'publicInputs'",
)
@click.option("--verifier-cmd", default=None, help="Verifier command; {proof} and {vkey} are replaced by paths")
@click.option("--timeout", type=float, default=None, help="Verifier timeout in seconds")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "table"], case_sensitive=False),
    default=None,
    help="Output format (default from config: json)",
)
@click.pass_context
def verify_command(
    ctx: click.Context,
    vkey_path: Path,
    proof_path: Path,
    verifier_cmd: Optional[str],
    timeout: Optional[float],
    fmt: Optional[str],
) -> None:
    """Verify a proof and print the decoded Hyle output.

    \b
    Exit codes:
        0  - Verified
        10 - Proof invalid
        20 - Malformed proof, key or public inputs
        30 - Verifier unavailable
    """
    config = ctx.obj["config"] if ctx.obj else load_config()
    if verifier_cmd:
        config["verifier"]["command"] = shlex.split(verifier_cmd)
    if timeout is not None:
        config["verifier"]["timeout_seconds"] = timeout
    fmt = (fmt or config["output"].get("format") or "json").lower()
    sys.exit(run_verify(vkey_path, proof_path, config=config, fmt=fmt))
