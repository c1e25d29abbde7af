"""Proof verification gate.

The cryptographic check itself belongs to an external verifier. This module
only invokes it, and decodes the public inputs once it has answered yes.
"""
from __future__ import annotations

import logging
import subprocess
import tempfile
from pathlib import Path
from typing import Protocol, Sequence

from .codec.public_inputs import decode_public_inputs
from .errors import VerificationRejected, VerifierUnavailable
from .output import HyleOutput
from .proof import ProofData

LOGGER = logging.getLogger(__name__)

DEFAULT_COMMAND = ("bb", "verify", "-k", "{vkey}", "-p", "{proof}")
DEFAULT_TIMEOUT = 120.0


class Verifier(Protocol):
    def verify_proof(self, proof: ProofData, vkey: bytes) -> bool:
        ...


class CommandVerifier:
    """Runs an external verifier program and reads its exit status.

    ``command`` is an argv list whose items may contain the placeholders
    ``{proof}``, ``{vkey}`` and ``{public_inputs}``; each is replaced by the
    path of a temporary file holding that artifact. Exit status 0 means the
    proof is valid.
    """

    def __init__(self, command: Sequence[str] = DEFAULT_COMMAND, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        if not command:
            raise VerifierUnavailable("no verifier command configured")
        self.command = tuple(command)
        self.timeout = timeout

    def _argv(self, paths: dict[str, Path]) -> list[str]:
        argv = []
        for part in self.command:
            for name, path in paths.items():
                part = part.replace("{" + name + "}", str(path))
            argv.append(part)
        return argv

    def verify_proof(self, proof: ProofData, vkey: bytes) -> bool:
        with tempfile.TemporaryDirectory(prefix="hyle_verify_") as tmpdir:
            base = Path(tmpdir)
            paths = {
                "proof": base / "proof",
                "vkey": base / "vk",
                "public_inputs": base / "public_inputs",
            }
            paths["proof"].write_bytes(proof.proof)
            paths["vkey"].write_bytes(vkey)
            paths["public_inputs"].write_text("\n".join(proof.public_inputs))
            argv = self._argv(paths)
            LOGGER.info("running verifier: %s", argv[0])
            try:
                result = subprocess.run(argv, capture_output=True, text=True, timeout=self.timeout)
            except subprocess.TimeoutExpired as exc:
                raise VerifierUnavailable(f"verifier timed out after {self.timeout}s") from exc
            except OSError as exc:
                raise VerifierUnavailable(f"cannot run verifier {argv[0]}: {exc}") from exc
        if result.returncode != 0:
            LOGGER.info("verifier rejected proof (exit %d): %s", result.returncode, result.stderr.strip())
        return result.returncode == 0


def verify_and_decode(proof: ProofData, vkey: bytes, verifier: Verifier) -> HyleOutput:
    """Verify ``proof`` and decode its public inputs.

    The public inputs are only decoded after the verifier accepts the proof.

    Raises:
        VerificationRejected: If the verifier reports the proof invalid.
        DecodeError: If the proof is valid but its public inputs are malformed.
        VerifierUnavailable: If the verifier could not be run.
    """
    if not verifier.verify_proof(proof, vkey):
        raise VerificationRejected("proof rejected by verifier")
    LOGGER.debug("proof accepted, decoding %d public inputs", len(proof.public_inputs))
    return decode_public_inputs(proof.public_inputs)


__all__ = ["Verifier", "CommandVerifier", "verify_and_decode", "DEFAULT_COMMAND", "DEFAULT_TIMEOUT"]
