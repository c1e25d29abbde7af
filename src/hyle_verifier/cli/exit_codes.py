"""Stable exit codes for the hyle-verifier CLI.

    0  - Verified (or decoded)
    10 - Proof rejected by the verifier
    20 - Malformed public inputs, proof file or verification key
    30 - Verifier unavailable (not installed, timed out)
"""
from __future__ import annotations

from ..errors import (
    DecodeError,
    HyleVerifierError,
    ProofFileError,
    VerificationRejected,
    VerifierUnavailable,
)

EXIT_VERIFIED = 0
EXIT_PROOF_INVALID = 10
EXIT_MALFORMED = 20
EXIT_VERIFIER_UNAVAILABLE = 30

_DESCRIPTIONS = {
    EXIT_VERIFIED: "verified",
    EXIT_PROOF_INVALID: "proof rejected by verifier",
    EXIT_MALFORMED: "malformed input",
    EXIT_VERIFIER_UNAVAILABLE: "verifier unavailable",
}


def error_to_exit_code(error: HyleVerifierError) -> int:
    if isinstance(error, VerificationRejected):
        return EXIT_PROOF_INVALID
    if isinstance(error, (DecodeError, ProofFileError)):
        return EXIT_MALFORMED
    if isinstance(error, VerifierUnavailable):
        return EXIT_VERIFIER_UNAVAILABLE
    return EXIT_MALFORMED


def exit_code_description(code: int) -> str:
    return _DESCRIPTIONS.get(code, f"unknown exit code {code}")
