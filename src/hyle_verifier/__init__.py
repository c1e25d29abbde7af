"""Hyle verifier - proof gating and public-input decoding.

Submodules:
    codec     - public-input token codec and Cairo output framing
    output    - the HyleOutput record
    proof     - proof and verification key loading
    verifier  - external verifier invocation and the verify-then-decode gate
    config    - layered configuration
    cli       - command-line interface

Public API:
    from hyle_verifier import decode_public_inputs, verify_and_decode, HyleOutput
"""
from __future__ import annotations

__version__ = "0.1.0"

from hyle_verifier.errors import (
    DecodeError,
    ExhaustedInput,
    HyleVerifierError,
    MalformedByte,
    MalformedInteger,
    MalformedLength,
    ProofFileError,
    VerificationRejected,
    VerifierUnavailable,
)
from hyle_verifier.output import HyleOutput
from hyle_verifier.codec import TokenCursor, decode_public_inputs, encode_public_inputs
from hyle_verifier.proof import ProofData, load_proof, load_verification_key
from hyle_verifier.verifier import CommandVerifier, Verifier, verify_and_decode


__all__ = [
    "__version__",
    # Record and codec
    "HyleOutput",
    "TokenCursor",
    "decode_public_inputs",
    "encode_public_inputs",
    # Gate
    "ProofData",
    "load_proof",
    "load_verification_key",
    "Verifier",
    "CommandVerifier",
    "verify_and_decode",
    # Errors
    "HyleVerifierError",
    "DecodeError",
    "ExhaustedInput",
    "MalformedLength",
    "MalformedByte",
    "MalformedInteger",
    "ProofFileError",
    "VerificationRejected",
    "VerifierUnavailable",
]
