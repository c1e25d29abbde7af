"""Error taxonomy for public-input decoding and proof gating.

Every error carries a stable ``code`` so CLI output and logs can be matched
without parsing messages. Decode errors share ``DecodeError`` as a base so a
caller can tell "the public inputs are malformed" apart from "the verifier
rejected the proof".
"""
from __future__ import annotations

from typing import Optional


class HyleVerifierError(Exception):
    """Root of all errors raised by this package."""

    code = "E000_INTERNAL"


class DecodeError(HyleVerifierError, ValueError):
    """Raised when a token stream does not match the public-input protocol."""

    code = "E100_DECODE_FAILED"

    def __init__(self, message: str, *, position: Optional[int] = None) -> None:
        self.position = position
        if position is not None:
            message = f"{message} (token {position})"
        super().__init__(message)


class ExhaustedInput(DecodeError):
    """A token was requested after the stream ran out."""

    code = "E101_EXHAUSTED_INPUT"


class MalformedLength(DecodeError):
    """A length prefix is not a non-negative decimal numeral."""

    code = "E102_MALFORMED_LENGTH"


class MalformedByte(DecodeError):
    """A byte token is not a one or two digit hex value."""

    code = "E103_MALFORMED_BYTE"


class MalformedInteger(DecodeError):
    """An integer token is not a decimal numeral within the field width."""

    code = "E104_MALFORMED_INTEGER"


class UnsupportedProgramOutput(DecodeError):
    """Trailing Cairo program output matches no known event layout."""

    code = "E105_UNSUPPORTED_PROGRAM_OUTPUT"


class MalformedContainer(DecodeError):
    """A length-framed Cairo proof container is truncated or inconsistent."""

    code = "E106_MALFORMED_CONTAINER"


class ProofFileError(HyleVerifierError):
    """A proof or verification key file cannot be read or parsed."""

    code = "E201_PROOF_FILE"


class VerificationRejected(HyleVerifierError):
    """The verifier reported the proof as invalid."""

    code = "E301_VERIFICATION_REJECTED"


class VerifierUnavailable(HyleVerifierError):
    """The external verifier could not be run to completion."""

    code = "E302_VERIFIER_UNAVAILABLE"


__all__ = [
    "HyleVerifierError",
    "DecodeError",
    "ExhaustedInput",
    "MalformedLength",
    "MalformedByte",
    "MalformedInteger",
    "UnsupportedProgramOutput",
    "MalformedContainer",
    "ProofFileError",
    "VerificationRejected",
    "VerifierUnavailable",
]
