"""Loading of Noir proofs and verification keys from disk."""
from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import ProofFileError


@dataclass(frozen=True)
class ProofData:
    """A proof together with the public inputs it commits to."""

    proof: bytes
    public_inputs: tuple[str, ...]

    @classmethod
    def from_json_obj(cls, obj: Any) -> "ProofData":
        if not isinstance(obj, dict):
            raise ProofFileError("proof file must contain a JSON object")
        raw_proof = obj.get("proof")
        public_inputs = obj.get("publicInputs")
        if not isinstance(raw_proof, list):
            raise ProofFileError("'proof' must be a list of byte values")
        if not isinstance(public_inputs, list) or not all(isinstance(t, str) for t in public_inputs):
            raise ProofFileError("'publicInputs' must be a list of strings")
        try:
            proof = bytes(raw_proof)
        except (TypeError, ValueError) as exc:
            raise ProofFileError(f"'proof' is not a byte array: {exc}") from exc
        return cls(proof=proof, public_inputs=tuple(public_inputs))

    def to_json_obj(self) -> dict[str, Any]:
        return {"proof": list(self.proof), "publicInputs": list(self.public_inputs)}


def load_proof(path: Path) -> ProofData:
    """Read a ``{"proof": [...], "publicInputs": [...]}`` JSON file.

    Raises:
        ProofFileError: If the file is unreadable or has the wrong shape.
    """
    try:
        obj = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ProofFileError(f"cannot read proof file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ProofFileError(f"proof file {path} is not valid JSON: {exc}") from exc
    return ProofData.from_json_obj(obj)


def load_verification_key(path: Path) -> bytes:
    """Read a base64-encoded verification key."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ProofFileError(f"cannot read verification key {path}: {exc}") from exc
    try:
        return base64.b64decode("".join(text.split()), validate=True)
    except binascii.Error as exc:
        raise ProofFileError(f"verification key {path} is not valid base64: {exc}") from exc


__all__ = ["ProofData", "load_proof", "load_verification_key"]
