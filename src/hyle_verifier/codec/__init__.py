"""Codecs for proof public inputs.

Submodules:
    cursor         - one-directional token cursor
    public_inputs  - positional Hyle public-input codec
    cairo          - Cairo program output and proof container framing
"""
from __future__ import annotations

from .cursor import TokenCursor
from .public_inputs import (
    decode_byte_array,
    decode_length,
    decode_output,
    decode_public_inputs,
    decode_public_inputs_with_rest,
    decode_string,
    decode_uint,
    encode_public_inputs,
)
from .cairo import (
    CairoProgramOutput,
    Event,
    ProofContainer,
    decode_cairo_output,
    split_proof_container,
)

__all__ = [
    "TokenCursor",
    "decode_uint",
    "decode_length",
    "decode_byte_array",
    "decode_string",
    "decode_output",
    "decode_public_inputs",
    "decode_public_inputs_with_rest",
    "encode_public_inputs",
    "CairoProgramOutput",
    "Event",
    "ProofContainer",
    "decode_cairo_output",
    "split_proof_container",
]
