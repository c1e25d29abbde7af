"""Cairo program output and proof container framing.

A Cairo proof file is three length-framed sections followed by the program
output::

    u32 LE proof_len | proof | u32 LE public_inputs_len | public_inputs | output

The program output itself is printed by the Cairo program as whitespace
separated felts, optionally wrapped in brackets. Strings use Cairo's
``ByteArray`` serialization: a count of full 31-byte words, the words, a
pending word and the pending word's byte length.

``split_proof_container`` and ``join_proof_container`` are library helpers for
callers that handle framed proof files themselves; no CLI command reads
containers, and the bincode-encoded ``program_output`` section is returned
as raw bytes, not decoded.
"""
from __future__ import annotations

import logging
import struct
from dataclasses import dataclass, field
from typing import Any, Optional

from ..errors import MalformedByte, MalformedContainer, MalformedLength, UnsupportedProgramOutput
from ..output import HyleOutput
from .cursor import TokenCursor
from .public_inputs import decode_length, decode_uint

LOGGER = logging.getLogger(__name__)

BYTES31_LEN = 31
FELT_BITS = 252
_LEN_PREFIX = struct.Struct("<I")


@dataclass(frozen=True)
class ProofContainer:
    proof: bytes
    public_inputs: bytes
    program_output: bytes


def _read_section(data: bytes, offset: int, label: str) -> tuple[bytes, int]:
    if offset + _LEN_PREFIX.size > len(data):
        raise MalformedContainer(f"{label} length prefix truncated", position=offset)
    (length,) = _LEN_PREFIX.unpack_from(data, offset)
    start = offset + _LEN_PREFIX.size
    end = start + length
    if end > len(data):
        raise MalformedContainer(
            f"{label} declares {length} bytes but only {len(data) - start} remain",
            position=offset,
        )
    return data[start:end], end


def split_proof_container(data: bytes) -> ProofContainer:
    """Split a framed Cairo proof file into its three sections."""
    if len(data) < 2 * _LEN_PREFIX.size:
        raise MalformedContainer(f"container too short ({len(data)} bytes)")
    proof, offset = _read_section(data, 0, "proof")
    public_inputs, offset = _read_section(data, offset, "public inputs")
    return ProofContainer(proof=proof, public_inputs=public_inputs, program_output=data[offset:])


def join_proof_container(container: ProofContainer) -> bytes:
    out = bytearray()
    out += _LEN_PREFIX.pack(len(container.proof))
    out += container.proof
    out += _LEN_PREFIX.pack(len(container.public_inputs))
    out += container.public_inputs
    out += container.program_output
    return bytes(out)


@dataclass(frozen=True)
class Event:
    """Program outputs of the supported Cairo contracts.

    The ERC20 contract emits a transfer (``sender``, ``recipient``,
    ``amount``); the ML contract emits a single ``score``.
    """

    sender: Optional[str] = None
    recipient: Optional[str] = None
    amount: Optional[int] = None
    score: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.sender,
            "to": self.recipient,
            "amount": self.amount,
            "score": self.score,
        }


@dataclass(frozen=True)
class CairoProgramOutput:
    output: HyleOutput
    event: Event = field(default_factory=Event)

    def to_dict(self) -> dict[str, Any]:
        data = self.output.to_dict()
        data["program_outputs"] = self.event.to_dict()
        return data


def _felt_bytes(cursor: TokenCursor, size: int) -> bytes:
    position = cursor.position
    value = decode_uint(cursor, bits=FELT_BITS)
    try:
        return value.to_bytes(size, "big")
    except OverflowError:
        raise MalformedByte(f"felt {value} does not fit in {size} bytes", position=position) from None


def decode_byte_array_felts(cursor: TokenCursor) -> str:
    """Read one serialized Cairo ``ByteArray`` as UTF-8 text."""
    start = cursor.position
    full_words = decode_length(cursor)
    data = bytearray()
    for _ in range(full_words):
        data += _felt_bytes(cursor, BYTES31_LEN)
    pending_position = cursor.position
    pending = decode_uint(cursor, bits=FELT_BITS)
    pending_len = decode_length(cursor)
    if pending_len >= BYTES31_LEN:
        raise MalformedLength(f"pending word length {pending_len} exceeds 30", position=cursor.position - 1)
    try:
        data += pending.to_bytes(pending_len, "big")
    except OverflowError:
        raise MalformedByte(
            f"pending word {pending} does not fit in {pending_len} bytes", position=pending_position
        ) from None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedByte(f"byte array is not valid UTF-8: {exc.reason}", position=start) from None


def _decode_event(cursor: TokenCursor) -> Event:
    if cursor.remaining == 1:
        return Event(score=decode_uint(cursor))
    if cursor.remaining == 0:
        raise UnsupportedProgramOutput("no program output after the Hyle output", position=cursor.position)
    sender = decode_byte_array_felts(cursor)
    recipient = decode_byte_array_felts(cursor)
    amount = decode_uint(cursor)
    if cursor.remaining:
        raise UnsupportedProgramOutput(
            f"{cursor.remaining} unexpected tokens after transfer event", position=cursor.position
        )
    return Event(sender=sender, recipient=recipient, amount=amount)


def decode_cairo_output(text: str) -> CairoProgramOutput:
    """Decode the printed output of a Hyle Cairo contract.

    Block number and block time are not part of the Cairo layout and are
    reported as 0.
    """
    tokens = text.strip().strip("[]").split()
    cursor = TokenCursor(tokens)
    version = decode_uint(cursor, bits=32)
    initial_state = cursor.take_one().encode("utf-8")
    next_state = cursor.take_one().encode("utf-8")
    origin = decode_byte_array_felts(cursor)
    caller = decode_byte_array_felts(cursor)
    tx_hash = cursor.take_one().encode("utf-8")
    event = _decode_event(cursor)
    LOGGER.debug("decoded cairo output version=%d event=%s", version, event)
    output = HyleOutput(
        version=version,
        initial_state=initial_state,
        next_state=next_state,
        origin=origin,
        caller=caller,
        block_number=0,
        block_time=0,
        tx_hash=tx_hash,
    )
    return CairoProgramOutput(output=output, event=event)


def encode_byte_array_felts(text: str) -> list[str]:
    data = text.encode("utf-8")
    split = len(data) - len(data) % BYTES31_LEN
    words = [data[i : i + BYTES31_LEN] for i in range(0, split, BYTES31_LEN)]
    pending = data[split:]
    tokens = [str(len(words))]
    tokens += [str(int.from_bytes(word, "big")) for word in words]
    tokens += [str(int.from_bytes(pending, "big")), str(len(pending))]
    return tokens


__all__ = [
    "ProofContainer",
    "Event",
    "CairoProgramOutput",
    "split_proof_container",
    "join_proof_container",
    "decode_byte_array_felts",
    "encode_byte_array_felts",
    "decode_cairo_output",
]
