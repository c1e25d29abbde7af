"""Positional codec for Hyle public inputs.

The stream has no field tags. Producer and consumer agree on this order:

    version          u32, one decimal token
    initial_state    decimal length, then that many hex byte tokens
    next_state       same as initial_state
    origin           decimal length, then hex tokens read as character codes
    caller           same as origin
    block_number     u64, one decimal token
    block_time       u64, one decimal token
    tx_hash          same as initial_state

Anything after ``tx_hash`` is program output and is left unread.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from ..errors import MalformedByte, MalformedInteger, MalformedLength
from ..output import HyleOutput
from .cursor import TokenCursor

LOGGER = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(r"[0-9]+")
_HEX_BYTE_RE = re.compile(r"[0-9a-fA-F]{1,2}")


def _is_decimal(token: str) -> bool:
    # int() alone would accept "+5", " 5", "5_0" and non-ASCII digits
    return isinstance(token, str) and _DECIMAL_RE.fullmatch(token) is not None


def decode_uint(cursor: TokenCursor, *, bits: int = 64) -> int:
    """Read one decimal token as an unsigned integer of at most ``bits`` bits.

    Raises:
        MalformedInteger: If the token is not a plain decimal numeral or does
            not fit in ``bits`` bits.
        ExhaustedInput: If the stream is empty.
    """
    position = cursor.position
    token = cursor.take_one()
    if not _is_decimal(token):
        raise MalformedInteger(f"expected decimal integer, got {token!r}", position=position)
    value = int(token)
    if value >> bits:
        raise MalformedInteger(f"integer {token} exceeds u{bits}", position=position)
    return value


def decode_length(cursor: TokenCursor) -> int:
    """Read one decimal length prefix."""
    position = cursor.position
    token = cursor.take_one()
    if not _is_decimal(token):
        raise MalformedLength(f"expected decimal length, got {token!r}", position=position)
    return int(token)


def _decode_length_prefixed(cursor: TokenCursor) -> bytes:
    length = decode_length(cursor)
    out = bytearray()
    for _ in range(length):
        position = cursor.position
        token = cursor.take_one()
        if not isinstance(token, str) or _HEX_BYTE_RE.fullmatch(token) is None:
            raise MalformedByte(f"expected hex byte, got {token!r}", position=position)
        out.append(int(token, 16))
    return bytes(out)


def decode_byte_array(cursor: TokenCursor) -> bytes:
    """Read a length-prefixed run of hex byte tokens."""
    return _decode_length_prefixed(cursor)


def decode_string(cursor: TokenCursor) -> str:
    """Read a length-prefixed run of hex tokens as character codes."""
    return _decode_length_prefixed(cursor).decode("latin-1")


def decode_output(cursor: TokenCursor) -> HyleOutput:
    """Decode one ``HyleOutput`` from ``cursor`` and stop right after it."""
    version = decode_uint(cursor, bits=32)
    initial_state = decode_byte_array(cursor)
    next_state = decode_byte_array(cursor)
    origin = decode_string(cursor)
    caller = decode_string(cursor)
    block_number = decode_uint(cursor)
    block_time = decode_uint(cursor)
    tx_hash = decode_byte_array(cursor)
    return HyleOutput(
        version=version,
        initial_state=initial_state,
        next_state=next_state,
        origin=origin,
        caller=caller,
        block_number=block_number,
        block_time=block_time,
        tx_hash=tx_hash,
    )


def decode_public_inputs_with_rest(tokens: Iterable[str]) -> tuple[HyleOutput, int]:
    """Decode the output record and report how many trailing tokens were left."""
    cursor = TokenCursor(tokens)
    output = decode_output(cursor)
    if cursor.remaining:
        LOGGER.debug("ignoring %d trailing program output tokens", cursor.remaining)
    return output, cursor.remaining


def decode_public_inputs(tokens: Iterable[str]) -> HyleOutput:
    """Decode the ``HyleOutput`` at the head of a public-input token list.

    Args:
        tokens: Public inputs in stream order. The sequence is not modified.

    Returns:
        The decoded record. Trailing tokens are ignored.

    Raises:
        DecodeError: One of ``ExhaustedInput``, ``MalformedLength``,
            ``MalformedByte`` or ``MalformedInteger``. No partial record is
            ever returned.
    """
    output, _rest = decode_public_inputs_with_rest(tokens)
    return output


def _encode_bytes(data: bytes) -> list[str]:
    return [str(len(data))] + [f"{b:02x}" for b in data]


def encode_public_inputs(output: HyleOutput, program_outputs: Sequence[str] = ()) -> list[str]:
    """Produce the token stream ``decode_public_inputs`` reads back."""
    try:
        origin = output.origin.encode("latin-1")
        caller = output.caller.encode("latin-1")
    except UnicodeEncodeError as exc:
        raise ValueError(f"origin and caller must be single-byte text: {exc}") from exc
    tokens = [str(output.version)]
    tokens += _encode_bytes(output.initial_state)
    tokens += _encode_bytes(output.next_state)
    tokens += _encode_bytes(origin)
    tokens += _encode_bytes(caller)
    tokens += [str(output.block_number), str(output.block_time)]
    tokens += _encode_bytes(output.tx_hash)
    tokens += list(program_outputs)
    return tokens


__all__ = [
    "decode_uint",
    "decode_length",
    "decode_byte_array",
    "decode_string",
    "decode_output",
    "decode_public_inputs",
    "decode_public_inputs_with_rest",
    "encode_public_inputs",
]
