"""Tests for Cairo program output decoding and proof container framing."""
from __future__ import annotations

import pytest

from hyle_verifier.codec.cairo import (
    ProofContainer,
    decode_byte_array_felts,
    decode_cairo_output,
    encode_byte_array_felts,
    join_proof_container,
    split_proof_container,
)
from hyle_verifier.codec.cursor import TokenCursor
from hyle_verifier.errors import (
    ExhaustedInput,
    MalformedByte,
    MalformedContainer,
    MalformedLength,
    UnsupportedProgramOutput,
)


def _felt(text: str) -> str:
    return str(int.from_bytes(text.encode(), "big"))


class TestByteArray:

    def test_short_string_is_pending_word_only(self):
        cursor = TokenCursor(["0", _felt("alice"), "5"])
        assert decode_byte_array_felts(cursor) == "alice"
        assert cursor.remaining == 0

    def test_long_string_spans_full_words(self):
        text = "a" * 31 + "bc"
        tokens = encode_byte_array_felts(text)
        assert tokens[0] == "1"
        assert tokens[-1] == "2"
        assert decode_byte_array_felts(TokenCursor(tokens)) == text

    def test_empty(self):
        assert decode_byte_array_felts(TokenCursor(["0", "0", "0"])) == ""

    def test_pending_length_over_30(self):
        with pytest.raises(MalformedLength):
            decode_byte_array_felts(TokenCursor(["0", "0", "31"]))

    def test_pending_word_wider_than_its_length(self):
        with pytest.raises(MalformedByte):
            decode_byte_array_felts(TokenCursor(["0", _felt("abc"), "2"]))

    def test_invalid_utf8(self):
        with pytest.raises(MalformedByte):
            decode_byte_array_felts(TokenCursor(["0", "255", "1"]))


class TestCairoOutput:

    def _head(self):
        return ["1", "init", "next", *encode_byte_array_felts("origin"), *encode_byte_array_felts("caller"), "tx"]

    def test_score_event(self):
        text = "[" + " ".join(self._head() + ["42"]) + "]"
        result = decode_cairo_output(text)
        assert result.output.version == 1
        assert result.output.initial_state == b"init"
        assert result.output.next_state == b"next"
        assert result.output.origin == "origin"
        assert result.output.caller == "caller"
        assert result.output.tx_hash == b"tx"
        assert result.output.block_number == 0
        assert result.event.score == 42
        assert result.event.amount is None

    def test_transfer_event(self):
        tokens = self._head() + encode_byte_array_felts("bob") + encode_byte_array_felts("carol") + ["100"]
        result = decode_cairo_output(" ".join(tokens))
        assert result.event.sender == "bob"
        assert result.event.recipient == "carol"
        assert result.event.amount == 100
        data = result.to_dict()
        assert data["program_outputs"] == {"from": "bob", "to": "carol", "amount": 100, "score": None}

    def test_missing_event(self):
        with pytest.raises(UnsupportedProgramOutput):
            decode_cairo_output(" ".join(self._head()))

    def test_extra_tokens_after_transfer(self):
        tokens = self._head() + encode_byte_array_felts("bob") + encode_byte_array_felts("carol") + ["100", "1"]
        with pytest.raises(UnsupportedProgramOutput):
            decode_cairo_output(" ".join(tokens))

    def test_truncated_head(self):
        with pytest.raises(ExhaustedInput):
            decode_cairo_output("[1 init next]")


class TestProofContainer:

    def test_split_and_join(self):
        container = ProofContainer(proof=b"proof", public_inputs=b"pub", program_output=b"out")
        data = join_proof_container(container)
        assert data[:4] == (5).to_bytes(4, "little")
        assert split_proof_container(data) == container

    def test_too_short(self):
        with pytest.raises(MalformedContainer):
            split_proof_container(b"\x00" * 7)

    def test_proof_length_overruns(self):
        data = (100).to_bytes(4, "little") + b"\x00" * 10
        with pytest.raises(MalformedContainer):
            split_proof_container(data)

    def test_public_inputs_length_overruns(self):
        data = (1).to_bytes(4, "little") + b"p" + (9).to_bytes(4, "little") + b"ab"
        with pytest.raises(MalformedContainer):
            split_proof_container(data)
