"""Tests for HyleOutput rendering and validation."""
from __future__ import annotations

import json

import pytest

from hyle_verifier.output import U64_MAX, HyleOutput


def test_to_json_keeps_field_order_and_exact_integers(sample_output):
    text = sample_output.to_json()
    assert text.startswith('{"version":2,"initial_state":[0,1,2,255],')
    assert '"block_number":18446744073709551615' in text
    assert '"block_time":9007199254740993' in text
    assert list(json.loads(text)) == [
        "version",
        "initial_state",
        "next_state",
        "origin",
        "caller",
        "block_number",
        "block_time",
        "tx_hash",
    ]


def test_json_round_trip(sample_output):
    assert HyleOutput.from_json(sample_output.to_json()) == sample_output
    assert HyleOutput.from_json(sample_output.to_json(indent=2)) == sample_output


def test_from_dict_reports_missing_fields(sample_output):
    data = sample_output.to_dict()
    del data["caller"]
    del data["tx_hash"]
    with pytest.raises(ValueError, match="caller, tx_hash"):
        HyleOutput.from_dict(data)


@pytest.mark.parametrize("field,value", [
    ("block_number", U64_MAX + 1),
    ("block_time", -1),
    ("version", 2**32),
])
def test_rejects_out_of_range_integers(sample_output, field, value):
    data = sample_output.to_dict()
    data[field] = value
    with pytest.raises(ValueError):
        HyleOutput.from_dict(data)


def test_rejects_float_block_number(sample_output):
    data = sample_output.to_dict()
    data["block_number"] = 1000.0
    with pytest.raises(TypeError):
        HyleOutput.from_dict(data)


def test_is_immutable(sample_output):
    with pytest.raises(AttributeError):
        sample_output.version = 3


def test_bytearray_fields_are_frozen_to_bytes():
    record = HyleOutput(
        version=0,
        initial_state=bytearray(b"\x01"),
        next_state=b"",
        origin="",
        caller="",
        block_number=0,
        block_time=0,
        tx_hash=memoryview(b"\x02"),
    )
    assert type(record.initial_state) is bytes
    assert record.tx_hash == b"\x02"
