"""Shared fixtures for hyle-verifier tests."""
from __future__ import annotations

import base64
import json
from pathlib import Path

import pytest

from hyle_verifier.output import HyleOutput

# version, empty initial_state, next_state 03 04 05, origin "hith",
# caller "bye!", block 1000, time 2000, empty tx_hash
SCENARIO_TOKENS = [
    "1",
    "0",
    "3", "03", "04", "05",
    "4", "68", "69", "74", "68",
    "4", "62", "79", "65", "21",
    "1000",
    "2000",
    "0",
]


@pytest.fixture
def scenario_tokens():
    return list(SCENARIO_TOKENS)


@pytest.fixture
def scenario_output():
    return HyleOutput(
        version=1,
        initial_state=b"",
        next_state=bytes([3, 4, 5]),
        origin="hith",
        caller="bye!",
        block_number=1000,
        block_time=2000,
        tx_hash=b"",
    )


@pytest.fixture
def sample_output():
    return HyleOutput(
        version=2,
        initial_state=bytes([0, 1, 2, 255]),
        next_state=bytes([9, 8]),
        origin="alice.hyle",
        caller="bob.hyle",
        block_number=18_446_744_073_709_551_615,
        block_time=9_007_199_254_740_993,
        tx_hash=bytes(range(32)),
    )


@pytest.fixture
def proof_files(tmp_path: Path, scenario_tokens):
    """Write a proof JSON and base64 verification key, return their paths."""
    proof_path = tmp_path / "proof.json"
    proof_path.write_text(json.dumps({
        "proof": [1, 2, 3, 4],
        "publicInputs": scenario_tokens + ["7", "7"],
    }))
    vkey_path = tmp_path / "vk.b64"
    vkey_path.write_text(base64.b64encode(b"verification-key").decode())
    return proof_path, vkey_path
