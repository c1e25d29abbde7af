"""Tests for the verify-then-decode gate and the command verifier."""
from __future__ import annotations

import sys

import pytest

from hyle_verifier.errors import (
    DecodeError,
    ExhaustedInput,
    VerificationRejected,
    VerifierUnavailable,
)
from hyle_verifier.proof import ProofData
from hyle_verifier.verifier import CommandVerifier, verify_and_decode


class FakeVerifier:
    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.calls = []

    def verify_proof(self, proof, vkey):
        self.calls.append((proof, vkey))
        return self.answer


class TestVerifyAndDecode:

    def test_valid_proof_is_decoded(self, scenario_tokens, scenario_output):
        proof = ProofData(proof=b"p", public_inputs=tuple(scenario_tokens + ["9"]))
        verifier = FakeVerifier(True)
        assert verify_and_decode(proof, b"vk", verifier) == scenario_output
        assert verifier.calls == [(proof, b"vk")]

    def test_invalid_proof_never_reaches_decoder(self, monkeypatch, scenario_tokens):
        def fail(tokens):
            raise AssertionError("decoder must not run for a rejected proof")

        monkeypatch.setattr("hyle_verifier.verifier.decode_public_inputs", fail)
        proof = ProofData(proof=b"p", public_inputs=tuple(scenario_tokens))
        with pytest.raises(VerificationRejected) as info:
            verify_and_decode(proof, b"vk", FakeVerifier(False))
        assert not isinstance(info.value, DecodeError)

    def test_invalid_proof_with_garbage_inputs_is_still_rejected(self):
        proof = ProofData(proof=b"p", public_inputs=("zz",))
        with pytest.raises(VerificationRejected):
            verify_and_decode(proof, b"vk", FakeVerifier(False))

    def test_valid_proof_with_malformed_inputs(self, scenario_tokens):
        proof = ProofData(proof=b"p", public_inputs=tuple(scenario_tokens[:-1]))
        with pytest.raises(ExhaustedInput):
            verify_and_decode(proof, b"vk", FakeVerifier(True))


class TestCommandVerifier:

    def _script(self, code: str):
        return [sys.executable, "-c", code]

    def test_exit_zero_is_valid(self):
        verifier = CommandVerifier(self._script("import sys; sys.exit(0)"))
        assert verifier.verify_proof(ProofData(b"p", ()), b"vk") is True

    def test_nonzero_exit_is_invalid(self):
        verifier = CommandVerifier(self._script("import sys; sys.exit(3)"))
        assert verifier.verify_proof(ProofData(b"p", ()), b"vk") is False

    def test_placeholders_point_at_artifacts(self):
        code = (
            "import sys, pathlib; "
            "ok = pathlib.Path(sys.argv[1]).read_bytes() == b'PROOF' "
            "and pathlib.Path(sys.argv[2]).read_bytes() == b'KEY' "
            "and pathlib.Path(sys.argv[3]).read_text() == '1\\n2'; "
            "sys.exit(0 if ok else 1)"
        )
        verifier = CommandVerifier(self._script(code) + ["{proof}", "{vkey}", "{public_inputs}"])
        assert verifier.verify_proof(ProofData(b"PROOF", ("1", "2")), b"KEY") is True

    def test_missing_executable(self):
        verifier = CommandVerifier(["hyle-no-such-verifier-binary"])
        with pytest.raises(VerifierUnavailable):
            verifier.verify_proof(ProofData(b"p", ()), b"vk")

    def test_timeout(self):
        verifier = CommandVerifier(self._script("import time; time.sleep(10)"), timeout=0.2)
        with pytest.raises(VerifierUnavailable):
            verifier.verify_proof(ProofData(b"p", ()), b"vk")

    def test_empty_command(self):
        with pytest.raises(VerifierUnavailable):
            CommandVerifier([])

    def test_non_executable_command(self, tmp_path):
        exe = tmp_path / "bb"
        exe.write_text("#!/bin/sh\nexit 0\n")
        exe.chmod(0o644)
        verifier = CommandVerifier([str(exe)])
        with pytest.raises(VerifierUnavailable):
            verifier.verify_proof(ProofData(b"p", ()), b"vk")

    def test_directory_as_command(self, tmp_path):
        verifier = CommandVerifier([str(tmp_path)])
        with pytest.raises(VerifierUnavailable):
            verifier.verify_proof(ProofData(b"p", ()), b"vk")
