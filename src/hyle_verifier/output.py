"""The decoded public output of a Hyle contract proof."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1

FIELD_ORDER = (
    "version",
    "initial_state",
    "next_state",
    "origin",
    "caller",
    "block_number",
    "block_time",
    "tx_hash",
)


def _check_width(name: str, value: Any, limit: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > limit:
        raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class HyleOutput:
    """Public output committed to by a contract execution proof.

    ``version`` is a u32, ``block_number`` and ``block_time`` are u64. Python
    ints carry them at full width; construction rejects anything wider.
    """

    version: int
    initial_state: bytes
    next_state: bytes
    origin: str
    caller: str
    block_number: int
    block_time: int
    tx_hash: bytes

    def __post_init__(self) -> None:
        _check_width("version", self.version, U32_MAX)
        _check_width("block_number", self.block_number, U64_MAX)
        _check_width("block_time", self.block_time, U64_MAX)
        for name in ("initial_state", "next_state", "tx_hash"):
            value = getattr(self, name)
            if not isinstance(value, (bytes, bytearray, memoryview)):
                raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
            object.__setattr__(self, name, bytes(value))

    def to_dict(self) -> dict[str, Any]:
        """Render as plain JSON-ready values, byte fields as lists of ints."""
        return {
            "version": self.version,
            "initial_state": list(self.initial_state),
            "next_state": list(self.next_state),
            "origin": self.origin,
            "caller": self.caller,
            # exact integer literals, never floats
            "block_number": int(self.block_number),
            "block_time": int(self.block_time),
            "tx_hash": list(self.tx_hash),
        }

    def to_json(self, *, indent: int | None = None) -> str:
        separators = (",", ":") if indent is None else None
        return json.dumps(self.to_dict(), indent=indent, separators=separators)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HyleOutput":
        missing = [name for name in FIELD_ORDER if name not in data]
        if missing:
            raise ValueError(f"missing fields: {', '.join(missing)}")
        return cls(
            version=data["version"],
            initial_state=bytes(data["initial_state"]),
            next_state=bytes(data["next_state"]),
            origin=data["origin"],
            caller=data["caller"],
            block_number=data["block_number"],
            block_time=data["block_time"],
            tx_hash=bytes(data["tx_hash"]),
        )

    @classmethod
    def from_json(cls, text: str) -> "HyleOutput":
        return cls.from_dict(json.loads(text))


__all__ = ["HyleOutput", "FIELD_ORDER", "U32_MAX", "U64_MAX"]
