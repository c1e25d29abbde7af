"""One-directional cursor over a public-input token stream."""
from __future__ import annotations

from typing import Iterable

from ..errors import ExhaustedInput


class TokenCursor:
    """Hands out tokens front to back, each exactly once.

    The tokens are copied into a tuple on construction, so the caller's
    sequence is never mutated and the cursor is the only moving part.
    """

    __slots__ = ("_tokens", "_pos")

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens = tuple(tokens)
        self._pos = 0

    def take_one(self) -> str:
        if self._pos >= len(self._tokens):
            raise ExhaustedInput("public input ended early", position=self._pos)
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    @property
    def position(self) -> int:
        """Index of the next token to be taken."""
        return self._pos

    @property
    def consumed(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._tokens) - self._pos

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"TokenCursor(consumed={self.consumed}, remaining={self.remaining})"


__all__ = ["TokenCursor"]
