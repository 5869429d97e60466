"""Whitespace-separated token input for the serialized graph formats."""

from __future__ import annotations

import math
import os
from pathlib import Path


def read_text(path: str | os.PathLike[str]) -> str:
    return Path(path).read_text(encoding="utf-8")


class TokenReader:
    """Sequential reader over the whitespace-separated tokens of ``text``."""

    def __init__(self, text: str) -> None:
        self._tokens = text.split()
        self._pos = 0

    def is_empty(self) -> bool:
        return self._pos >= len(self._tokens)

    def remaining(self) -> int:
        return len(self._tokens) - self._pos

    def _next(self, what: str) -> str:
        if self.is_empty():
            raise ValueError(f"unexpected end of input while reading {what}")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def read_int(self) -> int:
        token = self._next("an integer")
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def read_float(self) -> float:
        token = self._next("a number")
        try:
            value = float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None
        if math.isnan(value):
            raise ValueError("weight is NaN")
        return value

    def read_count(self, what: str) -> int:
        n = self.read_int()
        if n < 0:
            raise ValueError(f"number of {what} must be nonnegative")
        return n
