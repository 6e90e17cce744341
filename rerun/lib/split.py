# rerun/lib/split.py
#
# Line -> argv-style tokens (no Core dependency).
#
# Dialect:
#   - unquoted spaces separate tokens, runs of spaces never yield ""
#   - '...' and "..." are taken verbatim; closing a quote always yields a
#     token, even an empty one; an unterminated quote closes at end of line
#   - no backslash escapes
#   - no adjacency joining: one'two' -> "one", "two"

from __future__ import annotations

from typing import Iterator, Optional

NORMAL = "normal"
SINGLE_QUOTE = "single"
DOUBLE_QUOTE = "double"

_OPENERS = {"'": SINGLE_QUOTE, '"': DOUBLE_QUOTE}
_CLOSERS = {SINGLE_QUOTE: "'", DOUBLE_QUOTE: '"'}


class Split:
    """Lazy single-pass token iterator over one input line."""

    def __init__(self, line: str):
        self._line = line
        self._pos = 0
        self._state = NORMAL
        self._finished = False

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        while not self._finished:
            tok = self._step()
            if tok is not None:
                return tok
        raise StopIteration

    def _step(self) -> Optional[str]:
        # Returns the next token, or None when this step produced nothing.
        if self._state != NORMAL:
            end = self._line.find(_CLOSERS[self._state], self._pos)
            self._state = NORMAL
            if end < 0:
                return self._capture_rest(allow_empty=True)
            return self._capture(end, allow_empty=True)

        for i in range(self._pos, len(self._line)):
            c = self._line[i]
            if c == " ":
                return self._capture(i, allow_empty=False)
            if c in _OPENERS:
                self._state = _OPENERS[c]
                return self._capture(i, allow_empty=False)

        return self._capture_rest(allow_empty=False)

    def _capture(self, i: int, allow_empty: bool) -> Optional[str]:
        tok = self._line[self._pos:i]
        self._pos = i + 1
        if allow_empty or tok:
            return tok
        return None

    def _capture_rest(self, allow_empty: bool) -> Optional[str]:
        tok = self._line[self._pos:]
        self._pos = len(self._line)
        self._finished = True
        if allow_empty or tok:
            return tok
        return None


def split_command(line: str) -> Split:
    return Split(line)
