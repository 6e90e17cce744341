# modules/term/reader.py
from __future__ import annotations

import readline
from typing import List, Optional


class LineReader:
    """
    readline-backed line source.

    Holds the prompt shown by read_line() and the recall list used by
    up-arrow. read_line() returns None once input is over (EOF or Ctrl-C at
    the prompt).
    """

    def __init__(self, prompt: str = "> ", history_length: int = 1000):
        self.prompt = prompt
        self.history_length = history_length
        # 0 means unlimited for us; readline wants -1
        readline.set_history_length(history_length if history_length > 0 else -1)

    def set_prompt(self, prompt: str) -> None:
        self.prompt = prompt

    def read_line(self) -> Optional[str]:
        try:
            return input(self.prompt)
        except (EOFError, KeyboardInterrupt):
            return None

    def add_history(self, line: str) -> None:
        readline.add_history(line)

    def history(self) -> List[str]:
        n = readline.get_current_history_length()
        # readline history is 1-based
        items = (readline.get_history_item(i) for i in range(1, n + 1))
        return [item for item in items if item is not None]
