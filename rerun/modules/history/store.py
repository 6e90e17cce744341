# modules/history/store.py
#
# One history file per target executable:
#   <home>/history/<executable basename>
# Loaded once at start, overwritten wholesale at exit.

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from rerun.errors import HistoryError

HISTORY_DIRNAME = "history"


class HistoryStore:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    @classmethod
    def for_command(cls, executable: str, home: Path) -> "HistoryStore":
        name = Path(executable).name
        if name in ("", ".", ".."):
            name = "_"
        return cls(Path(home) / HISTORY_DIRNAME / name)

    def load(self) -> List[str]:
        try:
            # newline="": keep \r and friends inside entries; only \n separates
            with self.path.open(encoding="utf-8", newline="") as f:
                text = f.read()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise HistoryError(f"cannot read history {self.path}: {e}") from e
        if not text:
            return []
        return text.removesuffix("\n").split("\n")

    def save(self, lines: Iterable[str]) -> None:
        text = "".join(f"{line}\n" for line in lines)
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="") as f:
                f.write(text)
            tmp.replace(self.path)
        except OSError as e:
            raise HistoryError(f"cannot write history {self.path}: {e}") from e
