# rerun/model/command.py
#
# Base command line: executable + persistent args.
#
# Options:
#   "t"     -> -t      (one letter)
#   "test"  -> --test
#   "-x"    -> -x      (already dashed, kept as written)
#
# Removal matches both -name and --name, and also drops the token right
# after a match unless it starts with "-" (taken as the option's value).
# A value that itself starts with "-" (e.g. -1) is therefore left behind.

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from rerun.lib.escape import escape


def canonical_option(name: str) -> str:
    if name.startswith("-"):
        return name
    if len(name) == 1:
        return "-" + name
    return "--" + name


class Command:
    def __init__(self, executable: str, args: Iterable[str] = ()):
        self._executable = executable
        self._args: List[str] = list(args)

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> "Command":
        """argv[0] is the executable, the rest become persistent args."""
        if not argv:
            raise ValueError("Command needs at least an executable")
        return cls(argv[0], argv[1:])

    @property
    def executable(self) -> str:
        return self._executable

    @property
    def args(self) -> Tuple[str, ...]:
        return tuple(self._args)

    # ---- mutations ----

    def remove_option(self, name: str) -> None:
        stripped = name.lstrip("-")
        spellings = ("-" + stripped, "--" + stripped)

        kept: List[str] = []
        after_match = False
        for arg in self._args:
            if after_match:
                after_match = False
                if not arg.startswith("-"):
                    continue
            if arg in spellings:
                after_match = True
                continue
            kept.append(arg)

        self._args[:] = kept

    def add_option(self, name: str) -> None:
        # remove-then-append: a re-added option moves to the end
        self.remove_option(name)
        self._args.append(canonical_option(name))

    def add_option_with_value(self, name: str, value: str) -> None:
        self.add_option(name)
        self._args.append(value)

    # ---- reads ----

    def build_invocation(self, extra_args: Iterable[str] = ()) -> List[str]:
        """Persistent args followed by one-shot extras. Does not touch the model."""
        result = list(self._args)
        result.extend(extra_args)
        return result

    def render(self) -> str:
        if not self._args:
            return self._executable
        return " ".join([self._executable] + [escape(a) for a in self._args])

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Command({self._executable!r}, {self._args!r})"
