"""rerun/core.py

Shell runtime + init_shell() wiring.

A line is split into tokens and its first token picks the handler:
control aliases (-, +, ++) edit the base command, anything else runs it.
"""

from __future__ import annotations

import itertools
import logging
import sys
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

from rerun.aliases import CONTROL_ALIASES, RUN_COMMAND, AliasManager
from rerun.config import DEFAULT_PROMPT, ShellConfig
from rerun.errors import HistoryError, ShellError
from rerun.lib.split import split_command
from rerun.modules.history import HistoryStore
from rerun.model.command import Command
from rerun.topics import ALL_COMMANDS
from rerun.topics.launch import launch_process

logger = logging.getLogger(__name__)


class Shell:
    def __init__(self, command: Command, reader, launcher=launch_process, prompt: str = DEFAULT_PROMPT):
        self.command = command
        self.reader = reader
        self.launcher = launcher
        self.prompt_format = prompt

        self.commands = {}   # name -> {handler, help, usage}
        self.aliases = AliasManager(CONTROL_ALIASES)

        # ---- history ----
        self.history_store = None
        self.save_history = False
        self.last_line: Optional[str] = None

        for name, (handler, help_text, usage) in ALL_COMMANDS.items():
            self.register(name, handler, help_text, usage)

        self.refresh_prompt()

    def register(self, name, handler, help_text="", usage=""):
        self.commands[name] = {"handler": handler, "help": help_text, "usage": usage}

    def describe(self):
        """One line per registered primitive: usage, then help text."""
        width = max(len(e["usage"]) for e in self.commands.values())
        return "\n".join(
            f"  {e['usage']:<{width}}  {e['help']}" for e in self.commands.values()
        )

    # ---- prompt ----

    def refresh_prompt(self):
        self.reader.set_prompt(self.prompt_format.format(command=self.command.render()))

    @contextmanager
    def updating(self) -> Iterator[Command]:
        """Yield the command for in-place edits, then refresh the prompt."""
        yield self.command
        self.refresh_prompt()

    # ---- dispatch ----

    def dispatch(self, name, *args):
        entry = self.commands[name]
        logger.debug("dispatch %s %s", name, args)
        return entry["handler"](self, *args)

    def execute(self, tokens: Iterable[str]):
        tokens = iter(tokens)
        head = next(tokens, None)
        if head is None:
            return None

        target = self.aliases.resolve(head)
        if target is None:
            return self.dispatch(RUN_COMMAND, head, *tokens)
        return self.dispatch(target, *tokens)

    def execute_line(self, line: str):
        return self.execute(split_command(line))

    def handle_line(self, line: str) -> Optional[str]:
        """Run one operator line; return a message for the operator, if any."""
        tokens = split_command(line)
        head = next(tokens, None)
        if head is None:
            return None

        try:
            out = self.execute(itertools.chain((head,), tokens))
        except ShellError as e:
            out = str(e)

        self.add_history(line)
        return out

    def run(self):
        try:
            while True:
                line = self.reader.read_line()
                if line is None:
                    break
                out = self.handle_line(line)
                if out:
                    print(out, file=sys.stderr)
        finally:
            self.close()

    # ---- history ----

    def add_history(self, line: str):
        if line != self.last_line:
            self.reader.add_history(line)
            self.last_line = line

    def enable_history(self, store):
        self.history_store = store
        try:
            lines = store.load()
        except HistoryError as e:
            logger.warning("Error reading history: %s", e)
            lines = []
        for line in lines:
            self.reader.add_history(line)
        self.save_history = True

    def close(self):
        if not self.save_history:
            return
        self.save_history = False
        try:
            self.history_store.save(self.reader.history())
        except HistoryError as e:
            logger.warning("Error writing history: %s", e)


def init_shell(argv, config: ShellConfig, reader=None, launcher=launch_process) -> Shell:
    # Late import: readline is only needed for a real terminal.
    if reader is None:
        from rerun.modules.term import LineReader
        reader = LineReader(history_length=config.history_length)

    shell = Shell(Command.from_argv(argv), reader, launcher=launcher, prompt=config.prompt)

    if config.save_history and config.home is not None:
        shell.enable_history(HistoryStore.for_command(shell.command.executable, config.home))

    return shell
