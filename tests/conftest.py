import pytest

from rerun.core import Shell
from rerun.model.command import Command


class MemoryReader:
    """In-memory stand-in for LineReader: scripted input, plain-list history."""

    def __init__(self, lines=()):
        self.prompt = ""
        self.lines = list(lines)
        self.items = []

    def set_prompt(self, prompt):
        self.prompt = prompt

    def read_line(self):
        if not self.lines:
            return None
        return self.lines.pop(0)

    def add_history(self, line):
        self.items.append(line)

    def history(self):
        return list(self.items)


class FakeChild:
    def __init__(self, returncode=0):
        self.returncode = returncode

    def wait(self):
        return self.returncode


class RecordingLauncher:
    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def __call__(self, executable, args):
        self.calls.append((executable, list(args)))
        if self.error is not None:
            raise self.error
        return FakeChild()


@pytest.fixture
def reader():
    return MemoryReader()


@pytest.fixture
def launcher():
    return RecordingLauncher()


@pytest.fixture
def make_shell(reader, launcher):
    def _make(*argv):
        return Shell(Command.from_argv(list(argv)), reader, launcher=launcher)
    return _make
