# rerun/topics/launch.py
#
# sys.run <extra...>
#   Runs <executable> <persistent args...> <extra...> in the foreground.
#   Child inherits stdin/stdout. Ctrl-C while it runs goes to the child;
#   the shell keeps its prompt.

from __future__ import annotations

import logging
import signal
import subprocess
import threading
from contextlib import contextmanager
from typing import Iterator, Sequence

from rerun.errors import LaunchError

logger = logging.getLogger(__name__)


def _noop_handler(signum, frame):
    return None


@contextmanager
def interrupts_ignored() -> Iterator[None]:
    """Swap in a no-op SIGINT handler, restoring the previous one on exit.

    The handler is a Python callable rather than SIG_IGN, so exec() resets it
    and the child still dies on Ctrl-C.
    """
    sigint = getattr(signal, "SIGINT", None)
    if sigint is None or threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = signal.signal(sigint, _noop_handler)
    if previous is None:
        # installed outside Python; best we can restore is the default
        previous = signal.SIG_DFL
    try:
        yield
    finally:
        signal.signal(sigint, previous)


def launch_process(executable: str, args: Sequence[str]) -> subprocess.Popen:
    # stdin/stdout/stderr are inherited
    return subprocess.Popen([executable, *args])


def run(shell, *extra):
    """sys.run: one-shot invocation, extra args are not kept."""
    cmd = shell.command
    argv = cmd.build_invocation(extra)
    logger.debug("launch %s %s", cmd.executable, argv)

    with interrupts_ignored():
        try:
            child = shell.launcher(cmd.executable, argv)
        except OSError as e:
            logger.debug("failed to launch %s: %s", cmd.executable, e)
            raise LaunchError(f"Error: {cmd.executable}: {e}") from e
        returncode = child.wait()

    logger.debug("%s exited with %s", cmd.executable, returncode)
    return None


COMMANDS = {
    "sys.run": (run, "Run the base command with extra args", "<arg...>"),
}
