# interactive.py
#
#   interactive <command> [args...]
#
#   + <opt...>        add options to the base command
#   - <opt...>        remove options (and their values)
#   ++ <opt> <value>  add an option with a value
#   <args...>         run the base command with extra args
#   Ctrl-D            quit

import logging
import sys

from rerun.config import default_home, load_config
from rerun.core import init_shell

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


def main(argv=None):
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        print("Usage: interactive <command>", file=sys.stderr)
        return 1

    # handler first, so config warnings use LOG_FORMAT; level comes from the config
    logging.basicConfig(format=LOG_FORMAT)
    cfg = load_config(default_home())
    logging.getLogger().setLevel(cfg.log_level)

    shell = init_shell(argv, cfg)
    print(shell.describe())
    print("Exit: Ctrl-D\n")
    shell.run()

    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
