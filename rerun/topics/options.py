# rerun/topics/options.py
#
# Persistent option edits. Reached via control aliases:
#   - <opt...>          remove each option (and its value, if any)
#   + <opt...>          add each option at the end
#   ++ <opt> <value>    add an option followed by its value

from rerun.errors import UsageError

OPT_ARG_USAGE = "++ <option> <arg>"


def opt_rm(shell, *names):
    with shell.updating() as cmd:
        for name in names:
            cmd.remove_option(name)
    return None


def opt_add(shell, *names):
    with shell.updating() as cmd:
        for name in names:
            cmd.add_option(name)
    return None


def opt_arg(shell, *args):
    if len(args) != 2:
        raise UsageError(OPT_ARG_USAGE)
    name, value = args
    with shell.updating() as cmd:
        cmd.add_option_with_value(name, value)
    return None


COMMANDS = {
    "sys.opt.rm":  (opt_rm,  "Remove persistent options",         "- <option...>"),
    "sys.opt.add": (opt_add, "Add persistent options",            "+ <option...>"),
    "sys.opt.arg": (opt_arg, "Add persistent option with value",  OPT_ARG_USAGE),
}
