# rerun/lib/escape.py
# Display quoting for a single argument (no Core dependency).


def escape(arg: str) -> str:
    """Single-quote arg when it holds a space or a quote; otherwise return it as-is."""
    if " " in arg or "'" in arg:
        return "'" + arg.replace("'", "'\\''") + "'"
    return arg
