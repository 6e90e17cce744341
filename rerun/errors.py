# rerun/errors.py
#
# Everything the driver reports to the operator derives from ShellError.
# Tokenizer, escaper and command model never raise.


class ShellError(RuntimeError):
    pass


class UsageError(ShellError):
    def __init__(self, usage: str):
        super().__init__(usage)
        self.usage = usage

    def __str__(self) -> str:
        return f"Usage: {self.usage}"


class LaunchError(ShellError):
    pass


class HistoryError(ShellError):
    pass
