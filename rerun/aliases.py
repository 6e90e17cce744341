# rerun/aliases.py
#
# Control lines: the first token selects an internal sys.* primitive.
# Any other first token is an invocation (sys.run with every token).

CONTROL_ALIASES = {
    "-":  "sys.opt.rm",
    "+":  "sys.opt.add",
    "++": "sys.opt.arg",
}

RUN_COMMAND = "sys.run"


class AliasManager:
    def __init__(self, aliases):
        self.aliases = dict(aliases)

    def resolve(self, name):
        return self.aliases.get(name)
