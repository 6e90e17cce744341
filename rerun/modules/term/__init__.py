from rerun.modules.term.reader import LineReader

__all__ = ["LineReader"]
