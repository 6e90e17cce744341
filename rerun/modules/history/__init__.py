from rerun.modules.history.store import HistoryStore

__all__ = ["HistoryStore"]
