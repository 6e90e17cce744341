from rerun.model.command import Command

__all__ = ["Command"]
