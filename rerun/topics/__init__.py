from rerun.topics import launch, options

ALL_COMMANDS = {}
ALL_COMMANDS.update(options.COMMANDS)
ALL_COMMANDS.update(launch.COMMANDS)

__all__ = ["ALL_COMMANDS"]
