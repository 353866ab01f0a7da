"""Version control synchronization for the shared roster directory."""

from .git import GitSync, SyncOutcome, SyncResult, is_nothing_to_commit
from .process import CommandResult, CommandRunner, run_command

__all__ = [
    "CommandResult",
    "CommandRunner",
    "GitSync",
    "SyncOutcome",
    "SyncResult",
    "is_nothing_to_commit",
    "run_command",
]
