"""Clone-or-pull and add-commit-push for the shared roster directory."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from rosterkit.config.settings import (
    DEFAULT_GIT_EXECUTABLE,
    DEFAULT_SYNC_DIR_NAME,
    ConfiguredLocator,
    PlatformLocator,
    RosterSettings,
)
from rosterkit.errors import PreconditionError, SyncToolError

from .process import CommandResult, CommandRunner, run_command


logger = logging.getLogger(__name__)

# Substrings git prints when a commit has nothing staged.
NOTHING_TO_COMMIT_MARKERS = (
    "nothing to commit",
    "nothing added to commit",
    "no changes added to commit",
)

# Keep git messages untranslated so the markers above match.
GIT_ENV = {"LC_ALL": "C"}


class SyncOutcome(str, enum.Enum):
    CLONED = "cloned"
    UPDATED = "updated"
    PUSHED = "pushed"
    NOTHING_TO_COMMIT = "nothing_to_commit"


@dataclass(frozen=True)
class SyncResult:
    outcome: SyncOutcome
    message: str


def is_nothing_to_commit(result: CommandResult) -> bool:
    text = result.output.lower()
    return any(marker in text for marker in NOTHING_TO_COMMIT_MARKERS)


class GitSync:
    """Keep a sibling working tree in step with its remote repository.

    The working tree is located through ``locator`` under ``dir_name``. When
    it is missing, :meth:`pull` clones ``remote`` into place; afterwards it
    pulls. :meth:`push` stages everything, commits and pushes, stopping at the
    first failing step.
    """

    def __init__(
        self,
        locator: PlatformLocator,
        *,
        remote: Optional[str] = None,
        dir_name: str = DEFAULT_SYNC_DIR_NAME,
        git: str = DEFAULT_GIT_EXECUTABLE,
        runner: CommandRunner = run_command,
    ):
        self.locator = locator
        self.remote = remote
        self.dir_name = dir_name
        self.git = git
        self.runner = runner

    @classmethod
    def from_settings(cls, settings: RosterSettings, *, runner: CommandRunner = run_command) -> "GitSync":
        return cls(
            ConfiguredLocator(settings.sync_parent_dir),
            remote=settings.sync_remote,
            dir_name=settings.sync_dir_name,
            git=settings.git_executable,
            runner=runner,
        )

    def working_tree(self) -> Path:
        return self.locator.resolve_sibling_directory(self.dir_name)

    def _run(self, args: Sequence[str], cwd: Path) -> CommandResult:
        result = self.runner([self.git, *args], cwd, env=GIT_ENV)
        if not result.ok:
            raise SyncToolError(result.diagnostic(), argv=result.argv, returncode=result.returncode)
        return result

    def pull(self) -> SyncResult:
        tree = self.working_tree()
        if not tree.is_dir():
            return self._clone(tree)
        result = self._run(["pull"], tree)
        message = result.stdout.strip()
        logger.info("Pulled %s: %s", tree, message)
        return SyncResult(SyncOutcome.UPDATED, message)

    def _clone(self, tree: Path) -> SyncResult:
        if not self.remote:
            raise PreconditionError(f"No sync remote configured; cannot clone into {tree}")
        tree.parent.mkdir(parents=True, exist_ok=True)
        self._run(["clone", self.remote, str(tree)], tree.parent)
        logger.info("Cloned %s into %s", self.remote, tree)
        return SyncResult(SyncOutcome.CLONED, f"Cloned {self.remote} into {tree}")

    def push(self, message: str) -> SyncResult:
        if not message or not message.strip():
            raise ValueError("Commit message must not be empty")
        tree = self.working_tree()
        if not tree.is_dir():
            raise PreconditionError(f"Sync directory {tree} does not exist; pull first")

        self._run(["add", "-A"], tree)
        commit = self.runner([self.git, "commit", "-m", message], tree, env=GIT_ENV)
        if not commit.ok:
            if is_nothing_to_commit(commit):
                logger.info("Nothing to commit in %s", tree)
                return SyncResult(SyncOutcome.NOTHING_TO_COMMIT, "Nothing to commit")
            raise SyncToolError(commit.diagnostic(), argv=commit.argv, returncode=commit.returncode)
        self._run(["push"], tree)
        logger.info("Pushed %s: %s", tree, message)
        return SyncResult(SyncOutcome.PUSHED, f"Pushed changes: {message}")
