"""Version-control operations, backed by the ``git`` executable."""

import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from dotman.errors import CloneFailedError, PullFailedError, ToolNotFoundError
from dotman.logging import get_logger

logger = get_logger(__name__)


class VcsOperations(Protocol):
    """The version-control capability the commands depend on."""

    def check_available(self) -> None:
        """Raise ``ToolNotFoundError`` if the tool cannot be run."""
        ...

    def clone(self, url: str, dest: Path) -> None:
        """Clone ``url`` into ``dest``, raising ``CloneFailedError`` on failure."""
        ...

    def pull_ff_only(self, repo: Path) -> None:
        """Fast-forward ``repo``, raising ``PullFailedError`` on failure."""
        ...


class GitVcs:
    """Run git as a child process.

    Output is passed straight through to the terminal and only the exit
    status is inspected. No timeout is applied, a hung git hangs the run.
    """

    def __init__(self, executable: str = 'git') -> None:
        self.executable = executable

    def _resolve(self) -> str:
        resolved = shutil.which(self.executable)
        if resolved is None:
            raise ToolNotFoundError(self.executable)
        return resolved

    def _run(self, args: list[str]) -> int:
        cmd = [self._resolve(), *args]
        logger.debug('running_git', _debug_command=' '.join(cmd))
        try:
            result = subprocess.run(cmd, check=False)  # noqa: S603 - argument vector, no shell
        except OSError as exc:
            raise ToolNotFoundError(self.executable) from exc
        return result.returncode

    def check_available(self) -> None:
        self._resolve()

    def clone(self, url: str, dest: Path) -> None:
        returncode = self._run(['clone', url, str(dest)])
        if returncode != 0:
            raise CloneFailedError(url, dest, returncode)

    def pull_ff_only(self, repo: Path) -> None:
        returncode = self._run(['-C', str(repo), 'pull', '--ff-only'])
        if returncode != 0:
            raise PullFailedError(repo, returncode)
