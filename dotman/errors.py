"""Exception hierarchy for dotman.

Every failure a command can hit is a ``DotmanError``. The CLI catches the base
class, reports the message and exits non-zero. ``PullFailedError`` is the one
error that ``update`` recovers from locally.
"""

from pathlib import Path


class DotmanError(RuntimeError):
    """Base class for all dotman failures."""


class DotmanConfigError(DotmanError):
    """Raised when dotman configuration is invalid."""


class InvalidRepoUrlError(DotmanError):
    """Raised when no repository name can be inferred from a URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f'could not infer repository name from URL: {url!r}')


class InvalidNameError(DotmanError):
    """Raised when a repository or target name would escape its parent directory."""

    def __init__(self, value: str, kind: str) -> None:
        self.value = value
        self.kind = kind
        super().__init__(f'invalid {kind} name: {value!r}')


class NoHomeDirectoryError(DotmanError):
    """Raised when the invoking user's home directory cannot be determined."""

    def __init__(self) -> None:
        super().__init__('unable to determine home directory')


class StoreUnwritableError(DotmanError):
    """Raised when the store directory cannot be created."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'failed creating {path} (need sudo?)')


class StoreUnreadableError(DotmanError):
    """Raised when the store directory cannot be listed."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'failed reading {path}')


class TargetDirUnwritableError(DotmanError):
    """Raised when the parent directory of a link target cannot be created."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'failed creating {path}')


class SourceNotFoundError(DotmanError):
    """Raised when the repository a link should point at does not exist."""

    def __init__(self, source: Path) -> None:
        self.source = source
        super().__init__(f'source repo not found: {source}')


class RemovalFailedError(DotmanError):
    """Raised when an existing link target cannot be removed."""

    def __init__(self, target: Path, source: Path) -> None:
        self.target = target
        self.source = source
        super().__init__(f'failed removing existing {target} (to link {source})')


class SymlinkCreationFailedError(DotmanError):
    """Raised when the symlink itself cannot be created."""

    def __init__(self, target: Path, source: Path) -> None:
        self.target = target
        self.source = source
        super().__init__(f'failed creating symlink {target} -> {source}')


class ToolNotFoundError(DotmanError):
    """Raised when the version-control executable is not on PATH."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f'{tool} is not installed or not found in PATH')


class CloneFailedError(DotmanError):
    """Raised when ``git clone`` exits non-zero."""

    def __init__(self, url: str, dest: Path, returncode: int) -> None:
        self.url = url
        self.dest = dest
        self.returncode = returncode
        super().__init__(f'git clone {url} -> {dest} failed with status {returncode}')


class PullFailedError(DotmanError):
    """Raised when a fast-forward pull exits non-zero in one repository."""

    def __init__(self, repo: Path, returncode: int) -> None:
        self.repo = repo
        self.returncode = returncode
        super().__init__(f'git pull failed in {repo} with status {returncode}')


__all__ = [
    'CloneFailedError',
    'DotmanConfigError',
    'DotmanError',
    'InvalidNameError',
    'InvalidRepoUrlError',
    'NoHomeDirectoryError',
    'PullFailedError',
    'RemovalFailedError',
    'SourceNotFoundError',
    'StoreUnreadableError',
    'StoreUnwritableError',
    'SymlinkCreationFailedError',
    'TargetDirUnwritableError',
    'ToolNotFoundError',
]
