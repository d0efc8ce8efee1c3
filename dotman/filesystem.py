"""Filesystem capability used by the link reconciler.

The reconciler only talks to the filesystem through this narrow interface so
that tests can swap in an in-memory implementation.
"""

import shutil
import stat
from pathlib import Path
from typing import Protocol

from dotman.models import TargetState


class FileSystem(Protocol):
    """Filesystem operations needed to replace a path with a symlink."""

    def classify(self, path: Path) -> TargetState:
        """Classify ``path`` without following a final symlink."""
        ...

    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def make_dirs(self, path: Path) -> None: ...

    def unlink(self, path: Path) -> None: ...

    def remove_tree(self, path: Path) -> None: ...

    def symlink(self, source: Path, target: Path, *, is_dir: bool) -> None: ...


class LocalFileSystem:
    """``FileSystem`` backed by the real disk."""

    def classify(self, path: Path) -> TargetState:
        try:
            mode = path.lstat().st_mode
        except FileNotFoundError:
            return 'absent'
        if stat.S_ISLNK(mode):
            return 'symlink'
        if stat.S_ISDIR(mode):
            return 'directory'
        return 'file'

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def unlink(self, path: Path) -> None:
        path.unlink()

    def remove_tree(self, path: Path) -> None:
        shutil.rmtree(path)

    def symlink(self, source: Path, target: Path, *, is_dir: bool) -> None:
        target.symlink_to(source, target_is_directory=is_dir)
