"""The store: a flat directory of repository checkouts."""

from collections.abc import Iterator
from pathlib import Path

from dotman.errors import StoreUnreadableError, StoreUnwritableError
from dotman.logging import get_logger
from dotman.models import ManagedRepo

logger = get_logger(__name__)

VCS_METADATA_DIR = '.git'


class Store:
    """Repositories managed by dotman, one directory per repository.

    Membership is derived purely from listing ``root``; no index is kept.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def __repr__(self) -> str:
        return f'Store({self.root})'

    def ensure(self) -> None:
        """Create the store directory (and parents) if it is missing."""
        if self.root.is_dir():
            return
        logger.debug('creating_store', path=str(self.root))
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error('store_unwritable', path=str(self.root), error=str(exc))
            raise StoreUnwritableError(self.root) from exc

    def repo_path(self, name: str) -> Path:
        return self.root / name

    def repo_exists(self, name: str) -> bool:
        return self.repo_path(name).exists()

    def list_managed_repos(self) -> Iterator[ManagedRepo]:
        """Yield every immediate subdirectory of the store, sorted by name."""
        try:
            children = sorted(self.root.iterdir())
        except OSError as exc:
            logger.error('store_unreadable', path=str(self.root), error=str(exc))
            raise StoreUnreadableError(self.root) from exc

        for path in children:
            if not path.is_dir():
                continue
            yield ManagedRepo(
                path=path,
                has_vcs_metadata=(path / VCS_METADATA_DIR).exists(),
            )
