"""Shared fixtures and fakes for dotman tests."""

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

import pytest

from dotman.config import DotmanConfig
from dotman.errors import CloneFailedError, PullFailedError, ToolNotFoundError
from dotman.models import TargetState


@dataclass
class FakeVcs:
    """Records git operations instead of running them."""

    available: bool = True
    clone_returncode: int = 0
    failing_pulls: set[str] = field(default_factory=set)
    calls: list[tuple] = field(default_factory=list)

    def check_available(self) -> None:
        self.calls.append(('check_available',))
        if not self.available:
            raise ToolNotFoundError('git')

    def clone(self, url: str, dest: Path) -> None:
        self.calls.append(('clone', url, dest))
        dest.mkdir(parents=True)
        if self.clone_returncode != 0:
            # git leaves a partial checkout behind
            raise CloneFailedError(url, dest, self.clone_returncode)
        (dest / '.git').mkdir()

    def pull_ff_only(self, repo: Path) -> None:
        self.calls.append(('pull', repo))
        if repo.name in self.failing_pulls:
            raise PullFailedError(repo, 1)

    def called(self, operation: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == operation]


@dataclass
class InMemoryFileSystem:
    """A tiny ``FileSystem`` keeping nodes in a dict.

    Nodes are ``'directory'``, ``'file'`` or ``('symlink', destination)``.
    ``errors`` maps an operation name to an exception raised when it is called.
    """

    nodes: dict[PurePosixPath, object] = field(default_factory=dict)
    errors: dict[str, OSError] = field(default_factory=dict)
    calls: list[tuple] = field(default_factory=list)

    def _key(self, path: Path) -> PurePosixPath:
        return PurePosixPath(path)

    def _check(self, operation: str) -> None:
        if operation in self.errors:
            raise self.errors[operation]

    def add_dir(self, path: Path) -> None:
        key = self._key(path)
        for parent in key.parents:
            self.nodes.setdefault(parent, 'directory')
        self.nodes[key] = 'directory'

    def add_file(self, path: Path) -> None:
        self.add_dir(Path(path).parent)
        self.nodes[self._key(path)] = 'file'

    def add_symlink(self, path: Path, destination: Path) -> None:
        self.add_dir(Path(path).parent)
        self.nodes[self._key(path)] = ('symlink', self._key(destination))

    def classify(self, path: Path) -> TargetState:
        self._check('classify')
        node = self.nodes.get(self._key(path))
        if node is None:
            return 'absent'
        if isinstance(node, tuple):
            return 'symlink'
        return node

    def _follow(self, path: Path) -> object:
        node = self.nodes.get(self._key(path))
        if isinstance(node, tuple):
            return self.nodes.get(node[1])
        return node

    def exists(self, path: Path) -> bool:
        return self._follow(path) is not None

    def is_dir(self, path: Path) -> bool:
        return self._follow(path) == 'directory'

    def make_dirs(self, path: Path) -> None:
        self.calls.append(('make_dirs', path))
        self._check('make_dirs')
        self.add_dir(path)

    def unlink(self, path: Path) -> None:
        self.calls.append(('unlink', path))
        self._check('unlink')
        if self.nodes.pop(self._key(path), None) is None:
            raise FileNotFoundError(str(path))

    def remove_tree(self, path: Path) -> None:
        self.calls.append(('remove_tree', path))
        self._check('remove_tree')
        key = self._key(path)
        if key not in self.nodes:
            raise FileNotFoundError(str(path))
        for node in [node for node in self.nodes if node == key or key in node.parents]:
            del self.nodes[node]

    def symlink(self, source: Path, target: Path, *, is_dir: bool) -> None:
        self.calls.append(('symlink', source, target, is_dir))
        self._check('symlink')
        if self._key(target) in self.nodes:
            raise FileExistsError(str(target))
        self.nodes[self._key(target)] = ('symlink', self._key(source))


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    return tmp_path / 'share' / 'dotman'


@pytest.fixture
def config_root(tmp_path: Path) -> Path:
    return tmp_path / 'home' / '.config'


@pytest.fixture
def config(store_dir: Path, config_root: Path) -> DotmanConfig:
    return DotmanConfig(store_dir=store_dir, config_root=config_root)


@pytest.fixture
def fake_vcs() -> FakeVcs:
    return FakeVcs()


@pytest.fixture
def memory_fs() -> InMemoryFileSystem:
    return InMemoryFileSystem()
