"""Repository name inference and well-known locations."""

from collections.abc import Callable
from pathlib import Path, PurePosixPath

from dotman.errors import InvalidNameError, InvalidRepoUrlError, NoHomeDirectoryError

DEFAULT_STORE_DIR = Path('/usr/local/share/dotman')
CONFIG_DIRNAME = '.config'
VCS_SUFFIX = '.git'


def derive_repo_name(url: str) -> str:
    """Infer the store name of a repository from its URL.

    One trailing ``/`` is stripped, then one trailing ``.git``, and the last
    path segment is returned::

        https://example.com/x/foo.git/  ->  foo
    """
    trimmed = url.removesuffix('/').removesuffix(VCS_SUFFIX)
    name = trimmed.rsplit('/', 1)[-1]
    if not name:
        raise InvalidRepoUrlError(url)
    return name


def validate_entry_name(value: str, kind: str, *, allow_nested: bool = False) -> str:
    """Reject names that would resolve outside of their parent directory."""
    path = PurePosixPath(value)
    if not value.strip() or path.is_absolute() or '\\' in value:
        raise InvalidNameError(value, kind)
    if any(part in ('.', '..') for part in value.split('/')):
        raise InvalidNameError(value, kind)
    if not allow_nested and len(path.parts) != 1:
        raise InvalidNameError(value, kind)
    return value


def resolve_config_root(home_provider: Callable[[], Path] = Path.home) -> Path:
    """Return ``<home>/.config`` for the invoking user."""
    try:
        home = home_provider()
    except (RuntimeError, KeyError) as exc:
        raise NoHomeDirectoryError from exc
    return Path(home) / CONFIG_DIRNAME
