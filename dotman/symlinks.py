"""Replace a path under the config root with a symlink into the store.

``link_path`` is destructive: whatever currently sits at the target (a file,
a whole directory tree or another symlink) is removed without a backup before
the new symlink is created.
"""

from pathlib import Path

from dotman.errors import (
    RemovalFailedError,
    SourceNotFoundError,
    SymlinkCreationFailedError,
    TargetDirUnwritableError,
)
from dotman.filesystem import FileSystem, LocalFileSystem
from dotman.logging import get_logger
from dotman.models import LinkResult, TargetState

logger = get_logger(__name__)


def classify_target(target: Path, fs: FileSystem | None = None) -> TargetState:
    """Report what currently exists at ``target``.

    A dangling symlink is reported as ``symlink``, never as ``absent``.
    """
    fs = fs or LocalFileSystem()
    return fs.classify(target)


def remove_target(
    target: Path,
    state: TargetState,
    *,
    source: Path,
    fs: FileSystem | None = None,
) -> None:
    """Remove ``target`` according to its classified ``state``.

    Symlinks are unlinked and never traversed, directories are removed
    recursively, and anything else is unlinked. A target that disappears
    before it can be removed counts as removed.
    """
    fs = fs or LocalFileSystem()
    if state == 'absent':
        return

    logger.debug('removing_existing_target', target=str(target), state=state)
    try:
        if state == 'directory':
            fs.remove_tree(target)
        else:
            fs.unlink(target)
    except FileNotFoundError:
        logger.debug('target_already_gone', target=str(target))
    except OSError as exc:
        logger.error('removal_failed', target=str(target), error=str(exc))
        raise RemovalFailedError(target, source) from exc


def link_path(
    source: Path,
    target: Path,
    fs: FileSystem | None = None,
) -> LinkResult:
    """Make ``target`` a symlink pointing at ``source``.

    The source is checked before anything is removed. Running this twice with
    the same arguments is safe: the second call replaces the first symlink
    with an identical one.
    """
    fs = fs or LocalFileSystem()
    # a relative link would resolve against the target directory
    source = source.absolute()

    if not fs.exists(source):
        logger.error('source_does_not_exist', source=str(source))
        raise SourceNotFoundError(source)

    parent = target.parent
    try:
        fs.make_dirs(parent)
    except OSError as exc:
        raise TargetDirUnwritableError(parent) from exc

    try:
        state = classify_target(target, fs)
    except OSError as exc:
        logger.error('target_inspection_failed', target=str(target), error=str(exc))
        raise RemovalFailedError(target, source) from exc
    remove_target(target, state, source=source, fs=fs)

    logger.debug(
        'creating_symlink',
        target=str(target),
        source=str(source),
        _verbose_replaced=state,
    )
    try:
        fs.symlink(source, target, is_dir=fs.is_dir(source))
    except OSError as exc:
        raise SymlinkCreationFailedError(target, source) from exc

    return LinkResult(source=source, target=target, replaced=state)
