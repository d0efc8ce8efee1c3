"""The dotman commands, composed from the store, reconciler and git."""

from collections.abc import Callable
from pathlib import Path

from dotman.config import DotmanConfig
from dotman.errors import PullFailedError, SourceNotFoundError
from dotman.filesystem import FileSystem, LocalFileSystem
from dotman.logging import get_logger
from dotman.models import InstallResult, LinkResult, RepoUpdateResult, UpdateSummary
from dotman.paths import derive_repo_name, validate_entry_name
from dotman.store import Store
from dotman.symlinks import link_path
from dotman.vcs import GitVcs, VcsOperations

logger = get_logger(__name__)


def _default_vcs(config: DotmanConfig) -> VcsOperations:
    return GitVcs(config.git_executable)


def install_repo(
    url: str,
    config: DotmanConfig,
    vcs: VcsOperations | None = None,
) -> InstallResult:
    """Clone ``url`` into the store unless a repository of that name is present.

    An existing entry is never re-cloned or updated. A failed clone is not
    cleaned up, so a partial checkout will count as installed on the next run.
    """
    vcs = vcs or _default_vcs(config)
    name = derive_repo_name(url)

    store = Store(config.store_dir)
    store.ensure()

    dest = store.repo_path(name)
    if store.repo_exists(name):
        logger.info('repo_already_exists', name=name, dest=str(dest))
        return InstallResult(name=name, url=url, dest=dest, cloned=False)

    vcs.check_available()

    logger.info('cloning_repository', url=url, dest=str(dest))
    vcs.clone(url, dest)

    logger.info('repo_installed', name=name)
    return InstallResult(name=name, url=url, dest=dest, cloned=True)


def link_repo(
    name: str,
    target_name: str,
    config: DotmanConfig,
    fs: FileSystem | None = None,
    home_provider: Callable[[], Path] = Path.home,
) -> LinkResult:
    """Replace ``<config root>/<target_name>`` with a symlink to a stored repo.

    Whatever currently exists at the target is deleted, there is no backup.
    """
    fs = fs or LocalFileSystem()
    validate_entry_name(name, 'repository')
    validate_entry_name(target_name, 'target', allow_nested=True)

    source = Store(config.store_dir).repo_path(name)
    if not fs.exists(source):
        logger.error('source_repo_not_found', source=str(source))
        raise SourceNotFoundError(source)

    target = config.resolved_config_root(home_provider) / target_name
    result = link_path(source, target, fs)

    logger.info(
        'linked',
        source=str(result.source),
        target=str(result.target),
        _verbose_replaced=result.replaced,
    )
    return result


def update_repos(
    config: DotmanConfig,
    vcs: VcsOperations | None = None,
) -> UpdateSummary:
    """Fast-forward every stored checkout.

    Directories without version-control metadata are skipped. A failed pull
    is reported and tallied, and the remaining repositories are still updated.
    """
    vcs = vcs or _default_vcs(config)

    store = Store(config.store_dir)
    store.ensure()
    vcs.check_available()

    summary = UpdateSummary()
    for repo in store.list_managed_repos():
        if not repo.has_vcs_metadata:
            logger.debug('skipping_repo_without_vcs', path=str(repo.path))
            summary.results.append(RepoUpdateResult(path=repo.path, status='skipped_no_vcs'))
            continue

        logger.info('updating_repo', path=str(repo.path))
        try:
            vcs.pull_ff_only(repo.path)
        except PullFailedError as exc:
            logger.error('pull_failed', path=str(repo.path), returncode=exc.returncode)
            summary.results.append(
                RepoUpdateResult(path=repo.path, status='pull_failed', returncode=exc.returncode),
            )
            continue

        summary.results.append(RepoUpdateResult(path=repo.path, status='updated'))

    logger.info(
        'update_finished',
        updated=summary.updated,
        skipped=summary.skipped,
        failed=summary.failed,
    )
    return summary
