"""Pydantic models for dotman."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, computed_field

TargetState = Literal['absent', 'symlink', 'directory', 'file']
UpdateStatus = Literal['updated', 'pull_failed', 'skipped_no_vcs']


class ManagedRepo(BaseModel):
    """A directory found directly under the store."""

    path: Path
    has_vcs_metadata: bool

    @property
    def name(self) -> str:
        """Store name of the repository (its directory name)."""
        return self.path.name


class InstallResult(BaseModel):
    """Outcome of an install command."""

    name: str
    url: str
    dest: Path
    cloned: bool


class LinkResult(BaseModel):
    """Outcome of reconciling a link target."""

    source: Path
    target: Path
    replaced: TargetState


class RepoUpdateResult(BaseModel):
    """Terminal state of a single repository during update."""

    path: Path
    status: UpdateStatus
    returncode: int | None = None


class UpdateSummary(BaseModel):
    """Tally of an update run across every managed repository."""

    results: list[RepoUpdateResult] = Field(default_factory=list)

    def _count(self, status: UpdateStatus) -> int:
        return sum(1 for result in self.results if result.status == status)

    @computed_field
    @property
    def updated(self) -> int:
        return self._count('updated')

    @computed_field
    @property
    def skipped(self) -> int:
        return self._count('skipped_no_vcs')

    @computed_field
    @property
    def failed(self) -> int:
        return self._count('pull_failed')
