"""Utilities for reading dotman configuration."""

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from dotman.errors import DotmanConfigError
from dotman.logging import get_logger
from dotman.paths import DEFAULT_STORE_DIR, resolve_config_root

logger = get_logger(__name__)

CONFIG_ENV_VAR = 'DOTMAN_CONFIG'
STORE_ENV_VAR = 'DOTMAN_DIR'


class DotmanConfig(BaseModel):
    """Runtime settings shared by every command."""

    model_config = ConfigDict(extra='forbid')

    store_dir: Path = DEFAULT_STORE_DIR
    config_root: Path | None = None
    git_executable: str = 'git'

    @field_validator('store_dir', 'config_root')
    @classmethod
    def normalize_path(cls, v: Path | None) -> Path | None:
        """Expand ``~`` and anchor relative paths at the current directory."""
        return v.expanduser().absolute() if v is not None else None

    def resolved_config_root(self, home_provider: Callable[[], Path] = Path.home) -> Path:
        """Return the configured root, or ``<home>/.config`` when unset."""
        if self.config_root is not None:
            return self.config_root
        return resolve_config_root(home_provider)


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        msg = f'configuration file not found: {config_path}'
        raise DotmanConfigError(msg)

    logger.debug('loading_config', config=str(config_path))
    try:
        with config_path.open() as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        msg = f'failed to parse YAML: {exc}'
        raise DotmanConfigError(msg) from exc

    if not isinstance(data, dict):
        msg = f'configuration root must be a mapping in {config_path}'
        raise DotmanConfigError(msg)

    return data


def load_config(
    config_path: Path | None = None,
    *,
    store_override: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> DotmanConfig:
    """Build the effective configuration.

    Later sources win: defaults, the YAML file (``config_path`` or
    ``$DOTMAN_CONFIG``), ``$DOTMAN_DIR``, then ``store_override``.
    """
    environ = os.environ if environ is None else environ

    if config_path is None and environ.get(CONFIG_ENV_VAR):
        config_path = Path(environ[CONFIG_ENV_VAR])

    data: dict[str, Any] = {}
    if config_path is not None:
        data = _load_yaml_config(config_path.expanduser())

    if environ.get(STORE_ENV_VAR):
        data['store_dir'] = environ[STORE_ENV_VAR]
    if store_override is not None:
        data['store_dir'] = store_override

    try:
        config = DotmanConfig.model_validate(data)
    except ValidationError as exc:
        msg = f'invalid dotman configuration: {exc}'
        raise DotmanConfigError(msg) from exc

    logger.debug('loaded_config', _verbose_config=config.model_dump(mode='json'))
    return config


__all__ = [
    'CONFIG_ENV_VAR',
    'STORE_ENV_VAR',
    'DotmanConfig',
    'load_config',
]
