"""Resolve where briefcase entries live from environment state.

Nothing here touches the filesystem or caches a result: each call reads the
environment snapshot it is given (``os.environ`` by default) again.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from briefcase_kv.config import BriefcaseConfig

NOT_APPLICABLE = "N/A"


class StorageLocation(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Path
    source: str
    dirname: str

    @property
    def directory(self) -> Path:
        return self.root / self.dirname


def resolve_root(
    environ: Mapping[str, str] | None = None,
    config: BriefcaseConfig | None = None,
) -> tuple[Path, str]:
    """Return the storage root and the name of the variable that supplied it."""
    env = os.environ if environ is None else environ
    config = config or BriefcaseConfig()
    for env_var in config.root_env_vars:
        value = env.get(env_var, "")
        if value:
            return Path(value), env_var
    return config.default_root, NOT_APPLICABLE


def resolve_subdir_name(
    environ: Mapping[str, str] | None = None,
    config: BriefcaseConfig | None = None,
) -> str:
    env = os.environ if environ is None else environ
    config = config or BriefcaseConfig()
    name = env.get(config.dirname_env_var, "")
    if name:
        return name
    return config.default_dirname


def resolve_storage_dir(
    environ: Mapping[str, str] | None = None,
    config: BriefcaseConfig | None = None,
) -> Path:
    return locate(environ, config).directory


def locate(
    environ: Mapping[str, str] | None = None,
    config: BriefcaseConfig | None = None,
) -> StorageLocation:
    root, source = resolve_root(environ, config)
    return StorageLocation(
        root=root,
        source=source,
        dirname=resolve_subdir_name(environ, config),
    )
