from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from garden_core.configuration import (
    load_project_config,
    resolve_project_config_path,
    resolve_provider_configs,
)
from garden_core.contracts import LocalConfigStore, ProjectSource
from garden_core.runtime.local_config import YamlLocalConfigStore

logger = logging.getLogger("garden.project")


@dataclass
class Garden:
    """
    Host-side project state for one environment.

    Satisfies GardenState; plugins never see this object, only contexts built from it.
    """

    project_name: str
    project_root: str
    environment_name: str
    local_config_store: LocalConfigStore
    project_sources: list[ProjectSource] = field(default_factory=list)
    provider_configs: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_project(cls, path: str | Path, *, environment_name: str | None = None) -> Garden:
        """
        Load a project from its garden.yml and resolve one environment.

        Without `environment_name`, the project's default_environment is used, falling
        back to the first declared environment.
        """
        config_path = resolve_project_config_path(path)
        project = load_project_config(config_path)
        environment = (
            environment_name or project.default_environment or project.environments[0].name
        )
        provider_configs = resolve_provider_configs(project, environment)
        project_root = config_path.parent

        logger.debug(
            "Loaded project %s from %s (environment=%s, providers=%s)",
            project.name,
            config_path,
            environment,
            sorted(provider_configs),
        )
        return cls(
            project_name=project.name,
            project_root=str(project_root),
            environment_name=environment,
            local_config_store=YamlLocalConfigStore(project_root),
            project_sources=list(project.sources),
            provider_configs=provider_configs,
        )
