from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from garden_core.contracts import PluginContext, PluginInfo, ProjectSource
from garden_core.runtime.garden import Garden
from garden_core.testkit.fakes import InMemoryLocalConfigStore


def make_garden(
    provider_configs: Mapping[str, Mapping[str, Any]] | None = None,
    *,
    project_name: str = "demo-project",
    project_root: str = "/tmp/demo-project",
    environment_name: str = "local",
    project_sources: list[ProjectSource] | None = None,
) -> Garden:
    if project_sources is None:
        project_sources = [
            ProjectSource(name="shared-lib", repository_url="https://example.com/lib.git#main")
        ]
    return Garden(
        project_name=project_name,
        project_root=project_root,
        environment_name=environment_name,
        local_config_store=InMemoryLocalConfigStore(),
        project_sources=project_sources,
        provider_configs=dict(provider_configs or {}),
    )


class DummyProviderPlugin:
    def __init__(self) -> None:
        self.last_ctx: PluginContext | None = None

    @property
    def info(self) -> PluginInfo:
        return PluginInfo(key="dummy", name="Dummy Provider", version="0.1.0")

    def get_environment_status(self, *, ctx: PluginContext) -> Mapping[str, Any]:
        self.last_ctx = ctx
        return {"ready": True, "provider": ctx.provider.name}
