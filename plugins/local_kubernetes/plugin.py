from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from garden_core.contracts import PluginContext, PluginInfo, ProviderPlugin

from .config import parse_config

LOCAL_CONFIG_KEY = "kubernetes"


class LocalKubernetesProvider(ProviderPlugin):
    @property
    def info(self) -> PluginInfo:
        return PluginInfo(
            key="local-kubernetes",
            name="Local Kubernetes",
            version="0.1.0",
            description="Deploy services to a local kubernetes cluster.",
        )

    def get_environment_status(self, *, ctx: PluginContext) -> Mapping[str, Any]:
        config = parse_config(ctx.provider)
        namespace = config.namespace or ctx.project_name
        configured = ctx.local_config_store.get(f"{LOCAL_CONFIG_KEY}.context")

        return {
            "ready": configured == config.context,
            "environment": ctx.environment_name,
            "context": config.context,
            "namespace": namespace,
            "dependencies": {
                name: dict(ctx.provider_config(name)) for name in config.depends_on
            },
        }

    def configure_environment(self, *, ctx: PluginContext) -> None:
        config = parse_config(ctx.provider)
        ctx.local_config_store.set(f"{LOCAL_CONFIG_KEY}.context", config.context)
        ctx.local_config_store.set(
            f"{LOCAL_CONFIG_KEY}.namespace", config.namespace or ctx.project_name
        )
