from __future__ import annotations

import logging
from copy import deepcopy

from garden_core.contracts import (
    DEFAULT_PROVIDER,
    DEFAULT_PROVIDER_NAME,
    GardenState,
    PluginContext,
    PluginError,
)
from garden_core.orchestration.registry import build_provider_registry

logger = logging.getLogger("garden.plugin_context")


def create_plugin_context(garden: GardenState, provider_name: str) -> PluginContext:
    """Build the view of `garden` that the provider `provider_name` gets to see."""
    providers = build_provider_registry(garden.provider_configs)
    provider = providers.get(provider_name)

    if provider_name == DEFAULT_PROVIDER_NAME:
        provider = DEFAULT_PROVIDER

    if provider is None:
        raise PluginError(
            f"Could not find provider '{provider_name}'",
            {"provider_name": provider_name, "providers": providers},
        )

    logger.debug(
        "Creating plugin context for provider %s (environment=%s, providers=%s)",
        provider_name,
        garden.environment_name,
        sorted(providers),
    )
    return PluginContext(
        project_name=garden.project_name,
        project_root=garden.project_root,
        project_sources=deepcopy(garden.project_sources),
        environment_name=garden.environment_name,
        local_config_store=garden.local_config_store,
        provider=provider,
        providers=providers,
    )
