"""Plugin context construction for Garden providers."""

from garden_core.contracts import PluginContext, PluginError, Provider
from garden_core.orchestration import build_provider_registry, create_plugin_context

__all__ = [
    "PluginContext",
    "PluginError",
    "Provider",
    "build_provider_registry",
    "create_plugin_context",
]
