from .plugin import PluginInfo, ProviderPlugin
from .plugin_context import PluginContext
from .provider import DEFAULT_PROVIDER, Provider, ProviderRegistry

__all__ = [
    "DEFAULT_PROVIDER",
    "PluginContext",
    "PluginInfo",
    "Provider",
    "ProviderPlugin",
    "ProviderRegistry",
]
