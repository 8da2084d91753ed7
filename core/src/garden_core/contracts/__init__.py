from .common import DEFAULT_PROVIDER_NAME, Identifier, ProviderName, is_identifier
from .errors import ConfigurationError, GardenError, PluginError
from .garden import GardenState, LocalConfigStore
from .plugin_contracts import (
    DEFAULT_PROVIDER,
    PluginContext,
    PluginInfo,
    Provider,
    ProviderPlugin,
    ProviderRegistry,
)
from .project_contracts import (
    EnvironmentConfig,
    EnvironmentDefaults,
    ProjectConfig,
    ProjectSource,
    ProviderConfigBase,
)

__all__ = [
    "DEFAULT_PROVIDER",
    "DEFAULT_PROVIDER_NAME",
    "Identifier",
    "ProviderName",
    "is_identifier",
    "GardenError",
    "PluginError",
    "ConfigurationError",
    "GardenState",
    "LocalConfigStore",
    "PluginContext",
    "PluginInfo",
    "Provider",
    "ProviderPlugin",
    "ProviderRegistry",
    "EnvironmentConfig",
    "EnvironmentDefaults",
    "ProjectConfig",
    "ProjectSource",
    "ProviderConfigBase",
]
