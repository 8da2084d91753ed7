from .dashboard import DashboardPage
from .plugin_context import PluginContextSchema, plugin_context_json_schema
from .provider import ProviderSchema
from .validation import (
    ContextValidationError,
    context_payload,
    parse_provider_config,
    validate_plugin_context,
)

__all__ = [
    "DashboardPage",
    "PluginContextSchema",
    "ProviderSchema",
    "ContextValidationError",
    "context_payload",
    "parse_provider_config",
    "plugin_context_json_schema",
    "validate_plugin_context",
]
