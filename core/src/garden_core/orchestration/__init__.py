from .plugin_context import create_plugin_context
from .registry import build_provider_registry

__all__ = ["build_provider_registry", "create_plugin_context"]
