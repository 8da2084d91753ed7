from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import ValidationError

from garden_core.configuration import format_validation_error
from garden_core.contracts.plugin_contracts import PluginContext, Provider
from garden_core.contracts.project_contracts import ProviderConfigBase
from garden_core.schemas.plugin_context import PluginContextSchema

ConfigT = TypeVar("ConfigT", bound=ProviderConfigBase)


class ContextValidationError(ValueError):
    pass


def validate_plugin_context(context: PluginContext) -> PluginContextSchema:
    """Check a constructed context against PluginContextSchema."""
    try:
        return PluginContextSchema.model_validate(context_payload(context))
    except ValidationError as exc:
        raise ContextValidationError(format_validation_error("ctx", exc)) from exc


def parse_provider_config(
    provider: Provider,
    schema: type[ConfigT] = ProviderConfigBase,  # type: ignore[assignment]
) -> ConfigT:
    """
    Validate a provider's opaque config against a plugin-specific schema.

    Plugins call this lazily, with their own subclass of ProviderConfigBase.
    """
    try:
        return schema.model_validate(_as_payload(provider.config))
    except ValidationError as exc:
        raise ContextValidationError(
            format_validation_error(f"providers.{provider.name}.config", exc)
        ) from exc


def _as_payload(config: Any) -> Any:
    if isinstance(config, Mapping):
        return dict(config)
    return config


def context_payload(context: PluginContext) -> dict[str, Any]:
    return {
        "project_name": context.project_name,
        "project_root": context.project_root,
        "project_sources": list(context.project_sources),
        "local_config_store": context.local_config_store,
        "environment_name": context.environment_name,
        "provider": context.provider.to_dict(),
        "providers": {name: provider.to_dict() for name, provider in context.providers.items()},
    }
