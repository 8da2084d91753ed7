from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from garden_core.contracts.plugin_contracts.plugin_context import PluginContext


@dataclass(frozen=True, slots=True)
class PluginInfo:
    key: str
    name: str
    version: str = "0.1.0"
    description: str | None = None


@runtime_checkable
class ProviderPlugin(Protocol):
    """
    Provider plugin interface contract.

    Plugins are concrete implementations (kubernetes, container, etc.) that Garden
    hands a PluginContext to. Core never runs them itself.
    """

    @property
    def info(self) -> PluginInfo: ...

    def get_environment_status(self, *, ctx: PluginContext) -> Mapping[str, Any]:
        """
        Report whether the provider's environment is ready.

        `ctx` is the only view of Garden state the plugin gets.
        """
        ...
