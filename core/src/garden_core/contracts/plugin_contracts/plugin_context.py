from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from garden_core.contracts.errors import PluginError
from garden_core.contracts.garden import LocalConfigStore
from garden_core.contracts.plugin_contracts.provider import Provider


@dataclass(frozen=True, slots=True)
class PluginContext:
    """
    Read-only projection of Garden state handed to a provider.

    Keep this stable: provider plugins should only depend on these fields.
    `local_config_store` is the one handle shared with Garden; everything else is
    a copy or treated as read-only.
    """

    project_name: str
    project_root: str
    project_sources: Sequence[Any]
    environment_name: str
    local_config_store: LocalConfigStore
    provider: Provider
    # Other configured providers, for reading the configuration of dependencies.
    providers: Mapping[str, Provider]

    def provider_config(self, name: str) -> Mapping[str, Any]:
        """Return the config of another configured provider or raise PluginError."""
        try:
            return self.providers[name].config
        except KeyError:
            raise PluginError(
                f"Could not find provider '{name}'",
                {"provider_name": name, "providers": self.providers},
            ) from None
