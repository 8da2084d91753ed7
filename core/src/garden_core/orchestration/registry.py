from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import Any

from garden_core.contracts import Provider, ProviderRegistry


def build_provider_registry(provider_configs: Mapping[str, Any]) -> ProviderRegistry:
    """
    Map provider name -> Provider from Garden's raw provider configs.

    Configs are copied so a provider cannot write through to Garden's state.
    The '_default' provider is not added here; the factory resolves it.
    """
    return {
        name: Provider(name=name, config=deepcopy(config))
        for name, config in provider_configs.items()
    }
