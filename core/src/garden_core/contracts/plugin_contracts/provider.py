from __future__ import annotations

from collections.abc import Mapping, Sequence
from copy import deepcopy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from garden_core.contracts.common import DEFAULT_PROVIDER_NAME


@dataclass(frozen=True, slots=True)
class Provider:
    """
    One configured provider (plugin) instance.

    `config` is plugin-specific and opaque to core; plugins validate it lazily
    against their own extension of ProviderConfigBase.
    """

    name: str
    config: Mapping[str, Any] = field(default_factory=dict)
    dashboard_pages: Sequence[Mapping[str, Any]] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "dashboard_pages": [dict(page) for page in self.dashboard_pages],
            "config": _plain_config(self.config),
        }


def _plain_config(config: Any) -> Any:
    # Non-mapping configs pass through so schema validation can report them.
    if isinstance(config, Mapping):
        return deepcopy(dict(config))
    return config


ProviderRegistry = dict[str, Provider]

DEFAULT_PROVIDER = Provider(name=DEFAULT_PROVIDER_NAME, config=MappingProxyType({}))
