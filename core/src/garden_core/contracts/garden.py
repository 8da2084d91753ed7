from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LocalConfigStore(Protocol):
    """
    Read/write access to the local (per-checkout) configuration document.

    Keys are dot-paths like 'kubernetes.context'.
    """

    def get(self, key: str | None = None) -> Any:
        """Return the value at `key` (or the whole document), None when missing."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Set the value at `key`, creating intermediate mappings."""
        ...

    def delete(self, key: str) -> bool:
        """Remove `key`; return whether anything was removed."""
        ...


@runtime_checkable
class GardenState(Protocol):
    """The parts of Garden that plugin contexts are built from."""

    @property
    def environment_name(self) -> str: ...

    @property
    def local_config_store(self) -> LocalConfigStore: ...

    @property
    def project_name(self) -> str: ...

    @property
    def project_root(self) -> str: ...

    @property
    def project_sources(self) -> Sequence[Any]: ...

    @property
    def provider_configs(self) -> Mapping[str, Mapping[str, Any]]: ...
