"""Garden error types."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class GardenError(Exception):
    """Base type for domain failures; carries a structured ``detail`` payload."""

    type = "_base"

    def __init__(self, message: str, detail: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = dict(detail or {})


class PluginError(GardenError):
    """Raised when a provider (plugin) cannot be resolved for a context."""

    type = "plugin"

    @property
    def provider_name(self) -> str | None:
        return self.detail.get("provider_name")

    @property
    def providers(self) -> Mapping[str, Any]:
        return self.detail.get("providers", {})


class ConfigurationError(GardenError):
    """Raised when the project configuration is inconsistent."""

    type = "configuration"
