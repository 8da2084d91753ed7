"""Concrete host-side collaborators for building plugin contexts."""

from garden_core.runtime.garden import Garden
from garden_core.runtime.local_config import YamlLocalConfigStore

__all__ = ["Garden", "YamlLocalConfigStore"]
