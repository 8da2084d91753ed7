from .dummies import DummyProviderPlugin, make_garden
from .fakes import InMemoryLocalConfigStore, StoreCall

__all__ = [
    "DummyProviderPlugin",
    "InMemoryLocalConfigStore",
    "StoreCall",
    "make_garden",
]
