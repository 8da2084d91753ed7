from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any

from garden_core.configuration import delete_dotpath, get_dotpath, set_dotpath


@dataclass(frozen=True, slots=True)
class StoreCall:
    """Record of a local config store call for assertions in tests."""

    name: str
    key: str | None
    value: Any = None


class InMemoryLocalConfigStore:
    """
    In-memory LocalConfigStore for unit tests.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._document: dict[str, Any] = deepcopy(initial or {})
        self._calls: list[StoreCall] = []

    @property
    def calls(self) -> list[StoreCall]:
        """Return the recorded calls in order."""
        return list(self._calls)

    def get(self, key: str | None = None) -> Any:
        self._calls.append(StoreCall(name="get", key=key))
        if key is None:
            return deepcopy(self._document)
        return deepcopy(get_dotpath(self._document, key))

    def set(self, key: str, value: Any) -> None:
        self._calls.append(StoreCall(name="set", key=key, value=value))
        set_dotpath(self._document, key, deepcopy(value))

    def delete(self, key: str) -> bool:
        self._calls.append(StoreCall(name="delete", key=key))
        return delete_dotpath(self._document, key)
