from __future__ import annotations

import logging
import threading
from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml

from garden_core.configuration import (
    ConfigError,
    delete_dotpath,
    dump_yaml,
    get_dotpath,
    load_yaml,
    set_dotpath,
)

LOCAL_CONFIG_DIRNAME = ".garden"
LOCAL_CONFIG_FILENAME = "local-config.yml"

logger = logging.getLogger("garden.local_config")


class YamlLocalConfigStore:
    """
    LocalConfigStore persisted as YAML under the project root.

    Every call re-reads the file so separate store instances see each other's writes.
    Writes replace the file atomically. The lock only serializes calls on one
    instance; concurrent writers in other instances or processes can still lose
    each other's updates.
    """

    def __init__(self, project_root: str | Path) -> None:
        self._path = Path(project_root) / LOCAL_CONFIG_DIRNAME / LOCAL_CONFIG_FILENAME
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str | None = None) -> Any:
        with self._lock:
            document = self._read()
        if key is None:
            return document
        return deepcopy(get_dotpath(document, key))

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            document = self._read()
            set_dotpath(document, key, deepcopy(value))
            dump_yaml(self._path, document)
        logger.debug("Set local config key %s in %s", key, self._path)

    def delete(self, key: str) -> bool:
        with self._lock:
            document = self._read()
            removed = delete_dotpath(document, key)
            if removed:
                dump_yaml(self._path, document)
        return removed

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            return load_yaml(self._path)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Unable to read local config at {self._path}") from exc
