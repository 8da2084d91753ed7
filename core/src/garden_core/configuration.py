from __future__ import annotations

import os
import re
import tempfile
from collections.abc import Mapping
from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from garden_core.contracts import ConfigurationError, ProjectConfig

PROJECT_CONFIG_FILENAME = "garden.yml"

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


class ConfigError(ValueError):
    pass


def load_yaml(path: str | Path) -> dict[str, Any]:
    with Path(path).open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ConfigError(f"YAML root must be a mapping: {path}")
    return payload


def dump_yaml(path: str | Path, payload: Any) -> None:
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    # Readers see either the old document or the new one, never a partial write.
    handle = tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=output.parent, prefix=f".{output.name}.", delete=False
    )
    try:
        with handle:
            yaml.safe_dump(payload, handle, sort_keys=False)
        os.replace(handle.name, output)
    except BaseException:
        Path(handle.name).unlink(missing_ok=True)
        raise


def resolve_project_config_path(path: str | Path) -> Path:
    candidate = Path(path).expanduser().resolve()
    if candidate.is_dir():
        candidate = candidate / PROJECT_CONFIG_FILENAME
    if not candidate.is_file():
        raise ConfigError(f"No project config found at {candidate}")
    return candidate


def load_project_config(path: str | Path) -> ProjectConfig:
    """Load `project:` from a garden.yml file (or a directory containing one)."""
    config_path = resolve_project_config_path(path)
    document = resolve_env_vars(load_yaml(config_path))
    payload = document.get("project")
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Missing or malformed 'project' section in {config_path}")
    try:
        return ProjectConfig.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(format_validation_error("project", exc)) from exc


def resolve_provider_configs(
    project: ProjectConfig, environment_name: str
) -> dict[str, dict[str, Any]]:
    """
    Merge default and environment-level provider configs, keyed by provider name.

    Environment entries are deep-merged over the defaults of the same name.
    """
    environment = project.get_environment(environment_name)
    if environment is None:
        raise ConfigurationError(
            f"Project '{project.name}' has no environment '{environment_name}'",
            {
                "environment_name": environment_name,
                "available": [env.name for env in project.environments],
            },
        )

    resolved: dict[str, dict[str, Any]] = {}
    for provider in project.environment_defaults.providers:
        resolved[str(provider.name)] = provider.model_dump(mode="python")
    for provider in environment.providers:
        name = str(provider.name)
        resolved[name] = deep_merge(resolved.get(name, {}), provider.model_dump(mode="python"))
    return resolved


def resolve_env_vars(payload: Any) -> Any:
    return _resolve_env_vars(payload, path="$")


def _resolve_env_vars(payload: Any, *, path: str) -> Any:
    if isinstance(payload, Mapping):
        return {
            str(key): _resolve_env_vars(value, path=f"{path}.{key}")
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [
            _resolve_env_vars(value, path=f"{path}[{index}]") for index, value in enumerate(payload)
        ]
    if isinstance(payload, str):
        return _substitute_env(payload, path=path)
    return payload


def _substitute_env(value: str, *, path: str) -> str:
    def replace(match: re.Match[str]) -> str:
        key = match.group(1)
        env_value = os.environ.get(key)
        if env_value is None:
            raise ConfigError(f"Missing environment variable '{key}' at {path}")
        return env_value

    return _ENV_VAR_PATTERN.sub(replace, value)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged = deepcopy(dict(base))
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


def split_dotpath(path: str) -> list[str]:
    parts = path.split(".")
    if any(not part for part in parts):
        raise ConfigError(f"Invalid key path '{path}'")
    return parts


def get_dotpath(source: Mapping[str, Any], path: str) -> Any:
    cursor: Any = source
    for part in split_dotpath(path):
        if not isinstance(cursor, Mapping) or part not in cursor:
            return None
        cursor = cursor[part]
    return cursor


def set_dotpath(target: dict[str, Any], path: str, value: Any) -> None:
    parts = split_dotpath(path)

    cursor: dict[str, Any] = target
    for part in parts[:-1]:
        next_value = cursor.get(part)
        if next_value is None:
            next_value = {}
            cursor[part] = next_value
        if not isinstance(next_value, dict):
            raise ConfigError(f"Key path '{path}' collides with non-mapping key '{part}'")
        cursor = next_value
    cursor[parts[-1]] = value


def delete_dotpath(target: dict[str, Any], path: str) -> bool:
    parts = split_dotpath(path)
    parent = get_dotpath(target, ".".join(parts[:-1])) if len(parts) > 1 else target
    if not isinstance(parent, dict) or parts[-1] not in parent:
        return False
    del parent[parts[-1]]
    return True


def format_validation_error(prefix: str, exc: ValidationError) -> str:
    details: list[str] = []
    for error in exc.errors(include_url=False):
        loc = ".".join(str(part) for part in error["loc"])
        details.append(f"{prefix}.{loc}: {error['msg']}" if loc else f"{prefix}: {error['msg']}")
    return "; ".join(details)
