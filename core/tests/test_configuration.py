from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from garden_core.configuration import (
    ConfigError,
    deep_merge,
    delete_dotpath,
    dump_yaml,
    get_dotpath,
    load_project_config,
    load_yaml,
    resolve_provider_configs,
    set_dotpath,
)
from garden_core.contracts import ConfigurationError


def _write_yaml(path: Path, payload: dict[str, Any]) -> None:
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")


def _project_payload() -> dict[str, Any]:
    return {
        "project": {
            "name": "demo-project",
            "default_environment": "local",
            "environment_defaults": {
                "providers": [
                    {"name": "local-kubernetes", "context": "docker-for-desktop", "port": 80},
                ]
            },
            "environments": [
                {
                    "name": "local",
                    "providers": [
                        {"name": "local-kubernetes", "context": "${KUBE_CONTEXT}"},
                        {"name": "container"},
                    ],
                },
                {"name": "staging"},
            ],
            "sources": [
                {"name": "shared-lib", "repository_url": "https://example.com/lib.git#main"}
            ],
        }
    }


def test_load_project_config_resolves_env_vars_and_merges_providers(tmp_path, monkeypatch):
    monkeypatch.setenv("KUBE_CONTEXT", "minikube")
    _write_yaml(tmp_path / "garden.yml", _project_payload())

    project = load_project_config(tmp_path)

    assert project.name == "demo-project"
    assert project.sources[0].repository_url == "https://example.com/lib.git#main"
    assert resolve_provider_configs(project, "local") == {
        "local-kubernetes": {"name": "local-kubernetes", "context": "minikube", "port": 80},
        "container": {"name": "container"},
    }
    assert resolve_provider_configs(project, "staging") == {
        "local-kubernetes": {
            "name": "local-kubernetes",
            "context": "docker-for-desktop",
            "port": 80,
        },
    }


def test_resolve_provider_configs_unknown_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("KUBE_CONTEXT", "minikube")
    _write_yaml(tmp_path / "garden.yml", _project_payload())
    project = load_project_config(tmp_path / "garden.yml")

    with pytest.raises(ConfigurationError, match="no environment 'prod'") as exc_info:
        resolve_provider_configs(project, "prod")

    assert exc_info.value.detail["available"] == ["local", "staging"]


def test_load_project_config_missing_env_var(tmp_path, monkeypatch):
    monkeypatch.delenv("KUBE_CONTEXT", raising=False)
    _write_yaml(tmp_path / "garden.yml", _project_payload())

    with pytest.raises(ConfigError, match="KUBE_CONTEXT"):
        load_project_config(tmp_path)


def test_load_project_config_requires_project_section(tmp_path):
    _write_yaml(tmp_path / "garden.yml", {"module": {"name": "api"}})

    with pytest.raises(ConfigError, match="'project' section"):
        load_project_config(tmp_path)


def test_load_project_config_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="No project config"):
        load_project_config(tmp_path)


@pytest.mark.parametrize(
    ("mutate", "message"),
    [
        (lambda p: p["environments"].append({"name": "local"}), "duplicate environment"),
        (lambda p: p.update(default_environment="prod"), "not a declared environment"),
        (lambda p: p["environments"][0]["providers"].append({"port": 1}), "missing a name"),
        (
            lambda p: p["environments"][0]["providers"].append({"name": "container"}),
            "more than once",
        ),
        (lambda p: p.update(name="Demo Project"), r"project\.name"),
    ],
)
def test_load_project_config_rejects_invalid_projects(tmp_path, monkeypatch, mutate, message):
    monkeypatch.setenv("KUBE_CONTEXT", "minikube")
    payload = _project_payload()
    mutate(payload["project"])
    _write_yaml(tmp_path / "garden.yml", payload)

    with pytest.raises(ConfigError, match=message):
        load_project_config(tmp_path)


def test_deep_merge_prefers_override_and_copies():
    base = {"a": {"b": 1, "c": [1]}, "d": 1}
    merged = deep_merge(base, {"a": {"b": 2}, "e": 3})

    assert merged == {"a": {"b": 2, "c": [1]}, "d": 1, "e": 3}
    merged["a"]["c"].append(2)
    assert base["a"]["c"] == [1]


def test_dotpath_helpers():
    document: dict[str, Any] = {}

    set_dotpath(document, "kubernetes.context", "minikube")
    assert get_dotpath(document, "kubernetes.context") == "minikube"
    assert get_dotpath(document, "kubernetes.missing") is None
    assert delete_dotpath(document, "kubernetes.context") is True
    assert delete_dotpath(document, "kubernetes.context") is False
    assert document == {"kubernetes": {}}

    with pytest.raises(ConfigError, match="Invalid key path"):
        set_dotpath(document, "kubernetes..context", 1)


def test_dump_yaml_replaces_file_without_leftovers(tmp_path):
    target = tmp_path / "state" / "local-config.yml"
    target.parent.mkdir()
    target.write_text("kubernetes:\n  context: old\n", encoding="utf-8")

    dump_yaml(target, {"kubernetes": {"context": "minikube", "ports": [80, 443]}})

    assert load_yaml(target) == {"kubernetes": {"context": "minikube", "ports": [80, 443]}}
    assert sorted(path.name for path in target.parent.iterdir()) == ["local-config.yml"]


def test_dump_yaml_keeps_previous_file_when_serialization_fails(tmp_path):
    target = tmp_path / "local-config.yml"
    dump_yaml(target, {"kubernetes": {"context": "minikube"}})

    with pytest.raises(yaml.YAMLError):
        dump_yaml(target, {"kubernetes": {"context": object()}})

    assert load_yaml(target) == {"kubernetes": {"context": "minikube"}}
    assert [path.name for path in tmp_path.iterdir()] == ["local-config.yml"]
