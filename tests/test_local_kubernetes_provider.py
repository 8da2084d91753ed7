from __future__ import annotations

import pytest

from garden_core.contracts import PluginError, ProviderPlugin
from garden_core.orchestration import create_plugin_context
from garden_core.schemas import ContextValidationError
from garden_core.testkit import make_garden
from plugins.local_kubernetes import LocalKubernetesProvider
from plugins.local_kubernetes.config import default_config


def test_local_kubernetes_default_config_contains_expected_keys() -> None:
    assert default_config() == {
        "context": "docker-for-desktop",
        "ingress_http_port": 80,
        "depends_on": [],
    }


def test_local_kubernetes_status_before_and_after_configure() -> None:
    garden = make_garden({"local-kubernetes": {"context": "minikube"}})
    plugin = LocalKubernetesProvider()
    ctx = create_plugin_context(garden, "local-kubernetes")

    before = plugin.get_environment_status(ctx=ctx)
    plugin.configure_environment(ctx=ctx)
    after = plugin.get_environment_status(ctx=create_plugin_context(garden, "local-kubernetes"))

    assert isinstance(plugin, ProviderPlugin)
    assert before["ready"] is False
    assert after["ready"] is True
    assert after["context"] == "minikube"
    assert after["namespace"] == "demo-project"
    assert after["environment"] == "local"
    assert garden.local_config_store.get("kubernetes") == {
        "context": "minikube",
        "namespace": "demo-project",
    }


def test_local_kubernetes_reads_dependency_configs() -> None:
    garden = make_garden(
        {
            "local-kubernetes": {"namespace": "apps", "depends_on": ["container"]},
            "container": {"registry": "localhost:5000"},
        }
    )
    ctx = create_plugin_context(garden, "local-kubernetes")

    status = LocalKubernetesProvider().get_environment_status(ctx=ctx)

    assert status["namespace"] == "apps"
    assert status["dependencies"] == {"container": {"registry": "localhost:5000"}}


def test_local_kubernetes_missing_dependency_raises_plugin_error() -> None:
    garden = make_garden({"local-kubernetes": {"depends_on": ["container"]}})
    ctx = create_plugin_context(garden, "local-kubernetes")

    with pytest.raises(PluginError, match="container"):
        LocalKubernetesProvider().get_environment_status(ctx=ctx)


def test_local_kubernetes_rejects_invalid_config() -> None:
    garden = make_garden({"local-kubernetes": {"ingress_http_port": 0, "unknown": True}})
    ctx = create_plugin_context(garden, "local-kubernetes")

    with pytest.raises(ContextValidationError, match=r"providers\.local-kubernetes\.config"):
        LocalKubernetesProvider().get_environment_status(ctx=ctx)
