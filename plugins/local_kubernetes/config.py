from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from garden_core.contracts import Identifier, Provider, ProviderConfigBase
from garden_core.schemas import parse_provider_config


class LocalKubernetesConfig(ProviderConfigBase):
    model_config = ConfigDict(extra="forbid")

    context: str = Field(
        default="docker-for-desktop",
        min_length=1,
        description="The kubectl context to deploy to.",
    )
    namespace: Identifier | None = Field(
        default=None,
        description="Namespace to deploy services into. Defaults to the project name.",
    )
    ingress_http_port: int = Field(default=80, ge=1, le=65535)
    depends_on: list[Identifier] = Field(
        default_factory=list,
        description="Other providers whose configuration this provider reads.",
    )


def default_config() -> dict[str, Any]:
    return LocalKubernetesConfig().model_dump(mode="python", exclude_none=True)


def parse_config(provider: Provider) -> LocalKubernetesConfig:
    return parse_provider_config(provider, LocalKubernetesConfig)
