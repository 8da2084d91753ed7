from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from garden_core.contracts.common import Identifier, ProviderName


class ProjectSource(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Identifier = Field(description="The name of the source to import.")
    repository_url: str = Field(
        min_length=1,
        description="A remote repository URL, optionally suffixed with '#<branch-or-tag>'.",
    )


class ProviderConfigBase(BaseModel):
    """Base provider config; plugins subclass this to describe their own keys."""

    model_config = ConfigDict(extra="allow")

    name: ProviderName | None = Field(
        default=None, description="The name of the provider plugin to configure."
    )


class EnvironmentDefaults(BaseModel):
    model_config = ConfigDict(extra="forbid")

    providers: list[ProviderConfigBase] = Field(default_factory=list)

    @field_validator("providers", mode="before")
    @classmethod
    def _coerce_providers_list(cls, value: Any) -> Any:
        if value is None:
            return []
        return value

    @field_validator("providers")
    @classmethod
    def _validate_provider_names(cls, value: list[ProviderConfigBase]) -> list[ProviderConfigBase]:
        seen: set[str] = set()
        for index, provider in enumerate(value):
            if provider.name is None:
                raise ValueError(f"providers[{index}] is missing a name")
            if provider.name in seen:
                raise ValueError(f"provider '{provider.name}' is configured more than once")
            seen.add(provider.name)
        return value


class EnvironmentConfig(EnvironmentDefaults):
    name: Identifier


class ProjectConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Identifier
    default_environment: Identifier | None = None
    environment_defaults: EnvironmentDefaults = Field(default_factory=EnvironmentDefaults)
    environments: list[EnvironmentConfig] = Field(min_length=1)
    sources: list[ProjectSource] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_names(self) -> ProjectConfig:
        environment_names = [env.name for env in self.environments]
        duplicates = sorted({n for n in environment_names if environment_names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate environment names: {duplicates}")

        source_names = [source.name for source in self.sources]
        duplicates = sorted({n for n in source_names if source_names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate source names: {duplicates}")

        if self.default_environment and self.default_environment not in environment_names:
            raise ValueError(
                f"default_environment '{self.default_environment}' is not a declared environment"
            )
        return self

    def get_environment(self, name: str) -> EnvironmentConfig | None:
        for env in self.environments:
            if env.name == name:
                return env
        return None
