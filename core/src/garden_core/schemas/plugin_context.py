from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from garden_core.contracts.common import Identifier, identifier_map
from garden_core.contracts.project_contracts import ProjectSource
from garden_core.schemas.provider import ProviderSchema


def _check_project_root(value: str) -> str:
    if "://" in value or value.startswith("//"):
        raise ValueError("project_root must not carry a URI scheme or authority")
    if not Path(value).is_absolute():
        raise ValueError("project_root must be an absolute path")
    return value


ProjectRoot = Annotated[str, AfterValidator(_check_project_root)]
ProviderMap = identifier_map(ProviderSchema)


# NOTE: used more for documentation than validation. create_plugin_context() does not
# apply it; call validate_plugin_context() explicitly (tests do).
class PluginContextSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    project_name: Identifier = Field(description="The name of the project.")
    project_root: ProjectRoot = Field(description="The absolute path of the project root.")
    project_sources: list[ProjectSource] = Field(
        description="Remote sources the project imports."
    )
    local_config_store: Any = Field(
        description="Helper class for managing local configuration for plugins."
    )
    environment_name: Identifier = Field(description="The name of the active environment.")
    provider: ProviderSchema = Field(description="The provider being used for this context.")
    providers: ProviderMap = Field(
        description=(
            "Map of other providers that the current provider depends on "
            "(useful for referencing their configuration)."
        )
    )

    @model_validator(mode="after")
    def _validate_registry_keys(self) -> PluginContextSchema:
        for key, provider in self.providers.items():
            if provider.name != key:
                raise ValueError(f"providers.{key} has mismatched name '{provider.name}'")
        return self


def plugin_context_json_schema() -> dict[str, Any]:
    return PluginContextSchema.model_json_schema()
