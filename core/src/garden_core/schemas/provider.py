from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from garden_core.contracts.common import ProviderName
from garden_core.contracts.project_contracts import ProviderConfigBase
from garden_core.schemas.dashboard import DashboardPage


class ProviderSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: ProviderName = Field(description="The name of the provider (plugin).")
    dashboard_pages: list[DashboardPage] = Field(
        description="Pages the provider adds to the dashboard."
    )
    config: ProviderConfigBase = Field(description="The provider's configuration.")
