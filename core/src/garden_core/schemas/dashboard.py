from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DashboardPage(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(max_length=32, description="The link title to show in the menu bar.")
    description: str = Field(description="A description to show when hovering over the link.")
    url: str = Field(min_length=1, description="The URL to open when the link is clicked.")
    new_window: bool = Field(
        default=False,
        description="Whether to open the link in a new tab or embed it in the dashboard.",
    )
