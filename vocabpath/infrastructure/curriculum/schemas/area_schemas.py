"""Pydantic schemas for the area catalogue."""

from pydantic import BaseModel, Field


class AreaSummarySchema(BaseModel):
    """A visible area with its size and recent activity."""

    area_id: int
    name: str
    description: str | None = None
    sort_order: int = Field(..., description="Effective area order for the learner's tenant")
    unit_count: int = Field(..., description="Visible sections in the area")
    recent_completions: int = Field(
        ..., description="Passed attempts on the area's sections over the last 7 days"
    )
    is_hot: bool


class AreaCatalogResponse(BaseModel):
    """Schema for the areas a learner can browse."""

    learner_id: int
    organization_id: int | None
    areas: list[AreaSummarySchema] = Field(..., description="Hot areas first, then area order")
