"""Pydantic models for annotation endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_ANNOTATIONS_PER_REQUEST = 500


class AttributeResponse(BaseModel):
    """An attribute annotators assign values for."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    options: list[str]


class ItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str


class WorkloadResponse(BaseModel):
    """Next items for the current annotator plus their progress."""

    model_config = ConfigDict(from_attributes=True)

    items: list[ItemResponse]
    completed: int
    remaining: int


class OverallStatsResponse(BaseModel):
    """Progress of the whole collection effort."""

    model_config = ConfigDict(from_attributes=True)

    items: int
    annotations: int
    annotators: int
    completed_items: int
    completion: float


class AnnotationRequest(BaseModel):
    item_id: int
    attribute_id: int
    value: str = Field(min_length=1, max_length=255)


class PostAnnotationsRequest(BaseModel):
    """Payload for submitting a batch of annotations."""

    annotations: list[AnnotationRequest] = Field(
        min_length=1, max_length=MAX_ANNOTATIONS_PER_REQUEST
    )


class PostAnnotationsResponse(BaseModel):
    stored: int
