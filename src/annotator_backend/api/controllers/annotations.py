"""Annotation endpoints: attributes, workload, overall stats and submission."""

from __future__ import annotations

from fastapi import HTTPException, status

from annotator_backend.api.dependencies import (
    AnnotationServiceDep,
    CurrentSessionDep,
    DbSessionDep,
)
from annotator_backend.api.models import (
    AttributeResponse,
    OverallStatsResponse,
    PostAnnotationsRequest,
    PostAnnotationsResponse,
    WorkloadResponse,
)
from annotator_backend.api.services import (
    AnnotationSubmission,
    InvalidAnnotationValueError,
    UnknownAttributeError,
    UnknownItemError,
)


def get_attributes(
    db: DbSessionDep, service: AnnotationServiceDep
) -> list[AttributeResponse]:
    """Return every attribute annotators can assign values for."""

    return [
        AttributeResponse.model_validate(attribute)
        for attribute in service.list_attributes(session=db)
    ]


def get_workload(
    current: CurrentSessionDep, db: DbSessionDep, service: AnnotationServiceDep
) -> WorkloadResponse:
    """Return the next batch of items for the current annotator."""

    workload = service.get_workload(session=db, annotator_id=current.annotator_id)
    return WorkloadResponse.model_validate(workload)


def get_overall_stats(
    db: DbSessionDep, service: AnnotationServiceDep
) -> OverallStatsResponse:
    """Return aggregate progress across all annotators."""

    return OverallStatsResponse.model_validate(service.get_overall_stats(session=db))


def post_annotations(
    payload: PostAnnotationsRequest,
    current: CurrentSessionDep,
    db: DbSessionDep,
    service: AnnotationServiceDep,
) -> PostAnnotationsResponse:
    """Store a batch of annotations from the current annotator."""

    submissions = [
        AnnotationSubmission(
            item_id=entry.item_id,
            attribute_id=entry.attribute_id,
            value=entry.value,
        )
        for entry in payload.annotations
    ]
    try:
        stored = service.record(
            session=db, annotator_id=current.annotator_id, submissions=submissions
        )
    except (UnknownItemError, UnknownAttributeError) as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except InvalidAnnotationValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc

    return PostAnnotationsResponse(stored=stored)
