"""API routes for browsing a learner's visible areas."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from vocabpath.application.curriculum.use_cases.get_area_catalog_use_case import (
    GetAreaCatalogUseCase,
)
from vocabpath.core import container
from vocabpath.domain.common.exceptions import DomainError
from vocabpath.exceptions import ValidationError, VocabPathError
from vocabpath.infrastructure.common.di import inject_use_case
from vocabpath.infrastructure.common.schemas import COMMON_ERROR_RESPONSES
from vocabpath.infrastructure.curriculum.schemas import AreaCatalogResponse, AreaSummarySchema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/learners", tags=["areas"], responses=COMMON_ERROR_RESPONSES)


@router.get(
    "/{learner_id}/areas",
    response_model=AreaCatalogResponse,
    status_code=status.HTTP_200_OK,
)
def get_areas(
    learner_id: int,
    use_case: GetAreaCatalogUseCase = Depends(inject_use_case(container.get_area_catalog_use_case)),
) -> AreaCatalogResponse:
    """
    List the areas visible to the learner's tenant.

    Areas with at least three passed attempts in the last week are marked hot
    and listed first; the rest follow in effective area order.

    Raises:
        HTTPException: If the learner is not found, is blocked, or retrieval fails
    """
    try:
        catalog = use_case.get_areas(learner_id)
        return AreaCatalogResponse(
            learner_id=catalog.context.learner_id.value,
            organization_id=(
                catalog.context.organization_id.value if catalog.context.organization_id else None
            ),
            areas=[
                AreaSummarySchema(
                    area_id=summary.area.id.value,
                    name=summary.area.name,
                    description=summary.area.description,
                    sort_order=summary.sort_order,
                    unit_count=summary.unit_count,
                    recent_completions=summary.recent_completions,
                    is_hot=summary.is_hot,
                )
                for summary in catalog.areas
            ],
        )
    except (VocabPathError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to list areas for learner {learner_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
