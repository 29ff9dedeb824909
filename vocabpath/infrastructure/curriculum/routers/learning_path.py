"""API routes for a learner's learning path and section content."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from vocabpath.application.progression.use_cases.dtos import SectionDetail
from vocabpath.application.progression.use_cases.get_learning_path_use_case import (
    GetLearningPathUseCase,
)
from vocabpath.application.progression.use_cases.get_section_detail_use_case import (
    GetSectionDetailUseCase,
)
from vocabpath.core import container
from vocabpath.domain.common.exceptions import DomainError
from vocabpath.domain.curriculum.entities.module import Module, Question
from vocabpath.domain.progression.entities.section_progress import LearnerSectionProgress
from vocabpath.exceptions import ValidationError, VocabPathError
from vocabpath.infrastructure.common.di import inject_use_case
from vocabpath.infrastructure.common.schemas import COMMON_ERROR_RESPONSES
from vocabpath.infrastructure.curriculum.schemas import (
    LearningPathResponse,
    LearningPathSection,
    ModuleSchema,
    QuestionOptionSchema,
    QuestionSchema,
    SectionDetailResponse,
    SectionProgressSchema,
    VocabularySchema,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/learners", tags=["learning-path"], responses=COMMON_ERROR_RESPONSES)


def progress_schema(progress: LearnerSectionProgress | None, unlocked: bool) -> SectionProgressSchema:
    """Build progress flags; a section without a row is only unlocked when first in the path."""
    if progress is None:
        return SectionProgressSchema(unlocked=unlocked)
    return SectionProgressSchema(
        unlocked=unlocked,
        unlocked_at=progress.unlocked_at,
        intro_completed=progress.intro_completed,
        practice_completed=progress.practice_completed,
        test_score=progress.test_score,
        test_passed=progress.test_passed,
    )


def _question_schema(question: Question) -> QuestionSchema:
    schema = QuestionSchema(
        id=question.id.value,
        type=question.type,
        prompt=question.prompt,
        sort_order=question.sort_order,
        options=[
            QuestionOptionSchema(
                id=option.id.value,
                option_text=option.option_text,
                sort_order=option.sort_order,
            )
            for option in question.options
        ],
    )
    if question.type == "matching":
        pairs = question.matching_pairs()
        schema.terms = [pair.term for pair in pairs]
        schema.definitions = sorted(pair.definition for pair in pairs)
    return schema


def _module_schema(module: Module) -> ModuleSchema:
    return ModuleSchema(
        id=module.id.value,
        type=module.type,
        content=module.content,
        questions=[_question_schema(q) for q in module.questions],
    )


def _section_detail_response(detail: SectionDetail) -> SectionDetailResponse:
    section = detail.entry.section
    return SectionDetailResponse(
        section_id=section.id.value,
        title=section.title,
        description=section.description,
        area_id=detail.entry.area.id.value,
        area_name=detail.entry.area.name,
        state=detail.state,
        progress=progress_schema(detail.progress, unlocked=True),
        modules=[_module_schema(module) for module in detail.modules],
        vocabulary=[
            VocabularySchema(
                id=entry.id.value,
                word=entry.word,
                definition=entry.definition,
                translation=entry.translation,
                example=entry.example,
            )
            for entry in detail.vocabulary
        ],
    )


@router.get(
    "/{learner_id}/learning-path",
    response_model=LearningPathResponse,
    status_code=status.HTTP_200_OK,
)
def get_learning_path(
    learner_id: int,
    area_id: int | None = Query(None, description="Only return sections of this area"),
    use_case: GetLearningPathUseCase = Depends(
        inject_use_case(container.get_learning_path_use_case)
    ),
) -> LearningPathResponse:
    """
    Get the learner's ordered, visible sections with unlock and completion state.

    Args:
        learner_id: ID of the learner
        area_id: Optional area filter
        use_case: GetLearningPathUseCase injected via dependency container

    Returns:
        Sections in area order, then section order

    Raises:
        HTTPException: If the learner is not found, is blocked, or retrieval fails
    """
    try:
        view = use_case.get_learning_path(learner_id, area_id=area_id)
        return LearningPathResponse(
            learner_id=view.context.learner_id.value,
            organization_id=(
                view.context.organization_id.value if view.context.organization_id else None
            ),
            sections=[
                LearningPathSection(
                    section_id=item.entry.section.id.value,
                    title=item.entry.section.title,
                    description=item.entry.section.description,
                    area_id=item.entry.area.id.value,
                    area_name=item.entry.area.name,
                    area_sort_order=item.entry.area_sort_order,
                    sort_order=item.entry.sort_order,
                    state=item.state,
                    progress=progress_schema(item.progress, unlocked=item.state != "locked"),
                )
                for item in view.sections
            ],
        )
    except (VocabPathError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to get learning path for learner {learner_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/{learner_id}/sections/{section_id}",
    response_model=SectionDetailResponse,
    status_code=status.HTTP_200_OK,
)
def get_section_detail(
    learner_id: int,
    section_id: int,
    use_case: GetSectionDetailUseCase = Depends(
        inject_use_case(container.get_section_detail_use_case)
    ),
) -> SectionDetailResponse:
    """
    Get modules, questions and vocabulary of an unlocked section.

    Args:
        learner_id: ID of the learner
        section_id: ID of the section
        use_case: GetSectionDetailUseCase injected via dependency container

    Returns:
        Full section payload without answer keys

    Raises:
        HTTPException: 404 if the section is outside the learner's scope, 403 if it is locked
    """
    try:
        detail = use_case.get_section(learner_id, section_id)
        return _section_detail_response(detail)
    except (VocabPathError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to get section {section_id} for learner {learner_id}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
