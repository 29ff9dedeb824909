"""API routes for submitting answers, completing stages and reviewing tests."""

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from vocabpath.application.progression.use_cases.complete_module_use_case import (
    CompleteModuleUseCase,
)
from vocabpath.application.progression.use_cases.dtos import (
    AttemptReview,
    SubmittedAnswerInput,
)
from vocabpath.application.progression.use_cases.get_test_review_use_case import (
    GetTestReviewUseCase,
)
from vocabpath.application.progression.use_cases.submit_attempt_use_case import (
    SubmitAttemptUseCase,
)
from vocabpath.core import container
from vocabpath.domain.common.exceptions import DomainError
from vocabpath.domain.curriculum.entities.module import Question
from vocabpath.domain.progression.entities.attempt import LearnerAnswer
from vocabpath.exceptions import ValidationError, VocabPathError
from vocabpath.infrastructure.common.di import inject_use_case
from vocabpath.infrastructure.common.schemas import COMMON_ERROR_RESPONSES, ErrorResponse
from vocabpath.infrastructure.progression.schemas import (
    AttemptSubmitRequest,
    AttemptSubmitResponse,
    GradedAnswerSchema,
    ModuleCompletionRequest,
    ReviewedAttempt,
    ReviewedQuestion,
    SectionProgressResponse,
    SectionReviewResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/learners", tags=["progression"], responses=COMMON_ERROR_RESPONSES)


def _learner_answer(question: Question, answer: LearnerAnswer | None) -> str | dict[str, str] | None:
    if answer is None:
        return None
    if question.is_choice():
        if answer.selected_option_id is None:
            return None
        option = question.find_option(answer.selected_option_id)
        return option.option_text if option else None
    if question.type == "matching" and answer.answer_text:
        return json.loads(answer.answer_text)
    return answer.answer_text


def _expected_answer(question: Question) -> str | dict[str, str] | None:
    if question.is_choice():
        option = question.correct_option()
        return option.option_text if option else None
    if question.type == "matching":
        return {pair.term: pair.definition for pair in question.matching_pairs()}
    return question.correct_answer


def _reviewed_attempt(review: AttemptReview) -> ReviewedAttempt:
    questions = []
    for question in review.module.questions:
        answer = review.answer_for(question.id)
        questions.append(
            ReviewedQuestion(
                question_id=question.id.value,
                type=question.type,
                prompt=question.prompt,
                learner_answer=_learner_answer(question, answer),
                expected_answer=_expected_answer(question),
                is_correct=answer.is_correct if answer else False,
            )
        )
    return ReviewedAttempt(
        attempt_id=review.attempt.id.value,
        module_id=review.module.id.value,
        score=review.attempt.score,
        passed=review.attempt.passed,
        completed_at=review.attempt.completed_at,
        questions=questions,
    )


@router.post(
    "/{learner_id}/attempts",
    response_model=AttemptSubmitResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse, "description": "Malformed submission"}},
)
def submit_attempt(
    learner_id: int,
    request: AttemptSubmitRequest,
    use_case: SubmitAttemptUseCase = Depends(inject_use_case(container.submit_attempt_use_case)),
) -> AttemptSubmitResponse:
    """
    Grade a practice or test submission.

    A passed test unlocks the next section of the learner's path in the
    same transaction that stores the attempt.

    Args:
        learner_id: ID of the learner
        request: Module ID and answers
        use_case: SubmitAttemptUseCase injected via dependency container

    Returns:
        Score, pass flag and counts

    Raises:
        HTTPException: If the module is unknown, the section is locked, the
            submission is malformed or storage fails
    """
    try:
        outcome = use_case.submit(
            learner_id=learner_id,
            module_id=request.module_id,
            answers=[
                SubmittedAnswerInput(
                    question_id=answer.question_id,
                    selected_option_id=answer.selected_option_id,
                    answer_text=answer.answer_text,
                    pairs=answer.pairs,
                )
                for answer in request.answers
            ],
        )
        return AttemptSubmitResponse(
            attempt_id=outcome.attempt.id.value,
            module_id=outcome.module.id.value,
            module_type=outcome.module.type,
            score=outcome.attempt.score or 0.0,
            passed=bool(outcome.attempt.passed),
            correct_count=outcome.correct_count,
            total_count=outcome.total_count,
            unlocked_section_id=(
                outcome.unlocked_section_id.value if outcome.unlocked_section_id else None
            ),
            answers=[
                GradedAnswerSchema(question_id=answer.question_id.value, is_correct=answer.is_correct)
                for answer in outcome.attempt.answers
            ],
        )
    except (VocabPathError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to submit attempt for module {request.module_id} by learner {learner_id}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{learner_id}/sections/{section_id}/progress",
    response_model=SectionProgressResponse,
    status_code=status.HTTP_200_OK,
)
def complete_module(
    learner_id: int,
    section_id: int,
    request: ModuleCompletionRequest,
    use_case: CompleteModuleUseCase = Depends(
        inject_use_case(container.complete_module_use_case)
    ),
) -> SectionProgressResponse:
    """
    Mark the introduction or practice stage of an unlocked section as done.

    Args:
        learner_id: ID of the learner
        section_id: ID of the section
        request: Which stage was completed
        use_case: CompleteModuleUseCase injected via dependency container

    Returns:
        The section's progress after the update
    """
    try:
        progress = use_case.complete(learner_id, section_id, request.module_type)
        return SectionProgressResponse(
            section_id=progress.section_id.value,
            state=progress.state,
            unlocked=progress.unlocked,
            unlocked_at=progress.unlocked_at,
            intro_completed=progress.intro_completed,
            practice_completed=progress.practice_completed,
            test_score=progress.test_score,
            test_passed=progress.test_passed,
        )
    except (VocabPathError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to complete {request.module_type} of section {section_id}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/{learner_id}/sections/{section_id}/test-review",
    response_model=SectionReviewResponse,
    status_code=status.HTTP_200_OK,
)
def get_test_review(
    learner_id: int,
    section_id: int,
    use_case: GetTestReviewUseCase = Depends(inject_use_case(container.get_test_review_use_case)),
) -> SectionReviewResponse:
    """
    Review the learner's latest test attempt for a section.

    Args:
        learner_id: ID of the learner
        section_id: ID of the section
        use_case: GetTestReviewUseCase injected via dependency container

    Returns:
        Each test question with the learner's answer and the expected one,
        or an empty review if the test was never taken
    """
    try:
        review = use_case.get_review(learner_id, section_id)
        if review is None:
            return SectionReviewResponse(attempt=None)
        return SectionReviewResponse(attempt=_reviewed_attempt(review))
    except (VocabPathError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to get test review for section {section_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
