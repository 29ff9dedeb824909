"""Domain service grading a batch of answers against a module."""

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from vocabpath.constants import TEST_PASS_THRESHOLD
from vocabpath.domain.common.exceptions import InvariantViolationError
from vocabpath.domain.common.value_objects import OptionId, QuestionId
from vocabpath.domain.curriculum.entities.module import Module, Question
from vocabpath.domain.progression.exceptions import SubmissionRejectedError


@dataclass(frozen=True)
class SubmittedAnswer:
    """
    A learner's response to one question.

    Matching questions are answered with a term to definition mapping,
    either as `pairs` or as its JSON encoding in `answer_text`.
    """

    question_id: QuestionId
    selected_option_id: OptionId | None = None
    answer_text: str | None = None
    pairs: Mapping[str, str] | None = field(default=None, hash=False)


@dataclass(frozen=True)
class GradedAnswer:
    """A submitted answer with its grade, ready to be stored for review."""

    question_id: QuestionId
    is_correct: bool
    selected_option_id: OptionId | None = None
    answer_text: str | None = None


@dataclass(frozen=True)
class GradeReport:
    """Aggregate outcome of grading a module submission."""

    answers: tuple[GradedAnswer, ...]
    correct_count: int
    total_count: int
    score: float
    passed: bool


def _normalize(text: str) -> str:
    return text.strip().casefold()


class AssessmentScorer:
    """Grades answers per question type and decides pass/fail.

    - multiple_choice / phonetics: the chosen option is the one flagged correct
    - fill_blank: trimmed, case-folded text equals the canonical answer
    - matching: every canonical term maps to its exact definition
      (all-or-nothing per question)

    Score is 100 * correct / questions in the module. Only test modules
    can fail; the threshold is inclusive.
    """

    def __init__(self, pass_threshold: int = TEST_PASS_THRESHOLD) -> None:
        self.pass_threshold = pass_threshold

    def grade(self, module: Module, submitted: Sequence[SubmittedAnswer]) -> GradeReport:
        """
        Grade a submission.

        Raises:
            SubmissionRejectedError: If the submission does not fit the module.
                Nothing should be persisted in that case.
        """
        if not module.is_graded():
            raise SubmissionRejectedError(
                f"Module {module.id.value} is an introduction and takes no answers"
            )

        seen: set[QuestionId] = set()
        graded: list[GradedAnswer] = []
        for answer in submitted:
            if answer.question_id in seen:
                raise SubmissionRejectedError(
                    f"Question {answer.question_id.value} was answered more than once",
                    question_id=answer.question_id.value,
                )
            seen.add(answer.question_id)

            question = module.find_question(answer.question_id)
            if question is None:
                raise SubmissionRejectedError(
                    f"Question {answer.question_id.value} does not belong to module {module.id.value}",
                    question_id=answer.question_id.value,
                )
            graded.append(self._grade_answer(question, answer))

        total_count = len(module.questions)
        correct_count = sum(1 for answer in graded if answer.is_correct)
        score = 100 * correct_count / total_count if total_count else 0.0

        if module.type == "test":
            # Integer comparison keeps exactly 80% from being lost to float rounding
            passed = total_count > 0 and correct_count * 100 >= self.pass_threshold * total_count
        else:
            passed = True

        return GradeReport(
            answers=tuple(graded),
            correct_count=correct_count,
            total_count=total_count,
            score=score,
            passed=passed,
        )

    def _grade_answer(self, question: Question, answer: SubmittedAnswer) -> GradedAnswer:
        if question.is_choice():
            return self._grade_choice(question, answer)
        if question.type == "fill_blank":
            return self._grade_fill_blank(question, answer)
        if question.type == "matching":
            return self._grade_matching(question, answer)
        raise InvariantViolationError("Question", f"unknown question type {question.type!r}")

    def _grade_choice(self, question: Question, answer: SubmittedAnswer) -> GradedAnswer:
        if answer.selected_option_id is None:
            return GradedAnswer(question_id=question.id, is_correct=False, answer_text=answer.answer_text)

        option = question.find_option(answer.selected_option_id)
        if option is None:
            raise SubmissionRejectedError(
                f"Option {answer.selected_option_id.value} does not belong to question {question.id.value}",
                question_id=question.id.value,
            )
        return GradedAnswer(
            question_id=question.id,
            is_correct=option.is_correct,
            selected_option_id=option.id,
        )

    def _grade_fill_blank(self, question: Question, answer: SubmittedAnswer) -> GradedAnswer:
        is_correct = (
            answer.answer_text is not None
            and question.correct_answer is not None
            and _normalize(answer.answer_text) == _normalize(question.correct_answer)
        )
        return GradedAnswer(question_id=question.id, is_correct=is_correct, answer_text=answer.answer_text)

    def _grade_matching(self, question: Question, answer: SubmittedAnswer) -> GradedAnswer:
        submitted_pairs = self._submitted_pairs(question, answer)
        canonical = question.matching_pairs()

        missing = [pair.term for pair in canonical if pair.term not in submitted_pairs]
        if missing:
            raise SubmissionRejectedError(
                f"Matching answer for question {question.id.value} omits terms: {', '.join(missing)}",
                question_id=question.id.value,
            )

        is_correct = bool(canonical) and all(
            submitted_pairs[pair.term] == pair.definition for pair in canonical
        )
        return GradedAnswer(
            question_id=question.id,
            is_correct=is_correct,
            answer_text=json.dumps(dict(submitted_pairs), ensure_ascii=False, sort_keys=True),
        )

    def _submitted_pairs(self, question: Question, answer: SubmittedAnswer) -> Mapping[str, str]:
        if answer.pairs is not None:
            pairs: object = answer.pairs
        elif answer.answer_text:
            try:
                pairs = json.loads(answer.answer_text)
            except json.JSONDecodeError as e:
                raise SubmissionRejectedError(
                    f"Matching answer for question {question.id.value} is not valid JSON",
                    question_id=question.id.value,
                ) from e
        else:
            raise SubmissionRejectedError(
                f"Matching answer for question {question.id.value} has no pairs",
                question_id=question.id.value,
            )

        if not isinstance(pairs, Mapping) or not all(
            isinstance(term, str) and isinstance(definition, str)
            for term, definition in pairs.items()
        ):
            raise SubmissionRejectedError(
                f"Matching answer for question {question.id.value} must map terms to definitions",
                question_id=question.id.value,
            )
        return pairs
