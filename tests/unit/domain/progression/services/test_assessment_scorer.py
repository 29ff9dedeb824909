"""Tests for AssessmentScorer domain service."""

import json

import pytest

from vocabpath.domain.common.exceptions import InvariantViolationError
from vocabpath.domain.common.value_objects import ModuleId, OptionId, QuestionId, SectionId
from vocabpath.domain.curriculum.entities.module import Module, Question, QuestionOption
from vocabpath.domain.progression.exceptions import SubmissionRejectedError
from vocabpath.domain.progression.services.assessment_scorer import (
    AssessmentScorer,
    SubmittedAnswer,
)


def _choice_question(id: int, question_type: str = "multiple_choice") -> Question:
    # Option 10*id is correct, 10*id + 1 is wrong
    return Question(
        id=QuestionId(id),
        module_id=ModuleId(1),
        type=question_type,  # type: ignore[arg-type]
        prompt=f"Question {id}",
        options=[
            QuestionOption(
                id=OptionId(10 * id), question_id=QuestionId(id), option_text="yes", is_correct=True
            ),
            QuestionOption(id=OptionId(10 * id + 1), question_id=QuestionId(id), option_text="no"),
        ],
    )


def _matching_question(id: int, pairs: dict[str, str]) -> Question:
    return Question(
        id=QuestionId(id),
        module_id=ModuleId(1),
        type="matching",
        prompt="Match the words",
        correct_answer=json.dumps([{"term": t, "definition": d} for t, d in pairs.items()]),
    )


def _make_module(questions: list[Question], module_type: str = "test") -> Module:
    return Module(
        id=ModuleId(1),
        section_id=SectionId(1),
        type=module_type,  # type: ignore[arg-type]
        questions=questions,
    )


def _choose(question_id: int, correct: bool) -> SubmittedAnswer:
    option = 10 * question_id if correct else 10 * question_id + 1
    return SubmittedAnswer(question_id=QuestionId(question_id), selected_option_id=OptionId(option))


class TestPassThreshold:
    def test_exactly_eighty_percent_passes(self) -> None:
        module = _make_module([_choice_question(i) for i in range(1, 6)])
        answers = [_choose(i, correct=i <= 4) for i in range(1, 6)]

        report = AssessmentScorer().grade(module, answers)

        assert report.correct_count == 4
        assert report.total_count == 5
        assert report.score == 80.0
        assert report.passed is True

    def test_just_below_eighty_percent_fails(self) -> None:
        # 399 / 500 = 79.8%
        module = _make_module([_choice_question(i) for i in range(1, 501)])
        answers = [_choose(i, correct=i <= 399) for i in range(1, 501)]

        report = AssessmentScorer().grade(module, answers)

        assert report.score == pytest.approx(79.8)
        assert report.passed is False

    def test_practice_never_fails(self) -> None:
        module = _make_module([_choice_question(1)], module_type="practice")

        report = AssessmentScorer().grade(module, [_choose(1, correct=False)])

        assert report.score == 0.0
        assert report.passed is True

    def test_unanswered_questions_count_against_score(self) -> None:
        module = _make_module([_choice_question(i) for i in range(1, 5)])

        report = AssessmentScorer().grade(module, [_choose(1, correct=True)])

        assert report.correct_count == 1
        assert report.total_count == 4
        assert report.score == 25.0
        assert len(report.answers) == 1

    def test_empty_module_scores_zero(self) -> None:
        report = AssessmentScorer().grade(_make_module([]), [])

        assert report.score == 0.0
        assert report.passed is False


class TestQuestionTypes:
    def test_phonetics_graded_like_choice(self) -> None:
        module = _make_module([_choice_question(1, "phonetics")])

        report = AssessmentScorer().grade(module, [_choose(1, correct=True)])

        assert report.answers[0].is_correct is True
        assert report.answers[0].selected_option_id == OptionId(10)

    def test_choice_without_option_is_wrong(self) -> None:
        module = _make_module([_choice_question(1)])

        report = AssessmentScorer().grade(module, [SubmittedAnswer(question_id=QuestionId(1))])

        assert report.answers[0].is_correct is False

    @pytest.mark.parametrize(
        ("submitted", "expected"),
        [("Apple", True), ("  apple ", True), ("APPLE", True), ("apples", False), ("", False)],
    )
    def test_fill_blank_normalizes_case_and_whitespace(
        self, submitted: str, expected: bool
    ) -> None:
        question = Question(
            id=QuestionId(1),
            module_id=ModuleId(1),
            type="fill_blank",
            prompt="An ___ a day",
            correct_answer=" apple",
        )

        report = AssessmentScorer().grade(
            _make_module([question]),
            [SubmittedAnswer(question_id=QuestionId(1), answer_text=submitted)],
        )

        assert report.answers[0].is_correct is expected

    def test_matching_all_pairs_correct(self) -> None:
        pairs = {"one": "uno", "two": "dos", "three": "tres", "four": "cuatro"}
        module = _make_module([_matching_question(1, pairs)])

        report = AssessmentScorer().grade(
            module, [SubmittedAnswer(question_id=QuestionId(1), pairs=pairs)]
        )

        assert report.answers[0].is_correct is True
        assert json.loads(report.answers[0].answer_text or "") == pairs

    def test_matching_three_of_four_is_wrong(self) -> None:
        pairs = {"one": "uno", "two": "dos", "three": "tres", "four": "cuatro"}
        module = _make_module([_matching_question(1, pairs)])
        submitted = {**pairs, "four": "tres"}

        report = AssessmentScorer().grade(
            module, [SubmittedAnswer(question_id=QuestionId(1), pairs=submitted)]
        )

        assert report.answers[0].is_correct is False
        assert report.correct_count == 0

    def test_matching_is_case_sensitive(self) -> None:
        module = _make_module([_matching_question(1, {"one": "uno"})])

        report = AssessmentScorer().grade(
            module, [SubmittedAnswer(question_id=QuestionId(1), pairs={"one": "Uno"})]
        )

        assert report.answers[0].is_correct is False

    def test_matching_extra_terms_are_ignored(self) -> None:
        module = _make_module([_matching_question(1, {"one": "uno"})])

        report = AssessmentScorer().grade(
            module,
            [SubmittedAnswer(question_id=QuestionId(1), pairs={"one": "uno", "five": "cinco"})],
        )

        assert report.answers[0].is_correct is True

    def test_matching_from_json_text(self) -> None:
        module = _make_module([_matching_question(1, {"one": "uno"})])

        report = AssessmentScorer().grade(
            module, [SubmittedAnswer(question_id=QuestionId(1), answer_text='{"one": "uno"}')]
        )

        assert report.answers[0].is_correct is True


class TestRejectedSubmissions:
    def test_introduction_rejected(self) -> None:
        with pytest.raises(SubmissionRejectedError):
            AssessmentScorer().grade(_make_module([], module_type="introduction"), [])

    def test_foreign_question_rejected(self) -> None:
        module = _make_module([_choice_question(1)])

        with pytest.raises(SubmissionRejectedError) as exc_info:
            AssessmentScorer().grade(module, [_choose(2, correct=True)])

        assert exc_info.value.question_id == 2

    def test_duplicate_question_rejected(self) -> None:
        module = _make_module([_choice_question(1)])

        with pytest.raises(SubmissionRejectedError):
            AssessmentScorer().grade(module, [_choose(1, correct=True), _choose(1, correct=False)])

    def test_option_of_other_question_rejected(self) -> None:
        module = _make_module([_choice_question(1), _choice_question(2)])

        with pytest.raises(SubmissionRejectedError) as exc_info:
            AssessmentScorer().grade(
                module,
                [SubmittedAnswer(question_id=QuestionId(1), selected_option_id=OptionId(20))],
            )

        assert exc_info.value.question_id == 1

    def test_matching_missing_term_rejected(self) -> None:
        module = _make_module([_matching_question(1, {"one": "uno", "two": "dos"})])

        with pytest.raises(SubmissionRejectedError):
            AssessmentScorer().grade(
                module, [SubmittedAnswer(question_id=QuestionId(1), pairs={"one": "uno"})]
            )

    @pytest.mark.parametrize("answer_text", [None, "not json", '["one", "uno"]', '{"one": 1}'])
    def test_matching_malformed_answer_rejected(self, answer_text: str | None) -> None:
        module = _make_module([_matching_question(1, {"one": "uno"})])

        with pytest.raises(SubmissionRejectedError):
            AssessmentScorer().grade(
                module, [SubmittedAnswer(question_id=QuestionId(1), answer_text=answer_text)]
            )

    def test_unparseable_canonical_pairs_is_invariant_violation(self) -> None:
        question = Question(
            id=QuestionId(1),
            module_id=ModuleId(1),
            type="matching",
            prompt="Match",
            correct_answer="one=uno",
        )

        with pytest.raises(InvariantViolationError):
            AssessmentScorer().grade(
                _make_module([question]),
                [SubmittedAnswer(question_id=QuestionId(1), pairs={"one": "uno"})],
            )
