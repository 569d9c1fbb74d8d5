import pytest

from paper_bank.models import Question
from paper_bank.quiz import sample_quiz, score_quiz, select_questions


def make_question(number, group="Group 1", difficulty="medium", secondary=False):
    return Question(
        question_number=number,
        question_text=f"Sample question number {number}?",
        options=["Delhi", "Mumbai", "Chennai", "Kolkata"],
        answer_label="C",
        secondary_question_text="தலைநகரம் எது?" if secondary else None,
        secondary_options=["தில்லி", "மும்பை"] if secondary else None,
        difficulty=difficulty,
        group=group,
    )


BANK = [
    make_question(1, group="Group 1", difficulty="easy"),
    make_question(2, group="Group 2", difficulty="medium", secondary=True),
    make_question(3, group="Group 1", difficulty="hard", secondary=True),
    make_question(4, group="Group 4", difficulty="medium"),
]


def test_select_questions_by_group_and_difficulty():
    assert [q.question_number for q in select_questions(BANK, groups=["Group 1"])] == [1, 3]
    assert [q.question_number for q in select_questions(BANK, difficulties=["medium"])] == [2, 4]
    assert [
        q.question_number
        for q in select_questions(BANK, groups=["Group 1", "Group 2"], difficulties=["hard"])
    ] == [3]


def test_select_questions_requiring_secondary():
    assert [q.question_number for q in select_questions(BANK, require_secondary=True)] == [2, 3]


def test_select_questions_without_filters():
    assert select_questions(BANK) == BANK


def test_sample_quiz_is_capped_and_ordered():
    picked = sample_quiz(BANK, 3, seed=7)
    numbers = [q.question_number for q in picked]
    assert len(picked) == 3
    assert numbers == sorted(numbers)

    assert sample_quiz(BANK, 10, seed=7) == BANK
    assert sample_quiz(BANK, 0) == []


def test_sample_quiz_is_repeatable_with_seed():
    assert sample_quiz(BANK, 2, seed=42) == sample_quiz(BANK, 2, seed=42)


def test_score_quiz():
    questions = BANK[:3]
    result = score_quiz(questions, {0: "C", 1: "chennai", 2: "A"})

    assert result.score == 2
    assert result.total == 3
    assert result.percentage == 67
    assert [a.is_correct for a in result.answers] == [True, True, False]
    assert result.answers[1].user_answer == "chennai"
    assert result.answers[1].correct_answer == "C"


def test_score_quiz_lowercase_letter_and_unanswered():
    result = score_quiz(BANK, {2: "c"})
    assert result.score == 1
    assert result.percentage == 25
    assert len(result.answers) == 1


def test_score_quiz_unknown_text_is_wrong():
    result = score_quiz(BANK[:1], {0: "Bangalore"})
    assert result.score == 0
    assert result.percentage == 0


def test_score_quiz_empty():
    result = score_quiz([], {})
    assert result.score == 0
    assert result.percentage == 0


def test_score_quiz_bad_index():
    with pytest.raises(IndexError):
        score_quiz(BANK, {9: "A"})
