import random
from typing import Dict, Iterable, List, Optional

from paper_bank.config import DEFAULT_CONFIG
from paper_bank.models import AnswerResult, Question, QuizResult


def select_questions(
    questions: Iterable[Question],
    groups: Optional[List[str]] = None,
    difficulties: Optional[List[str]] = None,
    require_secondary: bool = False,
) -> List[Question]:
    """
    Filter questions by group and difficulty, keeping bank order.

    - require_secondary=True drops questions without a translated stem
      and translated options.
    """
    result: List[Question] = []

    for q in questions:
        if groups is not None and q.group not in groups:
            continue

        if difficulties is not None and q.difficulty not in difficulties:
            continue

        if require_secondary and (
            q.secondary_question_text is None or not q.secondary_options
        ):
            continue

        result.append(q)

    return result


def sample_quiz(questions: List[Question], n: int, seed: Optional[int] = None) -> List[Question]:
    """At most n questions, sampled without replacement, in bank order."""
    rng = random.Random(seed)
    k = max(0, min(n, len(questions)))
    picked = sorted(rng.sample(range(len(questions)), k))
    return [questions[i] for i in picked]


def _response_label(q: Question, response: str, labels: str) -> Optional[str]:
    # a bare letter, or the full text of one of the options
    if len(response) == 1 and response.upper() in labels:
        return response.upper()

    for i, option in enumerate(q.options):
        if option.strip().lower() == response.lower() and i < len(labels):
            return labels[i]
    return None


def score_quiz(
    questions: List[Question],
    responses: Dict[int, str],
    labels: str = DEFAULT_CONFIG.labels,
) -> QuizResult:
    """
    responses maps question index -> what the user picked. Unanswered
    questions count as wrong.
    """
    answers: List[AnswerResult] = []

    for index in sorted(responses):
        if index < 0 or index >= len(questions):
            raise IndexError(f"No question at index {index}")

        q = questions[index]
        user_answer = responses[index]
        label = _response_label(q, user_answer.strip(), labels)

        answers.append(AnswerResult(
            question_index=index,
            user_answer=user_answer,
            correct_answer=q.answer_label,
            is_correct=label == q.answer_label,
        ))

    total = len(questions)
    score = sum(1 for a in answers if a.is_correct)
    percentage = int(score * 100 / total + 0.5) if total else 0

    return QuizResult(score=score, total=total, percentage=percentage, answers=answers)
