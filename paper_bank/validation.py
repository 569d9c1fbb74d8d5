import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from paper_bank.config import DEFAULT_CONFIG, ParserConfig
from paper_bank.models import Question

logger = logging.getLogger(__name__)


def normalize_question(q: Question) -> Question:
    """Trim every text field and uppercase the answer label."""
    return replace(
        q,
        question_text=q.question_text.strip(),
        options=tuple(opt.strip() for opt in q.options),
        answer_label=q.answer_label.strip().upper(),
        secondary_question_text=(
            q.secondary_question_text.strip()
            if q.secondary_question_text is not None else None
        ),
        secondary_options=(
            tuple(opt.strip() for opt in q.secondary_options)
            if q.secondary_options is not None else None
        ),
    )


def is_valid_question(q: Question, config: Optional[ParserConfig] = None) -> bool:
    config = config or DEFAULT_CONFIG

    if len(q.question_text) < config.min_question_length:
        return False
    if len(q.options) < 2:
        return False
    # answer must name one of the extracted options
    if len(q.answer_label) != 1 or q.answer_label not in config.labels:
        return False
    return config.labels.index(q.answer_label) < len(q.options)


def validate_questions(
    questions: Iterable[Question],
    config: Optional[ParserConfig] = None,
) -> List[Question]:
    config = config or DEFAULT_CONFIG
    result: List[Question] = []

    for q in questions:
        q = normalize_question(q)
        if not is_valid_question(q, config):
            logger.debug("Dropping question %s in validation", q.question_number)
            continue
        result.append(q)

    return result
