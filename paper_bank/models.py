from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Question:
    question_number: int          # as numbered in the source paper
    question_text: str
    options: Tuple[str, ...]
    answer_label: str             # "A".."D"
    secondary_question_text: Optional[str] = None
    secondary_options: Optional[Tuple[str, ...]] = None
    question_type: str = "mcq"

    # presentation metadata, filled from QuestionDefaults by the caller
    difficulty: Optional[str] = None
    group: Optional[str] = None
    explanation: str = ""

    def __post_init__(self):
        # lists from extractors or JSON are frozen into tuples
        object.__setattr__(self, "options", tuple(self.options))
        if self.secondary_options is not None:
            object.__setattr__(self, "secondary_options", tuple(self.secondary_options))


@dataclass(frozen=True)
class QuestionDefaults:
    """Metadata that can't be read from the paper itself."""
    difficulty: str = "medium"
    group: str = "Group 1"


@dataclass
class ParseReport:
    blocks_found: int
    blocks_parsed: int
    questions: List[Question] = field(default_factory=list)

    @property
    def dropped(self) -> int:
        return self.blocks_found - len(self.questions)


@dataclass
class AnswerResult:
    question_index: int
    user_answer: str
    correct_answer: str
    is_correct: bool


@dataclass
class QuizResult:
    score: int
    total: int
    percentage: int
    answers: List[AnswerResult] = field(default_factory=list)
