import json
import logging
from dataclasses import asdict
from typing import List, Optional

from paper_bank.answers import locate_answer
from paper_bank.config import DEFAULT_CONFIG, ParserConfig
from paper_bank.extraction import (
    extract_primary_options,
    extract_primary_question,
    extract_secondary_options,
    extract_secondary_question,
)
from paper_bank.models import ParseReport, Question, QuestionDefaults
from paper_bank.ocr_pages import strip_ocr_page_markers
from paper_bank.regexes import QUESTION_START_RE
from paper_bank.validation import validate_questions

logger = logging.getLogger(__name__)


# ---------- SEGMENTING ----------

def segment_blocks(ocr_text: str, config: Optional[ParserConfig] = None) -> List[str]:
    """
    Split OCR text into one block per numbered question.

    A block runs from a line-start "N." / "N)" marker up to the next marker
    (or the end of the text). Tiny blocks are page numbers, headers and
    other OCR debris and are dropped.
    """
    config = config or DEFAULT_CONFIG

    starts = [m.start() for m in QUESTION_START_RE.finditer(ocr_text)]
    if not starts:
        logger.warning("No question start markers (e.g. '1.', '2.') found")
        return []

    blocks: List[str] = []
    for i, start in enumerate(starts):
        end = starts[i + 1] if i + 1 < len(starts) else len(ocr_text)
        block = ocr_text[start:end].strip()
        if len(block) < config.min_block_length:
            logger.debug("Skipping short block %r", block)
            continue
        blocks.append(block)

    logger.info("Split OCR text into %d question blocks", len(blocks))
    return blocks


# ---------- PARSING ----------

def question_number(block: str) -> Optional[int]:
    m = QUESTION_START_RE.match(block)
    return int(m.group(1)) if m else None


def parse_block(
    block: str,
    config: Optional[ParserConfig] = None,
    defaults: Optional[QuestionDefaults] = None,
) -> Optional[Question]:
    config = config or DEFAULT_CONFIG

    number = question_number(block)
    if number is None:
        logger.debug("Rejected block without a number marker: %r", block[:40])
        return None

    question_text = extract_primary_question(block, config)
    if question_text is None:
        logger.debug("Rejected question %d: no usable question text", number)
        return None

    options = extract_primary_options(block, config)
    if len(options) < 2:
        logger.debug("Rejected question %d: fewer than 2 options", number)
        return None

    # bilingual fields are best effort
    secondary_text = extract_secondary_question(block, config)
    secondary_options = extract_secondary_options(block, config) or None

    answer = locate_answer(block, config)
    if answer is None:
        logger.debug("Rejected question %d: no marked answer", number)
        return None

    return Question(
        question_number=number,
        question_text=question_text,
        options=tuple(options),
        answer_label=answer,
        secondary_question_text=secondary_text,
        secondary_options=secondary_options,
        question_type="mcq",
        difficulty=defaults.difficulty if defaults else None,
        group=defaults.group if defaults else None,
    )


def parse_question_paper_report(
    ocr_text: str,
    config: Optional[ParserConfig] = None,
    defaults: Optional[QuestionDefaults] = None,
) -> ParseReport:
    config = config or DEFAULT_CONFIG

    blocks = segment_blocks(strip_ocr_page_markers(ocr_text), config)

    parsed: List[Question] = []
    for block in blocks:
        q = parse_block(block, config, defaults)
        if q is not None:
            parsed.append(q)
    logger.info("Parsed %d of %d question blocks", len(parsed), len(blocks))

    questions = validate_questions(parsed, config)
    logger.info("After validation, %d questions remain", len(questions))

    return ParseReport(
        blocks_found=len(blocks),
        blocks_parsed=len(parsed),
        questions=questions,
    )


def parse_question_paper(
    ocr_text: str,
    config: Optional[ParserConfig] = None,
    defaults: Optional[QuestionDefaults] = None,
) -> List[Question]:
    return parse_question_paper_report(ocr_text, config, defaults).questions


# ---------- QUESTION BANK JSON ----------

def save_question_bank_json(questions: List[Question], output_path: str):
    data = [asdict(q) for q in questions]
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def load_question_bank_json(path: str) -> List[Question]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return [Question(**q) for q in data]
