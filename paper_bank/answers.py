"""
Finds the marked correct option in a question block.

Strategies run in priority order and the first hit wins:

- check glyph right before a label:     '✓(B)', '√B.'
- label right before a check glyph:     '(B)✓', 'B) √'
- check glyph later on a label's line:  '(B) Chennai ✓'
- answer cue then label, after the stem: 'Answer: B', 'Ans (c)'
- label then "correct":                 '(B) is correct'

The located letter is not checked against the extracted options here,
the validator does that.
"""
import logging
from typing import Callable, Optional, Tuple

from paper_bank.config import DEFAULT_CONFIG, ParserConfig
from paper_bank.extraction import PRIMARY_OPTION_STRATEGIES, find_option_run
from paper_bank.regexes import (
    CHECK_RE,
    bare_label_re,
    cue_before_label_re,
    glyph_before_label_re,
    label_before_cue_re,
    label_before_glyph_re,
    paren_label_re,
)

logger = logging.getLogger(__name__)

AnswerStrategy = Callable[[str, ParserConfig], Optional[str]]


def _first_group(m) -> str:
    return next(g for g in m.groups() if g)


def _glyph_before_label(block: str, config: ParserConfig) -> Optional[str]:
    m = glyph_before_label_re(config.labels).search(block)
    return _first_group(m) if m else None


def _label_before_glyph(block: str, config: ParserConfig) -> Optional[str]:
    m = label_before_glyph_re(config.labels).search(block)
    return _first_group(m) if m else None


def _glyph_on_label_line(block: str, config: ParserConfig) -> Optional[str]:
    for line in block.splitlines():
        glyph = CHECK_RE.search(line)
        if not glyph:
            continue
        head = line[:glyph.start()]
        markers = [
            (m.start(), m.group(1).upper())
            for regex in (paren_label_re(config.labels), bare_label_re(config.labels))
            for m in regex.finditer(head)
        ]
        if markers:
            # nearest label to the left of the glyph
            return max(markers)[1]
    return None


def _cue_before_label(block: str, config: ParserConfig) -> Optional[str]:
    # stem instructions like "Choose the correct answer" sit before the options
    run = find_option_run(block, config, PRIMARY_OPTION_STRATEGIES)
    pos = run.start if run else 0

    matches = list(cue_before_label_re(config.labels, config.answer_cues).finditer(block, pos))
    return matches[-1].group(1).upper() if matches else None


def _label_before_cue(block: str, config: ParserConfig) -> Optional[str]:
    m = label_before_cue_re(config.labels).search(block)
    return m.group(1) if m else None


ANSWER_STRATEGIES: Tuple[AnswerStrategy, ...] = (
    _glyph_before_label,
    _label_before_glyph,
    _glyph_on_label_line,
    _cue_before_label,
    _label_before_cue,
)


def locate_answer(block: str, config: Optional[ParserConfig] = None) -> Optional[str]:
    config = config or DEFAULT_CONFIG
    for strategy in ANSWER_STRATEGIES:
        label = strategy(block, config)
        if label is not None:
            logger.debug("Answer %s found by %s", label, strategy.__name__)
            return label
    return None
