"""
Pulls the question stem and the labeled options out of one question block.

Option labels are found by trying a fixed list of strategies in order
(parenthesized labels first, then bare 'A)' / 'A.' labels); the first
strategy that yields at least two usable options wins. The same machinery
runs over the secondary script's labels for bilingual papers.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Pattern, Sequence, Tuple

from paper_bank.config import DEFAULT_CONFIG, ParserConfig
from paper_bank.regexes import (
    QUESTION_START_RE,
    bare_label_re,
    cue_before_label_re,
    glyph_before_label_re,
    paren_label_re,
)
from paper_bank.text_utils import first_script_index, normalize_text, strip_check_marks

logger = logging.getLogger(__name__)


@dataclass
class OptionRun:
    start: int            # offset of the first label marker
    options: List[str]    # in label order


# (label, marker_start, marker_end)
LabelSpan = Tuple[str, int, int]
OptionStrategy = Callable[[str, ParserConfig], Optional[OptionRun]]


def strip_question_marker(block: str) -> str:
    m = QUESTION_START_RE.match(block)
    return block[m.end():] if m else block


def _label_spans(regex: Pattern, text: str, upper: bool) -> List[LabelSpan]:
    spans = []
    for m in regex.finditer(text):
        label = m.group(1).upper() if upper else m.group(1)
        spans.append((label, m.start(), m.end()))
    return spans


def _clean_option(raw: str, config: ParserConfig) -> str:
    # "third ✓(B)" -> "third"
    mark = glyph_before_label_re(config.labels).search(raw)
    if mark:
        raw = raw[:mark.start()]
    text = strip_check_marks(raw)
    # "opt3 Answer: B" -> "opt3"
    cue = cue_before_label_re(config.labels, config.answer_cues).search(text)
    if cue:
        text = text[:cue.start()]
    return normalize_text(text).rstrip(" ([")


def _build_run(
    text: str,
    spans: List[LabelSpan],
    labels: Sequence[str],
    config: ParserConfig,
    stop: Callable[[str, int, int], int],
) -> Optional[OptionRun]:
    if not spans:
        return None

    found: Dict[str, str] = {}
    for i, (label, _, end) in enumerate(spans):
        if label in found:
            continue  # first occurrence of a label wins
        next_start = spans[i + 1][1] if i + 1 < len(spans) else len(text)
        found[label] = _clean_option(text[end:stop(text, end, next_start)], config)

    # contiguous A, B, C... so a label always indexes its own option
    options = []
    for label in labels:
        option = found.get(label)
        if option is None or len(option) < config.min_option_length:
            break
        options.append(option)

    if len(options) < 2:
        return None
    return OptionRun(start=spans[0][1], options=options)


# ---------- primary language ----------

def _stop_at_secondary(config: ParserConfig) -> Callable[[str, int, int], int]:
    def stop(text: str, start: int, end: int) -> int:
        idx = first_script_index(text[:end], config.secondary, start)
        return end if idx is None else idx
    return stop


def _paren_primary(text: str, config: ParserConfig) -> Optional[OptionRun]:
    spans = _label_spans(paren_label_re(config.labels), text, upper=True)
    return _build_run(text, spans, config.labels, config, _stop_at_secondary(config))


def _bare_primary(text: str, config: ParserConfig) -> Optional[OptionRun]:
    spans = _label_spans(bare_label_re(config.labels), text, upper=False)
    return _build_run(text, spans, config.labels, config, _stop_at_secondary(config))


PRIMARY_OPTION_STRATEGIES: Tuple[OptionStrategy, ...] = (_paren_primary, _bare_primary)


def find_option_run(
    text: str,
    config: ParserConfig,
    strategies: Sequence[OptionStrategy],
) -> Optional[OptionRun]:
    for strategy in strategies:
        run = strategy(text, config)
        if run is not None:
            return run
    return None


def _fallback_line(region: str, config: ParserConfig) -> str:
    for line in region.splitlines():
        if first_script_index(line, config.secondary) is not None:
            continue
        line = normalize_text(strip_check_marks(line))
        if len(line) >= config.fallback_line_length:
            return line
    return ""


def extract_primary_question(block: str, config: Optional[ParserConfig] = None) -> Optional[str]:
    """
    Stem = text between the number marker and whichever comes first: the
    first option label or the first secondary-script character.

    Falls back to the first long-enough primary-language line when no
    delimiter is found, or when the delimited stem is empty (papers that
    print the secondary-language stem first).
    """
    config = config or DEFAULT_CONFIG
    body = strip_question_marker(block)

    run = find_option_run(body, config, PRIMARY_OPTION_STRATEGIES)
    cuts = [idx for idx in (
        run.start if run else None,
        first_script_index(body, config.secondary),
    ) if idx is not None]

    stem = normalize_text(strip_check_marks(body[:min(cuts)])) if cuts else ""
    if not stem:
        stem = _fallback_line(body[:run.start] if run else body, config)

    if len(stem) < config.min_question_length:
        return None
    return stem


def extract_primary_options(block: str, config: Optional[ParserConfig] = None) -> List[str]:
    config = config or DEFAULT_CONFIG
    run = find_option_run(strip_question_marker(block), config, PRIMARY_OPTION_STRATEGIES)
    return run.options if run else []


# ---------- secondary language ----------

def _primary_marker_starts(text: str, config: ParserConfig) -> List[int]:
    starts = [m.start() for m in paren_label_re(config.labels).finditer(text)]
    starts.extend(m.start() for m in bare_label_re(config.labels).finditer(text))
    return sorted(starts)


def _stop_at_primary_label(config: ParserConfig) -> Callable[[str, int, int], int]:
    def stop(text: str, start: int, end: int) -> int:
        for idx in _primary_marker_starts(text, config):
            if start <= idx < end:
                return idx
        return end
    return stop


def _paren_secondary(text: str, config: ParserConfig) -> Optional[OptionRun]:
    labels = config.secondary.labels
    spans = _label_spans(paren_label_re(labels), text, upper=False)
    return _build_run(text, spans, labels, config, _stop_at_primary_label(config))


def _bare_secondary(text: str, config: ParserConfig) -> Optional[OptionRun]:
    labels = config.secondary.labels
    spans = _label_spans(bare_label_re(labels), text, upper=False)
    return _build_run(text, spans, labels, config, _stop_at_primary_label(config))


SECONDARY_OPTION_STRATEGIES: Tuple[OptionStrategy, ...] = (_paren_secondary, _bare_secondary)


def extract_secondary_options(block: str, config: Optional[ParserConfig] = None) -> List[str]:
    config = config or DEFAULT_CONFIG
    if config.secondary is None:
        return []
    run = find_option_run(strip_question_marker(block), config, SECONDARY_OPTION_STRATEGIES)
    return run.options if run else []


def extract_secondary_question(block: str, config: Optional[ParserConfig] = None) -> Optional[str]:
    config = config or DEFAULT_CONFIG
    script = config.secondary
    if script is None:
        return None

    body = strip_question_marker(block)
    start = first_script_index(body, script)
    if start is None:
        return None

    secondary_run = find_option_run(body, config, SECONDARY_OPTION_STRATEGIES)
    if secondary_run is not None and secondary_run.start <= start:
        return None  # first secondary text is an option, there is no stem

    end = len(body)
    for run in (secondary_run, find_option_run(body, config, PRIMARY_OPTION_STRATEGIES)):
        if run is not None and start < run.start < end:
            end = run.start

    # primary-language lines interleaved with the secondary stem are skipped
    lines = [
        line for line in body[start:end].splitlines()
        if first_script_index(line, script) is not None
    ]
    stem = normalize_text(strip_check_marks(" ".join(lines))).rstrip(" ([")
    if len(stem) < config.min_secondary_question_length:
        logger.debug("Secondary stem too short: %r", stem)
        return None
    return stem
