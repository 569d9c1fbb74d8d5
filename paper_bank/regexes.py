import re
from functools import lru_cache
from typing import Iterable, Pattern, Sequence


# ---------- REGEXES ----------
# building blocks

QNUM_STR = r"(\d{1,3})"             # group(1): question number as printed
CHECK_GLYPHS = "✓√✔"
CHECK_STR = f"[{CHECK_GLYPHS}]"

# "12." or "12)" at the start of a line; "1.5" is a decimal, not a marker
QUESTION_START_RE = re.compile(
    rf"""^[ \t]*
        {QNUM_STR}               # question number -> group(1)
        [ \t]*[.)]
        (?!\d)
    """,
    re.MULTILINE | re.VERBOSE,
)

CHECK_RE = re.compile(CHECK_STR)
WHITESPACE_RE = re.compile(r"\s+")

OCR_PAGE_END_RE = re.compile(r"==End of OCR for page (\d+)==")
OCR_PAGE_MARKER_RE = re.compile(r"==(?:Start|End) of OCR for page \d+==")


def label_class(labels: Iterable[str]) -> str:
    return "[" + "".join(re.escape(label) for label in labels) + "]"


# ---------- option labels ----------

@lru_cache(maxsize=None)
def paren_label_re(labels: Sequence[str]) -> Pattern:
    """'(A)', '( b )' -> group(1) is the label."""
    return re.compile(rf"\(\s*({label_class(labels)})\s*\)", re.IGNORECASE)


@lru_cache(maxsize=None)
def bare_label_re(labels: Sequence[str]) -> Pattern:
    """'A)' or 'A.' preceded by whitespace (or start of block)."""
    return re.compile(
        rf"""(?<!\S)
            ({label_class(labels)})  # label -> group(1)
            (?:\)|\.(?!\w))          # 'A.B.' is an abbreviation, not a label
        """,
        re.VERBOSE,
    )


# ---------- answer markers ----------

@lru_cache(maxsize=None)
def glyph_before_label_re(labels: Sequence[str]) -> Pattern:
    """'✓(B)', '√B.', '✓C'"""
    cls = label_class(labels)
    return re.compile(
        rf"{CHECK_STR}(?:\(\s*({cls})\s*\)|({cls})[.)]?(?![A-Za-z]))"
    )


@lru_cache(maxsize=None)
def label_before_glyph_re(labels: Sequence[str]) -> Pattern:
    """'(B)✓', 'B) √', 'C. ✔'"""
    cls = label_class(labels)
    return re.compile(
        rf"(?:\(\s*({cls})\s*\)|(?<![A-Za-z])({cls})[.)])[ \t]?{CHECK_STR}"
    )


def _cue_alternation(cues: Iterable[str]) -> str:
    # longest first so "correct answer" wins over "answer"
    ordered = sorted(cues, key=len, reverse=True)
    return "|".join(
        r"\s+".join(re.escape(word) for word in cue.split()) for cue in ordered
    )


@lru_cache(maxsize=None)
def cue_before_label_re(labels: Sequence[str], cues: Sequence[str]) -> Pattern:
    """'Answer: B', 'Ans (c)', 'correct answer is D'"""
    cls = label_class(list(labels) + [label.lower() for label in labels])
    return re.compile(
        rf"""(?<!\w)(?i:{_cue_alternation(cues)})
            \s*[:.\-]?\s*
            (?:(?i:is)\s+)?
            \(?\s*({cls})\s*\)?      # label -> group(1)
            (?![A-Za-z])
        """,
        re.VERBOSE,
    )


@lru_cache(maxsize=None)
def label_before_cue_re(labels: Sequence[str]) -> Pattern:
    """'(B) is correct', 'D - correct answer'"""
    cls = label_class(labels)
    return re.compile(
        rf"""(?<![A-Za-z])\(?({cls})\)?   # label -> group(1)
            [ \t]*[.:\-]?[ \t]*
            (?:(?i:is)\s+)?(?:(?i:the)\s+)?
            (?i:correct|right)(?:\s+(?i:answer))?
            (?!\w)
        """,
        re.VERBOSE,
    )


__all__ = [
    # building blocks
    "QNUM_STR",
    "CHECK_GLYPHS",
    "CHECK_STR",

    # compiled regexes
    "QUESTION_START_RE",
    "CHECK_RE",
    "WHITESPACE_RE",
    "OCR_PAGE_END_RE",
    "OCR_PAGE_MARKER_RE",

    # label-set builders
    "label_class",
    "paren_label_re",
    "bare_label_re",
    "glyph_before_label_re",
    "label_before_glyph_re",
    "cue_before_label_re",
    "label_before_cue_re",
]
