from paper_bank.regexes import (
    QUESTION_START_RE,
    bare_label_re,
    cue_before_label_re,
    glyph_before_label_re,
    label_before_cue_re,
    label_before_glyph_re,
    paren_label_re,
)

LABELS = "ABCD"
CUES = ("correct answer", "answer", "ans")


def test_question_start_re():
    m = QUESTION_START_RE.match("12. Which river is the longest?")
    assert m
    assert m.group(1) == "12"

    m2 = QUESTION_START_RE.match("  7) Who wrote Thirukkural?")
    assert m2 and m2.group(1) == "7"


def test_question_start_re_ignores_decimals():
    assert QUESTION_START_RE.match("3.14 is close to pi") is None
    found = [m.group(1) for m in QUESTION_START_RE.finditer("1. First\n2.5 km\n3. Third")]
    assert found == ["1", "3"]


def test_paren_label_re():
    labels = [m.group(1) for m in paren_label_re(LABELS).finditer("(A) one ( b ) two (E) five")]
    assert labels == ["A", "b"]


def test_bare_label_re():
    labels = [m.group(1) for m in bare_label_re(LABELS).finditer("A) one B. two")]
    assert labels == ["A", "B"]

    # abbreviations and parenthesized labels are not bare labels
    assert bare_label_re(LABELS).findall("U.S.A. B.C. era") == []
    assert bare_label_re(LABELS).findall("(A) one") == []


def test_glyph_before_label_re():
    m = glyph_before_label_re(LABELS).search("opt3 ✓(B)")
    assert m and "B" in m.groups()

    assert glyph_before_label_re(LABELS).search("✓Because") is None


def test_label_before_glyph_re():
    m = label_before_glyph_re(LABELS).search("(C) √ Chennai")
    assert m and "C" in m.groups()


def test_cue_before_label_re():
    m = cue_before_label_re(LABELS, CUES).search("Answer: c")
    assert m and m.group(1) == "c"

    m2 = cue_before_label_re(LABELS, CUES).search("The correct answer is D")
    assert m2 and m2.group(1) == "D"

    assert cue_before_label_re(LABELS, CUES).search("Write answers carefully") is None


def test_label_before_cue_re():
    m = label_before_cue_re(LABELS).search("(B) is correct")
    assert m and m.group(1) == "B"
