from paper_bank.config import TAMIL
from paper_bank.text_utils import first_script_index, has_script, normalize_text, strip_check_marks


def test_normalize_text_collapses_whitespace_and_controls():
    assert normalize_text("  What\tis\n\n the\x07 capital?  ") == "What is the capital?"


def test_normalize_text_is_idempotent():
    once = normalize_text(" a \n b ")
    assert normalize_text(once) == once


def test_strip_check_marks():
    assert normalize_text(strip_check_marks("Delhi ✓ √")) == "Delhi"


def test_script_detection():
    text = "Capital? தலைநகரம்"
    assert first_script_index(text, TAMIL) == text.index("த")
    assert has_script(text, TAMIL)
    assert not has_script("Capital?", TAMIL)
    assert first_script_index(text, None) is None
