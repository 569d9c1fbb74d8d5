import unicodedata
from typing import Optional

from paper_bank.config import SecondaryScript
from paper_bank.regexes import CHECK_RE, WHITESPACE_RE


def normalize_text(text: str) -> str:
    """NFC, drop control characters, collapse whitespace runs, trim."""
    text = unicodedata.normalize("NFC", text)
    text = "".join(
        ch
        for ch in text
        if ch.isspace() or unicodedata.category(ch) != "Cc"
    )
    return WHITESPACE_RE.sub(" ", text).strip()


def strip_check_marks(text: str) -> str:
    return CHECK_RE.sub(" ", text)


def first_script_index(text: str, script: Optional[SecondaryScript], start: int = 0) -> Optional[int]:
    if script is None:
        return None
    for i in range(start, len(text)):
        if script.contains(text[i]):
            return i
    return None


def has_script(text: str, script: Optional[SecondaryScript]) -> bool:
    return first_script_index(text, script) is not None
