import pytest

from paper_bank.ocr_pages import (
    count_ocr_pages,
    extract_ocr_page_range,
    strip_ocr_page_markers,
    wrap_ocr_page,
)

OCR = "\n".join([
    wrap_ocr_page(1, "1. First page question"),
    wrap_ocr_page(2, "2. Second page question"),
    wrap_ocr_page(3, "3. Third page question"),
])


def test_count_ocr_pages():
    assert count_ocr_pages(OCR) == 3
    assert count_ocr_pages("no markers here") == 0


def test_extract_ocr_page_range():
    assert extract_ocr_page_range(OCR, 2, 2) == "2. Second page question"
    assert extract_ocr_page_range(OCR, 1, 2) == (
        "1. First page question\n\n2. Second page question"
    )


def test_extract_ocr_page_range_skips_missing_pages():
    assert extract_ocr_page_range(OCR, 3, 5) == "3. Third page question"


@pytest.mark.parametrize("start, end", [(0, 2), (3, 2)])
def test_extract_ocr_page_range_rejects_bad_range(start, end):
    with pytest.raises(ValueError):
        extract_ocr_page_range(OCR, start, end)


def test_strip_ocr_page_markers():
    stripped = strip_ocr_page_markers(OCR)
    assert "OCR for page" not in stripped
    assert "\n2. Second page question" in stripped


def test_strip_inline_marker_leaves_line_break():
    text = "==End of OCR for page 1====Start of OCR for page 2==4. Fourth question"
    assert strip_ocr_page_markers(text).endswith("\n4. Fourth question")
