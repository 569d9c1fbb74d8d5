"""
Helpers for OCR dumps that wrap each page in

    ==Start of OCR for page N==
    ...
    ==End of OCR for page N==
"""
from typing import List

from paper_bank.regexes import OCR_PAGE_END_RE, OCR_PAGE_MARKER_RE


def page_start_marker(page: int) -> str:
    return f"==Start of OCR for page {page}=="


def page_end_marker(page: int) -> str:
    return f"==End of OCR for page {page}=="


def count_ocr_pages(ocr_text: str) -> int:
    """Highest page number among the end markers, 0 if there are none."""
    return max((int(m.group(1)) for m in OCR_PAGE_END_RE.finditer(ocr_text)), default=0)


def extract_ocr_page_range(ocr_text: str, start_page: int, end_page: int) -> str:
    if start_page < 1 or start_page > end_page:
        raise ValueError(f"Invalid page range: {start_page}-{end_page}")

    pages: List[str] = []
    for page in range(start_page, end_page + 1):
        start_marker = page_start_marker(page)
        start = ocr_text.find(start_marker)
        end = ocr_text.find(page_end_marker(page))

        # pages missing either marker are skipped
        if start == -1 or end == -1:
            continue
        pages.append(ocr_text[start + len(start_marker):end].strip())

    return "\n\n".join(pages)


def strip_ocr_page_markers(ocr_text: str) -> str:
    # a marker may share a line with question text, so leave a line break behind
    return OCR_PAGE_MARKER_RE.sub("\n", ocr_text)


def wrap_ocr_page(page: int, text: str) -> str:
    return f"{page_start_marker(page)}\n{text}\n{page_end_marker(page)}"
