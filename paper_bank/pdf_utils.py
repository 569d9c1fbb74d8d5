import os
from typing import List, Optional, Tuple

import pdfplumber
from pypdf import PdfReader

from paper_bank.ocr_pages import wrap_ocr_page


def get_pdf_page_count(pdf_path: str) -> int:
    if not os.path.exists(pdf_path):
        raise FileNotFoundError(pdf_path)
    return len(PdfReader(pdf_path).pages)


def resolve_page_range(
    total_pages: int,
    start_page: Optional[int] = None,
    end_page: Optional[int] = None,
) -> Tuple[int, int]:
    """1-based inclusive range; missing ends default to the whole document."""
    start = start_page if start_page is not None else 1
    end = end_page if end_page is not None else total_pages

    if start < 1 or end > total_pages or start > end:
        raise ValueError(
            f"Invalid page range {start}-{end} for a {total_pages}-page PDF"
        )
    return start, end


def extract_pdf_text(
    pdf_path: str,
    start_page: Optional[int] = None,
    end_page: Optional[int] = None,
) -> str:
    """
    Text of the selected pages, each wrapped in the
    "==Start/End of OCR for page N==" markers used for OCR dumps so both
    sources go through the same page helpers.
    """
    if not os.path.exists(pdf_path):
        raise FileNotFoundError(pdf_path)

    pages: List[str] = []
    with pdfplumber.open(pdf_path) as pdf:
        start, end = resolve_page_range(len(pdf.pages), start_page, end_page)
        for page_index in range(start, end + 1):
            text = pdf.pages[page_index - 1].extract_text() or ""
            pages.append(wrap_ocr_page(page_index, text))

    return "\n".join(pages)
