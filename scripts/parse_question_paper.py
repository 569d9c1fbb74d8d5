import argparse
import logging
import sys
from pathlib import Path

from paper_bank.config import DEFAULT_CONFIG, load_parser_config
from paper_bank.models import QuestionDefaults
from paper_bank.ocr_pages import count_ocr_pages, extract_ocr_page_range
from paper_bank.parsing import parse_question_paper_report, save_question_bank_json
from paper_bank.pdf_utils import extract_pdf_text


def load_source_text(path: str, start_page=None, end_page=None) -> str:
    """PDF text via pdfplumber, or an OCR text dump read as-is."""
    if Path(path).suffix.lower() == ".pdf":
        return extract_pdf_text(path, start_page, end_page)

    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    if start_page is None and end_page is None:
        return text

    total = count_ocr_pages(text)
    if total == 0:
        print("WARNING: no OCR page markers found; ignoring page range.")
        return text
    return extract_ocr_page_range(text, start_page or 1, end_page or total)


def main():
    parser = argparse.ArgumentParser(
        description="Extract numbered multiple-choice questions from a question "
                    "paper (PDF or OCR text) into a JSON question bank."
    )
    parser.add_argument("input", help="Path to a .pdf or an OCR .txt dump")
    parser.add_argument(
        "-o",
        "--output",
        dest="output_json",
        help="Path to question bank JSON (default: <input>_questions.json)",
    )
    parser.add_argument("--start-page", type=int, help="First page to read (1-based)")
    parser.add_argument("--end-page", type=int, help="Last page to read (inclusive)")
    parser.add_argument("--config", help="Parser config JSON (e.g. config/parser_tamil.json)")
    parser.add_argument("--difficulty", default="medium", help="Difficulty tag for every question")
    parser.add_argument("--group", default="Group 1", help="Exam group tag for every question")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log dropped blocks")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.output_json:
        output_json = args.output_json
    else:
        p = Path(args.input)
        output_json = str(p.with_name(p.stem + "_questions.json"))

    config = load_parser_config(args.config) if args.config else DEFAULT_CONFIG
    defaults = QuestionDefaults(difficulty=args.difficulty, group=args.group)

    # 1) Read the paper
    print(f"Reading: {args.input}")
    text = load_source_text(args.input, args.start_page, args.end_page)

    # 2) Parse + validate
    report = parse_question_paper_report(text, config, defaults)
    print(f"Found {report.blocks_found} question blocks.")
    print(f"Extracted {len(report.questions)} questions.")

    if report.dropped:
        print(f"{report.dropped} question blocks could not be parsed "
              "(re-run OCR or enter them manually).")

    if not report.questions:
        print("\nWARNING: No questions extracted. No question bank written.")
        sys.exit(1)

    # 3) Save
    out_path = Path(output_json)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    save_question_bank_json(report.questions, str(out_path))
    print(f"Wrote question bank to: {out_path}")


if __name__ == "__main__":
    main()
