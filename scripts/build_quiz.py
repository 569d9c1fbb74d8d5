import argparse
from pathlib import Path

from paper_bank.parsing import load_question_bank_json, save_question_bank_json
from paper_bank.quiz import sample_quiz, select_questions


def main():
    parser = argparse.ArgumentParser(
        description="Sample a practice quiz from a JSON question bank."
    )
    parser.add_argument("bank_json", help="Path to question bank JSON")
    parser.add_argument("-n", "--num-questions", type=int, default=20)
    parser.add_argument("-o", "--output", dest="output_json", help="Path to quiz JSON")
    parser.add_argument("--group", action="append", help="Keep only this group (repeatable)")
    parser.add_argument("--difficulty", action="append", help="Keep only this difficulty (repeatable)")
    parser.add_argument("--require-secondary", action="store_true",
                        help="Keep only questions with translated text and options")
    parser.add_argument("--seed", type=int, help="Random seed for repeatable quizzes")

    args = parser.parse_args()

    questions = load_question_bank_json(args.bank_json)
    print(f"Loaded {len(questions)} questions from {Path(args.bank_json).name}")

    filtered = select_questions(
        questions,
        groups=args.group,
        difficulties=args.difficulty,
        require_secondary=args.require_secondary,
    )
    print(f"Found {len(filtered)} questions matching your filters.")

    selected = sample_quiz(filtered, args.num_questions, seed=args.seed)
    if len(selected) < args.num_questions:
        print(f"Only {len(selected)} questions available; the quiz will be shorter.")

    if args.output_json:
        output_json = args.output_json
    else:
        p = Path(args.bank_json)
        output_json = str(p.with_name(f"{p.stem}_quiz_{len(selected)}questions.json"))

    save_question_bank_json(selected, output_json)
    print(f"Wrote quiz to: {output_json}")


if __name__ == "__main__":
    main()
