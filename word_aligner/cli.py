import argparse
import json
import logging
from .api import align
from .models import AlignmentError
from .utils import build_config_from_args


def _read_text(path):
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Word-level local alignment (Smith-Waterman) of two texts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  word-aligner --text1 "the quick brown fox" --text2 "a quick brown dog"
  word-aligner -a essay.txt -b source.txt --style text --context 5
        """,
    )

    parser.add_argument("--text1", type=str, help="Text the snippet is taken from")
    parser.add_argument("--text2", type=str, help="Text searched for in --text1")
    parser.add_argument(
        "-a", "--file1", required=False, help="Read the first text from a UTF-8 file"
    )
    parser.add_argument(
        "-b", "--file2", required=False, help="Read the second text from a UTF-8 file"
    )

    parser.add_argument(
        "--style",
        choices=["html", "text"],
        default=None,
        help="Snippet highlight style (default: html)",
    )
    parser.add_argument(
        "--context",
        type=int,
        default=None,
        help="Number of context tokens shown on each side of the match (default: 10)",
    )
    parser.add_argument(
        "--clamp",
        action="store_true",
        help="Floor every matrix cell at 0 (textbook Smith-Waterman)",
    )
    parser.add_argument("--match", type=int, help="Match weight (default: 2)")
    parser.add_argument("--mismatch", type=int, help="Mismatch weight (default: -1)")
    parser.add_argument("--deletion", type=int, help="Deletion weight (default: -1)")
    parser.add_argument("--insertion", type=int, help="Insertion weight (default: -1)")

    parser.add_argument(
        "--json", action="store_true", help="Print the full result as JSON"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help=(
            "Enable verbose output (show debug information); "
            "word_aligner log lines are printed without timestamps"
        ),
    )

    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        # Package lines go through the package handler only, without timestamps
        package_logger = logging.getLogger("word_aligner")
        package_logger.setLevel(logging.DEBUG)
        package_logger.propagate = False
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        text1 = _read_text(args.file1) if args.file1 else args.text1
        text2 = _read_text(args.file2) if args.file2 else args.text2
    except OSError as e:
        logging.error(f"Error: cannot read input file: {e}")
        return 1

    if text1 is None or text2 is None:
        logging.error("Error: provide --text1/--file1 and --text2/--file2")
        return 1

    config = build_config_from_args(args)

    try:
        result = align(text1, text2, **config)
    except (AlignmentError, ValueError) as e:
        logging.error(f"Error during alignment: {e}")
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(f"{result.score:.4f} {result.snippet}")
    return 0


if __name__ == "__main__":
    exit(main())
