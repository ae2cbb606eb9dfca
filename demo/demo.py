#!/usr/bin/env python3
"""
Word Aligner Demo Script

This script demonstrates basic usage of the word_aligner API.

Usage:
    python demo.py

Requirements:
    - Install the package: pip install -e .
    - Run from the project root directory
"""

import sys
import logging
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from word_aligner import SmithWaterman, align


PAIRS = [
    (
        "Smith-Waterman and Systolic PE Array are well-known dynamic programming algorithms.",
        "Smith-Waterman algorithm is a well-known algorithm for performing sequence alignment.",
    ),
    (
        "It was the best of times, it was the worst of times, it was the age of wisdom.",
        "it was the age of wisdom, it was the age of foolishness",
    ),
    ("the quick brown fox", "The quick brown fox."),
]


def main():
    """Main demo function"""

    logging.basicConfig(
        level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Disable propagation to avoid duplicate output
    word_logger = logging.getLogger("word_aligner")
    word_logger.setLevel(logging.DEBUG)
    word_logger.propagate = False

    print("Word Aligner Demo")
    print("=" * 50)

    for text1, text2 in PAIRS:
        result = align(text1, text2, style="text")
        print(f"text1: {text1}")
        print(f"text2: {text2}")
        print(f"  {result.score:.4f} {result.snippet}")
        print()

    # HTML output, as embedded in a web page
    sw = SmithWaterman(*PAIRS[0])
    print(f"{sw.get_score():.4f} {sw.get_html()}")

    print("\nDemo completed successfully!")


if __name__ == "__main__":
    sys.exit(main())
