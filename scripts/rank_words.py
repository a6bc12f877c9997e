#!/usr/bin/env python3
"""
Ranked Word List Builder

Combines a word list with a frequency list into the "word rank" format read by
the Wordle Filter. The frequency list holds one word per line, most frequent
first; a word's rank is its line index there. Words missing from the frequency
list are ranked after all known words, alphabetically.

Usage:
    python scripts/rank_words.py <word_list> <frequency_list> [output] [--length N]

Example:
    python scripts/rank_words.py wordlist.txt en_freq.txt data/words.txt
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Tuple

log = logging.getLogger("rank_words")


def is_valid_word(word: str, length: int = 5) -> bool:
    """
    Check if a word is an alphabetic word of the given length.

    Args:
        word: The word to check
        length: Required number of letters

    Returns:
        True if word contains exactly `length` alphabetic characters
    """
    word = word.strip().lower()
    return len(word) == length and word.isalpha()


def read_words(path: Path, length: int) -> List[str]:
    """Read valid words in file order, without duplicates."""
    words: List[str] = []
    seen = set()
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            fields = line.split()
            if not fields or fields[0].startswith('#'):
                continue
            word = fields[0].lower()
            if is_valid_word(word, length) and word not in seen:
                seen.add(word)
                words.append(word)
    return words


def rank_words(words: List[str], frequency_order: List[str]) -> List[Tuple[str, int]]:
    """
    Assign ranks to words.

    Args:
        words: Words to rank
        frequency_order: Words ordered from most to least frequent

    Returns:
        (word, rank) pairs sorted by rank
    """
    known: Dict[str, int] = {}
    for index, word in enumerate(frequency_order):
        known.setdefault(word, index)

    unknown = sorted(w for w in words if w not in known)
    ranked = sorted(((w, known[w]) for w in words if w in known), key=lambda pair: pair[1])
    base = len(frequency_order)
    ranked.extend((w, base + i) for i, w in enumerate(unknown))
    return ranked


def main(argv=None):
    """Main entry point for the script."""
    parser = argparse.ArgumentParser(description="Build a ranked word list.")
    parser.add_argument('word_list', type=Path)
    parser.add_argument('frequency_list', type=Path)
    parser.add_argument('output', type=Path, nargs='?', default=Path("data/words.txt"))
    parser.add_argument('-L', '--length', type=int, default=5)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(message)s')

    for path in (args.word_list, args.frequency_list):
        if not path.is_file():
            log.critical(f"Error: Input file '{path}' not found.")
            return 1

    words = read_words(args.word_list, args.length)
    frequency_order = read_words(args.frequency_list, args.length)
    ranked = rank_words(words, frequency_order)

    with open(args.output, 'w', encoding='utf-8') as f:
        f.write(f"# {args.length}-letter words, rank 0 = most frequent\n")
        for word, rank in ranked:
            f.write(f"{word} {rank}\n")

    log.info(f"Words: {len(words):,}, with frequency data: "
             f"{len(words) - sum(1 for _, r in ranked if r >= len(frequency_order)):,}")
    log.info(f"Output written to: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
