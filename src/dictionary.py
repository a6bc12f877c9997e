"""
Dictionary module for Wordle Filter.

Holds the ranked word store and loads it from a word list file.

Two file formats are understood:
1. "+word" / "-word" lines, where "+" marks a frequent word
2. "word [rank]" lines, with an optional integer frequency rank
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

log = logging.getLogger(__name__)

DEFAULT_WORD_LENGTH = 5


@dataclass(frozen=True)
class WordEntry:
    """A dictionary word with its frequency rank (lower = more common)."""
    word: str
    rank: int


class WordStore:
    """
    Immutable, ordered collection of WordEntry objects.

    All words share the same length. Entries keep the order in which they were
    loaded; that order is the tie-breaker when sorting by rank.

    Attributes:
        word_length: Length shared by every word in the store
        common_cutoff: Entries with rank >= cutoff are considered rare.
                       None means every word counts as common.
    """

    def __init__(
        self,
        entries: Sequence[WordEntry],
        word_length: int = DEFAULT_WORD_LENGTH,
        common_cutoff: Optional[int] = None
    ):
        if word_length < 1:
            raise ValueError(f"Word length must be positive, got {word_length}")

        for entry in entries:
            if len(entry.word) != word_length:
                raise ValueError(
                    f"Word '{entry.word}' has length {len(entry.word)}, "
                    f"expected {word_length}"
                )
            if entry.rank < 0:
                raise ValueError(f"Rank of '{entry.word}' must not be negative: {entry.rank}")

        self._entries: Tuple[WordEntry, ...] = tuple(entries)
        self.word_length = word_length
        self.common_cutoff = common_cutoff

    @classmethod
    def from_pairs(cls, pairs, word_length: int = DEFAULT_WORD_LENGTH, common_cutoff=None):
        """Build a store from (word, rank) pairs, e.g. a dict's items()."""
        return cls(
            [WordEntry(word, rank) for word, rank in pairs],
            word_length=word_length,
            common_cutoff=common_cutoff
        )

    def is_common(self, entry: WordEntry, cutoff: Optional[int] = None) -> bool:
        """Check entry against cutoff, or the store's own cutoff if None."""
        if cutoff is None:
            cutoff = self.common_cutoff
        if cutoff is None:
            return True
        return entry.rank < cutoff

    @property
    def words(self) -> List[str]:
        return [entry.word for entry in self._entries]

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def __repr__(self) -> str:
        return (
            f"WordStore({len(self._entries)} words, word_length={self.word_length}, "
            f"common_cutoff={self.common_cutoff})"
        )


def _is_flagged_line(line: str) -> bool:
    return line[:1] in ("+", "-")


def _data_lines(lines) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, stripped_line), skipping blanks and comments."""
    for number, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        yield number, line


def parse_word_lines(lines, word_length: int = DEFAULT_WORD_LENGTH) -> WordStore:
    """
    Parse word list lines into a WordStore.

    The format is chosen from the first data line. In the "+/-" format frequent
    words are ranked first (in file order), followed by the rare ones, and the
    number of frequent words becomes the store's common cutoff.

    Args:
        lines: Iterable of text lines
        word_length: Only words of this length are kept

    Returns:
        WordStore with deduplicated entries (first occurrence wins)

    Raises:
        ValueError: On a malformed line or if no valid word was found
    """
    data = list(_data_lines(lines))
    if not data:
        raise ValueError("Word list is empty")

    flagged = _is_flagged_line(data[0][1])
    seen = set()
    skipped = 0

    frequent: List[str] = []
    rare: List[str] = []
    ranked: List[WordEntry] = []

    for index, (number, line) in enumerate(data):
        if _is_flagged_line(line) != flagged:
            raise ValueError(f"Line {number}: mixed word list formats: '{line}'")

        if flagged:
            word = line[1:].strip().lower()
            rank = None
        else:
            fields = line.split()
            if len(fields) > 2:
                raise ValueError(f"Line {number}: expected 'word [rank]', got '{line}'")
            word = fields[0].lower()
            if len(fields) == 2:
                try:
                    rank = int(fields[1])
                except ValueError:
                    raise ValueError(f"Line {number}: invalid rank '{fields[1]}'") from None
                if rank < 0:
                    raise ValueError(f"Line {number}: rank must not be negative")
            else:
                rank = index

        if len(word) != word_length or not word.isalpha():
            skipped += 1
            continue
        if word in seen:
            log.debug("Line %d: duplicate word '%s' ignored", number, word)
            continue
        seen.add(word)

        if flagged:
            (frequent if line.startswith("+") else rare).append(word)
        else:
            ranked.append(WordEntry(word, rank))

    if skipped:
        log.debug("Skipped %d entries that are not %d-letter words", skipped, word_length)

    if flagged:
        entries = [WordEntry(w, i) for i, w in enumerate(frequent + rare)]
        common_cutoff = len(frequent)
    else:
        entries = ranked
        common_cutoff = None

    if not entries:
        raise ValueError(f"No valid {word_length}-letter words found")

    return WordStore(entries, word_length=word_length, common_cutoff=common_cutoff)


def load_dictionary(filepath: str | Path, word_length: int = DEFAULT_WORD_LENGTH) -> WordStore:
    """
    Load a ranked word list file.

    Args:
        filepath: Path to the word list file
        word_length: Only words of this length are kept

    Returns:
        WordStore loaded from the file

    Raises:
        FileNotFoundError: If the word list file doesn't exist
        ValueError: If the file is malformed or holds no valid words
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Word list file not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        try:
            store = parse_word_lines(f, word_length)
        except ValueError as e:
            raise ValueError(f"{filepath}: {e}") from None

    log.info("Loaded %d words from %s", len(store), filepath)
    return store


def get_word_list(
    custom_path: str | Path | None = None,
    word_length: int = DEFAULT_WORD_LENGTH
) -> WordStore:
    """
    Get the word store, using custom path or default location.

    Args:
        custom_path: Optional custom path to word list file.
                     If None, uses data/words.txt at the project root.
        word_length: Word length of the puzzle

    Returns:
        WordStore for the session
    """
    if custom_path:
        return load_dictionary(custom_path, word_length)

    default_path = Path(__file__).parent.parent / "data" / "words.txt"
    return load_dictionary(default_path, word_length)
