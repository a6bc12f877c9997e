"""
Solver module for Wordle Filter.

Evaluates a ConstraintSet against the word store and returns the surviving
words, most frequent first.
"""

from collections import Counter
from typing import List

from constraints import ConstraintSet, ContainmentConstraint, PositionConstraint, PositionKind
from dictionary import WordEntry, WordStore


def evaluate(store: WordStore, constraints: ConstraintSet) -> List[WordEntry]:
    """
    Filter the store down to the words matching every constraint.

    Filtering rules:
    1. MUST_BE positions must match exactly
    2. MUST_NOT_BE positions must not hold the forbidden letter
    3. Each required letter must occur at least its required number of times
    4. Excluded letters must not occur anywhere

    Survivors are sorted by rank; the sort is stable, so equal ranks keep
    store order. Neither argument is modified.

    Args:
        store: Word store to filter
        constraints: Constraints to apply

    Returns:
        New list of matching entries, ascending by rank
    """
    # Snapshot once instead of per word
    positions = constraints.position_constraints
    containment = constraints.containment
    word_length = constraints.word_length

    candidates = [
        entry for entry in store
        if _matches(entry.word, word_length, positions, containment)
    ]
    candidates.sort(key=lambda entry: entry.rank)
    return candidates


def matches(word: str, constraints: ConstraintSet) -> bool:
    """
    Check if a single word matches the constraint set.

    Args:
        word: Word to check
        constraints: Constraints to match against

    Returns:
        True if word matches all constraints, False otherwise
    """
    return _matches(
        word,
        constraints.word_length,
        constraints.position_constraints,
        constraints.containment
    )


def _matches(
    word: str,
    word_length: int,
    positions: List[PositionConstraint],
    containment: ContainmentConstraint
) -> bool:
    if len(word) != word_length:
        return False

    # Rules 1 and 2: position constraints
    for c in positions:
        if c.kind == PositionKind.MUST_BE:
            if word[c.position] != c.char:
                return False
        elif word[c.position] == c.char:
            return False

    word_counts = Counter(word)

    # Rule 3: minimum letter counts
    for letter, count in containment.required.items():
        if word_counts[letter] < count:
            return False

    # Rule 4: excluded letters
    for letter in containment.excluded:
        if word_counts[letter] > 0:
            return False

    return True
