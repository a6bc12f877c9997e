"""
Constraints module for Wordle Filter.

Holds the accumulated filter state of a session: position constraints
(green / yellow letters) and containment constraints (letters that must or
must not occur anywhere in the word).

Every mutation validates first; a rejected mutation leaves the state as it was.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set

from dictionary import DEFAULT_WORD_LENGTH


class ConstraintError(ValueError):
    """Base class for rejected constraint mutations."""


class InvalidPosition(ConstraintError):
    """Position index outside the configured word length."""


class InvalidCharacter(ConstraintError):
    """Constraint character is not a single letter."""


class ContradictoryConstraint(ConstraintError):
    """A character would be both required and excluded."""


class PositionKind(Enum):
    """Kind of a position constraint"""
    MUST_BE = "must_be"
    MUST_NOT_BE = "must_not_be"


@dataclass(frozen=True)
class PositionConstraint:
    position: int
    kind: PositionKind
    char: str


@dataclass
class ContainmentConstraint:
    """
    Whole-word letter constraints.

    Attributes:
        required: Minimum occurrence count per letter {letter: count}
        excluded: Letters that must not occur at all
    """
    required: Counter = field(default_factory=Counter)
    excluded: Set[str] = field(default_factory=set)

    @classmethod
    def from_counts(
        cls,
        required: Optional[Dict[str, int]] = None,
        excluded: Iterable[str] = ()
    ) -> 'ContainmentConstraint':
        """Build directly from counts; the result is validated."""
        containment = cls(Counter(required or {}), set(excluded))
        containment.validate()
        return containment

    def validate(self) -> None:
        """
        Raises:
            ContradictoryConstraint: If a letter is both required and excluded
        """
        for letter in sorted(self.excluded):
            if self.required[letter] > 0:
                raise ContradictoryConstraint(
                    f"Letter '{letter}' is required {self.required[letter]} time(s) "
                    f"but also excluded from the word"
                )

    def copy(self) -> 'ContainmentConstraint':
        return ContainmentConstraint(Counter(self.required), set(self.excluded))

    def is_empty(self) -> bool:
        return not +self.required and not self.excluded


def normalize_char(char: str) -> str:
    """
    Validate and lowercase a constraint character.

    Raises:
        InvalidCharacter: If char is not a single alphabetic character
    """
    if not isinstance(char, str) or len(char) != 1 or not char.isalpha():
        raise InvalidCharacter(f"Expected a single letter, got {char!r}")
    return char.lower()


class ConstraintSet:
    """
    Accumulated filter state for one puzzle.

    Position constraints are kept as a list: at most one MUST_BE per position
    (last write wins), any number of distinct MUST_NOT_BE per position.

    Note: forbid_at() also requires the letter somewhere in the word, even
    when the same letter is already placed by require_at() at another position.
    A word therefore needs the letter only once to satisfy both. This is the
    accepted behavior for a letter that is green in one place and yellow in
    another; pass implies_present=False to record a bare position exclusion.
    """

    def __init__(self, word_length: int = DEFAULT_WORD_LENGTH):
        if word_length < 1:
            raise ValueError(f"Word length must be positive, got {word_length}")
        self.word_length = word_length
        self._positions: List[PositionConstraint] = []
        self._containment = ContainmentConstraint()

    @classmethod
    def build(
        cls,
        word_length: int = DEFAULT_WORD_LENGTH,
        positions: Iterable[PositionConstraint] = (),
        containment: Optional[ContainmentConstraint] = None
    ) -> 'ConstraintSet':
        """
        Construct a set directly from its parts.

        Positions are applied through require_at / forbid_at(implies_present=False)
        so they get the same validation as interactive input.
        """
        constraints = cls(word_length)
        for c in positions:
            if c.kind == PositionKind.MUST_BE:
                constraints.require_at(c.position, c.char)
            else:
                constraints.forbid_at(c.position, c.char, implies_present=False)
        if containment is not None:
            containment.validate()
            constraints._containment = containment.copy()
        return constraints

    # === Views ===

    @property
    def position_constraints(self) -> List[PositionConstraint]:
        return list(self._positions)

    @property
    def containment(self) -> ContainmentConstraint:
        return self._containment.copy()

    def must_be(self) -> Dict[int, str]:
        """Position -> letter for every MUST_BE constraint."""
        return {
            c.position: c.char for c in self._positions
            if c.kind == PositionKind.MUST_BE
        }

    def must_not_be(self) -> Dict[int, List[str]]:
        """Position -> sorted letters for every MUST_NOT_BE constraint."""
        result: Dict[int, List[str]] = {}
        for c in self._positions:
            if c.kind == PositionKind.MUST_NOT_BE:
                result.setdefault(c.position, []).append(c.char)
        return {pos: sorted(chars) for pos, chars in result.items()}

    def is_empty(self) -> bool:
        return not self._positions and self._containment.is_empty()

    def copy(self) -> 'ConstraintSet':
        other = ConstraintSet(self.word_length)
        other._positions = list(self._positions)
        other._containment = self._containment.copy()
        return other

    # === Mutations ===

    def _check_position(self, position: int) -> None:
        if isinstance(position, bool) or not isinstance(position, int):
            raise InvalidPosition(f"Position must be an integer, got {position!r}")
        if not 0 <= position < self.word_length:
            raise InvalidPosition(
                f"Position {position} is outside a {self.word_length}-letter word"
            )

    def require_at(self, position: int, char: str) -> None:
        """
        Record that the letter at position must be char (green).

        Replaces an earlier MUST_BE for the same position.

        Raises:
            InvalidPosition: If position is outside the word
            InvalidCharacter: If char is not a single letter
        """
        self._check_position(position)
        char = normalize_char(char)

        self._positions = [
            c for c in self._positions
            if not (c.position == position and c.kind == PositionKind.MUST_BE)
        ]
        self._positions.append(PositionConstraint(position, PositionKind.MUST_BE, char))

    def forbid_at(self, position: int, char: str, implies_present: bool = True) -> None:
        """
        Record that the letter at position must not be char (yellow).

        A yellow letter is in the word, just elsewhere, so by default the
        letter is also required to occur at least once. A letter that is
        already required keeps its count. A letter already excluded by
        exclude_char() is known to be absent, so only the position exclusion
        is recorded.

        Args:
            position: 0-based index in the word
            char: Letter excluded from that position
            implies_present: If False, only the position exclusion is recorded

        Raises:
            InvalidPosition: If position is outside the word
            InvalidCharacter: If char is not a single letter
        """
        self._check_position(position)
        char = normalize_char(char)

        constraint = PositionConstraint(position, PositionKind.MUST_NOT_BE, char)
        if constraint not in self._positions:
            self._positions.append(constraint)

        if char in self._containment.excluded:
            return
        if implies_present and self._containment.required[char] == 0:
            self._containment.required[char] = 1

    def require_contains(self, char: str) -> None:
        """
        Require one more occurrence of char anywhere in the word.

        Calling this twice for 't' requires at least two 't's.

        Raises:
            InvalidCharacter: If char is not a single letter
            ContradictoryConstraint: If char is excluded
        """
        char = normalize_char(char)
        if char in self._containment.excluded:
            raise ContradictoryConstraint(
                f"Letter '{char}' is excluded from the word, it cannot be required"
            )
        self._containment.required[char] += 1

    def exclude_char(self, char: str) -> None:
        """
        Forbid char anywhere in the word (gray).

        Raises:
            InvalidCharacter: If char is not a single letter
            ContradictoryConstraint: If char is required
        """
        char = normalize_char(char)
        if self._containment.required[char] > 0:
            raise ContradictoryConstraint(
                f"Letter '{char}' is required {self._containment.required[char]} "
                f"time(s), it cannot be excluded"
            )
        self._containment.excluded.add(char)

    def reset(self) -> None:
        """Clear all constraints."""
        self._positions = []
        self._containment = ContainmentConstraint()

    # === Display ===

    def describe(self) -> List[str]:
        """Human readable lines, one per active filter."""
        lines = []
        must_be = self.must_be()
        must_not_be = self.must_not_be()
        for pos in range(self.word_length):
            if pos in must_be:
                lines.append(f"- char {pos + 1} must be {must_be[pos]}")
            if pos in must_not_be:
                lines.append(f"- char {pos + 1} must not be {', '.join(must_not_be[pos])}")

        required = sorted(self._containment.required.elements())
        if required:
            lines.append(f"- word must contain: {', '.join(required)}")
        if self._containment.excluded:
            lines.append(
                f"- word must not contain: {', '.join(sorted(self._containment.excluded))}"
            )
        return lines

    def __repr__(self) -> str:
        return (
            f"ConstraintSet(word_length={self.word_length}, "
            f"positions={self._positions}, containment={self._containment})"
        )
