"""
Session module for Wordle Filter.

Turns user commands into ConstraintSet mutations and builds the display model
shared by the terminal and GUI front ends.

Command grammar (several commands may be given on one line):
- 3+a   : letter 3 must be 'a' (green)
- 3-ab  : letter 3 must not be 'a' or 'b' (yellow, implies the letter occurs)
- +ee   : word must contain the letters (repeat a letter to require it twice)
- -xyz  : word must not contain the letters (gray)
- reset : clear all constraints
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from constraints import ConstraintError, ConstraintSet
from dictionary import WordEntry, WordStore
from solver import evaluate

log = logging.getLogger(__name__)

HELP_TEXT = (
    "Commands: <n>+<c> letter n must be c | <n>-<c> letter n must not be c | "
    "+<c> word must contain c | -<c> word must not contain c | reset | quit"
)

STYLE_SINGLE = "single"
STYLE_COMMON = "common"
STYLE_RARE = "rare"

_COMMAND_RE = re.compile(r'^(\d)?([+-])(\S+)$')


class CommandError(ValueError):
    """Input that does not follow the command grammar."""


class CommandKind(Enum):
    REQUIRE_AT = "require_at"
    FORBID_AT = "forbid_at"
    REQUIRE_CONTAINS = "require_contains"
    EXCLUDE = "exclude"
    RESET = "reset"
    QUIT = "quit"
    HELP = "help"


@dataclass(frozen=True)
class Command:
    """
    One parsed user command.

    Attributes:
        kind: What to do
        position: 0-based position for REQUIRE_AT / FORBID_AT
        chars: Letters the command applies to, in input order
    """
    kind: CommandKind
    position: Optional[int] = None
    chars: str = ""


_KEYWORDS = {
    "reset": CommandKind.RESET,
    "!": CommandKind.RESET,
    "quit": CommandKind.QUIT,
    "q": CommandKind.QUIT,
    "exit": CommandKind.QUIT,
    "help": CommandKind.HELP,
    "?": CommandKind.HELP,
}


def parse_command(text: str) -> Command:
    """
    Parse a single command token.

    Positions are 1-based in the grammar and 0-based in the result. Whether a
    position fits the word is checked by the ConstraintSet when applied.

    Raises:
        CommandError: If text does not follow the grammar
    """
    token = text.strip().lower()
    if token in _KEYWORDS:
        return Command(_KEYWORDS[token])

    match = _COMMAND_RE.match(token)
    if match is None:
        raise CommandError(f"Invalid command '{text.strip()}'")

    digit, sign, chars = match.groups()
    if digit is None:
        kind = CommandKind.REQUIRE_CONTAINS if sign == "+" else CommandKind.EXCLUDE
        return Command(kind, chars=chars)

    if sign == "+" and len(chars) != 1:
        raise CommandError(f"Position {digit} can only be one letter, got '{chars}'")
    kind = CommandKind.REQUIRE_AT if sign == "+" else CommandKind.FORBID_AT
    return Command(kind, position=int(digit) - 1, chars=chars)


def parse_line(line: str) -> List[Command]:
    """Parse a whitespace separated line of commands."""
    return [parse_command(token) for token in line.split()]


def apply_command(constraints: ConstraintSet, command: Command) -> None:
    """
    Apply a constraint command to a ConstraintSet.

    Raises:
        ConstraintError: If the ConstraintSet rejects the command
    """
    if command.kind == CommandKind.RESET:
        constraints.reset()
        return

    for char in command.chars:
        if command.kind == CommandKind.REQUIRE_AT:
            constraints.require_at(command.position, char)
        elif command.kind == CommandKind.FORBID_AT:
            constraints.forbid_at(command.position, char)
        elif command.kind == CommandKind.REQUIRE_CONTAINS:
            constraints.require_contains(char)
        elif command.kind == CommandKind.EXCLUDE:
            constraints.exclude_char(char)


@dataclass
class SessionView:
    """
    What a front end shows after each command.

    Attributes:
        description: Lines describing the active filter
        entries: Shown matches with their display style
        total: Number of matching words before truncation
        suggestions: Starting words, only set while no filter is active
    """
    description: List[str] = field(default_factory=list)
    entries: List[Tuple[WordEntry, str]] = field(default_factory=list)
    total: int = 0
    suggestions: List[str] = field(default_factory=list)


class Session:
    """
    Interactive filter session over one word store.

    Each input line is applied atomically: if any command on the line is
    rejected, none of them take effect. help and quit act after the
    constraint commands of their line have been applied.
    """

    def __init__(
        self,
        store: WordStore,
        max_words: int = 10,
        common_cutoff: Optional[int] = None,
        starting_words: Sequence[str] = ()
    ):
        self.store = store
        self.max_words = max_words
        self.common_cutoff = common_cutoff if common_cutoff is not None else store.common_cutoff
        self.starting_words = list(starting_words)
        self.constraints = ConstraintSet(store.word_length)
        self.finished = False
        self.last_error = False

    def handle(self, line: str) -> str:
        """
        Apply one line of user input.

        Returns:
            Status message for the user (empty if there is nothing to say)
        """
        self.last_error = False
        try:
            commands = parse_line(line)
        except CommandError as e:
            self.last_error = True
            return f"{e}. {HELP_TEXT}"

        if not commands:
            return ""

        updated = self.constraints.copy()
        keywords = set()
        for command in commands:
            if command.kind in (CommandKind.QUIT, CommandKind.HELP):
                keywords.add(command.kind)
                continue
            try:
                apply_command(updated, command)
            except ConstraintError as e:
                log.info("Rejected command %s: %s", command, e)
                self.last_error = True
                return f"Rejected: {e}"

        self.constraints = updated
        if CommandKind.QUIT in keywords:
            self.finished = True
            return "Bye"
        if CommandKind.HELP in keywords:
            return HELP_TEXT
        return ""

    def reset(self) -> None:
        self.constraints.reset()

    def matches(self) -> List[WordEntry]:
        return evaluate(self.store, self.constraints)

    def style_for(self, entry: WordEntry, match_count: int) -> str:
        if match_count == 1:
            return STYLE_SINGLE
        if self.store.is_common(entry, self.common_cutoff):
            return STYLE_COMMON
        return STYLE_RARE

    def view(self) -> SessionView:
        """Build the display model for the current constraints."""
        if self.constraints.is_empty() and self.starting_words:
            return SessionView(total=len(self.store), suggestions=list(self.starting_words))

        found = self.matches()
        shown = found[:self.max_words]
        return SessionView(
            description=self.constraints.describe(),
            entries=[(entry, self.style_for(entry, len(found))) for entry in shown],
            total=len(found)
        )
