"""
Terminal front end for Wordle Filter.

Reads one line of commands at a time, re-evaluates and prints the matches.
"""

import sys
from typing import List, TextIO

from session import HELP_TEXT, STYLE_RARE, STYLE_SINGLE, Session, SessionView

# ANSI colors
GREEN = "\033[32m"
RED = "\033[31m"
DARK_GREY = "\033[90m"
RESET = "\033[0m"


def _colored(text: str, color: str, use_color: bool) -> str:
    if not use_color:
        return text
    return f"{color}{text}{RESET}"


def render(view: SessionView, use_color: bool = True) -> List[str]:
    """Format a SessionView as output lines."""
    if view.suggestions:
        return ["No filter defined yet. Good starting words:"] + [f"- {w}" for w in view.suggestions]

    lines = [""]
    if not view.entries:
        lines.append(_colored("No matches", RED, use_color))
    else:
        header = "Matches:"
        if view.total > len(view.entries):
            header = f"Matches ({len(view.entries)} of {view.total}):"
        lines.append(header)
        for entry, style in view.entries:
            text = f"- {entry.word}"
            if style == STYLE_SINGLE:
                text = _colored(text, GREEN, use_color)
            elif style == STYLE_RARE:
                text = _colored(text, DARK_GREY, use_color)
            lines.append(text)

    if view.description:
        lines.append("Filter:")
        lines.extend(view.description)
    return lines


def run(session: Session, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout,
        use_color: bool = True) -> None:
    """Run the read-evaluate-display loop until quit or end of input."""
    def show(lines):
        for line in lines:
            print(line, file=stdout)

    show(render(session.view(), use_color))
    show([HELP_TEXT])

    while not session.finished:
        print("> ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            break
        message = session.handle(line)
        if session.finished:
            break
        show(render(session.view(), use_color))
        if message:
            show([message])
