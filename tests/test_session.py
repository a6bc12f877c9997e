import io

import pytest

from cli import render, run
from session import (
    STYLE_COMMON,
    STYLE_RARE,
    STYLE_SINGLE,
    Command,
    CommandError,
    CommandKind,
    Session,
    parse_command,
    parse_line,
)


@pytest.mark.parametrize("text, expected", [
    ("1+c", Command(CommandKind.REQUIRE_AT, 0, "c")),
    ("5-ab", Command(CommandKind.FORBID_AT, 4, "ab")),
    ("+ee", Command(CommandKind.REQUIRE_CONTAINS, None, "ee")),
    ("-XYZ", Command(CommandKind.EXCLUDE, None, "xyz")),
    ("0+a", Command(CommandKind.REQUIRE_AT, -1, "a")),
    ("reset", Command(CommandKind.RESET)),
    ("!", Command(CommandKind.RESET)),
    ("q", Command(CommandKind.QUIT)),
    ("?", Command(CommandKind.HELP)),
])
def test_parse_command(text, expected):
    assert parse_command(text) == expected


@pytest.mark.parametrize("text", ["a", "1a", "+", "12+a", "1+ab", "*"])
def test_parse_command_rejects(text):
    with pytest.raises(CommandError):
        parse_command(text)


def test_parse_line():
    assert parse_line(" 1+c  -xy ") == [
        Command(CommandKind.REQUIRE_AT, 0, "c"),
        Command(CommandKind.EXCLUDE, None, "xy"),
    ]
    assert parse_line("") == []


def words(session):
    return [entry.word for entry in session.matches()]


def test_handle_applies_commands(scenario_store):
    session = Session(scenario_store)
    assert session.handle("1+a") == ""
    assert words(session) == ["apple", "amble", "axiom"]
    session.handle("2-x")
    assert words(session) == []
    session.handle("reset")
    session.handle("+pp")
    assert words(session) == ["apple"]


def test_handle_is_atomic_per_line(scenario_store):
    session = Session(scenario_store)
    session.handle("+p")
    message = session.handle("-m -p")
    assert message.startswith("Rejected")
    assert session.last_error
    assert session.constraints.containment.excluded == set()
    assert words(session) == ["apple"]


def test_handle_rejects_bad_position(scenario_store):
    session = Session(scenario_store)
    message = session.handle("6+a")
    assert message.startswith("Rejected")
    assert session.constraints.is_empty()


def test_handle_reports_invalid_input(scenario_store):
    session = Session(scenario_store)
    message = session.handle("hello")
    assert "Invalid command" in message
    assert session.last_error
    assert session.constraints.is_empty()


def test_quit_and_help(scenario_store):
    session = Session(scenario_store)
    assert session.handle("help").startswith("Commands")
    assert not session.finished
    session.handle("quit")
    assert session.finished


def test_view_suggests_starting_words_without_filter(scenario_store):
    session = Session(scenario_store, starting_words=["slate", "crane"])
    view = session.view()
    assert view.suggestions == ["slate", "crane"]
    assert view.entries == []
    assert view.total == 3


def test_view_without_starting_words_lists_everything(scenario_store):
    session = Session(scenario_store)
    view = session.view()
    assert view.suggestions == []
    assert [e.word for e, _ in view.entries] == ["apple", "amble", "axiom"]


def test_view_styles_and_truncation(store):
    session = Session(store, max_words=3)
    session.handle("+e")
    view = session.view()
    assert view.total == 10
    assert [(e.word, style) for e, style in view.entries] == [
        ("lemon", STYLE_COMMON),
        ("crane", STYLE_COMMON),
        ("speed", STYLE_COMMON),
    ]
    assert view.description == ["- word must contain: e"]

    session.handle("-s 1-m")
    view = session.view()
    assert [(e.word, style) for e, style in view.entries] == [
        ("lemon", STYLE_COMMON),
        ("ember", STYLE_RARE),
    ]


def test_single_match_style(store):
    session = Session(store)
    session.handle("1+o")
    view = session.view()
    assert [(e.word, style) for e, style in view.entries] == [("otter", STYLE_SINGLE)]


def test_common_cutoff_override(store):
    session = Session(store, common_cutoff=2)
    session.handle("+e")
    styles = [style for _, style in session.view().entries]
    assert styles[0] == STYLE_COMMON
    assert set(styles[1:]) == {STYLE_RARE}


def test_render_plain(scenario_store):
    session = Session(scenario_store)
    session.handle("-z")
    lines = render(session.view(), use_color=False)
    assert lines == ["", "Matches:", "- apple", "- amble", "- axiom",
                     "Filter:", "- word must not contain: z"]


def test_render_no_matches(scenario_store):
    session = Session(scenario_store)
    session.handle("+q")
    assert "No matches" in render(session.view(), use_color=False)


def test_run_loop(scenario_store):
    session = Session(scenario_store, starting_words=["slate"])
    stdin = io.StringIO("1+a\n+pp\nbogus\nquit\n")
    stdout = io.StringIO()
    run(session, stdin=stdin, stdout=stdout, use_color=False)
    output = stdout.getvalue()
    assert "Good starting words" in output
    assert "- apple" in output
    assert "Invalid command 'bogus'" in output
    assert session.finished


def test_run_stops_at_end_of_input(scenario_store):
    session = Session(scenario_store)
    run(session, stdin=io.StringIO("+p\n"), stdout=io.StringIO(), use_color=False)
    assert not session.finished
    assert session.constraints.containment.required["p"] == 1


def test_yellow_after_gray_of_same_letter(scenario_store):
    session = Session(scenario_store)
    session.handle("-x")
    assert session.handle("2-x") == ""
    assert not session.last_error
    assert session.constraints.must_not_be() == {1: ["x"]}
    assert session.constraints.containment.required["x"] == 0
    assert words(session) == ["apple", "amble"]


def test_help_on_a_line_still_applies_its_commands(scenario_store):
    session = Session(scenario_store)
    assert session.handle("+pp ?") == session.handle("help")
    assert not session.last_error
    assert session.constraints.containment.required["p"] == 2
    assert words(session) == ["apple"]


def test_quit_on_a_line_still_applies_its_commands(scenario_store):
    session = Session(scenario_store)
    session.handle("q 1+a")
    assert session.finished
    assert session.constraints.must_be() == {0: "a"}


def test_help_with_rejected_command_is_an_error(scenario_store):
    session = Session(scenario_store)
    session.handle("+p")
    message = session.handle("? -p")
    assert message.startswith("Rejected")
    assert session.last_error
    assert session.constraints.containment.excluded == set()
