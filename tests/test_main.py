import logging

from main import build_session, main, make_argparser


def test_flags_override_settings(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("+banana\n+cherry\n-papaya\n", encoding="utf-8")
    args = make_argparser().parse_args([
        "--words", str(words), "-L", "6", "-n", "2", "--config", str(tmp_path / "none.json"),
    ])
    session = build_session(args)
    assert session.store.word_length == 6
    assert session.max_words == 2
    assert session.common_cutoff == 2
    assert session.constraints.word_length == 6


def test_log_volume_flags():
    parser = make_argparser()
    assert parser.parse_args([]).volume == logging.WARNING
    assert parser.parse_args(["-v"]).volume == logging.INFO
    assert parser.parse_args(["-D"]).volume == logging.DEBUG


def test_missing_word_list_exits_with_error(tmp_path):
    assert main(["--cli", "--words", str(tmp_path / "missing.txt")]) == 1
