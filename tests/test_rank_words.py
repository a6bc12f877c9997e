from rank_words import is_valid_word, main, rank_words, read_words


def test_is_valid_word():
    assert is_valid_word(" Crane\n")
    assert not is_valid_word("cranes")
    assert not is_valid_word("cr4ne")
    assert is_valid_word("banana", length=6)


def test_rank_words_orders_known_then_unknown():
    ranked = rank_words(["zesty", "apple", "crane", "amble"], ["crane", "other", "apple"])
    assert ranked == [("crane", 0), ("apple", 2), ("amble", 3), ("zesty", 4)]


def test_main_writes_ranked_list(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("Apple\ncrane\ncranes\napple\n", encoding="utf-8")
    freq = tmp_path / "freq.txt"
    freq.write_text("# most frequent first\ncrane 9000\nthose\n", encoding="utf-8")
    output = tmp_path / "ranked.txt"

    assert main([str(words), str(freq), str(output)]) == 0
    assert read_words(output, 5) == ["crane", "apple"]
    assert output.read_text(encoding="utf-8").splitlines()[1:] == ["crane 0", "apple 2"]


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "a.txt"), str(tmp_path / "b.txt")]) == 1
