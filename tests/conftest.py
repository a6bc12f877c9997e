import pytest

from dictionary import WordStore


@pytest.fixture
def scenario_store():
    return WordStore.from_pairs([("apple", 1), ("amble", 5), ("axiom", 9)])


@pytest.fixture
def store():
    # Deliberately not in rank order; "sweet"/"steel" share a rank
    return WordStore.from_pairs([
        ("crane", 3),
        ("sweet", 7),
        ("steel", 7),
        ("tweet", 12),
        ("otter", 20),
        ("lemon", 1),
        ("melon", 9),
        ("speed", 4),
        ("creep", 15),
        ("ember", 30),
    ], common_cutoff=10)
