import pytest

from tagcloud.errors import InvalidArgumentError
from tagcloud.ranking import TaggedWord, rank_words, top_words


def pairs(cloud):
    return [(t.word, t.size_group) for t in cloud]


def test_top_words_keeps_most_frequent_in_alphabetical_order():
    table = {"cat": 2, "sat": 1, "on": 1, "mat": 1, "ran": 1}
    cloud = top_words(table, 3, 1)
    assert pairs(cloud) == [("cat", 2), ("mat", 1), ("on", 1)]


def test_ties_are_broken_alphabetically_before_truncation():
    table = {"zeta": 5, "beta": 3, "alpha": 3, "gamma": 3}
    assert [w for w, _ in rank_words(table)] == ["zeta", "alpha", "beta", "gamma"]
    assert pairs(top_words(table, 2, 1)) == [("alpha", 3), ("zeta", 5)]


def test_size_group_is_count_floor_divided_by_group_size():
    table = {"a": 45, "b": 20, "c": 19, "d": 7}
    cloud = top_words(table, 10, 20)
    assert pairs(cloud) == [("a", 2), ("b", 1), ("c", 0), ("d", 0)]


def test_fewer_words_than_requested_keeps_all():
    cloud = top_words({"one": 1}, 50, 1)
    assert cloud == [TaggedWord("one", 1)]


def test_zero_words_to_keep_gives_empty_cloud():
    assert top_words({"one": 1}, 0, 1) == []


def test_empty_table_gives_empty_cloud():
    assert top_words({}, 5, 3) == []


@pytest.mark.parametrize("num_words, group_size", [(-1, 1), (3, 0), (3, -2), (2.5, 1), (True, 1)])
def test_invalid_arguments_are_rejected(num_words, group_size):
    with pytest.raises(InvalidArgumentError):
        top_words({"a": 1}, num_words, group_size)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        top_words({}, 1, 0)
