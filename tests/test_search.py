import random

import pytest

from algobox.search import find_word, ternary_search, ternary_search_recursive

SOURCE_VALUES = [1] * 17 + [2, 3, 4, 10]


def test_source_example_finds_target():
    expected = SOURCE_VALUES.index(10)
    assert ternary_search(SOURCE_VALUES, 10) == expected
    assert ternary_search_recursive(SOURCE_VALUES, 10) == expected


@pytest.mark.parametrize("target", [5, 0, 11])
def test_absent_target_gives_none(target):
    assert ternary_search(SOURCE_VALUES, target) is None
    assert ternary_search_recursive(SOURCE_VALUES, target) is None


def test_duplicates_return_a_matching_index():
    iterative = ternary_search(SOURCE_VALUES, 1)
    recursive = ternary_search_recursive(SOURCE_VALUES, 1)
    assert SOURCE_VALUES[iterative] == 1
    assert SOURCE_VALUES[recursive] == 1


def test_empty_sequence():
    assert ternary_search([], 3) is None
    assert ternary_search_recursive([], 3) is None


def test_single_element():
    assert ternary_search([7], 7) == 0
    assert ternary_search([7], 8) is None
    assert ternary_search_recursive([7], 7) == 0
    assert ternary_search_recursive([7], 8) is None


def test_every_distinct_element_found():
    rng = random.Random(5)
    values = sorted(rng.sample(range(10_000), 200))
    for index, value in enumerate(values):
        assert ternary_search(values, value) == index
        assert ternary_search_recursive(values, value) == index


def test_iterative_and_recursive_agree():
    rng = random.Random(11)
    for _ in range(50):
        values = sorted(rng.sample(range(500), rng.randint(0, 80)))
        target = rng.randint(-5, 505)
        assert ternary_search(values, target) == ternary_search_recursive(values, target)


def test_find_word_locates_first_occurrence():
    paragraph = "the cat sat on the mat"
    index = find_word(paragraph, "the")
    assert index == 0
    later = find_word(paragraph, "mat")
    assert paragraph[later : later + 3] == "mat"
    assert later == paragraph.index("mat")


def test_find_word_missing():
    assert find_word("hello world", "planet") is None


def test_find_word_empty_paragraph_raises():
    with pytest.raises(ValueError):
        find_word("", "anything")