import pytest

from algobox.hashing import ChainedHashTable


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        ChainedHashTable(0)


@pytest.mark.parametrize("value", [0, 5, 27, 99, 1234])
def test_hash_of_non_negative_is_in_range_and_consistent(value):
    table = ChainedHashTable(10)
    h = table.hash(value)
    assert 0 <= h < 10
    assert (value - h) % 10 == 0


def test_hash_of_negative_keeps_sign():
    table = ChainedHashTable(10)
    assert table.hash(-13) == -3


def test_added_values_are_found():
    table = ChainedHashTable(7)
    values = [3, 10, 17, 4, -11, 0]
    for value in values:
        table.add(value)
    assert all(table.contains(value) for value in values)
    assert not table.contains(24)
    assert not table.contains(5)


def test_in_operator_matches_contains():
    table = ChainedHashTable(5)
    table.add(12)
    assert 12 in table
    assert 7 not in table


def test_chain_keeps_insertion_order():
    table = ChainedHashTable(10)
    for value in (13, 3, 23):
        table.add(value)
    assert table.bucket(3) == [13, 3, 23]
    assert table.bucket(4) == []


def test_negative_value_goes_to_absolute_bucket():
    table = ChainedHashTable(10)
    table.add(-13)
    assert table.bucket(abs(table.hash(-13))) == [-13]
    assert table.contains(-13)


def test_bucket_out_of_range():
    table = ChainedHashTable(4)
    with pytest.raises(IndexError):
        table.bucket(4)
    with pytest.raises(IndexError):
        table.bucket(-1)


def test_bucket_returns_copy():
    table = ChainedHashTable(3)
    table.add(1)
    chain = table.bucket(1)
    chain.append(99)
    assert table.bucket(1) == [1]


def test_describe_format():
    table = ChainedHashTable(3)
    table.add(1)
    table.add(4)
    assert table.describe() == (
        "Key 0 is empty\n"
        "Key 1 has values = 1 4\n"
        "Key 2 is empty\n"
    )


def test_describe_has_one_line_per_bucket():
    table = ChainedHashTable(8)
    for value in range(20):
        table.add(value)
    lines = table.describe().splitlines()
    assert len(lines) == 8
    assert all(line.startswith(f"Key {key} ") for key, line in enumerate(lines))