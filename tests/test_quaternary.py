import pytest

from labworks.quaternary import Four


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ("0", "0", "0"),
        ("1", "0", "1"),
        ("0", "1", "1"),
        ("2", "0", "2"),
        ("0", "2", "2"),
        ("1", "1", "2"),
        ("3", "0", "3"),
        ("0", "3", "3"),
        ("1", "2", "3"),
        ("2", "1", "3"),
        ("3", "1", "10"),
        ("1", "3", "10"),
        ("2", "3", "11"),
        ("3", "2", "11"),
        ("3", "3", "12"),
        ("11", "3", "20"),
        ("123", "3", "132"),
        ("111111", "3", "111120"),
        ("111111", "333333", "1111110"),
        ("333333", "1", "1000000"),
        ("333333", "2", "1000001"),
        ("333333", "3", "1000002"),
    ],
)
def test_add(left, right, expected):
    assert Four(left) + Four(right) == Four(expected)


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ("0", "0", "0"),
        ("2", "0", "2"),
        ("3", "0", "3"),
        ("10", "0", "10"),
        ("10", "1", "3"),
        ("10", "2", "2"),
        ("10", "3", "1"),
        ("10", "10", "0"),
        ("321", "10", "311"),
        ("321", "12", "303"),
        ("321", "11", "310"),
        ("311231", "3312", "301313"),
        ("1000", "1", "333"),
        ("1000", "2", "332"),
    ],
)
def test_subtract(left, right, expected):
    assert Four(left) - Four(right) == Four(expected)


@pytest.mark.parametrize(
    "left, right, expected",
    [("1000", "2", True), ("2", "2", False), ("0", "2", False)],
)
def test_greater_than(left, right, expected):
    assert (Four(left) > Four(right)) is expected


@pytest.mark.parametrize(
    "left, right, expected",
    [("0", "2", True), ("2", "2", False), ("3", "2", False)],
)
def test_lower_than(left, right, expected):
    assert (Four(left) < Four(right)) is expected


@pytest.mark.parametrize(
    "left, right, expected",
    [("23", "22", True), ("22", "22", True), ("21", "22", False)],
)
def test_greater_than_eq(left, right, expected):
    assert (Four(left) >= Four(right)) is expected


@pytest.mark.parametrize(
    "left, right, expected",
    [("22", "22", True), ("13", "22", True), ("23", "22", False)],
)
def test_lower_than_eq(left, right, expected):
    assert (Four(left) <= Four(right)) is expected


@pytest.mark.parametrize(
    "left, right, expected",
    [("3", "2", False), ("22", "22", True), ("1", "2", False)],
)
def test_equal(left, right, expected):
    assert (Four(left) == Four(right)) is expected


def test_operands_are_not_changed():
    left = Four("3")
    right = Four("1")
    _ = left + right
    assert str(left) == "3"
    assert str(right) == "1"


def test_default_is_zero():
    assert Four() == Four("0")


def test_from_sequence_of_characters():
    assert Four(["1", "2", "3"]) == Four("123")


@pytest.mark.parametrize("text", ["4", "12a", "-1", " 1"])
def test_incorrect_character(text):
    with pytest.raises(ValueError, match="Incorrect character"):
        Four(text)


def test_subtract_larger_raises():
    with pytest.raises(ValueError):
        Four("2") - Four("10")


def test_repeated():
    assert Four.repeated(3, "1") == Four("111")


def test_repeated_incorrect_character():
    with pytest.raises(ValueError):
        Four.repeated(2, "7")


def test_str_and_repr_round_trip():
    number = Four("3012")
    assert Four(str(number)) == number
    assert repr(number) == "Four('3012')"


def test_hash_consistent_with_equality():
    assert hash(Four("22")) == hash(Four("22"))
    assert len({Four("22"), Four("22"), Four("3")}) == 2