import pytest

from rustlings.drills.errors import (
    CreationError,
    CreationErrorKind,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    generate_nametag_text,
    maybe_icecream,
    parse_pos_nonzero,
    total_cost,
)


@pytest.mark.parametrize(
    ("hour", "expected"),
    [(9, 5), (10, 5), (23, 0), (22, 0), (25, None)],
)
def test_check_icecream(hour, expected):
    assert maybe_icecream(hour) == expected


def test_raw_value():
    assert maybe_icecream(12) == 5


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


def test_item_quantity_empty():
    with pytest.raises(ValueError, match="empty string"):
        total_cost("")


def test_item_quantity_too_large_to_parse():
    with pytest.raises(ValueError, match="too large"):
        total_cost("2147483648")


def test_item_quantity_cost_overflows():
    with pytest.raises(OverflowError):
        total_cost("2147483647")


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger(-10)
    assert negative.value.kind is CreationErrorKind.NEGATIVE
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger(0)
    assert zero.value.kind is CreationErrorKind.ZERO


def test_creation_error_messages():
    assert str(CreationError(CreationErrorKind.NEGATIVE)) == "number is negative"
    assert str(CreationError(CreationErrorKind.ZERO)) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert info.value.creation is None
    assert str(info.value.parse_int) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert info.value.creation == CreationError(CreationErrorKind.NEGATIVE)
    assert info.value.parse_int is None


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert info.value.creation == CreationError(CreationErrorKind.ZERO)


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)
    assert parse_pos_nonzero("42").value == 42


def test_parse_accepts_leading_plus():
    assert parse_pos_nonzero("+7") == PositiveNonzeroInteger(7)


def test_parse_out_of_range():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("9223372036854775808")
    assert "too large" in str(info.value.parse_int)