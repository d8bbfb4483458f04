import pytest

from rsaid.id.checksum import compute_check_digit, verify_check_digit
from rsaid.id.errors import InvalidInputError


def test_compute_check_digit() -> None:
    assert compute_check_digit("211111500086") == 4
    assert compute_check_digit("930703548908") == 7
    assert compute_check_digit("720101507508") == 5
    assert compute_check_digit("710413480008") == 8
    assert compute_check_digit("710413480018") == 7


def test_compute_check_digit_wraps_to_zero() -> None:
    # Digit sum of 0 must give 0, not 10
    assert compute_check_digit("000000000000") == 0


def test_compute_check_digit_rejects_bad_input() -> None:
    for bad_data in ("", "21111150008", "2111115000864", "21111150008a", "２１１１１１５０００８６", "21111150008٦"):
        with pytest.raises(InvalidInputError):
            compute_check_digit(bad_data)


def test_invalid_input_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        compute_check_digit("foo")


def test_verify_check_digit() -> None:
    assert verify_check_digit("2111115000864")
    assert verify_check_digit("9307035489087")
    assert not verify_check_digit("9307035489086")
    assert not verify_check_digit("7201015075086")


def test_verify_check_digit_soft_fails() -> None:
    for bad_data in (None, "", "foo", "930703548908", "93070354890877", "930703548908x"):
        assert verify_check_digit(bad_data) is False
