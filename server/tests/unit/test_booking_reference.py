"""Property-based tests for reference generation and status validation."""

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from goglobe.models.booking import BookingStatus
from goglobe.services.booking_service import (
    REFERENCE_ALPHABET,
    InvalidStatusError,
    generate_reference,
    validate_status,
)


def test_alphabet_is_ascii_letters_and_digits():
    assert len(REFERENCE_ALPHABET) == 62
    assert set(REFERENCE_ALPHABET) == set(string.ascii_letters + string.digits)


@given(st.integers(min_value=0, max_value=50))
def test_default_reference_shape(_):
    reference = generate_reference()

    assert len(reference) == 11
    assert set(reference) <= set(REFERENCE_ALPHABET)


@given(st.integers(min_value=1, max_value=62))
def test_reference_symbols_do_not_repeat(length):
    reference = generate_reference(length)

    assert len(reference) == length
    assert len(set(reference)) == length


@given(st.sampled_from([1, 2, 3]))
def test_known_statuses_are_accepted(value):
    assert validate_status(value) == BookingStatus(value)


@given(st.integers().filter(lambda v: v not in (1, 2, 3)))
def test_out_of_range_integers_are_rejected(value):
    with pytest.raises(InvalidStatusError):
        validate_status(value)


@given(st.floats(allow_nan=True, allow_infinity=True).filter(lambda v: v not in (1.0, 2.0, 3.0)))
def test_other_floats_are_rejected(value):
    with pytest.raises(InvalidStatusError):
        validate_status(value)


@pytest.mark.parametrize("value", [1.0, 2.0, 3.0, BookingStatus.PENDING])
def test_integer_equivalents_are_accepted(value):
    assert validate_status(value) == BookingStatus(int(value))


@pytest.mark.parametrize("value", ["1", "Confirmed", None, True, False, [2], {"status": 2}])
def test_non_numbers_are_rejected(value):
    with pytest.raises(InvalidStatusError) as exc_info:
        validate_status(value)

    assert exc_info.value.problem_details["allowed_statuses"] == [1, 2, 3]


@pytest.mark.parametrize("length", [0, -1, 63])
def test_reference_length_out_of_range_is_rejected(length):
    with pytest.raises(ValueError):
        generate_reference(length)
