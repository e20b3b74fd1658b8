"""
Tests for ModulusInformation arithmetic.
"""

import pytest
from src.hanabi.strategies.modulus_information import ModulusInformation, HatContractViolation


def test_construct():
    """Test construction and its range check."""
    info = ModulusInformation(5, 3)
    assert info.modulus == 5
    assert info.value == 3

    with pytest.raises(HatContractViolation):
        ModulusInformation(5, 5)
    with pytest.raises(HatContractViolation):
        ModulusInformation(0, 0)
    with pytest.raises(HatContractViolation):
        ModulusInformation(3, -1)


def test_contract_violation_is_programming_error():
    """Violations are assertion errors, not recoverable runtime errors."""
    assert issubclass(HatContractViolation, AssertionError)


def test_none():
    """Test the no-information value."""
    assert ModulusInformation.none() == ModulusInformation(1, 0)


def test_combine():
    """Test combining as a more significant digit."""
    info = ModulusInformation(3, 2)
    info.combine(ModulusInformation(4, 1), 20)
    assert info == ModulusInformation(12, 5)

    # Modulus is capped at the ceiling
    info = ModulusInformation(3, 2)
    info.combine(ModulusInformation(3, 2), 10)
    assert info == ModulusInformation(9, 8)

    info = ModulusInformation(2, 0)
    info.combine(ModulusInformation(4, 3), 7)
    assert info == ModulusInformation(7, 6)


def test_combine_into_none():
    """Combining into the no-information value gives the other value."""
    info = ModulusInformation.none()
    info.combine(ModulusInformation(6, 4), 6)
    assert info == ModulusInformation(6, 4)


def test_combine_too_much_information():
    """Test combine rejects a modulus above info_remaining."""
    info = ModulusInformation(3, 2)
    assert info.info_remaining(10) == 3
    with pytest.raises(HatContractViolation):
        info.combine(ModulusInformation(4, 0), 10)


def test_info_remaining_is_tight():
    """info_remaining(c) can always be combined in, one more never can."""
    for ceiling in range(1, 25):
        for modulus in range(1, ceiling + 1):
            for value in range(modulus):
                remaining = ModulusInformation(modulus, value).info_remaining(ceiling)
                assert remaining >= 1

                info = ModulusInformation(modulus, value)
                info.combine(ModulusInformation(remaining, remaining - 1), ceiling)
                assert info.value < ceiling

                info = ModulusInformation(modulus, value)
                with pytest.raises(HatContractViolation):
                    info.combine(ModulusInformation(remaining + 1, 0), ceiling)


def test_info_remaining_value_above_ceiling():
    """Test info_remaining rejects a value that already exceeds the ceiling."""
    with pytest.raises(HatContractViolation):
        ModulusInformation(10, 7).info_remaining(5)


def test_split():
    """Test splitting off the least significant digit."""
    info = ModulusInformation(12, 5)
    low = info.split(3)
    assert low == ModulusInformation(3, 2)
    assert info == ModulusInformation(4, 1)

    # Remaining modulus depends on the extracted digit
    info = ModulusInformation(5, 1)
    low = info.split(2)
    assert low == ModulusInformation(2, 1)
    assert info == ModulusInformation(2, 0)

    info = ModulusInformation(5, 4)
    low = info.split(2)
    assert low == ModulusInformation(2, 0)
    assert info == ModulusInformation(3, 2)


def test_split_too_large():
    """Test split rejects a modulus larger than our own."""
    with pytest.raises(HatContractViolation):
        ModulusInformation(3, 1).split(4)


def test_split_then_combine_restores_value():
    """Combining the two halves of a split gives back the original value."""
    for modulus in range(1, 31):
        for value in range(modulus):
            for split_modulus in range(1, modulus + 1):
                high = ModulusInformation(modulus, value)
                low = high.split(split_modulus)
                assert low.modulus == split_modulus
                assert high.modulus == low.info_remaining(modulus)

                low.combine(high, modulus)
                assert low.value == value
                assert low.modulus <= modulus
                low.cast_up(modulus)
                assert low == ModulusInformation(modulus, value)


def test_cast_up():
    """Test cast_up only widens the modulus."""
    info = ModulusInformation(3, 2)
    info.cast_up(3)
    assert info == ModulusInformation(3, 2)
    info.cast_up(8)
    assert info == ModulusInformation(8, 2)

    with pytest.raises(HatContractViolation):
        info.cast_up(4)


def test_add_and_subtract():
    """Test modular addition and its inverse."""
    info = ModulusInformation(7, 5)
    other = ModulusInformation(7, 4)
    info.add(other)
    assert info == ModulusInformation(7, 2)
    info.subtract(other)
    assert info == ModulusInformation(7, 5)

    info.subtract(ModulusInformation(7, 6))
    assert info == ModulusInformation(7, 6)


def test_add_subtract_inverse_for_all_values():
    """add then subtract of the same value is the identity."""
    modulus = 9
    for value in range(modulus):
        for other_value in range(modulus):
            info = ModulusInformation(modulus, value)
            other = ModulusInformation(modulus, other_value)
            info.add(other)
            info.subtract(other)
            assert info.value == value


def test_add_modulus_mismatch():
    """Test add and subtract reject different moduli."""
    with pytest.raises(HatContractViolation):
        ModulusInformation(4, 1).add(ModulusInformation(5, 1))
    with pytest.raises(HatContractViolation):
        ModulusInformation(4, 1).subtract(ModulusInformation(3, 1))


def test_copy_is_independent():
    """Test copy does not share state."""
    info = ModulusInformation(6, 2)
    copied = info.copy()
    copied.add(ModulusInformation(6, 1))
    assert info.value == 2
    assert copied.value == 3
