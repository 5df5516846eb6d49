"""
Тесты DigitExpansion (lazy представление)

Проверяет:
1. Хранение четвёрки и восстановление цифр с ведущими нулями
2. Равенство разных разложений одного числа (через to_rational)
3. Shift map по цифрам и его согласованность с рациональным путём
4. Валидацию значений и основания
"""

import pytest
from pydantic import ValidationError

from laminations.core.domain import DigitExpansion, Ordering, UnitFraction, UnitNumber


def ternary(exact: str, repeating: str = "") -> DigitExpansion:
    return DigitExpansion.from_digits([int(c) for c in exact], [int(c) for c in repeating], 3)


class TestConstruction:
    """Тесты создания"""

    def test_from_digits_stores_quadruple(self) -> None:
        value = ternary("1", "100")
        assert value.base == 3
        assert (value.exact_value, value.exact_length) == (1, 1)
        assert (value.repeating_value, value.repeating_length) == (9, 3)

    def test_digits_restored_with_leading_zeros(self) -> None:
        value = ternary("0010", "021")
        assert value.exact_digits == (0, 0, 1, 0)
        assert value.repeating_digits == (0, 2, 1)

    def test_to_text_keeps_this_expansion(self) -> None:
        assert ternary("200", "00").to_text() == "200_00"
        assert str(ternary("", "102")) == "_102"

    def test_digit_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            DigitExpansion.from_digits([3], [], 3)

    def test_value_must_fit_length(self) -> None:
        with pytest.raises(ValidationError, match="does not fit"):
            DigitExpansion(base=3, exact_value=9, exact_length=2)

    def test_base_below_two_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DigitExpansion(base=1)

    def test_implements_unit_number(self) -> None:
        assert isinstance(ternary("1"), UnitNumber)


class TestCanonicalEquivalence:
    """Разные разложения одного числа равны"""

    def test_zero_equals_all_max_digits(self) -> None:
        assert ternary("", "") == ternary("", "2")

    def test_trailing_zero_blocks(self) -> None:
        assert ternary("2") == ternary("200") == ternary("200", "00")

    def test_rotated_periods(self) -> None:
        reference = ternary("", "102")
        for exact, repeating in [("1", "021"), ("10", "210"), ("102", "102"), ("1021", "021")]:
            assert ternary(exact, repeating) == reference

    def test_different_numbers_differ(self) -> None:
        assert ternary("", "102") != ternary("2", "1")

    def test_to_rational(self) -> None:
        assert ternary("1", "100").to_rational() == (35, 78)
        assert ternary("1", "100").to_rational(3) == (35, 78)

    def test_to_rational_base_mismatch(self) -> None:
        with pytest.raises(ValueError, match="bound to base 3"):
            ternary("1").to_rational(2)

    def test_to_float(self) -> None:
        assert ternary("1").to_float() == pytest.approx(1 / 3)

    def test_to_unit_fraction(self) -> None:
        eager = ternary("", "100").to_unit_fraction()
        assert isinstance(eager, UnitFraction)
        assert eager.to_rational() == (9, 26)

    def test_compare_and_hash(self) -> None:
        assert ternary("1").compare(ternary("2")) is Ordering.LESS
        assert ternary("2").compare(ternary("1", "")) is Ordering.GREATER
        assert hash(ternary("2")) == hash(ternary("200", "00"))
        assert len({ternary("2"), ternary("200"), ternary("", "2"), ternary("")}) == 2


class TestMapForward:
    """Тесты shift map по цифрам"""

    def test_drops_leading_exact_digit(self) -> None:
        shifted = ternary("12", "0").map_forward()
        assert shifted.exact_digits == (2,)
        assert shifted.repeating_digits == (0,)

    def test_rotates_repeating_block(self) -> None:
        shifted = ternary("", "100").map_forward()
        assert shifted.exact_digits == ()
        assert shifted.repeating_digits == (0, 0, 1)

    def test_zero_is_fixed(self) -> None:
        zero = DigitExpansion(base=3)
        assert zero.map_forward() is zero

    def test_shift_example(self) -> None:
        assert ternary("1", "100").map_forward() == ternary("", "100")

    @pytest.mark.parametrize(
        "exact, repeating",
        [("1", "100"), ("", "102"), ("2", ""), ("0012", "21"), ("", "2"), ("", "")],
    )
    def test_agrees_with_rational_shift(self, exact: str, repeating: str) -> None:
        lazy = ternary(exact, repeating)
        eager = lazy.to_unit_fraction()
        assert lazy.map_forward() == eager.map_forward(3)

    def test_base_mismatch(self) -> None:
        with pytest.raises(ValueError, match="bound to base 3"):
            ternary("1").map_forward(2)

    def test_explicit_matching_base(self) -> None:
        assert ternary("1", "100").map_forward(3) == ternary("", "100")

    def test_leading_digit(self) -> None:
        assert ternary("21").leading_digit() == 2
        assert ternary("", "102").leading_digit() == 1
        assert ternary("").leading_digit() == 0

    @pytest.mark.parametrize("exact, repeating", [("", "2"), ("1", "2"), ("02", "")])
    def test_leading_digit_is_canonical(self, exact, repeating) -> None:
        """Равные значения дают одну и ту же первую цифру, как у UnitFraction."""
        value = ternary(exact, repeating)
        assert value.leading_digit() == value.to_unit_fraction().leading_digit(3)

    def test_leading_digit_of_trailing_twos(self) -> None:
        assert ternary("", "2") == ternary("")
        assert ternary("", "2").leading_digit() == 0
        assert ternary("1", "2").leading_digit() == 2
