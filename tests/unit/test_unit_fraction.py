"""
Тесты UnitFraction (eager представление)

Проверяет:
1. Сокращение и wrap по модулю 1 при создании
2. Равенство, порядок и hash через to_rational
3. Проекции to_rational / to_float / to_fraction
4. Shift map, первую цифру, каноническую текстовую запись
5. Immutability (frozen=True)
"""

from fractions import Fraction

import pytest
from pydantic import ValidationError

from laminations.core.domain import DigitExpansion, Ordering, UnitFraction, UnitNumber


class TestConstruction:
    """Тесты канонизации при создании"""

    def test_simplifies(self) -> None:
        assert UnitFraction.new(1, 2) == UnitFraction.new(2, 4)
        assert UnitFraction.new(2, 4).to_rational() == (1, 2)

    def test_wraps(self) -> None:
        assert UnitFraction.new(1, 2) == UnitFraction.new(3, 2)
        assert UnitFraction.new(3, 2).to_rational() == (1, 2)

    def test_whole_number_is_zero(self) -> None:
        assert UnitFraction.new(5, 5) == UnitFraction.zero()
        assert UnitFraction.new(5, 5).is_zero

    def test_keyword_construction_canonicalizes(self) -> None:
        value = UnitFraction(numerator=6, denominator=4)
        assert (value.numerator, value.denominator) == (1, 2)

    @pytest.mark.parametrize("denominator", [0, -2])
    def test_non_positive_denominator_rejected(self, denominator: int) -> None:
        with pytest.raises(ValidationError):
            UnitFraction.new(1, denominator)

    def test_from_fraction(self) -> None:
        assert UnitFraction.from_fraction(Fraction(7, 3)) == UnitFraction.new(1, 3)

    def test_frozen(self) -> None:
        value = UnitFraction.new(1, 3)
        with pytest.raises(ValidationError):
            value.numerator = 2

    def test_implements_unit_number(self) -> None:
        assert isinstance(UnitFraction.new(1, 3), UnitNumber)


class TestComparison:
    """Тесты равенства и порядка"""

    def test_compare(self) -> None:
        third = UnitFraction.new(1, 3)
        half = UnitFraction.new(1, 2)
        assert third.compare(half) is Ordering.LESS
        assert half.compare(third) is Ordering.GREATER
        assert half.compare(UnitFraction.new(2, 4)) is Ordering.EQUAL

    def test_operators(self) -> None:
        third = UnitFraction.new(1, 3)
        half = UnitFraction.new(1, 2)
        assert third < half
        assert third <= half
        assert half > third
        assert half >= UnitFraction.new(3, 2)
        assert third != half

    def test_sorting(self) -> None:
        values = [UnitFraction.new(5, 6), UnitFraction.new(0, 1), UnitFraction.new(9, 26)]
        assert [str(v) for v in sorted(values)] == ["0/1", "9/26", "5/6"]

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(UnitFraction.new(1, 2)) == hash(UnitFraction.new(2, 4))
        assert len({UnitFraction.new(1, 2), UnitFraction.new(3, 2), UnitFraction.new(1, 3)}) == 2

    def test_equal_across_representations(self) -> None:
        eager = UnitFraction.new(1, 3)
        lazy = DigitExpansion.from_digits([1, 0, 0], [], 3)
        assert eager == lazy
        assert lazy == eager
        assert hash(eager) == hash(lazy)
        assert eager.compare(lazy) is Ordering.EQUAL

    def test_not_equal_to_plain_numbers(self) -> None:
        assert UnitFraction.new(1, 2) != 0.5
        assert UnitFraction.new(1, 2) != Fraction(1, 2)

    def test_ordering_with_plain_number_unsupported(self) -> None:
        with pytest.raises(TypeError):
            UnitFraction.new(1, 2) < 0.5  # noqa: B015


class TestProjections:
    """Тесты проекций"""

    def test_to_rational_ignores_base(self) -> None:
        assert UnitFraction.new(35, 78).to_rational() == (35, 78)
        assert UnitFraction.new(35, 78).to_rational(3) == (35, 78)

    def test_to_float(self) -> None:
        assert UnitFraction.new(1, 2).to_float() == 0.5
        assert UnitFraction.new(1, 3).to_float() == pytest.approx(1 / 3)

    def test_to_fraction(self) -> None:
        assert UnitFraction.new(2, 4).to_fraction() == Fraction(1, 2)

    def test_str(self) -> None:
        assert str(UnitFraction.new(9, 26)) == "9/26"


class TestBaseDependentOperations:
    """Тесты операций, требующих основание"""

    def test_map_forward(self) -> None:
        """Shift: числитель × base, wrap и сокращение"""
        assert UnitFraction.new(35, 78).map_forward(3) == UnitFraction.new(9, 26)
        assert UnitFraction.new(1, 7).map_forward(2) == UnitFraction.new(2, 7)

    def test_map_forward_matches_rational_arithmetic(self) -> None:
        value = UnitFraction.new(154, 157)
        expected = (Fraction(154, 157) * 12) % 1
        assert value.map_forward(12).to_fraction() == expected

    def test_map_forward_requires_base(self) -> None:
        with pytest.raises(ValueError, match="pass base explicitly"):
            UnitFraction.new(1, 3).map_forward()

    def test_map_forward_uses_stored_base(self) -> None:
        value = UnitFraction.new(35, 78, base=3)
        shifted = value.map_forward()
        assert shifted == UnitFraction.new(9, 26)
        assert shifted.base == 3
        assert value.leading_digit() == 1
        assert value.to_nary() == "1_100"

    def test_explicit_base_overrides_stored_base(self) -> None:
        shifted = UnitFraction.new(1, 7, base=3).map_forward(2)
        assert shifted == UnitFraction.new(2, 7)
        assert shifted.base == 2

    def test_stored_base_is_not_part_of_value(self) -> None:
        bound = UnitFraction.new(1, 2, base=3)
        assert bound == UnitFraction.new(1, 2)
        assert hash(bound) == hash(UnitFraction.new(1, 2))
        assert bound.to_dict() == {"numerator": 1, "denominator": 2}
        assert "base" not in bound.model_dump()

    def test_stored_base_validated(self) -> None:
        with pytest.raises(ValidationError):
            UnitFraction.new(1, 2, base=1)

    def test_map_forward_rejects_invalid_base(self) -> None:
        with pytest.raises(ValueError, match="base must be an integer"):
            UnitFraction.new(1, 3).map_forward(1)

    def test_leading_digit(self) -> None:
        assert UnitFraction.new(35, 78).leading_digit(3) == 1
        assert UnitFraction.new(847, 864).leading_digit(12) == 11

    def test_to_nary(self) -> None:
        assert UnitFraction.new(35, 78).to_nary(3) == "1_100"
        assert UnitFraction.new(11, 26).to_nary(3) == "_102"
        assert UnitFraction.new(627, 628).to_nary(12) == "11_11,9,2"
        assert UnitFraction.new(847, 864).to_nary(12) == "11,9,2"
        assert UnitFraction.zero().to_nary(3) == "_"

    def test_to_digits(self) -> None:
        runs = UnitFraction.new(2, 3).to_digits(3)
        assert runs.exact == (2,)
        assert runs.repeating == ()
