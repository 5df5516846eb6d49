"""
Тесты forward orbits под shift map

Проверяет:
1. Траекторию iterate_forward
2. Детекцию pre-period и period
3. Itinerary как каноническое разложение начальной точки
4. Ограничение max_steps
"""

from fractions import Fraction

import pytest

from laminations import LaminationAlgebra, Representation
from laminations.core.domain import DigitExpansion, UnitFraction
from laminations.dynamics import (
    ORBIT_MAX_STEPS_DEFAULT,
    OrbitLimitExceeded,
    forward_orbit,
    iterate_forward,
)


class TestIterateForward:
    """Тесты траектории"""

    def test_doubling_trajectory(self) -> None:
        trajectory = iterate_forward(UnitFraction.new(1, 7), 2, 3)
        assert [point.to_rational() for point in trajectory] == [(1, 7), (2, 7), (4, 7), (1, 7)]

    def test_zero_steps(self) -> None:
        start = UnitFraction.new(1, 3)
        assert iterate_forward(start, 3, 0) == [start]

    def test_negative_steps_rejected(self) -> None:
        with pytest.raises(ValueError, match="steps must be non-negative"):
            iterate_forward(UnitFraction.new(1, 3), 3, -1)

    def test_lazy_trajectory(self) -> None:
        start = DigitExpansion.from_digits([1], [1, 0, 0], 3)
        trajectory = iterate_forward(start, 3, 4)
        assert [str(point) for point in trajectory] == ["1_100", "_100", "_001", "_010", "_100"]


class TestForwardOrbit:
    """Тесты детекции цикла"""

    def test_periodic_point(self) -> None:
        orbit = forward_orbit(UnitFraction.new(1, 7), 2)
        assert orbit.is_periodic
        assert orbit.preperiod == 0
        assert orbit.period == 3
        assert orbit.start == UnitFraction.new(1, 7)

    def test_preperiodic_point(self) -> None:
        orbit = forward_orbit(UnitFraction.new(1, 6), 2)
        assert not orbit.is_periodic
        assert orbit.preperiod == 1
        assert orbit.period == 2
        assert [point.to_rational() for point in orbit.points] == [(1, 6), (1, 3), (2, 3)]

    def test_terminating_expansion_falls_to_zero(self) -> None:
        orbit = forward_orbit(UnitFraction.new(1, 3), 3)
        assert orbit.preperiod == 1
        assert orbit.cycle == (UnitFraction.zero(),)

    def test_zero_is_fixed_point(self) -> None:
        orbit = forward_orbit(UnitFraction.zero(), 5)
        assert orbit.is_periodic
        assert orbit.period == 1

    def test_mixed_expansion(self) -> None:
        orbit = forward_orbit(UnitFraction.new(35, 78), 3)
        assert (orbit.preperiod, orbit.period) == (1, 3)

    def test_lazy_orbit_matches_eager(self) -> None:
        lazy = forward_orbit(DigitExpansion.from_digits([1], [1, 0, 0], 3), 3)
        eager = forward_orbit(UnitFraction.new(35, 78), 3)
        assert lazy.points == eager.points

    def test_points_are_distinct(self) -> None:
        orbit = forward_orbit(UnitFraction.new(5, 62), 2)
        keys = {Fraction(*point.to_rational()) for point in orbit.points}
        assert len(keys) == len(orbit.points)

    def test_max_steps_exceeded(self) -> None:
        with pytest.raises(OrbitLimitExceeded) as exc_info:
            forward_orbit(UnitFraction.new(1, 7), 2, max_steps=2)
        assert exc_info.value.max_steps == 2

    def test_max_steps_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="max_steps must be positive"):
            forward_orbit(UnitFraction.new(1, 7), 2, max_steps=0)

    def test_default_limit(self) -> None:
        assert ORBIT_MAX_STEPS_DEFAULT > 0


class TestItinerary:
    """Itinerary = ведущие цифры точек орбиты"""

    def test_mixed_itinerary(self) -> None:
        itinerary = forward_orbit(UnitFraction.new(35, 78), 3).itinerary()
        assert itinerary.exact == (1,)
        assert itinerary.repeating == (1, 0, 0)

    def test_terminating_itinerary_repeats_zero(self) -> None:
        itinerary = forward_orbit(UnitFraction.new(1, 3), 3).itinerary()
        assert itinerary.exact == (1,)
        assert itinerary.repeating == (0,)

    @pytest.mark.parametrize("text", ["_102", "1_100", "2_1", "12_0", "_2", "0_21"])
    def test_itinerary_reconstructs_point(self, text: str) -> None:
        algebra = LaminationAlgebra.new(3, representation=Representation.LAZY)
        value = algebra.parse(text)
        itinerary = algebra.orbit(value).itinerary()
        assert algebra.from_digits(itinerary.exact, itinerary.repeating) == value
