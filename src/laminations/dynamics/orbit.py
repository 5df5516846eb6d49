"""
Forward Orbits — итерация shift map на единичной окружности

Для x ∈ [0, 1) и основания base орбита x → base·x mod 1 → ... порождает
последовательность точек, по которой строятся ламинации.

Каждое рациональное x eventually periodic: знаменатель несократимой
дроби не растёт под shift map, поэтому точек орбиты конечное число.
Орбита разбивается на pre-periodic часть и цикл:

    x_0, ..., x_{p-1} | x_p, ..., x_{p+t-1} | x_p, ...
      preperiod = p       period = t

Ведущие цифры точек орбиты (itinerary) дают каноническое разложение x.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точки сравниваются через to_rational (любое представление UnitNumber)
2. Поиск цикла ограничен max_steps → OrbitLimitExceeded
3. Все функции чистые, без состояния
"""

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Final

from laminations.core.domain.unit_fraction import UnitFraction
from laminations.core.domain.unit_number import UnitNumber, rational_key
from laminations.core.math.nary import DigitRuns, validate_base

logger = logging.getLogger(__name__)

# Максимальное число различных точек орбиты по умолчанию
ORBIT_MAX_STEPS_DEFAULT: Final[int] = 100_000


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OrbitLimitExceeded(Exception):
    """
    Цикл орбиты не найден за max_steps шагов.

    Для рациональных x цикл существует всегда, но его длина может быть
    порядка знаменателя; ограничение защищает от неограниченной работы.
    """

    def __init__(self, start: UnitNumber, max_steps: int):
        super().__init__(
            f"Forward orbit of {start} did not close within {max_steps} steps"
        )
        self.start = start
        self.max_steps = max_steps


# =============================================================================
# ORBIT MODEL
# =============================================================================


@dataclass(frozen=True)
class ForwardOrbit:
    """Орбита точки под shift map: pre-periodic часть и цикл."""

    base: int
    preperiodic: tuple[UnitNumber, ...]
    cycle: tuple[UnitNumber, ...]

    @property
    def start(self) -> UnitNumber:
        return (self.preperiodic + self.cycle)[0]

    @property
    def preperiod(self) -> int:
        return len(self.preperiodic)

    @property
    def period(self) -> int:
        return len(self.cycle)

    @property
    def is_periodic(self) -> bool:
        """True если начальная точка сама лежит на цикле."""
        return self.preperiod == 0

    @property
    def points(self) -> tuple[UnitNumber, ...]:
        """Все различные точки орбиты в порядке посещения."""
        return self.preperiodic + self.cycle

    def itinerary(self) -> DigitRuns:
        """
        Ведущие цифры точек орбиты: (exact, repeating) разложение начальной точки.

        Для конечных разложений repeating часть равна (0,).
        """
        return DigitRuns(
            exact=tuple(_leading_digit(point, self.base) for point in self.preperiodic),
            repeating=tuple(_leading_digit(point, self.base) for point in self.cycle),
        )


# =============================================================================
# ITERATION
# =============================================================================


def iterate_forward(x: UnitNumber, base: int, steps: int) -> list[UnitNumber]:
    """
    Траектория x_0, x_1, ..., x_steps под shift map.

    Args:
        x: Начальная точка
        base: Основание shift map
        steps: Количество применений map_forward (≥ 0)

    Returns:
        Список длины steps + 1, начинающийся с x

    Raises:
        ValueError: Если steps < 0 или base некорректен
    """
    validate_base(base)
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")

    trajectory = [x]
    current = x
    for _ in range(steps):
        current = current.map_forward(base)
        trajectory.append(current)
    return trajectory


def forward_orbit(
    x: UnitNumber,
    base: int,
    max_steps: int = ORBIT_MAX_STEPS_DEFAULT,
) -> ForwardOrbit:
    """
    Орбита x под shift map с детекцией цикла.

    Args:
        x: Начальная точка
        base: Основание shift map
        max_steps: Максимальное число различных точек орбиты

    Returns:
        ForwardOrbit с pre-periodic частью и циклом

    Raises:
        OrbitLimitExceeded: Если цикл не замкнулся за max_steps точек
        ValueError: Если max_steps ≤ 0 или base некорректен

    Examples:
        >>> orbit = forward_orbit(UnitFraction.new(35, 78), 3)
        >>> (orbit.preperiod, orbit.period)
        (1, 3)
    """
    validate_base(base)
    if max_steps <= 0:
        raise ValueError(f"max_steps must be positive, got {max_steps}")

    seen: dict[Fraction, int] = {}  # точка -> индекс в points
    points: list[UnitNumber] = []

    current = x
    key = rational_key(current)
    while key not in seen:
        if len(points) >= max_steps:
            raise OrbitLimitExceeded(x, max_steps)
        seen[key] = len(points)
        points.append(current)
        current = current.map_forward(base)
        key = rational_key(current)

    cycle_start = seen[key]
    logger.debug(
        f"Orbit of {x} in base {base}: preperiod={cycle_start}, "
        f"period={len(points) - cycle_start}"
    )
    return ForwardOrbit(
        base=base,
        preperiodic=tuple(points[:cycle_start]),
        cycle=tuple(points[cycle_start:]),
    )


def _leading_digit(point: UnitNumber, base: int) -> int:
    return UnitFraction.from_unit_number(point).leading_digit(base)
