"""
Reference growth curves for every complexity class.

The raw series are unclamped; presentation code calls ``cap_value`` or
``CurveSeries.capped`` so all lines share one bounded y-axis.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from complexity_cli.analyzer import ClassificationResult
from complexity_cli.complexity import ComplexityClass
from complexity_cli.core.constants import DEFAULT_DOMAIN_SIZE, VALUE_CEILING
from complexity_cli.core.exceptions import ValidationError

Point = Tuple[int, float]


@dataclass(frozen=True)
class CurveSeries:
    """Operation counts of one complexity class over the input-size domain."""

    complexity_class: ComplexityClass
    color: str
    points: Tuple[Point, ...]

    @property
    def name(self) -> str:
        return self.complexity_class.label

    @property
    def xs(self) -> List[int]:
        return [x for x, _ in self.points]

    @property
    def ys(self) -> List[float]:
        return [y for _, y in self.points]

    def capped(self, ceiling: float = VALUE_CEILING) -> List[Point]:
        """Points with every value clamped to ceiling, for display."""
        return [(x, cap_value(y, ceiling)) for x, y in self.points]


def cap_value(value: float, ceiling: float = VALUE_CEILING) -> float:
    return min(value, ceiling)


@lru_cache(maxsize=8)
def _build_curves(domain_size: int) -> Tuple[CurveSeries, ...]:
    xs = range(max(domain_size, 0))
    return tuple(
        CurveSeries(
            complexity_class=complexity_class,
            color=complexity_class.color,
            points=tuple((n, complexity_class.operations(n)) for n in xs),
        )
        for complexity_class in ComplexityClass
    )


def generate_curves(domain_size: int = DEFAULT_DOMAIN_SIZE) -> Tuple[CurveSeries, ...]:
    """
    Generate one reference series per complexity class.

    Args:
        domain_size: Number of points; x runs over 0..domain_size-1

    Returns:
        Series ordered from O(1) to O(n!), independent of any classification
    """
    return _build_curves(int(domain_size))


def find_series(
    curves: Iterable[CurveSeries], complexity: Union[str, ComplexityClass]
) -> Optional[CurveSeries]:
    """Return the series whose name matches the given class or label."""
    label = complexity.label if isinstance(complexity, ComplexityClass) else complexity
    for series in curves:
        if series.name == label:
            return series
    return None


def split_highlighted(
    curves: Sequence[CurveSeries], result: ClassificationResult
) -> Tuple[Optional[CurveSeries], List[CurveSeries]]:
    """Separate the series matching the classification from the reference lines."""
    highlighted = find_series(curves, result.complexity)
    others = [series for series in curves if series is not highlighted]
    return highlighted, others


def sample_points(points: Sequence[Point], step: int) -> List[Point]:
    """Keep every step-th point, starting with the first."""
    if step < 1:
        raise ValidationError(f"Sample step must be at least 1, got {step}")
    return list(points[::step])
