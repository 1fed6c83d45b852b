"""
Point-wise linear interpolation over ordered, unique-keyed samples.

``LinearInterpolator`` stores ``(index, value)`` pairs sorted by index. The
index type only needs to be totally ordered and convertible to a float
(``index_to_float``, default ``float``; curves pass ``datetime.timestamp``).
The value type needs ``+``, ``-`` and scalar ``*``/``/``, so plain floats,
constrained floats and ``Money`` all work.

Lookups never raise: ``interpolate`` returns one of the result records below,
and ``unwrap`` converts the non-value outcomes to exceptions for callers that
need a number.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar, Union

from pricing_core.errors import InterpolationOutOfRange, NoPointsError

I = TypeVar("I")
V = TypeVar("V")


@dataclass(frozen=True)
class ExistingValue(Generic[V]):
    """Index matched a stored sample exactly."""

    value: V


@dataclass(frozen=True)
class InterpolatedValue(Generic[V]):
    """Value blended from the two bracketing samples."""

    value: V


@dataclass(frozen=True)
class OutOfRange:
    """Index lies strictly outside [min, max]."""


@dataclass(frozen=True)
class NoPoints:
    """Interpolator is empty."""


InterpolationResult = Union[ExistingValue[V], InterpolatedValue[V], OutOfRange, NoPoints]


def unwrap(result: InterpolationResult[V]) -> V:
    """Return the value carried by ``result`` or raise the matching error."""
    if isinstance(result, (ExistingValue, InterpolatedValue)):
        return result.value
    if isinstance(result, OutOfRange):
        raise InterpolationOutOfRange("index lies outside the interpolation range")
    raise NoPointsError("interpolator has no points")


class LinearInterpolator(Generic[I, V]):
    """Sorted sample set with linear interpolation between neighbours."""

    def __init__(
        self,
        points: Iterable[tuple[I, V]] = (),
        *,
        index_to_float: Callable[[I], float] = float,
    ) -> None:
        self._keys: list[I] = []
        self._values: list[V] = []
        self._index_to_float = index_to_float
        self.add_points(points)

    def add_point(self, index: I, value: V) -> Optional[V]:
        """Insert or replace the sample at ``index``; return the replaced value."""
        pos = bisect_left(self._keys, index)
        if pos < len(self._keys) and self._keys[pos] == index:
            previous = self._values[pos]
            self._values[pos] = value
            return previous
        self._keys.insert(pos, index)
        self._values.insert(pos, value)
        return None

    def add_points(self, points: Iterable[tuple[I, V]]) -> list[Optional[V]]:
        return [self.add_point(index, value) for index, value in points]

    def remove_point(self, index: I) -> Optional[V]:
        """Remove the sample at ``index``; return its value, or None if absent."""
        pos = bisect_left(self._keys, index)
        if pos < len(self._keys) and self._keys[pos] == index:
            del self._keys[pos]
            return self._values.pop(pos)
        return None

    def remove_points(self, indices: Iterable[I]) -> list[Optional[V]]:
        return [self.remove_point(index) for index in indices]

    def range(self) -> Optional[tuple[I, I]]:
        """(min_index, max_index), or None when empty."""
        if not self._keys:
            return None
        return self._keys[0], self._keys[-1]

    def interpolate(self, index: I) -> InterpolationResult[V]:
        """
        Look up ``index``.

        Exact matches (including both boundaries) return ``ExistingValue``
        without computation; interior indices return ``InterpolatedValue``.
        """
        if not self._keys:
            return NoPoints()

        pos = bisect_left(self._keys, index)
        if pos < len(self._keys) and self._keys[pos] == index:
            return ExistingValue(self._values[pos])
        if pos == 0 or pos == len(self._keys):
            return OutOfRange()

        x = self._index_to_float(index)
        x_left = self._index_to_float(self._keys[pos - 1])
        x_right = self._index_to_float(self._keys[pos])
        v_left, v_right = self._values[pos - 1], self._values[pos]
        return InterpolatedValue(v_left + (v_right - v_left) * (x - x_left) / (x_right - x_left))

    def points(self) -> list[tuple[I, V]]:
        """Sorted copy of the stored samples."""
        return list(zip(self._keys, self._values))

    def copy(self) -> LinearInterpolator[I, V]:
        return LinearInterpolator(self.points(), index_to_float=self._index_to_float)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, index: Any) -> bool:
        pos = bisect_left(self._keys, index)
        return pos < len(self._keys) and self._keys[pos] == index

    def __repr__(self) -> str:
        return f"LinearInterpolator({self.points()!r})"
