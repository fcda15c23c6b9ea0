"""A small two-dimensional vector used for positions, sizes and velocities."""

from __future__ import annotations

from collections.abc import Iterator

_EPSILON = 1e-6


class Vector2D:
    """A mutable 2D vector.

    ``Vector2D()`` is the zero vector, ``Vector2D(s)`` puts ``s`` in both
    components and ``Vector2D(x, y)`` sets each one.  Dividing by a value
    that is almost zero yields the zero vector instead of raising.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float | None = None) -> None:
        self.x = float(x)
        self.y = self.x if y is None else float(y)

    def __repr__(self) -> str:
        return f"Vector2D({self.x!r}, {self.y!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector2D):
            return (self.x, self.y) == (other.x, other.y)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector2D | float) -> Vector2D:
        if isinstance(other, Vector2D):
            return Vector2D(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2D(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector2D:
        if isinstance(other, (int, float)):
            return Vector2D(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Vector2D | float) -> Vector2D:
        if isinstance(other, Vector2D):
            if abs(other.x) < _EPSILON or abs(other.y) < _EPSILON:
                return Vector2D()
            return Vector2D(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            if abs(other) < _EPSILON:
                return Vector2D()
            return Vector2D(self.x / other, self.y / other)
        return NotImplemented

    def to_int(self) -> tuple[int, int]:
        """Both components truncated toward zero."""
        return int(self.x), int(self.y)