"""Two-dimensional vector type used for positions, sizes and texture coordinates."""

from __future__ import annotations

import math
from typing import Iterator, Union

Scalar = Union[int, float]


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float))


class Vector2:
    """A mutable 2D vector of floats.

    ``Vector2()`` is the zero vector and ``Vector2(s)`` has both components set to ``s``.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: Scalar = 0.0, y: Scalar | None = None) -> None:
        self.x = float(x)
        self.y = float(x if y is None else y)

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        length = self.length()
        self.x /= length
        self.y /= length

    def normalized(self) -> Vector2:
        """Return a unit-length copy of this vector."""
        length = self.length()
        return Vector2(self.x / length, self.y / length)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def sqr_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def add(self, other: Vector2 | Scalar) -> None:
        """Add a vector component-wise, or a scalar to both components, in place."""
        if isinstance(other, Vector2):
            self.x += other.x
            self.y += other.y
        else:
            self.x += other
            self.y += other

    def sub(self, other: Vector2 | Scalar) -> None:
        """Subtract a vector component-wise, or a scalar from both components, in place."""
        if isinstance(other, Vector2):
            self.x -= other.x
            self.y -= other.y
        else:
            self.x -= other
            self.y -= other

    def mul(self, scalar: Scalar) -> None:
        self.x *= scalar
        self.y *= scalar

    def div(self, scalar: Scalar) -> None:
        """Divide both components by ``scalar`` in place."""
        if scalar == 0:
            raise ZeroDivisionError("tried to divide Vector2 by 0")
        self.x /= scalar
        self.y /= scalar

    def __add__(self, other: object) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x + other.x, self.y + other.y)
        if _is_scalar(other):
            return Vector2(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other: object) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x - other.x, self.y - other.y)
        if _is_scalar(other):
            return Vector2(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, other: object) -> Vector2 | float:
        """Dot product with a vector, or scaling by a scalar."""
        if isinstance(other, Vector2):
            return self.dot(other)
        if _is_scalar(other):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, scalar: object) -> Vector2:
        if not _is_scalar(scalar):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("tried to divide Vector2 by 0")
        return Vector2(self.x / scalar, self.y / scalar)

    def __radd__(self, scalar: object) -> Vector2:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector2(scalar + self.x, scalar + self.y)

    def __rsub__(self, scalar: object) -> Vector2:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector2(scalar - self.x, scalar - self.y)

    def __rmul__(self, scalar: object) -> Vector2:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector2(scalar * self.x, scalar * self.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"( {self.x:f} , {self.y:f} )"

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vector2:
        return cls(1.0, 1.0)

    @classmethod
    def up(cls) -> Vector2:
        return cls(0.0, 1.0)

    @classmethod
    def down(cls) -> Vector2:
        return cls(0.0, -1.0)

    @classmethod
    def right(cls) -> Vector2:
        return cls(1.0, 0.0)

    @classmethod
    def left(cls) -> Vector2:
        return cls(-1.0, 0.0)