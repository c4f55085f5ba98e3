"""Fixed-size vectors with named fields: Vec2, Vec3 and Vec4.

Each type is a thin projection of :class:`~math3d.vector.Vector`. Operations
lift the operands to a ``Vector`` in field order, compute there, and lower the
result back, so the fixed and variable-size APIs behave identically.

Field order is ``x, y`` / ``x, y, z`` / ``w, x, y, z``. Note that W leads for
:class:`Vec4`, so ``Vec4(1, 0, 0, 0)`` is the first basis vector.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, Iterator, List, Type, TypeVar

from .vector import Vector, standard_basis_vector, unit_vector, zero_vector

__all__ = [
    "Vec2",
    "Vec3",
    "Vec4",
    "new_vec2",
    "new_vec3",
    "new_vec4",
    "standard_basis_vec2",
    "standard_basis_vec3",
    "standard_basis_vec4",
    "unit_vec2",
    "unit_vec3",
    "unit_vec4",
    "zero_vec2",
    "zero_vec3",
    "zero_vec4",
]

V = TypeVar("V", bound="_FixedVector")


class _FixedVector:
    """Operations shared by the fixed-size vector types."""

    __slots__ = ()

    dimension: ClassVar[int]

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, float(getattr(self, f.name)))

    def to_vector(self) -> Vector:
        return Vector(tuple(getattr(self, f.name) for f in fields(self)))

    @classmethod
    def from_vector(cls: Type[V], v: Vector) -> V:
        """Build from the first ``dimension`` components of ``v``."""
        return cls(*(v[i] for i in range(cls.dimension)))

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_vector())

    def __add__(self: V, other: V) -> V:
        return self.add(other)

    def __sub__(self: V, other: V) -> V:
        return self.sub(other)

    def __neg__(self: V) -> V:
        return self.mul(-1.0)

    def __mul__(self: V, scalar: float) -> V:
        return self.mul(scalar)

    def __rmul__(self: V, scalar: float) -> V:
        return self.mul(scalar)

    def __truediv__(self: V, scalar: float) -> V:
        return self.div(scalar)

    def add(self: V, w: V) -> V:
        return self.from_vector(self.to_vector().add(w.to_vector()))

    def sub(self: V, w: V) -> V:
        return self.from_vector(self.to_vector().sub(w.to_vector()))

    def dot(self: V, w: V) -> V:
        """Element-wise product, same as :meth:`Vector.dot`."""
        return self.from_vector(self.to_vector().dot(w.to_vector()))

    def inner(self: V, w: V) -> float:
        return self.to_vector().inner(w.to_vector())

    def mul(self: V, scalar: float) -> V:
        return self.from_vector(self.to_vector().mul(scalar))

    def div(self: V, scalar: float) -> V:
        return self.from_vector(self.to_vector().div(scalar))

    def is_zero(self) -> bool:
        return self.to_vector().is_zero()

    def length(self) -> float:
        """Euclidean norm of the vector."""
        return self.to_vector().length()

    def length_squared(self) -> float:
        """Square of the Euclidean norm of the vector."""
        return self.to_vector().length_squared()

    def manhattan_distance(self) -> float:
        """Step-wise total distance of the vector."""
        return self.to_vector().manhattan_distance()

    def normalize(self: V) -> V:
        return self.from_vector(self.to_vector().normalize())

    def standard_basis(self: V) -> List[V]:
        return _standard_basis(type(self))

    def unit_vector(self: V) -> V:
        return self.from_vector(self.to_vector().unit_vector())

    def zero_vector(self: V) -> V:
        return self.from_vector(self.to_vector().zero_vector())


def _standard_basis(cls: Type[V]) -> List[V]:
    return [cls.from_vector(b) for b in standard_basis_vector(cls.dimension)]


@dataclass(frozen=True, slots=True)
class Vec2(_FixedVector):
    """A two-dimensional vector with length (magnitude) and direction."""

    x: float = 0.0
    y: float = 0.0

    dimension: ClassVar[int] = 2


@dataclass(frozen=True, slots=True)
class Vec3(_FixedVector):
    """A three-dimensional vector with length (magnitude) and direction."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    dimension: ClassVar[int] = 3


@dataclass(frozen=True, slots=True)
class Vec4(_FixedVector):
    """A four-dimensional vector; ``w`` is the leading component."""

    w: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    dimension: ClassVar[int] = 4


def new_vec2(x: float, y: float) -> Vec2:
    return Vec2(x=x, y=y)


def new_vec3(x: float, y: float, z: float) -> Vec3:
    return Vec3(x=x, y=y, z=z)


def new_vec4(w: float, x: float, y: float, z: float) -> Vec4:
    return Vec4(w=w, x=x, y=y, z=z)


def standard_basis_vec2() -> List[Vec2]:
    return _standard_basis(Vec2)


def standard_basis_vec3() -> List[Vec3]:
    return _standard_basis(Vec3)


def standard_basis_vec4() -> List[Vec4]:
    return _standard_basis(Vec4)


def unit_vec2() -> Vec2:
    return Vec2.from_vector(unit_vector(2))


def unit_vec3() -> Vec3:
    return Vec3.from_vector(unit_vector(3))


def unit_vec4() -> Vec4:
    return Vec4.from_vector(unit_vector(4))


def zero_vec2() -> Vec2:
    return Vec2.from_vector(zero_vector(2))


def zero_vec3() -> Vec3:
    return Vec3.from_vector(zero_vector(3))


def zero_vec4() -> Vec4:
    return Vec4.from_vector(zero_vector(4))
