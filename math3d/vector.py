"""Variable-dimension vector algebra (pure Python).

A :class:`Vector` is an immutable sequence of floats whose dimension is its
length. Every operation returns a new value; operands are never mutated.

Binary operations expect operands of equal dimension. Nothing checks this:
components of the argument are read by index, so a shorter argument raises
:class:`IndexError` and the extra components of a longer one are ignored.

Two names are kept for compatibility even though they read oddly:

* :meth:`Vector.dot` returns the element-wise product *vector*. Use
  :meth:`Vector.inner` for the scalar dot product.
* :func:`unit_vector` returns the zero vector, same as :func:`zero_vector`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .scalar import divide

__all__ = [
    "Vector",
    "new_vector",
    "standard_basis_vector",
    "unit_vector",
    "zero_vector",
]

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Vector:
    """A vector with length (magnitude) and direction."""

    components: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(float(s) for s in self.components))

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[float]:
        return iter(self.components)

    def __getitem__(self, index: int) -> float:
        return self.components[index]

    def __repr__(self) -> str:
        return f"Vector{self.components!r}"

    # Operator sugar maps onto the named operations.
    def __add__(self, other: "Vector") -> "Vector":
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.sub(other)

    def __neg__(self) -> "Vector":
        return self.mul(-1.0)

    def __mul__(self, scalar: float) -> "Vector":
        return self.mul(scalar)

    def __rmul__(self, scalar: float) -> "Vector":
        return self.mul(scalar)

    def __truediv__(self, scalar: float) -> "Vector":
        return self.div(scalar)

    def add(self, w: "Vector") -> "Vector":
        return Vector(tuple(s + w[i] for i, s in enumerate(self.components)))

    def sub(self, w: "Vector") -> "Vector":
        return Vector(tuple(s - w[i] for i, s in enumerate(self.components)))

    def dot(self, w: "Vector") -> "Vector":
        """Element-wise product of the two vectors (not a scalar)."""
        return Vector(tuple(s * w[i] for i, s in enumerate(self.components)))

    def inner(self, w: "Vector") -> float:
        """Scalar dot product: the sum of :meth:`dot`."""
        return math.fsum(self.dot(w))

    def mul(self, scalar: float) -> "Vector":
        return Vector(tuple(s * scalar for s in self.components))

    def div(self, scalar: float) -> "Vector":
        """Divide every component; a zero divisor gives ``inf``/``nan``."""
        return Vector(tuple(divide(s, scalar) for s in self.components))

    def is_zero(self) -> bool:
        return all(s == 0 for s in self.components)

    def length(self) -> float:
        """Euclidean norm of the vector."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Square of the Euclidean norm of the vector."""
        total = 0.0
        for s in self.components:
            total = total + s * s
        return total

    def manhattan_distance(self) -> float:
        """Step-wise total distance of the vector (L1 norm)."""
        total = 0.0
        for s in self.components:
            total = total + abs(s)
        return total

    def normalize(self) -> "Vector":
        """Unit vector in the direction of this one, or zero if degenerate."""
        if self.is_zero():
            log.debug("Normalizing zero vector of dimension %d; returning zero", len(self))
            return self.zero_vector()
        # Scale by the reciprocal rather than dividing each component. An
        # underflowing length gives an infinite reciprocal, not an error.
        reciprocal = divide(1.0, self.length())
        return self.mul(reciprocal)

    def standard_basis(self) -> List["Vector"]:
        return standard_basis_vector(len(self))

    def unit_vector(self) -> "Vector":
        return unit_vector(len(self))

    def zero_vector(self) -> "Vector":
        return zero_vector(len(self))


def new_vector(*components: float) -> Vector:
    return Vector(components)


def standard_basis_vector(n: int) -> List[Vector]:
    """Canonical basis of dimension ``n``: vector ``i`` is 1.0 at index ``i``."""
    return [Vector(tuple(1.0 if j == i else 0.0 for j in range(n))) for i in range(n)]


def unit_vector(n: int) -> Vector:
    # Same as zero_vector(n); callers depend on this.
    return Vector((0.0,) * n)


def zero_vector(n: int) -> Vector:
    return Vector((0.0,) * n)
