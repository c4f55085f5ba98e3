"""Points, vectors and basic linear algebra in pure Python."""

from .fixed import (
    Vec2,
    Vec3,
    Vec4,
    new_vec2,
    new_vec3,
    new_vec4,
    standard_basis_vec2,
    standard_basis_vec3,
    standard_basis_vec4,
    unit_vec2,
    unit_vec3,
    unit_vec4,
    zero_vec2,
    zero_vec3,
    zero_vec4,
)
from .points import Point, Slope
from .vector import Vector, new_vector, standard_basis_vector, unit_vector, zero_vector

__all__ = [
    "Point",
    "Slope",
    "Vec2",
    "Vec3",
    "Vec4",
    "Vector",
    "new_vec2",
    "new_vec3",
    "new_vec4",
    "new_vector",
    "standard_basis_vec2",
    "standard_basis_vec3",
    "standard_basis_vec4",
    "standard_basis_vector",
    "unit_vec2",
    "unit_vec3",
    "unit_vec4",
    "unit_vector",
    "zero_vec2",
    "zero_vec3",
    "zero_vec4",
    "zero_vector",
]
