"""
Vectors — 2D векторная алгебра над парами (x, y)

Углы в радианах. Ось y не инвертируется: интерпретация экранных
координат остаётся на стороне host.
"""

import math
from typing import Any

from scriptkit.core.errors import DomainViolation, InvalidArgumentError, warn_questionable
from scriptkit.core.math.numerical_safeguards import validate_finite

Vec2 = tuple[float, float]

ZERO: Vec2 = (0.0, 0.0)


def as_vec2(value: Any, name: str) -> Vec2:
    if value is None or not hasattr(value, "__len__") or len(value) != 2:
        raise InvalidArgumentError(f"{name} must be an (x, y) pair, got {value!r}")
    return (
        validate_finite(value[0], f"{name}.x"),
        validate_finite(value[1], f"{name}.y"),
    )


def vec_add(a: Vec2, b: Vec2) -> Vec2:
    ax, ay = as_vec2(a, "a")
    bx, by = as_vec2(b, "b")
    return (ax + bx, ay + by)


def vec_sub(a: Vec2, b: Vec2) -> Vec2:
    ax, ay = as_vec2(a, "a")
    bx, by = as_vec2(b, "b")
    return (ax - bx, ay - by)


def vec_scale(v: Vec2, factor: float) -> Vec2:
    x, y = as_vec2(v, "v")
    k = validate_finite(factor, "factor")
    return (x * k, y * k)


def vec_dot(a: Vec2, b: Vec2) -> float:
    ax, ay = as_vec2(a, "a")
    bx, by = as_vec2(b, "b")
    return ax * bx + ay * by


def vec_cross(a: Vec2, b: Vec2) -> float:
    """z-компонента 3D векторного произведения (ax·by - ay·bx)."""
    ax, ay = as_vec2(a, "a")
    bx, by = as_vec2(b, "b")
    return ax * by - ay * bx


def vec_length(v: Vec2) -> float:
    x, y = as_vec2(v, "v")
    return math.hypot(x, y)


def vec_normalize(v: Vec2) -> Vec2:
    """
    Единичный вектор того же направления.

    Нулевой вектор: мягкое предупреждение и (0, 0).
    """
    x, y = as_vec2(v, "v")
    length = math.hypot(x, y)
    if length == 0.0:
        warn_questionable("vec_normalize: zero-length vector, returning (0, 0)")
        return ZERO
    return (x / length, y / length)


def vec_distance(a: Vec2, b: Vec2) -> float:
    return vec_length(vec_sub(b, a))


def vec_angle(v: Vec2) -> float:
    """Угол вектора относительно +x (atan2)."""
    x, y = as_vec2(v, "v")
    return math.atan2(y, x)


def vec_angle_between(a: Vec2, b: Vec2) -> float:
    """Знаковый угол поворота от a к b, диапазон (-π, π]."""
    return math.atan2(vec_cross(a, b), vec_dot(a, b))


def vec_rotate(v: Vec2, angle: float) -> Vec2:
    x, y = as_vec2(v, "v")
    theta = validate_finite(angle, "angle")
    c, s = math.cos(theta), math.sin(theta)
    return (x * c - y * s, x * s + y * c)


def vec_lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
    ax, ay = as_vec2(a, "a")
    bx, by = as_vec2(b, "b")
    t = validate_finite(t, "t")
    return (ax + (bx - ax) * t, ay + (by - ay) * t)


def vec_project(v: Vec2, onto: Vec2) -> Vec2:
    """
    Проекция v на onto (через единичный вектор onto, без |onto|²).

    Raises:
        DomainViolation: onto нулевой или проекция не представима в float
    """
    vx, vy = as_vec2(v, "v")
    ox, oy = as_vec2(onto, "onto")

    length = math.hypot(ox, oy)
    if length == 0.0:
        raise DomainViolation("cannot project onto a zero-length vector")

    ux, uy = ox / length, oy / length
    along = vx * ux + vy * uy
    result = (ux * along, uy * along)
    if not all(math.isfinite(c) for c in result):
        raise DomainViolation(f"projection of {v!r} onto {onto!r} overflows")
    return result


def vec_reflect(v: Vec2, normal: Vec2) -> Vec2:
    """Отражение v от поверхности с нормалью normal (нормаль нормализуется)."""
    n = vec_normalize(normal)
    return vec_sub(v, vec_scale(n, 2.0 * vec_dot(v, n)))


def vec_perpendicular(v: Vec2) -> Vec2:
    """Поворот на +90°."""
    x, y = as_vec2(v, "v")
    return (-y, x)


def vec_from_angle(angle: float, length: float = 1.0) -> Vec2:
    theta = validate_finite(angle, "angle")
    r = validate_finite(length, "length")
    return (r * math.cos(theta), r * math.sin(theta))
