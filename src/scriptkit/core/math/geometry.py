"""
Geometry — площади, объёмы и point-in-shape проверки

Длины и радиусы должны быть неотрицательными (иначе InvalidArgumentError).
Точки и вершины — пары (x, y).
"""

import math
from collections.abc import Sequence

from scriptkit.core.errors import DomainViolation, InvalidArgumentError
from scriptkit.core.math.numerical_safeguards import EPS_CALC, validate_non_negative
from scriptkit.core.math.vectors import Vec2, as_vec2


# =============================================================================
# ТРЕУГОЛЬНИКИ
# =============================================================================


def triangle_area_heron(a: float, b: float, c: float) -> float:
    """
    Площадь треугольника по формуле Герона.

        s = (a + b + c) / 2
        S = sqrt(s(s-a)(s-b)(s-c))

    Raises:
        DomainViolation: стороны нарушают неравенство треугольника

    Examples:
        >>> triangle_area_heron(3, 4, 5)
        6.0
    """
    sa = validate_non_negative(a, "a")
    sb = validate_non_negative(b, "b")
    sc = validate_non_negative(c, "c")

    if sa + sb < sc or sa + sc < sb or sb + sc < sa:
        raise DomainViolation(f"sides {a}, {b}, {c} violate the triangle inequality")

    s = (sa + sb + sc) / 2.0
    # Вырожденный треугольник может дать -0.0 / -1e-17 из-за округления
    product = max(s * (s - sa) * (s - sb) * (s - sc), 0.0)
    return math.sqrt(product)


def triangle_area(base: float, height: float) -> float:
    return validate_non_negative(base, "base") * validate_non_negative(height, "height") / 2.0


def hypotenuse(a: float, b: float) -> float:
    return math.hypot(validate_non_negative(a, "a"), validate_non_negative(b, "b"))


# =============================================================================
# ПЛОСКИЕ ФИГУРЫ
# =============================================================================


def circle_area(radius: float) -> float:
    r = validate_non_negative(radius, "radius")
    return math.pi * r * r


def circle_circumference(radius: float) -> float:
    return 2.0 * math.pi * validate_non_negative(radius, "radius")


def rectangle_area(width: float, height: float) -> float:
    return validate_non_negative(width, "width") * validate_non_negative(height, "height")


def rectangle_perimeter(width: float, height: float) -> float:
    return 2.0 * (validate_non_negative(width, "width") + validate_non_negative(height, "height"))


def _as_polygon(points: Sequence[Vec2]) -> list[Vec2]:
    if points is None or len(points) < 3:
        raise InvalidArgumentError("polygon requires at least 3 points")
    return [as_vec2(p, f"points[{i}]") for i, p in enumerate(points)]


def polygon_area(points: Sequence[Vec2]) -> float:
    """
    Площадь простого многоугольника (shoelace formula), всегда >= 0.

    Examples:
        >>> polygon_area([(0, 0), (4, 0), (4, 3), (0, 3)])
        12.0
    """
    vertices = _as_polygon(points)
    twice_area = 0.0
    for i, (x1, y1) in enumerate(vertices):
        x2, y2 = vertices[(i + 1) % len(vertices)]
        twice_area += x1 * y2 - x2 * y1
    return abs(twice_area) / 2.0


# =============================================================================
# ТЕЛА
# =============================================================================


def sphere_volume(radius: float) -> float:
    r = validate_non_negative(radius, "radius")
    return 4.0 / 3.0 * math.pi * r * r * r


def sphere_surface_area(radius: float) -> float:
    r = validate_non_negative(radius, "radius")
    return 4.0 * math.pi * r * r


def cylinder_volume(radius: float, height: float) -> float:
    return circle_area(radius) * validate_non_negative(height, "height")


def cone_volume(radius: float, height: float) -> float:
    return cylinder_volume(radius, height) / 3.0


# =============================================================================
# POINT-IN-SHAPE
# =============================================================================


def point_in_rect(point: Vec2, origin: Vec2, size: Vec2) -> bool:
    """Точка внутри прямоугольника [origin, origin + size] (границы включены)."""
    px, py = as_vec2(point, "point")
    ox, oy = as_vec2(origin, "origin")
    w, h = as_vec2(size, "size")
    return ox <= px <= ox + w and oy <= py <= oy + h


def point_in_circle(point: Vec2, center: Vec2, radius: float) -> bool:
    px, py = as_vec2(point, "point")
    cx, cy = as_vec2(center, "center")
    r = validate_non_negative(radius, "radius")
    dx, dy = px - cx, py - cy
    return dx * dx + dy * dy <= r * r + EPS_CALC


def point_in_polygon(point: Vec2, points: Sequence[Vec2]) -> bool:
    """
    Ray casting (even-odd rule). Точки ровно на ребре могут дать любой ответ.
    """
    px, py = as_vec2(point, "point")
    vertices = _as_polygon(points)

    inside = False
    j = len(vertices) - 1
    for i in range(len(vertices)):
        xi, yi = vertices[i]
        xj, yj = vertices[j]
        if (yi > py) != (yj > py):
            x_cross = xi + (py - yi) * (xj - xi) / (yj - yi)
            if px < x_cross:
                inside = not inside
        j = i

    return inside


def distance(a: Vec2, b: Vec2) -> float:
    ax, ay = as_vec2(a, "a")
    bx, by = as_vec2(b, "b")
    return math.hypot(bx - ax, by - ay)


def manhattan_distance(a: Vec2, b: Vec2) -> float:
    ax, ay = as_vec2(a, "a")
    bx, by = as_vec2(b, "b")
    return abs(bx - ax) + abs(by - ay)


def midpoint(a: Vec2, b: Vec2) -> Vec2:
    ax, ay = as_vec2(a, "a")
    bx, by = as_vec2(b, "b")
    return ((ax + bx) / 2.0, (ay + by) / 2.0)

