"""
Core math modules для scriptkit

Математические примитивы и численные алгоритмы с явной валидацией входов.
"""

# Numerical Safeguards
from scriptkit.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Safe division / sanitization
    is_valid_float,
    safe_divide,
    sanitize_float,
    # Epsilon comparisons
    is_close,
    is_zero,
    # Utilities
    clamp,
    # Validation
    require_not_none,
    validate_finite,
    validate_in_range,
    validate_int,
    validate_non_negative,
    validate_positive,
    # Overflow guards
    checked_exp,
    checked_pow,
    ensure_finite_result,
)

# Basic helpers
from scriptkit.core.math.basic import (
    # Integers
    digit_sum,
    factorial,
    fibonacci,
    gcd,
    is_perfect_square,
    is_power_of_two,
    is_prime,
    lcm,
    next_power_of_two,
    powi,
    # Interpolation
    deg_to_rad,
    inverse_lerp,
    lerp,
    percentage,
    rad_to_deg,
    remap,
    sign,
    smoothstep,
    snapped,
    wrap,
    # Statistics
    mean,
    median,
    mode,
    std_dev,
    variance,
)

# Complex numbers (re, im)
from scriptkit.core.math.complex_numbers import (
    Complex,
    complex_abs,
    complex_add,
    complex_arg,
    complex_conjugate,
    complex_div,
    complex_from_polar,
    complex_mul,
    complex_pow,
    complex_sub,
    complex_to_string,
)

# 2D vectors
from scriptkit.core.math.vectors import (
    ZERO,
    Vec2,
    as_vec2,
    vec_add,
    vec_angle,
    vec_angle_between,
    vec_cross,
    vec_distance,
    vec_dot,
    vec_from_angle,
    vec_length,
    vec_lerp,
    vec_normalize,
    vec_perpendicular,
    vec_project,
    vec_reflect,
    vec_rotate,
    vec_scale,
    vec_sub,
)

# Numerical methods
from scriptkit.core.math.numerical_methods import (
    NewtonResult,
    derivative,
    find_root_bisection,
    find_root_newton,
    integrate_simpson,
    integrate_trapezoid,
    newton_solve,
)

# Geometry
from scriptkit.core.math.geometry import (
    circle_area,
    circle_circumference,
    cone_volume,
    cylinder_volume,
    distance,
    hypotenuse,
    manhattan_distance,
    midpoint,
    point_in_circle,
    point_in_polygon,
    point_in_rect,
    polygon_area,
    rectangle_area,
    rectangle_perimeter,
    sphere_surface_area,
    sphere_volume,
    triangle_area,
    triangle_area_heron,
)

# Seeded PRNG
from scriptkit.core.math.prng import PCG32, seeded_choice, seeded_shuffle

__all__ = [
    # Numerical Safeguards
    "EPS_CALC",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "is_valid_float",
    "safe_divide",
    "sanitize_float",
    "is_close",
    "is_zero",
    "clamp",
    "require_not_none",
    "validate_finite",
    "validate_in_range",
    "validate_int",
    "validate_non_negative",
    "validate_positive",
    "checked_exp",
    "checked_pow",
    "ensure_finite_result",
    # Basic
    "digit_sum",
    "factorial",
    "fibonacci",
    "gcd",
    "is_perfect_square",
    "is_power_of_two",
    "is_prime",
    "lcm",
    "next_power_of_two",
    "powi",
    "deg_to_rad",
    "inverse_lerp",
    "lerp",
    "percentage",
    "rad_to_deg",
    "remap",
    "sign",
    "smoothstep",
    "snapped",
    "wrap",
    "mean",
    "median",
    "mode",
    "std_dev",
    "variance",
    # Complex
    "Complex",
    "complex_abs",
    "complex_add",
    "complex_arg",
    "complex_conjugate",
    "complex_div",
    "complex_from_polar",
    "complex_mul",
    "complex_pow",
    "complex_sub",
    "complex_to_string",
    # Vectors
    "ZERO",
    "Vec2",
    "as_vec2",
    "vec_add",
    "vec_angle",
    "vec_angle_between",
    "vec_cross",
    "vec_distance",
    "vec_dot",
    "vec_from_angle",
    "vec_length",
    "vec_lerp",
    "vec_normalize",
    "vec_perpendicular",
    "vec_project",
    "vec_reflect",
    "vec_rotate",
    "vec_scale",
    "vec_sub",
    # Numerical methods
    "NewtonResult",
    "derivative",
    "find_root_bisection",
    "find_root_newton",
    "integrate_simpson",
    "integrate_trapezoid",
    "newton_solve",
    # Geometry
    "circle_area",
    "circle_circumference",
    "cone_volume",
    "cylinder_volume",
    "distance",
    "hypotenuse",
    "manhattan_distance",
    "midpoint",
    "point_in_circle",
    "point_in_polygon",
    "point_in_rect",
    "polygon_area",
    "rectangle_area",
    "rectangle_perimeter",
    "sphere_surface_area",
    "sphere_volume",
    "triangle_area",
    "triangle_area_heron",
    # PRNG
    "PCG32",
    "seeded_choice",
    "seeded_shuffle",
]
