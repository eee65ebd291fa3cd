"""
Physics — школьные формулы механики, гравитации и СТО

Единицы СИ. Масса, время, расстояние — неотрицательные
(иначе InvalidArgumentError). Сопротивление воздуха не учитывается.
"""

import math
from typing import Final

from scriptkit.core.errors import DomainViolation
from scriptkit.core.math.numerical_safeguards import (
    validate_finite,
    validate_non_negative,
    validate_positive,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

GRAVITY_EARTH: Final[float] = 9.80665  # м/с²
GRAVITATIONAL_CONSTANT: Final[float] = 6.67430e-11  # м³/(кг·с²)
SPEED_OF_LIGHT: Final[float] = 299_792_458.0  # м/с


# =============================================================================
# МЕХАНИКА
# =============================================================================


def kinetic_energy(mass: float, velocity: float) -> float:
    """E_k = m·v²/2"""
    m = validate_non_negative(mass, "mass")
    v = validate_finite(velocity, "velocity")
    return 0.5 * m * v * v


def potential_energy(mass: float, height: float, gravity: float = GRAVITY_EARTH) -> float:
    """E_p = m·g·h (h может быть отрицательной относительно уровня отсчёта)"""
    m = validate_non_negative(mass, "mass")
    return m * validate_finite(gravity, "gravity") * validate_finite(height, "height")


def momentum(mass: float, velocity: float) -> float:
    return validate_non_negative(mass, "mass") * validate_finite(velocity, "velocity")


def force(mass: float, acceleration: float) -> float:
    """F = m·a"""
    return validate_non_negative(mass, "mass") * validate_finite(acceleration, "acceleration")


def weight(mass: float, gravity: float = GRAVITY_EARTH) -> float:
    return force(mass, gravity)


def free_fall_distance(time: float, gravity: float = GRAVITY_EARTH) -> float:
    """h = g·t²/2"""
    t = validate_non_negative(time, "time")
    return 0.5 * validate_finite(gravity, "gravity") * t * t


def free_fall_velocity(time: float, gravity: float = GRAVITY_EARTH) -> float:
    return validate_finite(gravity, "gravity") * validate_non_negative(time, "time")


# =============================================================================
# БАЛЛИСТИКА (старт и финиш на одной высоте)
# =============================================================================


def projectile_range(speed: float, angle_deg: float, gravity: float = GRAVITY_EARTH) -> float:
    """R = v²·sin(2θ)/g"""
    v = validate_non_negative(speed, "speed")
    g = validate_positive(gravity, "gravity")
    theta = math.radians(validate_finite(angle_deg, "angle_deg"))
    return v * v * math.sin(2.0 * theta) / g


def projectile_max_height(speed: float, angle_deg: float, gravity: float = GRAVITY_EARTH) -> float:
    """H = (v·sinθ)²/(2g)"""
    v = validate_non_negative(speed, "speed")
    g = validate_positive(gravity, "gravity")
    vy = v * math.sin(math.radians(validate_finite(angle_deg, "angle_deg")))
    return vy * vy / (2.0 * g)


def projectile_flight_time(speed: float, angle_deg: float, gravity: float = GRAVITY_EARTH) -> float:
    """T = 2·v·sinθ/g"""
    v = validate_non_negative(speed, "speed")
    g = validate_positive(gravity, "gravity")
    vy = v * math.sin(math.radians(validate_finite(angle_deg, "angle_deg")))
    return 2.0 * vy / g


# =============================================================================
# ГРАВИТАЦИЯ
# =============================================================================


def gravitational_force(mass1: float, mass2: float, distance: float) -> float:
    """F = G·m1·m2/r²"""
    m1 = validate_non_negative(mass1, "mass1")
    m2 = validate_non_negative(mass2, "mass2")
    r = validate_positive(distance, "distance")
    return GRAVITATIONAL_CONSTANT * m1 * m2 / (r * r)


def escape_velocity(mass: float, radius: float) -> float:
    """v = sqrt(2·G·M/r)"""
    m = validate_non_negative(mass, "mass")
    r = validate_positive(radius, "radius")
    return math.sqrt(2.0 * GRAVITATIONAL_CONSTANT * m / r)


# =============================================================================
# СТО
# =============================================================================


def lorentz_factor(velocity: float) -> float:
    """
    γ = 1 / sqrt(1 - v²/c²)

    Raises:
        DomainViolation: |v| >= c
    """
    v = validate_finite(velocity, "velocity")
    if abs(v) >= SPEED_OF_LIGHT:
        raise DomainViolation(f"|velocity| must be below the speed of light, got {v}")
    beta = v / SPEED_OF_LIGHT
    return 1.0 / math.sqrt(1.0 - beta * beta)


def time_dilation(proper_time: float, velocity: float) -> float:
    """Время в неподвижной системе отсчёта: Δt = γ·Δt₀"""
    return validate_non_negative(proper_time, "proper_time") * lorentz_factor(velocity)


# =============================================================================
# ПРОЧЕЕ
# =============================================================================


def ohms_law_voltage(current: float, resistance: float) -> float:
    """U = I·R"""
    return validate_finite(current, "current") * validate_non_negative(resistance, "resistance")


def wave_speed(frequency: float, wavelength: float) -> float:
    """v = f·λ"""
    return validate_non_negative(frequency, "frequency") * validate_non_negative(wavelength, "wavelength")
