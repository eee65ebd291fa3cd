"""
Physics — toy-формулы для геймплейных расчётов.
"""

from scriptkit.physics.formulas import (
    GRAVITATIONAL_CONSTANT,
    GRAVITY_EARTH,
    SPEED_OF_LIGHT,
    escape_velocity,
    force,
    free_fall_distance,
    free_fall_velocity,
    gravitational_force,
    kinetic_energy,
    lorentz_factor,
    momentum,
    ohms_law_voltage,
    potential_energy,
    projectile_flight_time,
    projectile_max_height,
    projectile_range,
    time_dilation,
    wave_speed,
    weight,
)

__all__ = [
    # Constants
    "GRAVITATIONAL_CONSTANT",
    "GRAVITY_EARTH",
    "SPEED_OF_LIGHT",
    # Functions
    "escape_velocity",
    "force",
    "free_fall_distance",
    "free_fall_velocity",
    "gravitational_force",
    "kinetic_energy",
    "lorentz_factor",
    "momentum",
    "ohms_law_voltage",
    "potential_energy",
    "projectile_flight_time",
    "projectile_max_height",
    "projectile_range",
    "time_dilation",
    "wave_speed",
    "weight",
]
