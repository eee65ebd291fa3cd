"""
Probability — парадоксы и симуляции.
"""

from scriptkit.probability.paradoxes import (
    BENFORD_DIGITS,
    benford_distribution,
    benford_expected,
    benford_observed,
    birthday_paradox,
    monty_hall,
    simpsons_paradox_example,
)

__all__ = [
    "BENFORD_DIGITS",
    "benford_distribution",
    "benford_expected",
    "benford_observed",
    "birthday_paradox",
    "monty_hall",
    "simpsons_paradox_example",
]
