"""
Domain models — immutable записи результатов.

Color, AmortizationRow/AmortizationSchedule, GroupRate/SimpsonParadoxData.
"""

from scriptkit.core.domain.color import Color
from scriptkit.core.domain.finance import AmortizationRow, AmortizationSchedule
from scriptkit.core.domain.paradox import GroupRate, SimpsonParadoxData

__all__ = [
    # Color
    "Color",
    # Finance
    "AmortizationRow",
    "AmortizationSchedule",
    # Paradox
    "GroupRate",
    "SimpsonParadoxData",
]
