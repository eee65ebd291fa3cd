"""
Paradox records — иллюстративные наборы данных для парадоксов вероятности
"""

from pydantic import BaseModel, Field, computed_field


class GroupRate(BaseModel):
    """Успехи/попытки в одной группе для одного варианта лечения."""

    successes: int = Field(..., ge=0)
    trials: int = Field(..., gt=0)

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def rate(self) -> float:
        return self.successes / self.trials


class SimpsonParadoxData(BaseModel):
    """
    Фиксированный пример парадокса Симпсона.

    Вариант A лучше B в каждой группе, но хуже в объединённой выборке.
    """

    treatment_a: dict[str, GroupRate]
    treatment_b: dict[str, GroupRate]
    combined_a: GroupRate
    combined_b: GroupRate
    paradox_holds: bool

    model_config = {"frozen": True}
