"""
Finance records — строки и итог графика аннуитетных платежей

Immutable Pydantic модели. Создаются заново на каждый вызов
amortization_schedule и принадлежат вызывающему коду.
"""

from pydantic import BaseModel, Field, model_validator


class AmortizationRow(BaseModel):
    """Разбивка одного платежа на проценты и тело долга."""

    period: int = Field(..., ge=1, description="Номер платежа (с 1)")
    payment: float = Field(..., ge=0, description="Сумма платежа")
    interest: float = Field(..., ge=0, description="Процентная часть")
    principal: float = Field(..., ge=0, description="Погашение тела долга")
    balance: float = Field(..., ge=0, description="Остаток долга после платежа")

    model_config = {"frozen": True}


class AmortizationSchedule(BaseModel):
    """
    Полный график погашения кредита с фиксированной ставкой.

    Инвариант: len(rows) == periods, последний balance == 0.
    """

    principal: float = Field(..., gt=0, description="Сумма кредита")
    annual_rate: float = Field(..., ge=0, description="Годовая ставка, %")
    payments_per_year: int = Field(..., ge=1)
    periods: int = Field(..., ge=1, description="Общее число платежей")
    payment: float = Field(..., ge=0, description="Уровневый платёж")
    total_interest: float = Field(..., ge=0)
    total_paid: float = Field(..., ge=0)
    rows: tuple[AmortizationRow, ...]

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_rows_match_periods(self) -> "AmortizationSchedule":
        if len(self.rows) != self.periods:
            raise ValueError(
                f"schedule has {len(self.rows)} rows, expected {self.periods}"
            )
        return self
