"""
Тесты для графика погашения и JSON Schema контракта

Проверяет:
1. Инварианты графика (число строк, нулевой итоговый остаток, суммы)
2. Immutability pydantic-моделей
3. Валидацию экспорта по amortization_schedule.json
4. Запись/чтение графика через utils.files
"""

import json

import pytest
from pydantic import ValidationError

from scriptkit.core.contracts import (
    AmortizationScheduleValidator,
    ContractValidator,
    SchemaLoader,
    validate_against,
    validate_amortization_schedule,
)
from scriptkit.core.domain.finance import AmortizationRow, AmortizationSchedule
from scriptkit.core.errors import ContractViolation, InvalidArgumentError
from scriptkit.finance.amortization import amortization_schedule, schedule_to_dict, write_schedule_json
from scriptkit.utils.files import read_json


@pytest.fixture
def mortgage() -> AmortizationSchedule:
    """100k на 30 лет под 6% годовых, ежемесячные платежи"""
    return amortization_schedule(100_000, 6, 30)


@pytest.fixture
def schedule_dict(mortgage) -> dict:
    return schedule_to_dict(mortgage)


# =============================================================================
# ГРАФИК ПОГАШЕНИЯ
# =============================================================================


class TestAmortizationSchedule:
    def test_shape(self, mortgage) -> None:
        assert mortgage.periods == 360
        assert len(mortgage.rows) == 360
        assert [row.period for row in mortgage.rows[:3]] == [1, 2, 3]

    def test_payment(self, mortgage) -> None:
        assert mortgage.payment == pytest.approx(599.55, abs=0.01)

    def test_final_balance_is_zero(self, mortgage) -> None:
        assert mortgage.rows[-1].balance == 0.0

    def test_principal_parts_sum_to_principal(self, mortgage) -> None:
        assert sum(row.principal for row in mortgage.rows) == pytest.approx(100_000, abs=1e-6)

    def test_totals_consistent(self, mortgage) -> None:
        assert mortgage.total_paid == pytest.approx(mortgage.total_interest + 100_000)
        assert mortgage.total_interest == pytest.approx(sum(r.interest for r in mortgage.rows))

    def test_interest_decreases_over_time(self, mortgage) -> None:
        assert mortgage.rows[0].interest == pytest.approx(500.0)
        assert mortgage.rows[0].interest > mortgage.rows[-1].interest

    def test_zero_rate(self) -> None:
        schedule = amortization_schedule(1200, 0, 1)
        assert schedule.payment == 100.0
        assert schedule.total_interest == 0.0
        assert all(row.principal == pytest.approx(100.0) for row in schedule.rows)

    def test_quarterly(self) -> None:
        schedule = amortization_schedule(10_000, 8, 2, payments_per_year=4)
        assert schedule.periods == 8

    @pytest.mark.parametrize(
        "args",
        [(0, 5, 10), (1000, -1, 10), (1000, 5, 0), (1000, 5, 0.01)],
    )
    def test_invalid_parameters(self, args) -> None:
        with pytest.raises(InvalidArgumentError):
            amortization_schedule(*args)


class TestFinanceModels:
    def test_schedule_is_frozen(self, mortgage) -> None:
        with pytest.raises(ValidationError):
            mortgage.payment = 1.0

    def test_row_count_must_match_periods(self, mortgage) -> None:
        with pytest.raises(ValidationError, match="rows"):
            AmortizationSchedule(
                principal=1000,
                annual_rate=0,
                payments_per_year=12,
                periods=2,
                payment=500,
                total_interest=0,
                total_paid=1000,
                rows=(AmortizationRow(period=1, payment=500, interest=0, principal=500, balance=500),),
            )

    def test_row_rejects_negative_balance(self) -> None:
        with pytest.raises(ValidationError):
            AmortizationRow(period=1, payment=1, interest=0, principal=1, balance=-1)


# =============================================================================
# КОНТРАКТ
# =============================================================================


class TestAmortizationContract:
    def test_valid_export(self, schedule_dict) -> None:
        validate_amortization_schedule(schedule_dict)
        assert AmortizationScheduleValidator().is_valid(schedule_dict)

    def test_rows_serialized_as_list(self, schedule_dict) -> None:
        assert isinstance(schedule_dict["rows"], list)
        assert schedule_dict["rows"][0]["period"] == 1

    def test_missing_field(self, schedule_dict) -> None:
        del schedule_dict["payment"]
        with pytest.raises(ContractViolation, match="payment"):
            validate_amortization_schedule(schedule_dict)

    def test_extra_field(self, schedule_dict) -> None:
        schedule_dict["currency"] = "USD"
        with pytest.raises(ContractViolation):
            validate_amortization_schedule(schedule_dict)

    def test_error_reports_path(self, schedule_dict) -> None:
        schedule_dict["rows"][2]["balance"] = -5.0
        with pytest.raises(ContractViolation, match="rows/2/balance"):
            validate_amortization_schedule(schedule_dict)

    def test_iter_errors_collects_all(self, schedule_dict) -> None:
        schedule_dict["periods"] = 0
        schedule_dict["principal"] = -1
        errors = list(AmortizationScheduleValidator().iter_errors(schedule_dict))
        assert len(errors) == 2


class TestContractValidator:
    def test_exactly_one_source_required(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ContractValidator()
        with pytest.raises(InvalidArgumentError):
            ContractValidator("amortization_schedule", {"type": "object"})

    def test_unknown_schema(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Schema not found"):
            ContractValidator("no_such_schema")

    def test_invalid_inline_schema(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ContractValidator(schema={"type": "not-a-type"})

    def test_validate_against_inline(self) -> None:
        schema = {"type": "object", "required": ["level"], "properties": {"level": {"type": "integer"}}}
        validate_against({"level": 3}, schema)
        with pytest.raises(ContractViolation):
            validate_against({"level": "3"}, schema)

    def test_loader_caches(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("amortization_schedule") is loader.load_schema("amortization_schedule")

    def test_loader_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "missing")


# =============================================================================
# ЭКСПОРТ
# =============================================================================


class TestScheduleExport:
    def test_write_and_read_back(self, mortgage, tmp_path) -> None:
        path = write_schedule_json(mortgage, tmp_path / "out" / "schedule.json")
        assert path.exists()

        data = read_json(path)
        validate_amortization_schedule(data)
        assert AmortizationSchedule.model_validate(data) == mortgage

    def test_file_is_pretty_printed(self, mortgage, tmp_path) -> None:
        path = write_schedule_json(mortgage, tmp_path / "schedule.json")
        text = path.read_text(encoding="utf-8")
        assert text.startswith("{\n  ")
        assert json.loads(text)["periods"] == 360
