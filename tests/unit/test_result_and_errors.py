"""
Тесты для иерархии ошибок, мягких предупреждений и attempt()/Outcome
"""

import logging
import warnings

import pytest

from scriptkit.core.errors import (
    ContractViolation,
    DomainViolation,
    InvalidArgumentError,
    QuestionableInputWarning,
    ScriptKitError,
    warn_questionable,
)
from scriptkit.core.math.basic import percentage, powi
from scriptkit.core.math.complex_numbers import complex_div
from scriptkit.core.result import Issue, Outcome, Severity, attempt
from scriptkit.utils.containers import array_average


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "exc_type,code",
        [
            (InvalidArgumentError, "invalid_argument"),
            (DomainViolation, "domain_violation"),
            (ContractViolation, "contract_violation"),
        ],
    )
    def test_codes(self, exc_type, code) -> None:
        assert issubclass(exc_type, ScriptKitError)
        assert exc_type.code == code

    def test_argument_errors_are_value_errors(self) -> None:
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(DomainViolation, ValueError)


class TestWarnQuestionable:
    def test_emits_warning_category(self) -> None:
        with pytest.warns(QuestionableInputWarning, match="odd input"):
            warn_questionable("odd input")

    def test_logs_at_warning_level(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="scriptkit.core.errors"):
            with warnings.catch_warnings():
                warnings.simplefilter("ignore")
                warn_questionable("logged input")
        assert "logged input" in caplog.text

    def test_warning_points_at_caller(self) -> None:
        """stacklevel указывает на код, вызвавший функцию каталога"""
        with pytest.warns(QuestionableInputWarning) as record:
            percentage(1, 0)
        assert record[0].filename.endswith("test_result_and_errors.py")


class TestAttempt:
    def test_success(self) -> None:
        outcome = attempt(powi, 2, 10)
        assert outcome.ok
        assert outcome.value == 1024
        assert outcome.error is None
        assert outcome.warnings == ()
        assert outcome.unwrap() == 1024

    def test_hard_error_returns_fallback(self) -> None:
        outcome = attempt(powi, 2, -1, fallback=0)
        assert not outcome.ok
        assert outcome.value == 0
        assert outcome.error.severity is Severity.ERROR
        assert outcome.error.code == "invalid_argument"

    def test_domain_error(self) -> None:
        outcome = attempt(complex_div, (1.0, 0.0), (0.0, 0.0), fallback=(0.0, 0.0))
        assert outcome.error.code == "domain_violation"
        assert outcome.value == (0.0, 0.0)

    def test_unwrap_failure_raises(self) -> None:
        with pytest.raises(ScriptKitError, match="invalid_argument"):
            attempt(powi, 2, -1).unwrap()

    def test_soft_warnings_collected(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            outcome = attempt(array_average, [])
        assert outcome.ok
        assert outcome.value == 0.0
        assert len(outcome.warnings) == 1
        assert outcome.warnings[0].severity is Severity.WARNING
        assert outcome.warnings[0].code == "QuestionableInputWarning"

    def test_kwargs_forwarded(self) -> None:
        outcome = attempt(percentage, part=1, whole=4)
        assert outcome.value == 25.0

    def test_foreign_exceptions_propagate(self) -> None:
        def broken() -> None:
            raise KeyError("bug")

        with pytest.raises(KeyError):
            attempt(broken)

    def test_outcome_is_frozen(self) -> None:
        outcome = Outcome(value=1, error=Issue(Severity.ERROR, "x", "y"))
        with pytest.raises(AttributeError):
            outcome.value = 2
