"""
Core primitives: ошибки, Outcome, конфигурация, математика, domain-модели и контракты.

Не зависит от host engine.
"""
