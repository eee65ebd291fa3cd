"""
Finance — проценты, аннуитеты, график погашения, NPV/IRR, Black-Scholes.
"""

# Interest (ставки в процентах)
from scriptkit.finance.interest import (
    CompoundingPeriods,
    cagr,
    compound_interest,
    compounding_periods,
    future_value,
    loan_payment,
    present_value,
    return_on_investment,
    simple_interest,
    simple_intrst,
)

# Amortization
from scriptkit.finance.amortization import (
    amortization_schedule,
    schedule_to_dict,
    write_schedule_json,
)

# Cash flows (ставки в долях)
from scriptkit.finance.cashflows import (
    IRRResult,
    internal_rate_of_return,
    irr_solve,
    net_present_value,
)

# Options
from scriptkit.finance.options import (
    black_scholes_call,
    black_scholes_put,
    erf_approx,
    normal_cdf,
)

__all__ = [
    # Interest
    "CompoundingPeriods",
    "cagr",
    "compound_interest",
    "compounding_periods",
    "future_value",
    "loan_payment",
    "present_value",
    "return_on_investment",
    "simple_interest",
    "simple_intrst",
    # Amortization
    "amortization_schedule",
    "schedule_to_dict",
    "write_schedule_json",
    # Cash flows
    "IRRResult",
    "internal_rate_of_return",
    "irr_solve",
    "net_present_value",
    # Options
    "black_scholes_call",
    "black_scholes_put",
    "erf_approx",
    "normal_cdf",
]
