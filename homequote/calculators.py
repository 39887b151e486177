from __future__ import annotations
import logging
import math
from typing import Iterable, List, Sequence, Tuple

import pandas as pd

from homequote.errors import InvalidInput, NumericError
from homequote.models import AmortizationRow, LoanInputs, PaymentBreakdown
from homequote.presets import (
    PMI_ANNUAL_PCT,
    PMI_DOWN_PAYMENT_THRESHOLD,
    SAMPLED_FIRST_MONTHS,
    SAMPLED_MONTHS,
)

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = ["Month", "Payment", "Principal", "Interest", "Balance"]


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Form values restored from a saved session can be ``None`` or blank
    strings.  This helper mirrors the spreadsheet ``NZ()`` function and keeps
    later math from breaking when a value is missing.
    """

    try:
        if x is None or (isinstance(x, float) and math.isnan(x)):
            return default
        return float(x)
    except (TypeError, ValueError):
        return default


def monthly_payment(principal, annual_rate_pct, term_years):
    """Calculate the fully amortizing monthly payment for a loan.

    ``principal`` is the starting loan amount, ``annual_rate_pct`` is the
    nominal yearly interest rate (e.g. ``6.5`` for 6.5%), and ``term_years`` is
    the amortization period in years.  A zero (or negligible) rate falls back to
    straight-line repayment.
    """

    L = nz(principal)
    r = nz(annual_rate_pct) / 100 / 12
    n = int(nz(term_years) * 12)
    if n <= 0:
        return 0.0
    if abs(r) < 1e-9:
        return L / n
    return (r * L) / (1 - (1 + r) ** (-n))


def principal_from_payment(payment, annual_rate_pct, term_years):
    """Reverse amortization to find the loan amount for a given payment.

    Used when qualifying a borrower: given a payment target, rate and term,
    determine the maximum principal that fits the scenario.
    """

    P = nz(payment)
    r = nz(annual_rate_pct) / 100 / 12
    n = int(nz(term_years) * 12)
    if n <= 0:
        return 0.0
    if abs(r) < 1e-9:
        return P * n
    return P * (1 - (1 + r) ** (-n)) / r


def validate_loan_inputs(inputs: LoanInputs) -> None:
    """Raise ``InvalidInput`` when the loan inputs cannot be amortized."""

    for name in (
        "home_price",
        "down_payment",
        "annual_interest_rate_pct",
        "annual_property_tax_rate_pct",
        "annual_insurance_premium",
    ):
        if not math.isfinite(getattr(inputs, name)):
            raise InvalidInput(f"{name} must be a finite number")
    if inputs.home_price <= 0:
        raise InvalidInput("Home price must be greater than zero.")
    if inputs.down_payment < 0:
        raise InvalidInput("Down payment cannot be negative.")
    if inputs.down_payment >= inputs.home_price:
        raise InvalidInput("Down payment must be less than the home price.")
    if inputs.annual_interest_rate_pct < 0:
        raise InvalidInput("Interest rate cannot be negative.")
    if inputs.term_years <= 0:
        raise InvalidInput("Loan term must be at least one year.")
    if inputs.annual_property_tax_rate_pct < 0:
        raise InvalidInput("Property tax rate cannot be negative.")
    if inputs.annual_insurance_premium < 0:
        raise InvalidInput("Insurance premium cannot be negative.")


def _require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise NumericError(f"{name} is not a finite number ({value!r})")


def is_sampled_month(month: int, num_payments: int) -> bool:
    """Whether ``month`` belongs in the condensed schedule shown to clients."""

    return month <= SAMPLED_FIRST_MONTHS or month in SAMPLED_MONTHS or month == num_payments


def sample_schedule(rows: Sequence[AmortizationRow]) -> List[AmortizationRow]:
    """Reduce a full schedule to the first year, five-year marks and payoff."""

    if not rows:
        return []
    last = rows[-1].month
    return [row for row in rows if is_sampled_month(row.month, last)]


def compute_schedule(
    inputs: LoanInputs,
    full: bool = False,
    pmi_annual_pct: float = PMI_ANNUAL_PCT,
) -> Tuple[PaymentBreakdown, List[AmortizationRow]]:
    """Break the monthly housing payment into PITI and amortize the loan.

    Returns the payment breakdown and the amortization rows.  By default the
    rows are condensed to months 1-12, every fifth year through year 25 and
    the final payment; pass ``full=True`` for every month.  PMI only applies
    when requested and the down payment is under 20% of the price.
    """

    validate_loan_inputs(inputs)
    if not math.isfinite(pmi_annual_pct) or pmi_annual_pct < 0:
        raise InvalidInput("PMI rate must be a non-negative number.")
    principal = inputs.home_price - inputs.down_payment
    monthly_rate = inputs.annual_interest_rate_pct / 100 / 12
    num_payments = inputs.term_years * 12

    try:
        pi = monthly_payment(principal, inputs.annual_interest_rate_pct, inputs.term_years)
    except (OverflowError, ZeroDivisionError) as exc:
        raise NumericError("Rate and term are outside the range the payment formula supports.") from exc
    _require_finite(principal_and_interest=pi)

    taxes = inputs.home_price * (inputs.annual_property_tax_rate_pct / 100) / 12
    insurance = inputs.annual_insurance_premium / 12
    down_fraction = inputs.down_payment / inputs.home_price
    pmi = 0.0
    if inputs.include_pmi and down_fraction < PMI_DOWN_PAYMENT_THRESHOLD:
        pmi = principal * (pmi_annual_pct / 100) / 12
    total = pi + taxes + insurance + pmi
    total_interest = pi * num_payments - principal
    total_cost = total * num_payments
    _require_finite(
        monthly_property_tax=taxes,
        monthly_pmi=pmi,
        total_monthly_payment=total,
        total_cost_over_term=total_cost,
    )

    rows: List[AmortizationRow] = []
    balance = principal
    for month in range(1, num_payments + 1):
        interest = balance * monthly_rate
        principal_portion = pi - interest
        balance -= principal_portion
        if full or is_sampled_month(month, num_payments):
            rows.append(
                AmortizationRow(
                    month=month,
                    payment_amount=pi,
                    principal_portion=principal_portion,
                    interest_portion=interest,
                    remaining_balance=max(0.0, balance),
                )
            )
    _require_finite(remaining_balance=balance)

    logger.debug(
        "Amortized %.2f at %.3f%% over %d months: P&I %.2f, total %.2f",
        principal,
        inputs.annual_interest_rate_pct,
        num_payments,
        pi,
        total,
    )
    breakdown = PaymentBreakdown(
        principal=principal,
        principal_and_interest=pi,
        monthly_property_tax=taxes,
        monthly_insurance=insurance,
        monthly_pmi=pmi,
        total_monthly_payment=total,
        total_interest_over_term=total_interest,
        total_cost_over_term=total_cost,
    )
    return breakdown, rows


def schedule_frame(rows: Iterable[AmortizationRow]) -> pd.DataFrame:
    """Tabulate amortization rows for display or CSV export."""

    data = [
        {
            "Month": r.month,
            "Payment": r.payment_amount,
            "Principal": r.principal_portion,
            "Interest": r.interest_portion,
            "Balance": r.remaining_balance,
        }
        for r in rows
    ]
    return pd.DataFrame(data, columns=SCHEDULE_COLUMNS)


def compare_rates(
    inputs: LoanInputs,
    rates: Sequence[float],
    terms: Sequence[int] = (15, 30),
    pmi_annual_pct: float = PMI_ANNUAL_PCT,
) -> pd.DataFrame:
    """Quote the same purchase across several rate and term combinations."""

    records = []
    for term in terms:
        for rate in rates:
            scenario = inputs.model_copy(
                update={"annual_interest_rate_pct": float(rate), "term_years": int(term)}
            )
            breakdown, _ = compute_schedule(scenario, pmi_annual_pct=pmi_annual_pct)
            records.append(
                {
                    "RatePct": float(rate),
                    "TermYears": int(term),
                    "MonthlyPI": breakdown.principal_and_interest,
                    "TotalMonthly": breakdown.total_monthly_payment,
                    "TotalInterest": breakdown.total_interest_over_term,
                    "TotalCost": breakdown.total_cost_over_term,
                }
            )
    return pd.DataFrame(
        records,
        columns=["RatePct", "TermYears", "MonthlyPI", "TotalMonthly", "TotalInterest", "TotalCost"],
    )
