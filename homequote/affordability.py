"""Instant pre-qualification estimate.

A single deterministic pass: the credit tier and loan program pick a rate,
the program's DTI ceiling sets the housing budget, and the purchase price is
the lower of what the income supports and what the cash on hand can close.
"""
from __future__ import annotations
import logging
import math
from typing import Dict

from homequote.calculators import monthly_payment, principal_from_payment
from homequote.errors import InvalidInput, NumericError
from homequote.models import AffordabilityInputs, AffordabilityResult
from homequote.presets import (
    BASE_RATE_BY_CREDIT_TIER,
    CLOSING_COST_RESERVE_PCT,
    CREDIT_TIERS,
    MAX_DTI_BY_PROGRAM,
    MIN_DOWN_PCT_BY_PROGRAM,
    MODERATE_DTI_LIMIT,
    PREQUAL_TERM_MONTHS,
    PROGRAM_RATE_ADJUSTMENT,
    QUALIFIED_DTI_LIMIT,
    QUALIFIED_MIN_PRICE,
    SAFETY_HAIRCUT,
    STRONG_DTI_LIMIT,
)
from homequote.rules import evaluate_program_eligibility, evaluate_recommendations

logger = logging.getLogger(__name__)

PREQUAL_TERM_YEARS = PREQUAL_TERM_MONTHS / 12


def qualification_tier(dti_pct: float, max_purchase_price: float, credit_tier: str) -> str:
    """Classify a result as ``strong``, ``moderate`` or ``weak``.

    Both DTI limits are exclusive: a DTI of exactly 36% is ``moderate``.
    """

    if (
        max_purchase_price > QUALIFIED_MIN_PRICE
        and dti_pct < STRONG_DTI_LIMIT
        and credit_tier != "poor"
    ):
        return "strong"
    if dti_pct < MODERATE_DTI_LIMIT:
        return "moderate"
    return "weak"


def is_qualified(dti_pct: float, max_purchase_price: float) -> bool:
    return max_purchase_price > QUALIFIED_MIN_PRICE and dti_pct < QUALIFIED_DTI_LIMIT


def _validate(inputs: AffordabilityInputs, base_rates: Dict[str, float], rate_adjustments: Dict[str, float]) -> None:
    for name in (
        "annual_income",
        "additional_annual_income",
        "monthly_debt_payments",
        "liquid_savings",
        "gift_funds",
    ):
        value = getattr(inputs, name)
        if not math.isfinite(value) or value < 0:
            raise InvalidInput(f"{name} must be a non-negative amount")
    down = inputs.desired_down_payment_pct
    if not math.isfinite(down) or down < 0 or down >= 100:
        raise InvalidInput("Down payment percent must be at least 0 and below 100.")
    if inputs.annual_income + inputs.additional_annual_income <= 0:
        raise InvalidInput("Enter income greater than zero to estimate affordability.")
    if inputs.credit_tier not in base_rates:
        raise InvalidInput(f"No base rate configured for credit tier {inputs.credit_tier!r}")
    if inputs.loan_program not in rate_adjustments:
        raise InvalidInput(f"No rate adjustment configured for program {inputs.loan_program!r}")


def estimate_affordability(
    inputs: AffordabilityInputs,
    base_rates: Dict[str, float] = BASE_RATE_BY_CREDIT_TIER,
    rate_adjustments: Dict[str, float] = PROGRAM_RATE_ADJUSTMENT,
) -> AffordabilityResult:
    """Estimate the maximum purchase price a buyer can pre-qualify for.

    ``base_rates`` maps credit tier to an annual rate and ``rate_adjustments``
    maps loan program to a rate add-on; both default to the presets and can
    be overridden from the policy sidebar.
    """

    _validate(inputs, base_rates, rate_adjustments)
    program = inputs.loan_program
    rate = float(base_rates[inputs.credit_tier]) + float(rate_adjustments[program])
    if not math.isfinite(rate) or rate < 0:
        raise InvalidInput(f"Rate tables produce an invalid rate ({rate}).")

    monthly_income = (inputs.annual_income + inputs.additional_annual_income) / 12
    max_housing_payment = monthly_income * MAX_DTI_BY_PROGRAM[program] - inputs.monthly_debt_payments

    max_loan = 0.0
    if max_housing_payment > 0:
        max_loan = principal_from_payment(max_housing_payment, rate, PREQUAL_TERM_YEARS) * SAFETY_HAIRCUT

    effective_down_pct = max(inputs.desired_down_payment_pct, MIN_DOWN_PCT_BY_PROGRAM[program])
    financed_fraction = 1 - effective_down_pct / 100
    income_limited_price = max_loan / financed_fraction

    available_funds = inputs.liquid_savings + inputs.gift_funds
    cash_limited_price = available_funds / (effective_down_pct / 100 + CLOSING_COST_RESERVE_PCT / 100)

    max_price = max(0.0, min(income_limited_price, cash_limited_price))
    loan = max_price * financed_fraction
    payment = monthly_payment(loan, rate, PREQUAL_TERM_YEARS)
    dti_pct = (payment + inputs.monthly_debt_payments) / monthly_income * 100
    for name, value in (("max_purchase_price", max_price), ("payment", payment), ("dti", dti_pct)):
        if not math.isfinite(value):
            raise NumericError(f"{name} is not a finite number ({value!r})")

    state = {
        "loan_program": program,
        "credit_tier": inputs.credit_tier,
        "max_purchase_price": max_price,
        "dti_pct": dti_pct,
        "desired_down_payment_pct": inputs.desired_down_payment_pct,
        "available_funds": available_funds,
    }
    programs = [r.message for r in evaluate_program_eligibility(state)]
    recommendations = [r.message for r in evaluate_recommendations(state)]

    logger.debug(
        "Pre-qualified %s/%s at %.2f%%: income cap %.0f, cash cap %.0f, DTI %.1f%%",
        program,
        inputs.credit_tier,
        rate,
        income_limited_price,
        cash_limited_price,
        dti_pct,
    )
    return AffordabilityResult(
        max_purchase_price=round(max_price, 2),
        max_loan_amount=round(loan, 2),
        estimated_monthly_payment=round(payment, 2),
        estimated_rate_pct=rate,
        debt_to_income_ratio_pct=round(dti_pct, 1),
        effective_down_payment_pct=effective_down_pct,
        qualification_tier=qualification_tier(dti_pct, max_price, inputs.credit_tier),
        is_qualified=is_qualified(dti_pct, max_price),
        eligible_programs=programs,
        recommendations=recommendations,
    )


def what_if_affordability(
    inputs: AffordabilityInputs,
    base_rates: Dict[str, float] = BASE_RATE_BY_CREDIT_TIER,
    rate_adjustments: Dict[str, float] = PROGRAM_RATE_ADJUSTMENT,
) -> Dict[str, AffordabilityResult]:
    """Re-run the estimate with common borrower adjustments.

    Scenarios: ``base``, ``savings_plus_10k``, ``debt_plus_300`` and
    ``credit_tier_up`` (one tier better; excellent stays excellent).
    """

    tier_idx = CREDIT_TIERS.index(inputs.credit_tier)
    better_tier = CREDIT_TIERS[max(0, tier_idx - 1)]
    scenarios = {
        "base": inputs,
        "savings_plus_10k": inputs.model_copy(update={"liquid_savings": inputs.liquid_savings + 10000}),
        "debt_plus_300": inputs.model_copy(
            update={"monthly_debt_payments": inputs.monthly_debt_payments + 300}
        ),
        "credit_tier_up": inputs.model_copy(update={"credit_tier": better_tier}),
    }
    return {
        name: estimate_affordability(scenario, base_rates, rate_adjustments)
        for name, scenario in scenarios.items()
    }
