from __future__ import annotations
from typing import Literal, List, Dict, Any
from pydantic import BaseModel, Field

from homequote.presets import (
    CONVENTIONAL_ELIGIBLE_DTI,
    PMI_FREE_DOWN_PCT,
    REDUCE_DEBT_DTI,
    RESERVES_TARGET_PCT,
)


class RuleResult(BaseModel):
    code: str
    severity: Literal["info", "warn", "critical"]
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)


def evaluate_program_eligibility(state: dict) -> List[RuleResult]:
    """Loan programs worth presenting for a pre-qualification result.

    ``state`` carries ``loan_program``, ``credit_tier``, ``max_purchase_price``
    and ``dti_pct``.  Checks are independent and run in display order.
    """
    res: List[RuleResult] = []

    program = state.get("loan_program", "conventional")
    credit_tier = state.get("credit_tier", "good")
    max_price = float(state.get("max_purchase_price", 0.0))
    dti_pct = float(state.get("dti_pct", 0.0))

    if program == "va":
        res.append(
            RuleResult(code="VA_ZERO_DOWN", severity="info", message="VA Home Loan – 0% Down")
        )
    if program == "fha":
        res.append(
            RuleResult(code="FHA_LOW_DOWN", severity="info", message="FHA Loan – 3.5% Down")
        )
    if program == "usda":
        res.append(
            RuleResult(code="USDA_RURAL", severity="info", message="USDA Rural Development Loan")
        )
    if credit_tier == "excellent":
        res.append(
            RuleResult(code="BEST_RATE", severity="info", message="Best Rate Programs Available")
        )
    if max_price > 0 and dti_pct < CONVENTIONAL_ELIGIBLE_DTI:
        res.append(
            RuleResult(
                code="CONVENTIONAL_ELIGIBLE",
                severity="info",
                message="Conventional Loan Eligible",
                context={"dti_pct": dti_pct, "limit": CONVENTIONAL_ELIGIBLE_DTI},
            )
        )
    return res


def evaluate_recommendations(state: dict) -> List[RuleResult]:
    """Suggestions that would strengthen a buyer's pre-qualification.

    ``state`` carries ``dti_pct``, ``credit_tier``, ``desired_down_payment_pct``,
    ``available_funds`` and ``max_purchase_price``.
    """
    res: List[RuleResult] = []

    dti_pct = float(state.get("dti_pct", 0.0))
    credit_tier = state.get("credit_tier", "good")
    down_pct = float(state.get("desired_down_payment_pct", 0.0))
    funds = float(state.get("available_funds", 0.0))
    max_price = float(state.get("max_purchase_price", 0.0))

    if dti_pct > REDUCE_DEBT_DTI:
        res.append(
            RuleResult(
                code="REDUCE_DEBT",
                severity="warn",
                message="Consider paying down debts to improve qualification",
                context={"actual": dti_pct, "limit": REDUCE_DEBT_DTI},
            )
        )
    if credit_tier in ("fair", "poor"):
        res.append(
            RuleResult(
                code="IMPROVE_CREDIT",
                severity="warn",
                message="Improving credit score could save thousands in interest",
            )
        )
    if down_pct < PMI_FREE_DOWN_PCT:
        res.append(
            RuleResult(
                code="AVOID_PMI",
                severity="info",
                message="20% down eliminates PMI (~$100-300/month savings)",
            )
        )
    reserves_target = max_price * RESERVES_TARGET_PCT / 100
    if funds < reserves_target:
        res.append(
            RuleResult(
                code="BUILD_RESERVES",
                severity="warn",
                message="Build reserves for closing costs and emergencies",
                context={"available": funds, "target": reserves_target},
            )
        )
    return res
