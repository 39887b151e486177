"""Seller net proceeds and buyer cash-to-close estimates."""
from __future__ import annotations
import logging
import math

from homequote.calculators import monthly_payment
from homequote.errors import InvalidInput
from homequote.models import (
    BuyerCashToClose,
    BuyerCashToCloseInputs,
    SellerNetSheet,
    SellerNetSheetInputs,
)
from homequote.presets import BUYER_MI_ANNUAL_PCT, NET_SHEET_TERM_YEARS, PMI_FREE_DOWN_PCT

logger = logging.getLogger(__name__)


def _require_amounts(model, names) -> None:
    for name in names:
        value = getattr(model, name)
        if not math.isfinite(value) or value < 0:
            raise InvalidInput(f"{name} must be a non-negative amount")


def seller_net_sheet(inputs: SellerNetSheetInputs) -> SellerNetSheet:
    """Estimate what the seller walks away with after costs and payoff."""

    _require_amounts(
        inputs,
        (
            "mortgage_balance",
            "commission_rate_pct",
            "title_insurance",
            "escrow_fees",
            "prorations",
            "repair_credits",
            "home_warranty",
            "other_credits",
        ),
    )
    if not math.isfinite(inputs.sale_price) or inputs.sale_price <= 0:
        raise InvalidInput("Sale price must be greater than zero.")

    commission = inputs.sale_price * inputs.commission_rate_pct / 100
    costs = (
        commission
        + inputs.title_insurance
        + inputs.escrow_fees
        + inputs.prorations
        + inputs.repair_credits
        + inputs.home_warranty
        + inputs.other_credits
    )
    net_before_mortgage = inputs.sale_price - costs
    net = net_before_mortgage - inputs.mortgage_balance
    if net < 0:
        logger.info("Seller net sheet is short by %.2f", -net)
    return SellerNetSheet(
        gross_proceeds=inputs.sale_price,
        commission=commission,
        total_closing_costs=costs,
        net_before_mortgage=net_before_mortgage,
        mortgage_payoff=inputs.mortgage_balance,
        estimated_net_proceeds=net,
        is_short_sale=net < 0,
    )


def buyer_mi_monthly(loan_amount: float, down_payment_pct: float, program: str) -> float:
    """Monthly mortgage insurance for the buyer sheet.

    None at 20% down or on VA loans; otherwise a flat annual percentage of the
    loan by program.
    """

    if down_payment_pct >= PMI_FREE_DOWN_PCT or program == "va":
        return 0.0
    return loan_amount * BUYER_MI_ANNUAL_PCT.get(program, BUYER_MI_ANNUAL_PCT["conventional"]) / 100 / 12


def buyer_cash_to_close(inputs: BuyerCashToCloseInputs) -> BuyerCashToClose:
    """Estimate the buyer's cash to close and resulting monthly payment."""

    _require_amounts(
        inputs,
        (
            "interest_rate_pct",
            "closing_cost_pct",
            "title_insurance",
            "escrow_fees",
            "prepaid_insurance",
            "prepaid_taxes",
            "inspection_fees",
            "appraisal_fee",
            "seller_credits",
        ),
    )
    if not math.isfinite(inputs.purchase_price) or inputs.purchase_price <= 0:
        raise InvalidInput("Purchase price must be greater than zero.")
    if not math.isfinite(inputs.down_payment_pct) or not 0 <= inputs.down_payment_pct <= 100:
        raise InvalidInput("Down payment percent must be between 0 and 100.")

    down = inputs.purchase_price * inputs.down_payment_pct / 100
    loan = inputs.purchase_price - down
    closing = (
        loan * inputs.closing_cost_pct / 100
        + inputs.title_insurance
        + inputs.escrow_fees
        + inputs.prepaid_insurance
        + inputs.prepaid_taxes
        + inputs.inspection_fees
        + inputs.appraisal_fee
    )
    pi = monthly_payment(loan, inputs.interest_rate_pct, NET_SHEET_TERM_YEARS)
    mi = buyer_mi_monthly(loan, inputs.down_payment_pct, inputs.loan_program)
    taxes = inputs.prepaid_taxes / 12
    insurance = inputs.prepaid_insurance / 12
    return BuyerCashToClose(
        down_payment=down,
        loan_amount=loan,
        closing_costs=closing,
        seller_credits=inputs.seller_credits,
        total_cash_needed=down + closing - inputs.seller_credits,
        monthly_principal_and_interest=pi,
        monthly_mortgage_insurance=mi,
        monthly_taxes=taxes,
        monthly_insurance=insurance,
        total_monthly_payment=pi + mi + taxes + insurance,
    )
