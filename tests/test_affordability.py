import pytest

from homequote.affordability import (
    estimate_affordability,
    is_qualified,
    qualification_tier,
    what_if_affordability,
)
from homequote.calculators import monthly_payment
from homequote.errors import InvalidInput
from homequote.models import AffordabilityInputs


def _inputs(**overrides):
    values = dict(
        annual_income=85000.0,
        additional_annual_income=0.0,
        monthly_debt_payments=500.0,
        credit_tier="good",
        liquid_savings=30000.0,
        gift_funds=0.0,
        loan_program="conventional",
        desired_down_payment_pct=10.0,
    )
    values.update(overrides)
    return AffordabilityInputs(**values)


def test_cash_limited_estimate():
    res = estimate_affordability(_inputs())
    # savings cover 10% down plus a 3% closing-cost reserve
    expected_price = 30000 / 0.13
    assert abs(res.max_purchase_price - expected_price) < 0.01
    assert abs(res.max_loan_amount - expected_price * 0.9) < 0.01
    assert res.estimated_rate_pct == 6.75
    payment = monthly_payment(expected_price * 0.9, 6.75, 30)
    assert abs(res.estimated_monthly_payment - payment) < 0.01
    dti = (payment + 500) / (85000 / 12) * 100
    assert abs(res.debt_to_income_ratio_pct - dti) <= 0.051
    assert res.qualification_tier == "strong"
    assert res.is_qualified
    assert res.eligible_programs == ["Conventional Loan Eligible"]
    assert res.recommendations == ["20% down eliminates PMI (~$100-300/month savings)"]


def test_income_limited_estimate_applies_safety_haircut():
    res = estimate_affordability(_inputs(liquid_savings=1000000.0))
    max_housing = 85000 / 12 * 0.45 - 500
    full_loan = max_housing / monthly_payment(1, 6.75, 30)
    assert abs(res.max_loan_amount - full_loan * 0.8) < 0.05
    assert abs(res.max_purchase_price - full_loan * 0.8 / 0.9) < 0.05


def test_program_rate_adjustments():
    assert estimate_affordability(_inputs(loan_program="fha")).estimated_rate_pct == 7.0
    assert estimate_affordability(_inputs(loan_program="va")).estimated_rate_pct == 6.5
    assert estimate_affordability(_inputs(credit_tier="poor", loan_program="usda")).estimated_rate_pct == 8.5


def test_rate_table_override():
    rates = {"excellent": 5.0, "good": 5.5, "fair": 6.0, "poor": 7.0}
    res = estimate_affordability(_inputs(), base_rates=rates)
    assert res.estimated_rate_pct == 5.5


def test_missing_rate_table_entry():
    with pytest.raises(InvalidInput):
        estimate_affordability(_inputs(), base_rates={"excellent": 6.0})


def test_more_income_never_lowers_price():
    prices = [
        estimate_affordability(_inputs(annual_income=income, liquid_savings=80000.0)).max_purchase_price
        for income in range(20000, 300001, 20000)
    ]
    assert all(later >= earlier for earlier, later in zip(prices, prices[1:]))
    assert prices[-1] > prices[0]


def test_more_debt_never_raises_price():
    prices = [
        estimate_affordability(_inputs(monthly_debt_payments=debt, liquid_savings=200000.0)).max_purchase_price
        for debt in range(0, 4001, 250)
    ]
    assert all(later <= earlier for earlier, later in zip(prices, prices[1:]))
    assert prices[-1] == 0


def test_va_keeps_requested_down_payment():
    assert estimate_affordability(_inputs(loan_program="va", desired_down_payment_pct=0.0)).effective_down_payment_pct == 0.0
    assert estimate_affordability(_inputs(loan_program="va", desired_down_payment_pct=5.0)).effective_down_payment_pct == 5.0


def test_fha_enforces_minimum_down_payment():
    res = estimate_affordability(_inputs(loan_program="fha", desired_down_payment_pct=0.0))
    assert res.effective_down_payment_pct == 3.5
    assert res.max_purchase_price <= 30000 / (0.035 + 0.03) + 0.01
    conv = estimate_affordability(_inputs(desired_down_payment_pct=1.0))
    assert conv.effective_down_payment_pct == 3.0


def test_debts_above_budget_floor_price_at_zero():
    res = estimate_affordability(_inputs(annual_income=40000.0, monthly_debt_payments=2000.0))
    assert res.max_purchase_price == 0
    assert res.max_loan_amount == 0
    assert res.estimated_monthly_payment == 0
    assert res.debt_to_income_ratio_pct == 60.0
    assert res.qualification_tier == "weak"
    assert not res.is_qualified
    assert "Conventional Loan Eligible" not in res.eligible_programs


def test_tier_boundaries_are_exclusive():
    assert qualification_tier(35.99, 250000, "good") == "strong"
    assert qualification_tier(36.0, 250000, "good") == "moderate"
    assert qualification_tier(30.0, 250000, "poor") == "moderate"
    assert qualification_tier(30.0, 100000, "excellent") == "moderate"
    assert qualification_tier(44.9, 250000, "good") == "moderate"
    assert qualification_tier(45.0, 250000, "good") == "weak"


def test_qualified_flag():
    assert is_qualified(49.9, 100000.01)
    assert not is_qualified(49.9, 100000.0)
    assert not is_qualified(50.0, 400000.0)


def test_programs_listed_in_check_order():
    res = estimate_affordability(
        _inputs(credit_tier="excellent", loan_program="va", desired_down_payment_pct=0.0, liquid_savings=9000.0)
    )
    assert res.eligible_programs == [
        "VA Home Loan – 0% Down",
        "Best Rate Programs Available",
        "Conventional Loan Eligible",
    ]
    fha = estimate_affordability(_inputs(loan_program="fha"))
    assert fha.eligible_programs[0] == "FHA Loan – 3.5% Down"
    usda = estimate_affordability(_inputs(loan_program="usda"))
    assert usda.eligible_programs[0] == "USDA Rural Development Loan"


def test_recommendations_listed_in_check_order():
    res = estimate_affordability(
        _inputs(
            annual_income=60000.0,
            monthly_debt_payments=1500.0,
            credit_tier="poor",
            liquid_savings=5000.0,
            loan_program="va",
            desired_down_payment_pct=0.0,
        )
    )
    assert res.recommendations == [
        "Consider paying down debts to improve qualification",
        "Improving credit score could save thousands in interest",
        "20% down eliminates PMI (~$100-300/month savings)",
        "Build reserves for closing costs and emergencies",
    ]
    assert res.eligible_programs == ["VA Home Loan – 0% Down"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"annual_income": 0.0, "additional_annual_income": 0.0},
        {"desired_down_payment_pct": 100.0},
        {"desired_down_payment_pct": -1.0},
        {"monthly_debt_payments": -10.0},
        {"gift_funds": float("inf")},
    ],
)
def test_invalid_affordability_inputs(overrides):
    with pytest.raises(InvalidInput):
        estimate_affordability(_inputs(**overrides))


def test_additional_income_counts():
    base = estimate_affordability(_inputs(liquid_savings=500000.0))
    more = estimate_affordability(_inputs(liquid_savings=500000.0, additional_annual_income=15000.0))
    assert more.max_purchase_price > base.max_purchase_price


def test_what_if_scenarios():
    res = what_if_affordability(_inputs())
    assert set(res) == {"base", "savings_plus_10k", "debt_plus_300", "credit_tier_up"}
    base = res["base"]
    assert res["savings_plus_10k"].max_purchase_price >= base.max_purchase_price
    assert res["debt_plus_300"].debt_to_income_ratio_pct > base.debt_to_income_ratio_pct
    assert res["credit_tier_up"].estimated_rate_pct == 6.25


def test_what_if_excellent_stays_excellent():
    res = what_if_affordability(_inputs(credit_tier="excellent"))
    assert res["credit_tier_up"] == res["base"]


def test_negligible_rates_estimate_without_error():
    rates = {"excellent": 1e-13, "good": 1e-13, "fair": 1e-13, "poor": 1e-13}
    res = estimate_affordability(_inputs(liquid_savings=1000000.0), base_rates=rates)
    max_housing = 85000 / 12 * 0.45 - 500
    assert res.max_loan_amount == pytest.approx(max_housing * 360 * 0.8, abs=0.05)


@pytest.mark.parametrize(
    "overrides, tier",
    [
        ({}, "strong"),
        ({"liquid_savings": 60000.0, "monthly_debt_payments": 900.0}, "moderate"),
        ({"annual_income": 60000.0, "monthly_debt_payments": 1500.0, "liquid_savings": 200000.0}, "moderate"),
        ({"annual_income": 40000.0, "monthly_debt_payments": 2000.0}, "weak"),
        ({"credit_tier": "poor"}, "moderate"),
    ],
)
def test_reported_tier_agrees_with_reported_dti(overrides, tier):
    inputs = _inputs(**overrides)
    res = estimate_affordability(inputs)
    assert res.qualification_tier == tier
    assert res.qualification_tier == qualification_tier(
        res.debt_to_income_ratio_pct, res.max_purchase_price, inputs.credit_tier
    )
    assert res.is_qualified == is_qualified(res.debt_to_income_ratio_pct, res.max_purchase_price)
